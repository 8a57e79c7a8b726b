# fleet/routes/driver.py
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Query, Response
from fleet.dependencies import get_driver_service
from fleet.errors import FleetError
from fleet.schemas.driver import CreatedOut, DriverCreate, DriverOut, DriverUpdate
from fleet.schemas.vehicle import VehicleCreate
from fleet.services.driver import DriverService
from .errors import bad_request, http_error, not_found, parse_id

router = APIRouter()

TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}

def parse_include_vehicle(value: Optional[str]) -> bool:
    if value is None or value == "":
        return False
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise bad_request("includeVehicle must be a boolean")

def to_driver_out(driver) -> DriverOut:
    return DriverOut.model_validate(driver.model_dump())

@router.get("/drivers", response_model=List[DriverOut])
async def get_drivers(service: DriverService = Depends(get_driver_service)):
    try:
        drivers = await service.list()
    except FleetError as error:
        raise http_error(error)
    return [to_driver_out(driver) for driver in drivers]

@router.get("/drivers/{driver_id}", response_model=DriverOut)
async def get_driver(
    driver_id: str,
    include_vehicle: Optional[str] = Query(None, alias="includeVehicle"),
    service: DriverService = Depends(get_driver_service),
):
    driver_id = parse_id(driver_id, "driverId")
    include_vehicles = parse_include_vehicle(include_vehicle)

    try:
        driver = await service.get(driver_id, include_vehicles)
    except FleetError as error:
        raise http_error(error)
    if driver is None:
        raise not_found("driver")

    return to_driver_out(driver)

@router.post("/drivers", response_model=CreatedOut, status_code=201)
async def create_driver(
    driver: Optional[DriverCreate] = Body(None),
    service: DriverService = Depends(get_driver_service),
):
    try:
        driver_id = await service.create(driver.to_model() if driver else None)
    except FleetError as error:
        raise http_error(error)
    return CreatedOut(id=driver_id)

@router.post("/drivers/{driver_id}/vehicle", response_model=CreatedOut, status_code=201)
async def add_vehicle(
    driver_id: str,
    vehicle: Optional[VehicleCreate] = Body(None),
    service: DriverService = Depends(get_driver_service),
):
    driver_id = parse_id(driver_id, "driverId")
    try:
        vehicle_id = await service.attach_vehicle(driver_id, vehicle.to_model() if vehicle else None)
    except FleetError as error:
        raise http_error(error)
    return CreatedOut(id=vehicle_id)

@router.put("/drivers/{driver_id}", response_model=DriverOut)
async def update_driver(
    driver_id: str,
    driver: Optional[DriverUpdate] = Body(None),
    service: DriverService = Depends(get_driver_service),
):
    driver_id = parse_id(driver_id, "driverId")
    try:
        updated = await service.update(driver_id, (driver or DriverUpdate()).to_model())
    except FleetError as error:
        raise http_error(error)
    return to_driver_out(updated)

@router.delete("/drivers/{driver_id}", status_code=204)
async def delete_driver(driver_id: str, service: DriverService = Depends(get_driver_service)):
    driver_id = parse_id(driver_id, "driverId")
    try:
        await service.delete(driver_id)
    except FleetError as error:
        raise http_error(error)
    return Response(status_code=204)
