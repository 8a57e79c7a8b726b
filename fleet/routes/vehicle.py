# fleet/routes/vehicle.py
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Response
from fleet.dependencies import get_vehicle_service
from fleet.errors import FleetError
from fleet.schemas.vehicle import VehicleOut, VehicleUpdate
from fleet.services.vehicle import VehicleService
from .errors import http_error, not_found, parse_id

router = APIRouter()

def to_vehicle_out(vehicle) -> VehicleOut:
    return VehicleOut.model_validate(vehicle.model_dump())

@router.get("/vehicles", response_model=List[VehicleOut])
async def get_vehicles(service: VehicleService = Depends(get_vehicle_service)):
    try:
        vehicles = await service.list()
    except FleetError as error:
        raise http_error(error)
    return [to_vehicle_out(vehicle) for vehicle in vehicles]

@router.get("/vehicles/{vehicle_id}", response_model=VehicleOut)
async def get_vehicle(vehicle_id: str, service: VehicleService = Depends(get_vehicle_service)):
    vehicle_id = parse_id(vehicle_id, "vehicleId")
    try:
        vehicle = await service.get(vehicle_id)
    except FleetError as error:
        raise http_error(error)
    if vehicle is None:
        raise not_found("vehicle")

    return to_vehicle_out(vehicle)

@router.put("/vehicles/{vehicle_id}", response_model=VehicleOut)
async def update_vehicle(
    vehicle_id: str,
    vehicle: Optional[VehicleUpdate] = Body(None),
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicle_id = parse_id(vehicle_id, "vehicleId")
    try:
        updated = await service.update(vehicle_id, (vehicle or VehicleUpdate()).to_model())
    except FleetError as error:
        raise http_error(error)
    return to_vehicle_out(updated)

@router.delete("/vehicles/{vehicle_id}", status_code=204)
async def delete_vehicle(vehicle_id: str, service: VehicleService = Depends(get_vehicle_service)):
    vehicle_id = parse_id(vehicle_id, "vehicleId")
    try:
        await service.delete(vehicle_id)
    except FleetError as error:
        raise http_error(error)
    return Response(status_code=204)
