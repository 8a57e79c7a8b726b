# fleet/services/vehicle.py
from typing import List, Optional

from fleet.errors import InvalidIdentifier, NotFound, ValidationFailure
from fleet.logging import get_logger
from fleet.models.vehicle import VehicleModel
from fleet.repositories.base import VehicleStore
from fleet.validation import validate_vehicle

logger = get_logger(__name__)


class VehicleService:
    """Vehicle use cases. Attaching a vehicle to a driver lives in DriverService."""

    def __init__(self, store: VehicleStore):
        self.store = store

    async def list(self) -> List[VehicleModel]:
        return await self.store.list()

    async def get(self, vehicle_id: int) -> Optional[VehicleModel]:
        _check_vehicle_id(vehicle_id)
        return await self.store.get_by_id(vehicle_id)

    async def update(self, vehicle_id: int, patch: VehicleModel) -> VehicleModel:
        _check_vehicle_id(vehicle_id)

        vehicle = await self.store.get_by_id(vehicle_id)
        if vehicle is None:
            logger.info("vehicle not found", extra={"vehicle_id": vehicle_id})
            raise NotFound("vehicle")

        if patch.brand != "":
            vehicle.brand = patch.brand
        if patch.plate != "":
            vehicle.plate = patch.plate
        if patch.vehicle_model != "":
            vehicle.vehicle_model = patch.vehicle_model
        if patch.year != 0:
            vehicle.year = patch.year

        violations = validate_vehicle(vehicle)
        if violations:
            logger.info("vehicle rejected", extra={"vehicle_id": vehicle_id, "violations": violations})
            raise ValidationFailure(violations)

        await self.store.update(vehicle)
        logger.info("vehicle updated", extra={"vehicle_id": vehicle_id})
        return vehicle

    async def delete(self, vehicle_id: int) -> None:
        _check_vehicle_id(vehicle_id)
        await self.store.delete(vehicle_id)
        logger.info("vehicle deleted", extra={"vehicle_id": vehicle_id})


def _check_vehicle_id(vehicle_id: int) -> None:
    if vehicle_id <= 0:
        raise InvalidIdentifier("vehicle id is invalid")
