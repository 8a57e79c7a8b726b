# fleet/services/driver.py
"""Driver use cases, including attaching a vehicle to a driver."""

from typing import List, Optional

from fleet.errors import InvalidIdentifier, NotFound, ValidationFailure
from fleet.logging import get_logger
from fleet.models.driver import DriverModel
from fleet.models.vehicle import VehicleModel
from fleet.repositories.base import DriverStore
from fleet.validation import validate_driver, validate_vehicle

logger = get_logger(__name__)

# Fields copied from an update payload when they are not empty
MERGED_FIELDS = ("name", "last_name", "email", "phone", "license", "license_type")


class DriverService:
    def __init__(self, store: DriverStore):
        self.store = store

    async def list(self) -> List[DriverModel]:
        return await self.store.list()

    async def get(self, driver_id: int, include_vehicles: bool = False) -> Optional[DriverModel]:
        """Return the driver, or ``None`` when the store has no such driver."""
        _check_driver_id(driver_id)
        return await self.store.get_by_id(driver_id, include_vehicles)

    async def create(self, driver: Optional[DriverModel]) -> int:
        if driver is None:
            raise InvalidIdentifier("driver is invalid")
        _check_driver(driver)

        driver_id = await self.store.create(driver)
        logger.info("driver created", extra={"driver_id": driver_id})
        return driver_id

    async def attach_vehicle(self, driver_id: int, vehicle: Optional[VehicleModel]) -> int:
        """Store ``vehicle`` as owned by the driver and return the new vehicle id."""
        _check_driver_id(driver_id)
        if vehicle is None:
            raise InvalidIdentifier("vehicle is invalid")

        violations = validate_vehicle(vehicle)
        if violations:
            logger.info("vehicle rejected", extra={"driver_id": driver_id, "violations": violations})
            raise ValidationFailure(violations)

        driver = await self.store.get_by_id(driver_id, False)
        if driver is None:
            logger.info("driver not found", extra={"driver_id": driver_id})
            raise NotFound("driver")

        vehicle_id = await self.store.associate(driver, vehicle)
        logger.info("vehicle attached", extra={"driver_id": driver_id, "vehicle_id": vehicle_id})
        return vehicle_id

    async def update(self, driver_id: int, patch: DriverModel) -> DriverModel:
        """Merge the non-empty fields of ``patch`` into the stored driver and save it.

        An empty string in the patch keeps the stored value, so a field can
        never be cleared through an update.
        """
        _check_driver_id(driver_id)

        driver = await self.store.get_by_id(driver_id, False)
        if driver is None:
            logger.info("driver not found", extra={"driver_id": driver_id})
            raise NotFound("driver")

        for field in MERGED_FIELDS:
            value = getattr(patch, field)
            if value != "":
                setattr(driver, field, value)

        _check_driver(driver)

        await self.store.update(driver)
        logger.info("driver updated", extra={"driver_id": driver_id})
        return driver

    async def delete(self, driver_id: int) -> None:
        _check_driver_id(driver_id)
        await self.store.delete(driver_id)
        logger.info("driver deleted", extra={"driver_id": driver_id})


def _check_driver_id(driver_id: int) -> None:
    if driver_id <= 0:
        raise InvalidIdentifier("driver id is invalid")


def _check_driver(driver: DriverModel) -> None:
    violations = validate_driver(driver)
    if violations:
        logger.info("driver rejected", extra={"driver_id": driver.id, "violations": violations})
        raise ValidationFailure(violations)
