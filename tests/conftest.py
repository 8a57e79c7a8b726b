"""
Pytest Configuration and Shared Fixtures

In-memory stores stand in for MongoDB. Each one records the operations it
receives so tests can assert which store calls ran and which never did.
"""

import os
from typing import List, Optional

import pytest

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")

from fleet.errors import StoreError
from fleet.models.driver import DriverModel, LicenseType
from fleet.models.vehicle import VehicleModel
from fleet.repositories.base import DriverStore, VehicleStore


class InMemoryDriverStore(DriverStore):
    def __init__(self, vehicles: Optional[dict] = None):
        self.drivers = {}
        self.vehicles = vehicles if vehicles is not None else {}
        self.calls = []
        self.failure: Optional[StoreError] = None

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.failure is not None:
            raise self.failure

    def called(self, name: str) -> bool:
        return name in self.calls

    async def list(self) -> List[DriverModel]:
        self._record("list")
        return [driver.model_copy(deep=True) for driver in self.drivers.values()]

    async def get_by_id(self, driver_id: int, expand: bool = False) -> Optional[DriverModel]:
        self._record("get_by_id")
        driver = self.drivers.get(driver_id)
        if driver is None:
            return None
        driver = driver.model_copy(deep=True)
        if expand:
            driver.vehicles = [
                vehicle.model_copy(deep=True)
                for vehicle in self.vehicles.values()
                if vehicle.driver_id == driver_id
            ]
        return driver

    async def create(self, driver: DriverModel) -> int:
        self._record("create")
        driver.id = len(self.drivers) + 1
        self.drivers[driver.id] = driver.model_copy(deep=True)
        return driver.id

    async def update(self, driver: DriverModel) -> None:
        self._record("update")
        self.drivers[driver.id] = driver.model_copy(deep=True)

    async def delete(self, driver_id: int) -> None:
        self._record("delete")
        self.drivers.pop(driver_id, None)

    async def associate(self, driver: DriverModel, vehicle: VehicleModel) -> int:
        self._record("associate")
        vehicle.id = len(self.vehicles) + 1
        vehicle.driver_id = driver.id
        self.vehicles[vehicle.id] = vehicle.model_copy(deep=True)
        return vehicle.id


class InMemoryVehicleStore(VehicleStore):
    def __init__(self, vehicles: Optional[dict] = None):
        self.vehicles = vehicles if vehicles is not None else {}
        self.calls = []
        self.failure: Optional[StoreError] = None

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.failure is not None:
            raise self.failure

    def called(self, name: str) -> bool:
        return name in self.calls

    async def list(self) -> List[VehicleModel]:
        self._record("list")
        return [vehicle.model_copy(deep=True) for vehicle in self.vehicles.values()]

    async def get_by_id(self, vehicle_id: int) -> Optional[VehicleModel]:
        self._record("get_by_id")
        vehicle = self.vehicles.get(vehicle_id)
        return vehicle.model_copy(deep=True) if vehicle else None

    async def update(self, vehicle: VehicleModel) -> None:
        self._record("update")
        self.vehicles[vehicle.id] = vehicle.model_copy(deep=True)

    async def delete(self, vehicle_id: int) -> None:
        self._record("delete")
        self.vehicles.pop(vehicle_id, None)


def make_driver(**overrides) -> DriverModel:
    fields = {
        "name": "John",
        "last_name": "Doe",
        "email": "john.doe@example.com",
        "phone": "1234567890",
        "license": "ABC123",
        "license_type": LicenseType.A,
    }
    fields.update(overrides)
    return DriverModel(**fields)


def make_vehicle(**overrides) -> VehicleModel:
    fields = {
        "brand": "Toyota",
        "vehicle_model": "Camry",
        "year": 2022,
        "plate": "ABC-1234",
    }
    fields.update(overrides)
    return VehicleModel(**fields)


@pytest.fixture
def vehicle_rows():
    """Vehicle records shared by the driver and vehicle stores."""
    return {}


@pytest.fixture
def driver_store(vehicle_rows):
    return InMemoryDriverStore(vehicle_rows)


@pytest.fixture
def vehicle_store(vehicle_rows):
    return InMemoryVehicleStore(vehicle_rows)


@pytest.fixture
def stored_driver(driver_store):
    driver = make_driver(id=1)
    driver_store.drivers[1] = driver.model_copy(deep=True)
    return driver


@pytest.fixture
def stored_vehicle(vehicle_rows):
    vehicle = make_vehicle(id=1, driver_id=1)
    vehicle_rows[1] = vehicle.model_copy(deep=True)
    return vehicle
