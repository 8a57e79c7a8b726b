"""
Unit Tests for VehicleService
"""

import pytest

from fleet.errors import InvalidIdentifier, NotFound, StoreError, ValidationFailure
from fleet.models.vehicle import VehicleModel
from fleet.services.vehicle import VehicleService


@pytest.fixture
def service(vehicle_store):
    return VehicleService(vehicle_store)


async def test_list_returns_all_vehicles(service, stored_vehicle):
    vehicles = await service.list()
    assert [vehicle.id for vehicle in vehicles] == [1]


async def test_list_passes_store_errors_through(service, vehicle_store):
    vehicle_store.failure = StoreError("error listing vehicles")
    with pytest.raises(StoreError):
        await service.list()


async def test_get_returns_vehicle(service, stored_vehicle):
    vehicle = await service.get(1)
    assert vehicle == stored_vehicle


async def test_get_missing_vehicle_returns_none(service):
    assert await service.get(9) is None


@pytest.mark.parametrize("operation", ["get", "delete"])
@pytest.mark.parametrize("vehicle_id", [0, -3])
async def test_invalid_id_skips_store(service, vehicle_store, operation, vehicle_id):
    with pytest.raises(InvalidIdentifier, match="vehicle id is invalid"):
        await getattr(service, operation)(vehicle_id)
    assert vehicle_store.calls == []


async def test_update_invalid_id_skips_store(service, vehicle_store):
    with pytest.raises(InvalidIdentifier, match="vehicle id is invalid"):
        await service.update(0, VehicleModel(brand="Honda"))
    assert vehicle_store.calls == []


async def test_update_merges_non_empty_fields(service, vehicle_store, stored_vehicle):
    updated = await service.update(1, VehicleModel(brand="Honda", year=2024))

    saved = vehicle_store.vehicles[1]
    assert updated == saved
    assert saved.brand == "Honda"
    assert saved.year == 2024
    assert saved.vehicle_model == "Camry"
    assert saved.plate == "ABC-1234"


async def test_update_zero_year_keeps_stored_year(service, vehicle_store, stored_vehicle):
    await service.update(1, VehicleModel(plate="XYZ-9876", year=0))
    assert vehicle_store.vehicles[1].year == 2022
    assert vehicle_store.vehicles[1].plate == "XYZ-9876"


async def test_update_never_changes_owner(service, vehicle_store, stored_vehicle):
    await service.update(1, VehicleModel(brand="Honda", driver_id=99))
    assert vehicle_store.vehicles[1].driver_id == 1


async def test_update_with_current_record_is_a_no_op(service, vehicle_store, stored_vehicle):
    await service.update(1, stored_vehicle.model_copy())
    assert vehicle_store.vehicles[1] == stored_vehicle


async def test_update_missing_vehicle(service, vehicle_store):
    with pytest.raises(NotFound) as exc_info:
        await service.update(5, VehicleModel(brand="Honda"))
    assert exc_info.value.entity == "vehicle"
    assert not vehicle_store.called("update")


async def test_update_rejects_invalid_merge(service, vehicle_store, stored_vehicle):
    with pytest.raises(ValidationFailure) as exc_info:
        await service.update(1, VehicleModel(plate="abc-1234", year=1800))
    assert list(exc_info.value.messages) == ["vehicle year is invalid", "vehicle plate is invalid"]
    assert not vehicle_store.called("update")
    assert vehicle_store.vehicles[1] == stored_vehicle


async def test_delete_delegates_to_store(service, vehicle_store, stored_vehicle):
    await service.delete(1)
    assert vehicle_store.calls == ["delete"]
    assert vehicle_store.vehicles == {}
