# fleet/repositories/driver.py
from datetime import datetime, timezone
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from fleet.database import next_sequence
from fleet.models.driver import DriverModel
from fleet.models.vehicle import VehicleModel

from .base import DriverStore, store_errors

LIVE = {"deleted_at": None}


class MongoDriverStore(DriverStore):
    """Drivers in the ``drivers`` collection; owned vehicles in ``vehicles``."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def list(self) -> List[DriverModel]:
        with store_errors("listing drivers"):
            documents = await self.db.drivers.find(LIVE).sort("_id").to_list(length=None)
        return [DriverModel.model_validate(document) for document in documents]

    async def get_by_id(self, driver_id: int, expand: bool = False) -> Optional[DriverModel]:
        with store_errors("getting driver by id", driver_id=driver_id):
            document = await self.db.drivers.find_one({"_id": driver_id, **LIVE})
            if document is None:
                return None
            if expand:
                document["vehicles"] = await self.db.vehicles.find(
                    {"driver_id": driver_id, **LIVE}
                ).sort("_id").to_list(length=None)
        return DriverModel.model_validate(document)

    async def create(self, driver: DriverModel) -> int:
        now = datetime.now(timezone.utc)
        with store_errors("creating driver"):
            driver_id = await next_sequence(self.db, "drivers")
            document = driver.model_dump(exclude={"id", "vehicles"})
            document.update({"_id": driver_id, "created_at": now, "updated_at": now, "deleted_at": None})
            await self.db.drivers.insert_one(document)
        driver.id = driver_id
        return driver_id

    async def update(self, driver: DriverModel) -> None:
        fields = driver.model_dump(exclude={"id", "vehicles", "created_at", "deleted_at"})
        fields["updated_at"] = datetime.now(timezone.utc)
        with store_errors("updating driver", driver_id=driver.id):
            await self.db.drivers.update_one({"_id": driver.id, **LIVE}, {"$set": fields})

    async def delete(self, driver_id: int) -> None:
        with store_errors("deleting driver", driver_id=driver_id):
            await self.db.drivers.update_one(
                {"_id": driver_id, **LIVE},
                {"$set": {"deleted_at": datetime.now(timezone.utc)}},
            )

    async def associate(self, driver: DriverModel, vehicle: VehicleModel) -> int:
        now = datetime.now(timezone.utc)
        with store_errors("adding vehicle to driver", driver_id=driver.id):
            vehicle_id = await next_sequence(self.db, "vehicles")
            document = vehicle.model_dump(exclude={"id"})
            document.update({
                "_id": vehicle_id,
                "driver_id": driver.id,
                "created_at": now,
                "updated_at": now,
                "deleted_at": None,
            })
            await self.db.vehicles.insert_one(document)
        vehicle.id = vehicle_id
        vehicle.driver_id = driver.id
        return vehicle_id
