# fleet/repositories/vehicle.py
from datetime import datetime, timezone
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from fleet.models.vehicle import VehicleModel

from .base import VehicleStore, store_errors
from .driver import LIVE


class MongoVehicleStore(VehicleStore):
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def list(self) -> List[VehicleModel]:
        with store_errors("listing vehicles"):
            documents = await self.db.vehicles.find(LIVE).sort("_id").to_list(length=None)
        return [VehicleModel.model_validate(document) for document in documents]

    async def get_by_id(self, vehicle_id: int) -> Optional[VehicleModel]:
        with store_errors("getting vehicle by id", vehicle_id=vehicle_id):
            document = await self.db.vehicles.find_one({"_id": vehicle_id, **LIVE})
        if document is None:
            return None
        return VehicleModel.model_validate(document)

    async def update(self, vehicle: VehicleModel) -> None:
        fields = vehicle.model_dump(exclude={"id", "created_at", "deleted_at"})
        fields["updated_at"] = datetime.now(timezone.utc)
        with store_errors("updating vehicle", vehicle_id=vehicle.id):
            await self.db.vehicles.update_one({"_id": vehicle.id, **LIVE}, {"$set": fields})

    async def delete(self, vehicle_id: int) -> None:
        with store_errors("deleting vehicle", vehicle_id=vehicle_id):
            await self.db.vehicles.update_one(
                {"_id": vehicle_id, **LIVE},
                {"$set": {"deleted_at": datetime.now(timezone.utc)}},
            )
