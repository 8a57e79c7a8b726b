# fleet/schemas/vehicle.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from fleet.models.vehicle import VehicleModel

class VehicleBase(BaseModel):
    brand: str = ""
    vehicle_model: str = ""
    year: int = 0
    plate: str = ""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_model(self) -> VehicleModel:
        return VehicleModel(**self.model_dump())

class VehicleCreate(VehicleBase):
    pass

class VehicleUpdate(VehicleBase):
    pass

class VehicleOut(VehicleBase):
    id: int
    driver_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
