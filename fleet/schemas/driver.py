# fleet/schemas/driver.py
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from fleet.models.driver import DriverModel
from .vehicle import VehicleOut

class DriverBase(BaseModel):
    name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    license: str = ""
    license_type: str = ""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_model(self) -> DriverModel:
        return DriverModel(**self.model_dump())

class DriverCreate(DriverBase):
    pass

class DriverUpdate(DriverBase):
    pass

class DriverOut(DriverBase):
    id: int
    vehicles: List[VehicleOut] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class CreatedOut(BaseModel):
    id: int
