# fleet/models/vehicle.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class VehicleModel(BaseModel):
    id: int = Field(default=0, alias="_id")
    brand: str = ""
    vehicle_model: str = ""
    year: int = 0
    plate: str = ""
    driver_id: Optional[int] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True)
