# fleet/models/driver.py
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from .vehicle import VehicleModel

class LicenseType:
    ACC = "ACC"
    A = "A"
    A1 = "A1"
    AB = "AB"
    B = "B"
    B1 = "B1"
    C = "C"
    C1 = "C1"
    D = "D"
    D1 = "D1"
    BE = "BE"
    CE = "CE"
    C1E = "C1E"
    DE = "DE"
    D1E = "D1E"

LICENSE_TYPES = frozenset({
    LicenseType.ACC, LicenseType.A, LicenseType.A1, LicenseType.AB,
    LicenseType.B, LicenseType.B1, LicenseType.C, LicenseType.C1,
    LicenseType.D, LicenseType.D1, LicenseType.BE, LicenseType.CE,
    LicenseType.C1E, LicenseType.DE, LicenseType.D1E,
})

class DriverModel(BaseModel):
    id: int = Field(default=0, alias="_id")
    name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    license: str = ""
    license_type: str = ""
    # Only filled when the store is asked to expand the driver's vehicles
    vehicles: List[VehicleModel] = Field(default_factory=list)

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True)
