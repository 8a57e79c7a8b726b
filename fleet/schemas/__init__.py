# fleet/schemas/__init__.py
from .driver import DriverCreate, DriverUpdate, DriverOut, CreatedOut
from .vehicle import VehicleCreate, VehicleUpdate, VehicleOut
