# fleet/models/__init__.py
from .driver import DriverModel, LicenseType, LICENSE_TYPES
from .vehicle import VehicleModel
