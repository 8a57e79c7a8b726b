# fleet/services/__init__.py
from .driver import DriverService
from .vehicle import VehicleService
