# fleet/repositories/__init__.py
from .base import DriverStore, VehicleStore
from .driver import MongoDriverStore
from .vehicle import MongoVehicleStore
