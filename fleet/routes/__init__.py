#fleet/routes/__init__.py

from .driver import router as driver_router
from .vehicle import router as vehicle_router
