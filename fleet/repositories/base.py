# fleet/repositories/base.py
"""Store interfaces the services depend on.

A store reports a missing record by returning ``None`` from ``get_by_id``
and reports every storage failure as ``StoreError``.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import List, Optional

from pymongo.errors import PyMongoError

from fleet.errors import StoreError
from fleet.logging import get_logger
from fleet.models.driver import DriverModel
from fleet.models.vehicle import VehicleModel

logger = get_logger(__name__)


@contextmanager
def store_errors(action: str, **context):
    """Log a PyMongo failure and re-raise it as ``StoreError``."""
    try:
        yield
    except PyMongoError as exc:
        logger.error(f"error {action}", extra={**context, "error": str(exc)})
        raise StoreError(f"error {action}") from exc


class DriverStore(ABC):
    @abstractmethod
    async def list(self) -> List[DriverModel]:
        ...

    @abstractmethod
    async def get_by_id(self, driver_id: int, expand: bool = False) -> Optional[DriverModel]:
        """Fetch a live driver; ``expand`` also loads the driver's vehicles."""

    @abstractmethod
    async def create(self, driver: DriverModel) -> int:
        ...

    @abstractmethod
    async def update(self, driver: DriverModel) -> None:
        """Save every field of ``driver`` over the stored record."""

    @abstractmethod
    async def delete(self, driver_id: int) -> None:
        ...

    @abstractmethod
    async def associate(self, driver: DriverModel, vehicle: VehicleModel) -> int:
        """Store ``vehicle`` as owned by ``driver`` and return the vehicle id."""


class VehicleStore(ABC):
    @abstractmethod
    async def list(self) -> List[VehicleModel]:
        ...

    @abstractmethod
    async def get_by_id(self, vehicle_id: int) -> Optional[VehicleModel]:
        ...

    @abstractmethod
    async def update(self, vehicle: VehicleModel) -> None:
        ...

    @abstractmethod
    async def delete(self, vehicle_id: int) -> None:
        ...
