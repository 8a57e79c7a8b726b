# fleet/dependencies.py
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from fleet.database import get_database
from fleet.repositories import MongoDriverStore, MongoVehicleStore
from fleet.services import DriverService, VehicleService

def get_driver_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> DriverService:
    return DriverService(MongoDriverStore(db))

def get_vehicle_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> VehicleService:
    return VehicleService(MongoVehicleStore(db))
