# fleet/database.py
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError
from fleet.config import get_settings
from fleet.logging import get_logger

logger = get_logger(__name__)

class Database:
    client: AsyncIOMotorClient = None
    db = None

db = Database()

async def connect_to_mongo():
    settings = get_settings()
    db.client = AsyncIOMotorClient(settings.MONGODB_URI)
    db.db = db.client[settings.MONGODB_DB_NAME]
    logger.info("Connected to MongoDB", extra={"database": settings.MONGODB_DB_NAME})

async def close_mongo_connection():
    if db.client:
        db.client.close()
        logger.info("Closed MongoDB connection")

async def get_database():
    return db.db

async def next_sequence(database: AsyncIOMotorDatabase, name: str) -> int:
    """Return the next integer id for ``name``, starting at 1."""
    counter = await database.counters.find_one_and_update(
        {"_id": name},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return counter["seq"]

async def init_db():
    if not db.client:
        await connect_to_mongo()
    try:
        # Create collections
        collections = await db.db.list_collection_names()
        for name in ("drivers", "vehicles", "counters"):
            if name not in collections:
                await db.db.create_collection(name)

        # Soft-deleted documents are filtered out on every read
        await db.db.drivers.create_index([("deleted_at", ASCENDING)])
        await db.db.vehicles.create_index([("deleted_at", ASCENDING)])
        await db.db.vehicles.create_index([("driver_id", ASCENDING)])

        logger.info("Database initialized successfully")
        return True
    except PyMongoError:
        logger.exception("Database initialization failed")
        return False
