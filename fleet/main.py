# fleet/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
from fleet.routes import driver_router, vehicle_router
from fleet.database import connect_to_mongo, close_mongo_connection, init_db
from fleet.config import get_settings
from fleet.logging import setup_logging

settings = get_settings()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging(settings.LOG_LEVEL)
    await connect_to_mongo()
    await init_db()
    yield
    # Shutdown
    await close_mongo_connection()

app = FastAPI(title="Fleet Registry", lifespan=lifespan)

app.include_router(driver_router, prefix=settings.API_PREFIX, tags=["drivers"])
app.include_router(vehicle_router, prefix=settings.API_PREFIX, tags=["vehicles"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Fleet Registry"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "fleet.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
