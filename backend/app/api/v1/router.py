# backend/app/api/v1/router.py
from fastapi import APIRouter

# Import domain API routers
from app.domains.device.api.device_api import router as device_router
from app.domains.sensor.api.sensor_api import router as sensor_router

api_router = APIRouter()

# Register domain routers
api_router.include_router(device_router, prefix="/devices", tags=["Devices"])
api_router.include_router(sensor_router, prefix="/sensors", tags=["Sensors"])
