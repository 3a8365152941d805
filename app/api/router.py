"""
API Router - JSON Endpoints
"""
from fastapi import APIRouter

from app.api.customers import router as customers_router
from app.api.health import router as health_router

api_router = APIRouter(tags=["API"])

api_router.include_router(customers_router)
api_router.include_router(health_router)
