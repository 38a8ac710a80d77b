"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from dogratings.api.health import router as health_router
from dogratings.api.records import router as records_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# People, dogs and ratings
api_router.include_router(records_router)
