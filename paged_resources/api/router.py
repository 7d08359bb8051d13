"""
Main API router that includes all endpoint routers.
"""
from fastapi import APIRouter

from paged_resources.api.v1.endpoints import users


# Create main API router
api_router = APIRouter()

# Include all endpoint routers with appropriate tags
api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Users"]
)
