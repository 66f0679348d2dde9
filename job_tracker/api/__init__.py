"""
API routes module.

FastAPI routers for the JSON handlers.
"""

from fastapi import APIRouter

from .routers import health_router, sheet_data_router, submit_router

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(submit_router)
api_router.include_router(sheet_data_router)

__all__ = ["api_router"]
