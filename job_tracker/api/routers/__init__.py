"""API routers."""

from .health import router as health_router
from .sheet_data import router as sheet_data_router
from .submit import router as submit_router

__all__ = [
    "health_router",
    "sheet_data_router",
    "submit_router",
]
