"""
Controllers Package

Each controller is a FastAPI APIRouter for one resource.
"""

from app.controllers.items import router as items_router

__all__ = ["items_router"]
