"""
Coffee routers.
"""

from fastapi import APIRouter

from .coffees import router as coffees_router
from .recommendations import router as recommendations_router
from .system import router as system_router

router = APIRouter()

router.include_router(coffees_router)
router.include_router(recommendations_router)

__all__ = ["router", "system_router"]
