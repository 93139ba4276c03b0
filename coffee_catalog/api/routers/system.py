"""
Service health endpoint.
"""

from fastapi import APIRouter

from coffee_catalog import __version__
from coffee_catalog.api.schemas import HealthResponse
from coffee_catalog.infra.auth import public_api
from coffee_catalog.infra.config.settings import get_settings

router = APIRouter()


@router.get("/", response_model=HealthResponse)
@public_api
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy", service=get_settings().app_name, version=__version__
    )
