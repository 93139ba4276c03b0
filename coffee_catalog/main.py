"""
FastAPI application entry point for the Coffee Catalog API.
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from coffee_catalog import __version__
from coffee_catalog.api.errors import setup_error_handlers
from coffee_catalog.api.routers import router as coffees_router
from coffee_catalog.api.routers import system_router
from coffee_catalog.infra.auth import verify_api_key
from coffee_catalog.infra.config.database import create_tables, dispose_engine
from coffee_catalog.infra.config.logging_config import get_logger, setup_logging
from coffee_catalog.infra.config.settings import get_settings
from coffee_catalog.infra.middleware.request_context import RequestContextMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger = get_logger("app")
    logger.info(
        "app.startup",
        app_name=settings.app_name,
        environment=settings.environment,
    )

    if settings.database_synchronize:
        # Development convenience only; production schemas are managed out of band
        logger.warning("database.synchronize", environment=settings.environment)
        await create_tables()

    try:
        yield
    finally:
        await dispose_engine()
        logger.info("app.shutdown", app_name=settings.app_name)


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Settings are loaded here so a missing or malformed variable stops the
    process before it starts listening.
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        description="Catalog of coffees and flavors with recommendation tracking",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        # Deny by default: only endpoints marked @public_api skip the key check
        dependencies=[Depends(verify_api_key)],
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request context + logging middleware
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    app.include_router(system_router, tags=["system"])
    app.include_router(coffees_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "coffee_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
