"""
Pytest configuration and fixtures.
"""

import os

# Settings are read when the app module is imported; set them first.
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_HOST"] = "localhost"
os.environ["DATABASE_USER"] = "coffee"
os.environ["DATABASE_PASSWORD"] = "coffee"
os.environ["DATABASE_NAME"] = "coffee_test"
os.environ["DATABASE_SYNCHRONIZE"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["API_KEY"] = "test-api-key"
os.environ["PAGINATION_MAX_LIMIT"] = "50"
os.environ["LOG_FORMAT"] = "console"

from typing import AsyncGenerator, List

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from coffee_catalog.application.services.coffee_service import CoffeeService
from coffee_catalog.application.unit_of_work import UnitOfWork
from coffee_catalog.data.models import Base
from coffee_catalog.domain_core.entities.coffee import Coffee
from coffee_catalog.infra.config.database import get_db_session

API_KEY = "test-api-key"


# ---------- DATABASE FIXTURES ----------


@pytest.fixture
async def test_db_engine():
    """In-memory SQLite engine shared by every session of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(test_db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_db_engine, class_=AsyncSession, expire_on_commit=False
    )


@pytest.fixture
async def test_db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def seed_coffees(session_factory):
    """Create coffees through the catalog service, each in its own session."""

    async def _seed(*rows) -> List[Coffee]:
        created = []
        for name, brand, flavors in rows:
            async with session_factory() as session:
                service = CoffeeService(UnitOfWork(session))
                created.append(await service.create(name, brand, flavors))
        return created

    return _seed


# ---------- API TESTING FIXTURES ----------


@pytest.fixture
def app(session_factory):
    """FastAPI application wired to the test database."""
    from coffee_catalog.main import app

    async def _test_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _test_db_session
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as ac:
        yield ac


@pytest.fixture
def auth_headers():
    """Headers carrying the configured API key."""
    return {"Authorization": API_KEY}


@pytest.fixture
def sample_coffee_request():
    return {
        "name": "Shipwreck Roast",
        "brand": "Buddy Brew",
        "flavors": ["chocolate", "vanilla"],
    }


# ---------- PYTEST CONFIGURATION ----------


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        path = str(item.fspath)
        if "integration" in path:
            item.add_marker(pytest.mark.integration)
        elif "api" in path:
            item.add_marker(pytest.mark.api)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)
