#!/usr/bin/env python3
"""
Initialize database tables for development.
"""
import asyncio

from coffee_catalog.infra.config.database import create_tables, dispose_engine
from coffee_catalog.infra.config.logging_config import get_logger, setup_logging


async def init_db():
    """Create all database tables."""
    setup_logging()
    await create_tables()
    await dispose_engine()
    get_logger("init_db").info("database.initialized")


if __name__ == "__main__":
    asyncio.run(init_db())
