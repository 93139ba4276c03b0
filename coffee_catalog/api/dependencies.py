"""
API dependencies for dependency injection.

Wires a request-scoped session into the unit of work, and the unit of work
into the catalog service and the recommend use case.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coffee_catalog.application.services.coffee_service import CoffeeService
from coffee_catalog.application.unit_of_work import UnitOfWork
from coffee_catalog.application.use_cases.recommend_coffee import RecommendCoffeeUseCase
from coffee_catalog.infra.config.database import get_db_session
from coffee_catalog.infra.config.settings import Settings, get_settings


async def get_unit_of_work(
    session: AsyncSession = Depends(get_db_session),
) -> UnitOfWork:
    """
    Create a Unit of Work instance with repositories.

    Args:
        session: Database session

    Returns:
        UnitOfWork: Configured unit of work instance
    """
    return UnitOfWork(session=session)


async def get_coffee_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
    settings: Settings = Depends(get_settings),
) -> CoffeeService:
    return CoffeeService(uow=uow, max_page_size=settings.pagination_max_limit)


async def get_recommend_coffee_use_case(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> RecommendCoffeeUseCase:
    return RecommendCoffeeUseCase(uow=uow)


# Type aliases for cleaner dependency injection
CoffeeServiceDep = Annotated[CoffeeService, Depends(get_coffee_service)]
RecommendCoffeeUseCaseDep = Annotated[
    RecommendCoffeeUseCase, Depends(get_recommend_coffee_use_case)
]
