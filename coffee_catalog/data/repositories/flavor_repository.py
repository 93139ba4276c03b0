"""
Flavor repository: lookup and find-or-create by name.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coffee_catalog.data.models.coffee_model import FlavorModel
from coffee_catalog.domain_core.entities.coffee import Flavor
from coffee_catalog.infra.config.logging_config import get_logger


class FlavorRepository:
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.flavor")

    async def get_by_name(self, name: str) -> Optional[FlavorModel]:
        """Get the oldest flavor with exactly this name (case-sensitive)."""
        result = await self.session.execute(
            select(FlavorModel)
            .where(FlavorModel.name == name, FlavorModel.deleted_at.is_(None))
            .order_by(FlavorModel.id)
            .limit(1)
        )
        return result.scalars().first()

    async def preload_by_name(self, name: str) -> FlavorModel:
        """
        Return the existing flavor with this name, or stage a new one.

        New flavors are flushed immediately so a second lookup for the same
        name inside the transaction finds the staged row.
        """
        existing = await self.get_by_name(name)
        if existing is not None:
            return existing

        flavor = FlavorModel(name=name)
        self.session.add(flavor)
        await self.session.flush()
        self._log.info("flavor.create", flavor_id=flavor.id, name=name)
        return flavor

    async def list_all(self) -> List[Flavor]:
        result = await self.session.execute(
            select(FlavorModel)
            .where(FlavorModel.deleted_at.is_(None))
            .order_by(FlavorModel.id)
        )
        return [Flavor(id=model.id, name=model.name) for model in result.scalars()]
