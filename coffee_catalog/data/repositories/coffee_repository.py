"""
Coffee repository for data access operations.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from coffee_catalog.data.models.base import utcnow
from coffee_catalog.data.models.coffee_model import CoffeeModel
from coffee_catalog.data.repositories.flavor_repository import FlavorRepository
from coffee_catalog.domain_core.entities.coffee import Coffee, Flavor
from coffee_catalog.infra.config.logging_config import get_logger

UPDATABLE_FIELDS = frozenset({"name", "brand"})


class CoffeeRepository:
    def __init__(
        self, session: AsyncSession, flavor_repo: Optional[FlavorRepository] = None
    ):
        self.session = session
        self.flavor_repo = flavor_repo or FlavorRepository(session)
        self._log = get_logger("repo.coffee")

    @staticmethod
    def _active():
        return select(CoffeeModel).where(CoffeeModel.deleted_at.is_(None))

    async def _get_model(self, coffee_id: int) -> Optional[CoffeeModel]:
        result = await self.session.execute(
            self._active().where(CoffeeModel.id == coffee_id)
        )
        return result.scalar_one_or_none()

    async def _resolve_flavors(self, flavor_names: List[str]):
        return [await self.flavor_repo.preload_by_name(name) for name in flavor_names]

    async def get_page(self, limit: int, offset: int) -> List[Coffee]:
        """Get a page of coffees ordered by id."""
        result = await self.session.execute(
            self._active().order_by(CoffeeModel.id).offset(offset).limit(limit)
        )
        items = [self._to_entity(model) for model in result.scalars().all()]
        self._log.info("coffee.list", count=len(items), limit=limit, offset=offset)
        return items

    async def get_by_id(self, coffee_id: int) -> Optional[Coffee]:
        """Get coffee by ID with its flavors."""
        model = await self._get_model(coffee_id)
        if model is None:
            self._log.info("coffee.get.not_found", coffee_id=coffee_id)
            return None
        return self._to_entity(model)

    async def create(self, name: str, brand: str, flavor_names: List[str]) -> Coffee:
        """Create a coffee, reusing flavors that already exist by name."""
        flavors = await self._resolve_flavors(flavor_names)
        model = CoffeeModel(name=name, brand=brand, recommendations=0, flavors=flavors)

        self.session.add(model)
        await self.session.flush()  # Get the ID without committing

        self._log.info("coffee.create", coffee_id=model.id, flavors=len(flavors))
        return self._to_entity(model)

    async def update(
        self,
        coffee_id: int,
        changes: Dict[str, Any],
        flavor_names: Optional[List[str]] = None,
    ) -> Optional[Coffee]:
        """
        Merge partial changes onto an existing coffee.

        The coffee is looked up before any flavor is resolved, so updating a
        missing coffee never creates flavor rows.
        """
        model = await self._get_model(coffee_id)
        if model is None:
            self._log.info("coffee.update.not_found", coffee_id=coffee_id)
            return None

        if flavor_names is not None:
            model.flavors = await self._resolve_flavors(flavor_names)

        for field, value in changes.items():
            if field not in UPDATABLE_FIELDS:
                raise ValueError(f"Field {field!r} cannot be updated")
            setattr(model, field, value)

        await self.session.flush()
        self._log.info(
            "coffee.update", coffee_id=coffee_id, fields=sorted(changes.keys())
        )
        return self._to_entity(model)

    async def delete(self, coffee_id: int) -> Optional[Coffee]:
        """Delete a coffee and its flavor links; flavors themselves are kept."""
        model = await self._get_model(coffee_id)
        if model is None:
            self._log.info("coffee.delete.not_found", coffee_id=coffee_id)
            return None

        removed = self._to_entity(model)
        await self.session.delete(model)
        await self.session.flush()
        self._log.info("coffee.delete", coffee_id=coffee_id)
        return removed

    async def increment_recommendations(self, coffee_id: int) -> Optional[int]:
        """Add one to the counter in SQL and return the new value.

        Returns None when no active coffee matched, e.g. it was deleted after
        the caller looked it up.
        """
        updated = await self.session.execute(
            update(CoffeeModel)
            .where(CoffeeModel.id == coffee_id, CoffeeModel.deleted_at.is_(None))
            .values(
                recommendations=CoffeeModel.recommendations + 1,
                updated_at=utcnow(),
            )
            .execution_options(synchronize_session=False)
        )
        if updated.rowcount == 0:
            self._log.info("coffee.recommend.not_found", coffee_id=coffee_id)
            return None

        result = await self.session.execute(
            select(CoffeeModel.recommendations).where(CoffeeModel.id == coffee_id)
        )
        recommendations = result.scalar_one()
        self._log.info(
            "coffee.recommend", coffee_id=coffee_id, recommendations=recommendations
        )
        return recommendations

    def _to_entity(self, model: CoffeeModel) -> Coffee:
        """Convert SQLAlchemy model to domain entity."""
        return Coffee(
            id=model.id,
            name=model.name,
            brand=model.brand,
            recommendations=model.recommendations,
            flavors=[Flavor(id=flavor.id, name=flavor.name) for flavor in model.flavors],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
