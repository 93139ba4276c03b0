"""
Catalog service: list, look up, create, update and remove coffees.
"""

from typing import Any, Dict, List, Optional

from coffee_catalog.application.unit_of_work import UnitOfWork
from coffee_catalog.data.repositories.coffee_repository import UPDATABLE_FIELDS
from coffee_catalog.domain_core.entities.coffee import Coffee
from coffee_catalog.domain_core.exceptions import CoffeeNotFoundError, InvalidCoffeeError
from coffee_catalog.domain_core.validators import CoffeeValidators
from coffee_catalog.infra.config.logging_config import bind_context, get_logger


class CoffeeService:
    """Catalog operations, each committed through one unit of work."""

    def __init__(self, uow: UnitOfWork, max_page_size: int = 100):
        self.uow = uow
        self.max_page_size = max_page_size
        self._log = get_logger("service.coffee")

    async def find_all(
        self, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> List[Coffee]:
        limit, offset = CoffeeValidators.validate_pagination(
            limit, offset, self.max_page_size
        )
        return await self.uow.coffee_repo.get_page(limit=limit, offset=offset)

    async def find_one(self, coffee_id: int) -> Coffee:
        coffee = await self.uow.coffee_repo.get_by_id(coffee_id)
        if coffee is None:
            raise CoffeeNotFoundError(coffee_id)
        return coffee

    async def create(self, name: str, brand: str, flavors: List[str]) -> Coffee:
        """
        Create a coffee with the given flavors.

        Flavor names that already exist are linked, not duplicated.
        """
        CoffeeValidators.validate_text(name, "name")
        CoffeeValidators.validate_text(brand, "brand")
        flavor_names = CoffeeValidators.validate_flavor_names(flavors)

        async with self.uow:
            coffee = await self.uow.coffee_repo.create(name, brand, flavor_names)
            await self.uow.commit()

        bind_context(coffee_id=coffee.id)
        self._log.info("coffee.created", flavors=coffee.flavor_names)
        return coffee

    async def update(self, coffee_id: int, changes: Dict[str, Any]) -> Coffee:
        """
        Merge the supplied fields onto an existing coffee.

        ``flavors``, when present, replaces the flavor set using the same
        find-or-create rule as creation.
        """
        changes = dict(changes)
        flavor_names = changes.pop("flavors", None)

        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise InvalidCoffeeError(f"Unknown coffee fields: {sorted(unknown)}")
        for field, value in changes.items():
            CoffeeValidators.validate_text(value, field)
        if flavor_names is not None:
            flavor_names = CoffeeValidators.validate_flavor_names(flavor_names)

        async with self.uow:
            coffee = await self.uow.coffee_repo.update(coffee_id, changes, flavor_names)
            if coffee is None:
                raise CoffeeNotFoundError(coffee_id)
            await self.uow.commit()

        self._log.info("coffee.updated", coffee_id=coffee_id)
        return coffee

    async def remove(self, coffee_id: int) -> Coffee:
        async with self.uow:
            coffee = await self.uow.coffee_repo.delete(coffee_id)
            if coffee is None:
                raise CoffeeNotFoundError(coffee_id)
            await self.uow.commit()

        self._log.info("coffee.removed", coffee_id=coffee_id)
        return coffee
