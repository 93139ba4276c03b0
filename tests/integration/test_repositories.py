"""
Integration tests for the catalog repositories with a real (SQLite) database.
"""

import pytest
from sqlalchemy import func, select

from coffee_catalog.application.services.coffee_service import CoffeeService
from coffee_catalog.application.unit_of_work import UnitOfWork
from coffee_catalog.data.models import CoffeeModel, EventModel, FlavorModel, coffee_flavors
from coffee_catalog.data.repositories import CoffeeRepository, FlavorRepository
from coffee_catalog.domain_core.exceptions import CoffeeNotFoundError


async def _count(session_factory, statement) -> int:
    async with session_factory() as session:
        return (await session.execute(statement)).scalar_one()


async def _flavor_count(session_factory) -> int:
    return await _count(session_factory, select(func.count()).select_from(FlavorModel))


class TestFlavorDeduplication:
    @pytest.mark.asyncio
    async def test_shared_flavor_resolves_to_one_row(self, seed_coffees, session_factory):
        first, second = await seed_coffees(
            ("Shipwreck Roast", "Buddy Brew", ["vanilla", "chocolate"]),
            ("Nicaraguan", "Buddy Brew", ["vanilla"]),
        )

        assert await _flavor_count(session_factory) == 2
        first_vanilla = next(f for f in first.flavors if f.name == "vanilla")
        assert second.flavors[0].id == first_vanilla.id

    @pytest.mark.asyncio
    async def test_repeated_name_in_one_request(self, seed_coffees, session_factory):
        (coffee,) = await seed_coffees(("Roast", "Brew", ["mocha", "mocha"]))

        assert coffee.flavor_names == ["mocha"]
        assert await _flavor_count(session_factory) == 1

    @pytest.mark.asyncio
    async def test_lookup_is_case_sensitive(self, seed_coffees, session_factory):
        await seed_coffees(("Roast", "Brew", ["Vanilla"]), ("Blend", "Brew", ["vanilla"]))

        assert await _flavor_count(session_factory) == 2

    @pytest.mark.asyncio
    async def test_preload_by_name_reuses_existing(self, test_db_session):
        repo = FlavorRepository(test_db_session)

        created = await repo.preload_by_name("caramel")
        again = await repo.preload_by_name("caramel")

        assert created is again
        assert [flavor.name for flavor in await repo.list_all()] == ["caramel"]


class TestPagination:
    @pytest.mark.asyncio
    async def test_pages_in_stable_order(self, seed_coffees, session_factory):
        seeded = await seed_coffees(
            *[(f"Coffee {i}", "Brew", ["vanilla"]) for i in range(5)]
        )

        async with session_factory() as session:
            repo = CoffeeRepository(session)
            first_page = await repo.get_page(limit=2, offset=0)
            last_page = await repo.get_page(limit=2, offset=4)

        assert [c.id for c in first_page] == [seeded[0].id, seeded[1].id]
        assert [c.id for c in last_page] == [seeded[4].id]
        assert first_page[0].flavor_names == ["vanilla"]

    @pytest.mark.asyncio
    async def test_service_clamps_limit(self, seed_coffees, session_factory):
        await seed_coffees(*[(f"Coffee {i}", "Brew", []) for i in range(5)])

        async with session_factory() as session:
            service = CoffeeService(UnitOfWork(session), max_page_size=3)
            page = await service.find_all(limit=100)

        assert len(page) == 3


class TestUpdate:
    @pytest.mark.asyncio
    async def test_partial_update_merges_fields(self, seed_coffees, session_factory):
        (coffee,) = await seed_coffees(("Roast", "Brew", ["vanilla"]))

        async with session_factory() as session:
            service = CoffeeService(UnitOfWork(session))
            updated = await service.update(coffee.id, {"brand": "New Brew"})

        assert updated.name == "Roast"
        assert updated.brand == "New Brew"
        assert updated.flavor_names == ["vanilla"]

    @pytest.mark.asyncio
    async def test_flavors_are_replaced(self, seed_coffees, session_factory):
        (coffee,) = await seed_coffees(("Roast", "Brew", ["vanilla"]))

        async with session_factory() as session:
            service = CoffeeService(UnitOfWork(session))
            await service.update(coffee.id, {"flavors": ["caramel", "vanilla"]})

        async with session_factory() as session:
            reloaded = await CoffeeRepository(session).get_by_id(coffee.id)

        assert reloaded.flavor_names == ["vanilla", "caramel"]
        assert await _flavor_count(session_factory) == 2

    @pytest.mark.asyncio
    async def test_missing_coffee_creates_no_flavors(self, session_factory):
        async with session_factory() as session:
            service = CoffeeService(UnitOfWork(session))
            with pytest.raises(CoffeeNotFoundError):
                await service.update(999, {"flavors": ["ghost"]})

        assert await _flavor_count(session_factory) == 0


class TestRemove:
    @pytest.mark.asyncio
    async def test_remove_keeps_shared_flavors(self, seed_coffees, session_factory):
        first, second = await seed_coffees(
            ("Roast", "Brew", ["vanilla"]), ("Blend", "Brew", ["vanilla"])
        )

        async with session_factory() as session:
            service = CoffeeService(UnitOfWork(session))
            removed = await service.remove(first.id)

        assert removed.id == first.id
        assert await _flavor_count(session_factory) == 1
        assert (
            await _count(session_factory, select(func.count()).select_from(coffee_flavors))
            == 1
        )
        async with session_factory() as session:
            remaining = await CoffeeRepository(session).get_page(limit=10, offset=0)
        assert [c.id for c in remaining] == [second.id]

    @pytest.mark.asyncio
    async def test_missing_coffee_leaves_store_untouched(self, seed_coffees, session_factory):
        await seed_coffees(("Roast", "Brew", ["vanilla"]))

        async with session_factory() as session:
            service = CoffeeService(UnitOfWork(session))
            with pytest.raises(CoffeeNotFoundError):
                await service.remove(999)
            with pytest.raises(CoffeeNotFoundError):
                await service.find_one(999)

        assert (
            await _count(session_factory, select(func.count()).select_from(CoffeeModel))
            == 1
        )
        assert (
            await _count(session_factory, select(func.count()).select_from(EventModel))
            == 0
        )
