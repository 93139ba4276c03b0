"""
Unit tests for the unit of work transaction boundary.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from coffee_catalog.application.unit_of_work import UnitOfWork


@pytest.fixture
def session():
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


class TestUnitOfWork:
    def test_repositories_share_the_session(self, session):
        uow = UnitOfWork(session)

        assert uow.coffee_repo.session is session
        assert uow.event_repo.session is session
        assert uow.coffee_repo.flavor_repo is uow.flavor_repo

    @pytest.mark.asyncio
    async def test_commit_is_kept(self, session):
        uow = UnitOfWork(session)

        async with uow:
            await uow.commit()

        assert uow.is_committed
        session.commit.assert_awaited_once()
        session.rollback.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_commit_rolls_back(self, session):
        uow = UnitOfWork(session)

        async with uow:
            pass

        assert not uow.is_committed
        session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_error_rolls_back_and_propagates(self, session):
        uow = UnitOfWork(session)

        with pytest.raises(RuntimeError):
            async with uow:
                raise RuntimeError("boom")

        session.commit.assert_not_called()
        session.rollback.assert_awaited_once()
