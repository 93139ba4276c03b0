"""
Unit of Work pattern implementation for transaction boundaries.

The Unit of Work shares one session between the coffee, flavor and event
repositories so that their writes commit or roll back together.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from coffee_catalog.data.repositories import (
    CoffeeRepository,
    EventRepository,
    FlavorRepository,
)


class UnitOfWork:
    """
    Unit of Work implementation that manages transaction boundaries
    and provides access to repositories within a transaction context.
    """

    def __init__(
        self,
        session: AsyncSession,
        coffee_repo: CoffeeRepository | None = None,
        flavor_repo: FlavorRepository | None = None,
        event_repo: EventRepository | None = None,
    ):
        self.session = session
        self.flavor_repo = flavor_repo or FlavorRepository(session)
        self.coffee_repo = coffee_repo or CoffeeRepository(session, self.flavor_repo)
        self.event_repo = event_repo or EventRepository(session)
        self._committed = False

    async def __aenter__(self):
        """Enter transaction context."""
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Roll back anything that was not explicitly committed."""
        if exc_type is not None or not self._committed:
            await self.rollback()

    async def commit(self):
        """
        Commit the transaction.

        This makes all changes within the transaction permanent.
        """
        await self.session.commit()
        self._committed = True

    async def rollback(self):
        """
        Rollback the transaction.

        This discards all changes made within the transaction.
        """
        await self.session.rollback()

    @property
    def is_committed(self) -> bool:
        """Check if the transaction has been committed."""
        return self._committed
