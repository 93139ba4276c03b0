"""
Use Case: Recommend Coffee

Increments a coffee's recommendation counter and appends a
``recommend_coffee`` audit event. Both writes share one transaction:
either the counter and the event land together or neither does.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from coffee_catalog.application.unit_of_work import UnitOfWork
from coffee_catalog.domain_core.entities.event import EventName, EventType
from coffee_catalog.domain_core.exceptions import CoffeeNotFoundError
from coffee_catalog.infra.config.logging_config import bind_context, get_logger


@dataclass(frozen=True)
class RecommendationOutcome:
    """Result of one recommend call."""

    ok: bool
    coffee_id: int
    recommendations: Optional[int] = None
    event_id: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def succeeded(
        cls, coffee_id: int, recommendations: int, event_id: int
    ) -> "RecommendationOutcome":
        return cls(
            ok=True,
            coffee_id=coffee_id,
            recommendations=recommendations,
            event_id=event_id,
        )

    @classmethod
    def failed(cls, coffee_id: int, error: str) -> "RecommendationOutcome":
        return cls(ok=False, coffee_id=coffee_id, error=error)


class RecommendCoffeeUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self._log = get_logger("usecase.recommend_coffee")

    async def execute(self, coffee_id: int) -> RecommendationOutcome:
        """
        Execute the recommend use case.

        Args:
            coffee_id: ID of the coffee to recommend

        Returns:
            RecommendationOutcome describing success or the rolled-back failure

        Raises:
            CoffeeNotFoundError: if the coffee does not exist or disappears before
                the update (nothing is written)
        """
        bind_context(coffee_id=coffee_id)
        self._log.info("usecase.start", action="recommend_coffee")

        # 1. Lookup happens before the write transaction
        coffee = await self.uow.coffee_repo.get_by_id(coffee_id)
        if coffee is None:
            raise CoffeeNotFoundError(coffee_id)

        # 2. Counter and audit event in one transaction
        try:
            async with self.uow:
                recommendations = await self.uow.coffee_repo.increment_recommendations(
                    coffee.id
                )
                if recommendations is None:
                    # Deleted between the lookup and the update
                    raise CoffeeNotFoundError(coffee.id)
                event = await self.uow.event_repo.store_event(
                    name=EventName.RECOMMEND_COFFEE.value,
                    type=EventType.COFFEE.value,
                    payload=coffee.recommendation_payload(),
                )
                await self.uow.commit()
        except SQLAlchemyError as e:
            # The unit of work has already rolled back both writes
            self._log.exception("usecase.rollback", error=str(e))
            return RecommendationOutcome.failed(coffee.id, str(e))

        self._log.info(
            "usecase.success", recommendations=recommendations, event_id=event.id
        )
        return RecommendationOutcome.succeeded(coffee.id, recommendations, event.id)
