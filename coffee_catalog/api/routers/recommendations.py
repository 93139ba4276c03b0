"""
Recommend endpoint: bumps the counter and records an audit event.
"""

from fastapi import APIRouter, status

from coffee_catalog.api.dependencies import RecommendCoffeeUseCaseDep
from coffee_catalog.api.schemas import DataResponse, RecommendCoffeeResponse
from coffee_catalog.domain_core.exceptions import RecommendationFailedError
from coffee_catalog.infra.config.logging_config import get_logger

router = APIRouter(prefix="/coffees", tags=["coffees"])
log = get_logger("api.coffees.recommend")


@router.patch(
    "/{coffee_id}/recommend", response_model=DataResponse[RecommendCoffeeResponse]
)
async def recommend_coffee(coffee_id: int, use_case: RecommendCoffeeUseCaseDep):
    """
    Recommend a coffee.

    Returns 404 for an unknown coffee and 500 when the transaction was rolled
    back; in both cases neither the counter nor the event log changed.
    """
    outcome = await use_case.execute(coffee_id)
    if not outcome.ok:
        log.warning("coffee.recommend.failed", coffee_id=coffee_id)
        raise RecommendationFailedError(coffee_id, "transaction rolled back")

    return DataResponse(
        data=RecommendCoffeeResponse(
            coffee_id=outcome.coffee_id,
            recommendations=outcome.recommendations,
            event_id=outcome.event_id,
        ),
        status_code=status.HTTP_200_OK,
    )
