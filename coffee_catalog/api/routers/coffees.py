"""
Coffee catalog endpoints: list, lookup, create, update, delete.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from coffee_catalog.api.dependencies import CoffeeServiceDep
from coffee_catalog.api.schemas import (
    CoffeeResponse,
    CreateCoffeeRequest,
    DataResponse,
    UpdateCoffeeRequest,
)
from coffee_catalog.infra.auth import public_api
from coffee_catalog.infra.config.logging_config import bind_context, get_logger

router = APIRouter(prefix="/coffees", tags=["coffees"])
log = get_logger("api.coffees")


@router.get("", response_model=DataResponse[List[CoffeeResponse]])
@public_api
async def find_all(
    service: CoffeeServiceDep,
    limit: Optional[int] = Query(None, ge=0, description="Max items to return"),
    offset: Optional[int] = Query(None, ge=0, description="Number of items to skip"),
):
    """List coffees with their flavors, one page at a time."""
    coffees = await service.find_all(limit=limit, offset=offset)
    return DataResponse(
        data=[CoffeeResponse.model_validate(coffee) for coffee in coffees],
        status_code=status.HTTP_200_OK,
    )


@router.get("/{coffee_id}", response_model=DataResponse[CoffeeResponse])
@public_api
async def find_one(coffee_id: int, service: CoffeeServiceDep):
    coffee = await service.find_one(coffee_id)
    return DataResponse(
        data=CoffeeResponse.model_validate(coffee), status_code=status.HTTP_200_OK
    )


@router.post(
    "",
    response_model=DataResponse[CoffeeResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create(request: CreateCoffeeRequest, service: CoffeeServiceDep):
    """Create a coffee; flavor names that already exist are reused."""
    log.info("coffee.create.request", flavors=len(request.flavors))
    coffee = await service.create(
        name=request.name, brand=request.brand, flavors=request.flavors
    )
    return DataResponse(
        data=CoffeeResponse.model_validate(coffee),
        status_code=status.HTTP_201_CREATED,
    )


@router.patch("/{coffee_id}", response_model=DataResponse[CoffeeResponse])
async def update(
    coffee_id: int, request: UpdateCoffeeRequest, service: CoffeeServiceDep
):
    bind_context(coffee_id=coffee_id)
    coffee = await service.update(coffee_id, request.model_dump(exclude_unset=True))
    return DataResponse(
        data=CoffeeResponse.model_validate(coffee), status_code=status.HTTP_200_OK
    )


@router.delete("/{coffee_id}", response_model=DataResponse[CoffeeResponse])
async def remove(coffee_id: int, service: CoffeeServiceDep):
    """Delete a coffee and return it as it was before deletion."""
    bind_context(coffee_id=coffee_id)
    coffee = await service.remove(coffee_id)
    return DataResponse(
        data=CoffeeResponse.model_validate(coffee), status_code=status.HTTP_200_OK
    )
