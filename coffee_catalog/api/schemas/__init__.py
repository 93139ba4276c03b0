from .base import DataResponse, ErrorResponse, HealthResponse
from .coffee import (
    CoffeeResponse,
    CreateCoffeeRequest,
    FlavorResponse,
    RecommendCoffeeResponse,
    UpdateCoffeeRequest,
)

__all__ = [
    "DataResponse",
    "ErrorResponse",
    "HealthResponse",
    "CoffeeResponse",
    "CreateCoffeeRequest",
    "FlavorResponse",
    "RecommendCoffeeResponse",
    "UpdateCoffeeRequest",
]
