"""
Request and response schemas for coffee endpoints.
"""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from coffee_catalog.domain_core.validators.coffee_validators import MAX_NAME_LENGTH

# Kept verbatim: flavor lookup is exact, so " vanilla " and "vanilla" differ
FlavorName = Annotated[str, StringConstraints(min_length=1, max_length=MAX_NAME_LENGTH)]


# ---------- REQUESTS ----------
class CreateCoffeeRequest(BaseModel):
    """Body of POST /coffees. Unknown fields are rejected."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Shipwreck Roast",
                "brand": "Buddy Brew",
                "flavors": ["vanilla", "chocolate", "caramel"],
            }
        },
    )

    name: str = Field(
        ..., min_length=1, max_length=MAX_NAME_LENGTH, description="The name of a coffee"
    )
    brand: str = Field(
        ..., min_length=1, max_length=MAX_NAME_LENGTH, description="The brand of a coffee"
    )
    flavors: List[FlavorName] = Field(..., description="The flavors of a coffee")


class UpdateCoffeeRequest(BaseModel):
    """Body of PATCH /coffees/{id}. Every field is optional."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(
        None, min_length=1, max_length=MAX_NAME_LENGTH, description="The name of a coffee"
    )
    brand: Optional[str] = Field(
        None, min_length=1, max_length=MAX_NAME_LENGTH, description="The brand of a coffee"
    )
    flavors: Optional[List[FlavorName]] = Field(
        None, description="Replaces the flavors of a coffee"
    )


# ---------- RESPONSES ----------
class FlavorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class CoffeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    brand: str
    recommendations: int
    flavors: List[FlavorResponse] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RecommendCoffeeResponse(BaseModel):
    coffee_id: int
    recommendations: int = Field(..., description="Counter after the increment")
    event_id: int = Field(..., description="ID of the recorded audit event")
