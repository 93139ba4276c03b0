"""
Coffee and flavor domain entities.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Flavor:
    id: int
    name: str


@dataclass
class Coffee:
    id: int
    name: str
    brand: str
    recommendations: int = 0
    flavors: List[Flavor] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def flavor_names(self) -> List[str]:
        return [flavor.name for flavor in self.flavors]

    def recommendation_payload(self) -> dict:
        """Audit payload identifying this coffee."""
        return {"coffee_id": self.id, "coffee_name": self.name}
