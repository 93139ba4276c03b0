"""
Audit event entity.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class EventName(str, Enum):
    RECOMMEND_COFFEE = "recommend_coffee"


class EventType(str, Enum):
    COFFEE = "coffee"


@dataclass(frozen=True)
class Event:
    """Immutable record of something that happened to a catalog item."""

    id: int
    name: str
    type: str
    payload: Dict[str, Any] = field(default_factory=dict)
    created_at: Optional[datetime] = None
