"""
Event repository for storing audit events.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coffee_catalog.data.models.event_model import EventModel
from coffee_catalog.domain_core.entities.event import Event
from coffee_catalog.infra.config.logging_config import get_logger


class EventRepository:
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.event")

    async def store_event(
        self, name: str, type: str, payload: Dict[str, Any]
    ) -> Event:
        """Store an audit event."""
        event_model = EventModel(name=name, type=type, payload=payload)

        self.session.add(event_model)
        await self.session.flush()
        self._log.info("event.store", event_id=event_model.id, name=name, type=type)
        return self._to_entity(event_model)

    async def list_events(
        self, name: Optional[str] = None, type: Optional[str] = None
    ) -> List[Event]:
        """Get events ordered by id, optionally filtered by name and type."""
        query = select(EventModel).order_by(EventModel.id)
        if name is not None:
            query = query.where(EventModel.name == name)
        if type is not None:
            query = query.where(EventModel.type == type)

        result = await self.session.execute(query)
        items = [self._to_entity(model) for model in result.scalars().all()]
        self._log.info("event.list", name=name, type=type, count=len(items))
        return items

    def _to_entity(self, model: EventModel) -> Event:
        return Event(
            id=model.id,
            name=model.name,
            type=model.type,
            payload=dict(model.payload),
            created_at=model.created_at,
        )
