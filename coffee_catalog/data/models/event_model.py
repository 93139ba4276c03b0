"""
SQLAlchemy model for audit events.
"""

from sqlalchemy import JSON, Column, Index, String

from coffee_catalog.data.models.base import Base, TimestampedMixin


class EventModel(TimestampedMixin, Base):
    __tablename__ = "events"
    __table_args__ = (Index("ix_events_name_type", "name", "type"),)

    name = Column(String(100), nullable=False)  # recommend_coffee, ...
    type = Column(String(50), nullable=False)  # coffee, ...
    payload = Column(JSON, nullable=False)
