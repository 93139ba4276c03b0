"""
Declarative base and the columns shared by every catalog table.
"""

from datetime import datetime, UTC

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(UTC)


class TimestampedMixin:
    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )
    # Soft-deletion marker; rows with a value are hidden from catalog reads
    deleted_at = Column(DateTime(timezone=True), nullable=True)
