"""
SQLAlchemy models for coffees, flavors and their association table.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from coffee_catalog.data.models.base import Base, TimestampedMixin

coffee_flavors = Table(
    "coffee_flavors",
    Base.metadata,
    Column(
        "coffee_id",
        Integer,
        ForeignKey("coffees.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "flavor_id",
        Integer,
        ForeignKey("flavors.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class CoffeeModel(TimestampedMixin, Base):
    __tablename__ = "coffees"

    name = Column(String(255), nullable=False)
    brand = Column(String(255), nullable=False)
    recommendations = Column(Integer, nullable=False, default=0)

    # Relationships
    flavors = relationship(
        "FlavorModel",
        secondary=coffee_flavors,
        back_populates="coffees",
        lazy="selectin",
        order_by="FlavorModel.id",
    )


class FlavorModel(TimestampedMixin, Base):
    __tablename__ = "flavors"

    name = Column(String(255), nullable=False, index=True)

    coffees = relationship(
        "CoffeeModel", secondary=coffee_flavors, back_populates="flavors"
    )
