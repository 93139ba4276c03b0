from .base import Base
from .coffee_model import CoffeeModel, FlavorModel, coffee_flavors
from .event_model import EventModel

__all__ = ["Base", "CoffeeModel", "FlavorModel", "EventModel", "coffee_flavors"]
