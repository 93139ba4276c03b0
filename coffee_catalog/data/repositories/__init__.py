from .coffee_repository import CoffeeRepository
from .event_repository import EventRepository
from .flavor_repository import FlavorRepository

__all__ = ["CoffeeRepository", "EventRepository", "FlavorRepository"]
