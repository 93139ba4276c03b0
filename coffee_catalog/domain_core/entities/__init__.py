from .coffee import Coffee, Flavor
from .event import Event, EventName, EventType

__all__ = ["Coffee", "Flavor", "Event", "EventName", "EventType"]
