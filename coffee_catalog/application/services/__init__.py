from .coffee_service import CoffeeService

__all__ = ["CoffeeService"]
