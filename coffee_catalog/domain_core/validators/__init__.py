from .coffee_validators import CoffeeValidators

__all__ = ["CoffeeValidators"]
