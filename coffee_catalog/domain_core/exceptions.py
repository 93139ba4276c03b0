"""
Domain errors raised by services and use cases.

The API layer maps each error code to an HTTP status; raw database
exceptions are wrapped before they leave the application layer.
"""


class DomainError(Exception):
    """Base class for domain-specific errors."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class CoffeeNotFoundError(DomainError):
    """Raised when a coffee is not found."""

    def __init__(self, coffee_id: int):
        super().__init__(f"Coffee #{coffee_id} not found", "COFFEE_NOT_FOUND")
        self.coffee_id = coffee_id


class InvalidCoffeeError(DomainError, ValueError):
    """Raised when coffee input breaks a domain rule."""

    def __init__(self, reason: str):
        super().__init__(reason, "INVALID_COFFEE")


class RecommendationFailedError(DomainError):
    """Raised when the recommend transaction was rolled back."""

    def __init__(self, coffee_id: int, reason: str):
        super().__init__(
            f"Recommendation for coffee #{coffee_id} failed: {reason}",
            "RECOMMENDATION_FAILED",
        )
        self.coffee_id = coffee_id
