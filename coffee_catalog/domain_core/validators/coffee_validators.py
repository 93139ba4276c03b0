"""
Domain validators for coffee catalog business rules.
"""

from typing import Iterable, List, Optional, Tuple

from coffee_catalog.domain_core.exceptions import InvalidCoffeeError

MAX_NAME_LENGTH = 255


class CoffeeValidators:
    @staticmethod
    def validate_text(value: str, field_name: str) -> None:
        """Validate a required free-text field (name, brand, flavor)."""
        if value is None or not value.strip():
            raise InvalidCoffeeError(f"Coffee {field_name} cannot be empty")

        if len(value) > MAX_NAME_LENGTH:
            raise InvalidCoffeeError(
                f"Coffee {field_name} cannot exceed {MAX_NAME_LENGTH} characters"
            )

    @staticmethod
    def validate_flavor_names(names: Iterable[str]) -> List[str]:
        """Validate flavor names and drop repeats, keeping first-seen order."""
        names = list(names)
        for name in names:
            CoffeeValidators.validate_text(name, "flavor")
        return list(dict.fromkeys(names))

    @staticmethod
    def validate_pagination(
        limit: Optional[int], offset: Optional[int], max_limit: int
    ) -> Tuple[int, int]:
        """Return (limit, offset) with limit clamped to max_limit."""
        if limit is not None and limit < 0:
            raise InvalidCoffeeError("Pagination limit must be non-negative")

        if offset is not None and offset < 0:
            raise InvalidCoffeeError("Pagination offset must be non-negative")

        if limit is None:
            limit = max_limit
        return min(limit, max_limit), offset or 0
