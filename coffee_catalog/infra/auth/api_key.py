"""
Pre-shared API key guard.

Every route requires the key unless its endpoint is marked with
``@public_api``. The guard is installed as an application-wide dependency so
that new routes are protected by default.
"""

import hmac
from typing import Callable, TypeVar

from fastapi import HTTPException, Request, status

from coffee_catalog.infra.config.logging_config import get_logger
from coffee_catalog.infra.config.settings import get_settings

PUBLIC_API_ATTR = "__public_api__"

F = TypeVar("F", bound=Callable)

log = get_logger("auth")


def public_api(endpoint: F) -> F:
    """Mark an endpoint as reachable without the API key."""
    setattr(endpoint, PUBLIC_API_ATTR, True)
    return endpoint


def is_public_endpoint(endpoint) -> bool:
    return bool(getattr(endpoint, PUBLIC_API_ATTR, False))


def is_valid_api_key(provided: str | None, expected: str) -> bool:
    """Exact match of the Authorization header against the configured key."""
    if provided is None:
        return False
    return hmac.compare_digest(provided.encode(), expected.encode())


async def verify_api_key(request: Request) -> None:
    """Reject requests to non-public endpoints that lack the configured key."""
    endpoint = request.scope.get("endpoint")
    if is_public_endpoint(endpoint):
        return

    authorization = request.headers.get("Authorization")
    if not is_valid_api_key(authorization, get_settings().api_key):
        log.info("auth.rejected", has_header=authorization is not None)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden resource"
        )
