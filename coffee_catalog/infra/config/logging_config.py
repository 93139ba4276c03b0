"""
Structured logging for the coffee catalog.

Every record carries the service name and environment so that logs from
several deployments can share one sink. Request-scoped keys (request_id,
coffee_id) come from contextvars bound by the middleware and use cases.
"""

from __future__ import annotations

import logging
from typing import Any, MutableMapping, Optional

import structlog

EventDict = MutableMapping[str, Any]


def _service_stamper(service: str, environment: str):
    def stamp(_logger, _method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        event_dict.setdefault("environment", environment)
        return event_dict

    return stamp


def setup_logging(
    log_level: Optional[str] = None, log_format: Optional[str] = None
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Level name such as "INFO". Defaults to ``LOG_LEVEL``.
        log_format: "json" or "console". Defaults to ``LOG_FORMAT``.
    """
    from coffee_catalog.infra.config.settings import get_settings

    settings = get_settings()
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    fmt = (log_format or settings.log_format).lower()

    logging.basicConfig(level=level, format="%(message)s")
    # SQL statements are only wanted when DATABASE_ECHO is on
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug_sql else logging.WARNING
    )

    renderer = (
        structlog.processors.JSONRenderer(sort_keys=True)
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _service_stamper(settings.app_name, settings.environment),
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:  # type: ignore[name-defined]
    if name:
        return structlog.get_logger(name)
    return structlog.get_logger()


def bind_context(**kwargs) -> None:
    """Attach keys (request_id, coffee_id) to every log line of this request."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
