"""
Structured logging for the inventory, built on structlog.

Every event carries the application name, the environment and the storage
backend in use; ``bind_store_context`` adds the keys of the store that is
currently open. Development gets colored console output, other
environments get one JSON object per line.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from fabric_inventory.config.settings import get_settings


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add application and storage context to log events."""
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["version"] = settings.app_version
    event_dict["environment"] = settings.environment
    event_dict.setdefault("storage_backend", settings.storage.backend)
    return event_dict


def bind_store_context(items_key: str, movements_key: str) -> None:
    """Tag subsequent log events with the keys of the open store."""
    structlog.contextvars.bind_contextvars(
        items_key=items_key,
        movements_key=movements_key,
    )


def clear_store_context() -> None:
    structlog.contextvars.unbind_contextvars("items_key", "movements_key")


def configure_logging() -> None:
    """Configure structlog for the application."""
    settings = get_settings()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
    ]

    if settings.environment == "development":
        renderer: Processor = structlog.dev.ConsoleRenderer(colors=True)
        processors = shared_processors + [renderer]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
