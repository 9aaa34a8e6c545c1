"""
Centralized logging configuration using structlog
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar, Token
from typing import Any

import structlog

from .config import settings

# Client mutation id of the mutation currently being resolved
client_mutation_id_ctx: ContextVar[str | None] = ContextVar("client_mutation_id", default=None)


class MutationContextFilter:
    """Add the active client mutation id to log records."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        """Add mutation context to the event dict."""
        # Suppress unused parameter warnings - these are required by structlog interface
        _ = logger, method_name

        client_mutation_id = client_mutation_id_ctx.get()
        if client_mutation_id:
            event_dict.setdefault("client_mutation_id", client_mutation_id)

        return event_dict


def configure_logging(debug: bool | None = None) -> None:
    """Configure structlog with appropriate processors and formatters.

    The stdlib level comes from `settings.log_level`, unless debug output is
    enabled, which always logs at DEBUG.

    Args:
        debug: If True, use human-readable console output. If False, use JSON.
            Defaults to `settings.debug`.
    """
    if debug is None:
        debug = settings.debug

    log_level = logging.DEBUG if debug else settings.log_level.upper()

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        # Drop events below the stdlib logger's level
        structlog.stdlib.filter_by_level,
        # Add logger name to event dict
        structlog.stdlib.add_logger_name,
        # Add log level to event dict
        structlog.stdlib.add_log_level,
        # Add mutation context
        MutationContextFilter(),
        # Add timestamp
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        # Stack info processor (for exceptions)
        structlog.processors.StackInfoRenderer(),
        # Exception info processor
        structlog.processors.format_exc_info,
    ]

    if debug:
        # Development: human-readable console output
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def set_client_mutation_id(client_mutation_id: str | None) -> Token[str | None]:
    """Set the active client mutation id and return the token to restore it."""
    return client_mutation_id_ctx.set(client_mutation_id)


def reset_client_mutation_id(token: Token[str | None]) -> None:
    """Restore the client mutation id that was active before `set_client_mutation_id`."""
    client_mutation_id_ctx.reset(token)


def get_client_mutation_id() -> str | None:
    """Get the client mutation id of the mutation currently being resolved."""
    return client_mutation_id_ctx.get()
