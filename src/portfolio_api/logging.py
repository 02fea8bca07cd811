"""
Structured logging for the Portfolio API.

Log lines are rendered by structlog on top of stdlib logging: JSON in
production, a colored console layout when debugging. Per-request values
(request id, GraphQL operation) are bound with ``structlog.contextvars``
and merged into every event logged while the request is handled.
"""

import logging
import secrets
import sys

import structlog

# 10 random bytes encode to 14 URL-safe characters
REQUEST_ID_BYTES = 10


def _resolve_level(debug: bool, level: str | None) -> int:
    if not level:
        return logging.DEBUG if debug else logging.INFO
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Safe to call more than once; the last call wins. The CLI configures
    logging before the app module does, so loggers are not cached.

    Args:
        debug: Render human-readable console output instead of JSON.
        level: Log level name; defaults to DEBUG when debugging, else INFO.
    """
    logging.basicConfig(
        level=_resolve_level(debug, level),
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Return a random, URL-safe request id."""
    return secrets.token_urlsafe(REQUEST_ID_BYTES)


def set_request_context(request_id: str | None = None, graphql_operation: str | None = None) -> str:
    """Bind request values for every log event in the current context.

    Any values left over from a previous request are discarded first.
    Returns the request id in use, generating one when none is given.
    """
    request_id = request_id or generate_request_id()

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)
    if graphql_operation is not None:
        structlog.contextvars.bind_contextvars(graphql_operation=graphql_operation)
    return request_id


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


def get_request_id() -> str | None:
    return structlog.contextvars.get_contextvars().get("request_id")
