"""
Structured logging for the Ecosystem API.

Every event carries the request id and, once a session token has been
verified, the user id of the caller. Credential-bearing keys are redacted
before rendering so that passwords and session tokens never reach the logs.
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
user_id_ctx: ContextVar[str | None] = ContextVar("user_id", default=None)

REDACTED_EVENT_KEYS = frozenset(
    {"password", "new_password", "auth_token", "token", "authorization", "jwt_secret"}
)


def add_request_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Attach the current request and user ids to an event."""
    request_id = request_id_ctx.get()
    if request_id:
        event_dict.setdefault("request_id", request_id)

    user_id = user_id_ctx.get()
    if user_id:
        event_dict.setdefault("user_id", user_id)

    return event_dict


def redact_credentials(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    for key in REDACTED_EVENT_KEYS.intersection(event_dict):
        event_dict[key] = "[REDACTED]"
    return event_dict


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        debug: Render human-readable console output instead of JSON lines
        level: Stdlib level name; DEBUG when ``debug`` is set, INFO otherwise
    """
    if level is None:
        level = "DEBUG" if debug else "INFO"

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_request_context,
        redact_credentials,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Eleven urlsafe base64 characters: a microsecond timestamp plus two random bytes."""
    stamp = int(time.time() * 1_000_000).to_bytes(8, byteorder="big")
    return base64.urlsafe_b64encode(stamp + secrets.token_bytes(2)).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None, user_id: str | None = None) -> str:
    """Start the logging context of a request and return its id."""
    request_id = request_id or generate_request_id()
    request_id_ctx.set(request_id)
    if user_id is not None:
        user_id_ctx.set(user_id)
    return request_id


def clear_request_context() -> None:
    request_id_ctx.set(None)
    user_id_ctx.set(None)


def get_request_id() -> str | None:
    return request_id_ctx.get()


def get_user_id() -> str | None:
    return user_id_ctx.get()
