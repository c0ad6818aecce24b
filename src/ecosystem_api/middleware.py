"""
Middleware for request context and logging
"""

import json
import re
import time
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

SENSITIVE_KEYS = {
    "password",
    "token",
    "secret",
    "auth",
    "authorization",
    "jwt",
    "session",
    "cookie",
    "credentials",
}

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")
REQUEST_ID_HEADER = "X-Request-ID"


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Redact query parameters whose name looks sensitive."""
    return {
        key: "[REDACTED]" if any(s in key.lower() for s in SENSITIVE_KEYS) else value
        for key, value in params.items()
    }


def operation_name_from_payload(data: dict[str, Any]) -> str | None:
    """Name a GraphQL operation from its request payload."""
    op = data.get("operationName")
    if isinstance(op, str) and op:
        return op

    query = data.get("query", "")
    if not isinstance(query, str) or not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = _OPERATION_RE.search(query)
    if match:
        kind = "mutation:" if match.group(1) == "mutation" else ""
        return f"{kind}{match.group(2)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        return operation_name_from_payload(dict(request.query_params))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
        except (json.JSONDecodeError, TypeError, UnicodeDecodeError):
            return None
        if isinstance(data, dict):
            return operation_name_from_payload(data)

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """
    Give each request a logging context and log its start and outcome.

    The request id is echoed in the ``X-Request-ID`` response header so a
    client report can be matched to server logs.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_context(request.headers.get(REQUEST_ID_HEADER))
        started = time.perf_counter()

        try:
            graphql_operation = await extract_graphql_operation_name(request)
            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=self._loggable_params(request),
                graphql_operation=graphql_operation,
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )
            raise

        finally:
            clear_request_context()

    @staticmethod
    def _loggable_params(request: Request) -> dict[str, Any] | None:
        if not request.query_params:
            return None
        params = sanitize_query_params(dict(request.query_params))
        # GraphQL documents and variables may carry credentials
        if request.url.path == "/graphql":
            for key in ("query", "variables", "extensions"):
                if key in params:
                    params[key] = "[REDACTED]"
        return params
