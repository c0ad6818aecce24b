"""
Fixtures for executing GraphQL operations against the schema
"""

from collections.abc import Awaitable, Callable
from typing import Any

import pytest

from ecosystem_api.auth.context import AuthContext
from ecosystem_api.graphql.context import build_context
from ecosystem_api.graphql.schema import schema

Execute = Callable[..., Awaitable[Any]]


@pytest.fixture
def execute(memory_store, issuer) -> Execute:
    """Run an operation with the seeded in-memory store in the context."""

    async def run(
        query: str,
        variables: dict[str, Any] | None = None,
        auth: AuthContext | None = None,
        memoize: bool = True,
    ):
        context = build_context(memory_store, auth=auth, issuer=issuer, memoize=memoize)
        return await schema.execute(query, variable_values=variables, context_value=context)

    return run


@pytest.fixture
def admin_session(issuer) -> AuthContext:
    token = issuer.issue(1, 1, "admin")
    return AuthContext(claims=issuer.verify(token), token=token)


@pytest.fixture
def member_session(issuer) -> AuthContext:
    token = issuer.issue(2, 2, "member")
    return AuthContext(claims=issuer.verify(token), token=token)
