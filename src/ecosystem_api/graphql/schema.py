"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..auth.middleware import get_auth_context
from ..logging import get_logger
from ..store.base import RecordStore
from .context import build_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Unresolvable type references surface here instead of on the first
    request.

    Raises:
        RuntimeError: If the schema is invalid or introspection fails
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        messages = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", error=messages)
        raise RuntimeError(f"GraphQL schema validation failed: {messages}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        messages = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed", error=messages)
        raise RuntimeError(f"GraphQL introspection failed: {messages}")

    logger.info("GraphQL schema validation successful")


def create_graphql_router(
    store: RecordStore | None = None, graphiql: bool = True
) -> GraphQLRouter[dict[str, Any], None]:
    """
    Create a GraphQL router for FastAPI.

    Args:
        store: Record store for every request; defaults to ``app.state.store``
        graphiql: Serve the GraphiQL IDE on GET
    """

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        auth = await get_auth_context(request.headers.get("authorization"))
        return build_context(store or request.app.state.store, auth=auth, request=request)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphiql=graphiql,
        context_getter=get_context,
    )
