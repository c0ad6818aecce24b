"""
Request context shared by GraphQL resolvers
"""

from typing import Any

import strawberry

from ..auth.context import AuthContext
from ..auth.gate import AuthGate
from ..auth.tokens import SessionTokenIssuer, get_token_issuer
from ..config import settings
from ..engine.batch import BatchMutationCoordinator
from ..engine.relationships import CollectionFetcher
from ..logging import get_logger
from ..store.base import RecordStore
from .loaders import Loaders

logger = get_logger(__name__)


def build_context(
    store: RecordStore,
    auth: AuthContext | None = None,
    issuer: SessionTokenIssuer | None = None,
    memoize: bool | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """
    Build the per-request resolver context.

    Args:
        store: Record store used by every resolver of the request
        auth: Authentication context; anonymous when omitted
        issuer: Session token issuer; the process-wide one when omitted
        memoize: Share collection fetches between sibling fields of the request
    """
    if memoize is None:
        memoize = settings.memoize_collection_fetches
    return {
        "store": store,
        "auth": auth or AuthContext(),
        "issuer": issuer,
        "loaders": Loaders(store) if memoize else None,
        **extra,
    }


def get_store(info: strawberry.Info) -> RecordStore:
    return info.context["store"]


def get_auth_context_from_info(info: strawberry.Info) -> AuthContext:
    """Authentication context of the request; anonymous when none was attached."""
    auth = info.context.get("auth")
    if auth is None:
        logger.debug("No auth context in GraphQL context")
        return AuthContext()
    return auth


def get_auth_gate(info: strawberry.Info) -> AuthGate:
    issuer = info.context.get("issuer") or get_token_issuer()
    return AuthGate(get_store(info), issuer)


def get_batch_coordinator(info: strawberry.Info) -> BatchMutationCoordinator:
    return BatchMutationCoordinator(get_store(info))


def collection_fetcher(info: strawberry.Info) -> CollectionFetcher:
    """Fetch whole collections, through the request's loader when memoizing."""
    loaders: Loaders | None = info.context.get("loaders")
    if loaders is not None:
        return loaders.collections.load
    return get_store(info).fetch_all
