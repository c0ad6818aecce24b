"""
Generic resolvers shared by every record-backed GraphQL type.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

import strawberry

from ...engine.filters import SINGLE_PREDICATE, collect_predicates
from ...engine.relationships import RelationshipSpec, resolve_related
from ...logging import get_logger
from ...store.base import Record
from ..context import collection_fetcher, get_store
from ..inputs import present_fields

logger = get_logger(__name__)

T = TypeVar("T")
RecordTransform = Callable[[Record], Record]


def _build(records: list[Record], type_: type[T], transform: RecordTransform | None) -> list[T]:
    if transform is not None:
        records = [transform(record) for record in records]
    return [type_.from_record(record) for record in records]  # type: ignore[attr-defined]


async def resolve_collection(
    info: strawberry.Info,
    collection: str,
    type_: type[T],
    limit: int | None = None,
    offset: int | None = None,
    transform: RecordTransform | None = None,
) -> list[T]:
    """Resolve a whole collection, optionally paginated."""
    records = await get_store(info).fetch_all(collection, limit=limit, offset=offset)
    return _build(records, type_, transform)


async def resolve_filtered(
    info: strawberry.Info,
    collection: str,
    type_: type[T],
    filter: Any,
    max_predicates: int = SINGLE_PREDICATE,
    transform: RecordTransform | None = None,
) -> list[T]:
    """
    Resolve the records of a collection matching a filter input.

    Args:
        filter: Strawberry filter input, or an already built descriptor; only
            supplied fields count
        max_predicates: Number of filter fields accepted at most
    """
    descriptor = filter if isinstance(filter, Mapping) else present_fields(filter)
    predicates = collect_predicates(descriptor, max_predicates)
    records = await get_store(info).fetch_where(collection, predicates)
    logger.debug(
        "Filtered query resolved",
        collection=collection,
        fields=[p.field for p in predicates],
        count=len(records),
    )
    return _build(records, type_, transform)


async def resolve_relationship(
    parent: Any, info: strawberry.Info, spec: RelationshipSpec, type_: type[T]
) -> list[T]:
    """Resolve one nested field of ``parent`` through its relationship."""
    records = await resolve_related(parent, spec, collection_fetcher(info))
    return _build(records, type_, None)
