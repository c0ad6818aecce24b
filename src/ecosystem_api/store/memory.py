"""In-memory record store for tests and local development."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import MetaData

from ..database.models import Base
from ..errors import StoreError
from ..logging import get_logger
from .base import Record
from .coercion import Uncoercible, coerce

if TYPE_CHECKING:
    from ..engine.filters import Predicate

logger = get_logger(__name__)


def _page(records: list[Record], limit: int | None, offset: int | None) -> list[Record]:
    start = offset or 0
    end = None if limit is None else start + limit
    return records[start:end]


class InMemoryRecordStore:
    """
    Record store keeping each collection as a list of dicts.

    Values of collections known to ``metadata`` are coerced to their column
    types on the way in, as the SQL store does. Other collections hold values
    as given.
    """

    def __init__(
        self,
        collections: dict[str, Iterable[Record]] | None = None,
        metadata: MetaData | None = Base.metadata,
    ):
        self.metadata = metadata
        self._collections: dict[str, list[Record]] = {}
        self._next_ids: dict[str, int] = {}
        self._write_lock = asyncio.Lock()
        for name, records in (collections or {}).items():
            self.seed(name, records)

    def seed(self, collection: str, records: Iterable[Record]) -> None:
        """Append records without going through the async API."""
        self._insert(collection, records)

    async def fetch_all(
        self, collection: str, limit: int | None = None, offset: int | None = None
    ) -> list[Record]:
        records = self._collections.get(collection, [])
        return [dict(r) for r in _page(records, limit, offset)]

    async def fetch_where(
        self,
        collection: str,
        predicates: Sequence[Predicate],
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Record]:
        matched = self._select(collection, predicates)
        return [dict(r) for r in _page(matched, limit, offset)]

    async def count(self, collection: str, predicates: Sequence[Predicate]) -> int:
        return len(self._select(collection, predicates))

    async def insert_many(self, collection: str, records: Sequence[Record]) -> list[Record]:
        async with self._write_lock:
            return [dict(r) for r in self._insert(collection, records)]

    async def update_many(
        self, collection: str, records: Sequence[Record], key_field: str = "id"
    ) -> list[Record]:
        updated: list[Record] = []
        async with self._write_lock:
            batch = [self._coerced(collection, changes) for changes in records]
            stored_records = self._collections.get(collection, [])
            for changes in batch:
                for stored in stored_records:
                    if stored.get(key_field) == changes.get(key_field):
                        stored.update({k: v for k, v in changes.items() if k != key_field})
                        updated.append(dict(stored))
                        break
        return updated

    async def delete_many(
        self, collection: str, records: Sequence[Record], key_field: str = "id"
    ) -> list[Record]:
        deleted: list[Record] = []
        async with self._write_lock:
            keys = [
                self._coerced(collection, {key_field: target.get(key_field)})[key_field]
                for target in records
            ]
            stored_records = self._collections.get(collection, [])
            for key in keys:
                for index, stored in enumerate(stored_records):
                    if stored.get(key_field) == key:
                        deleted.append(stored_records.pop(index))
                        break
        return deleted

    def _column(self, collection: str, field: str):
        if self.metadata is None:
            return None
        table = self.metadata.tables.get(collection)
        return None if table is None else table.c.get(field)

    def _coerced(self, collection: str, record: Record) -> Record:
        values = {}
        for field, value in record.items():
            column = self._column(collection, field)
            try:
                values[field] = value if column is None else coerce(column, value)
            except Uncoercible as e:
                raise StoreError(
                    f"Invalid value for field '{field}' of collection '{collection}'"
                ) from e
        return values

    def _wanted(self, collection: str, predicate: Predicate) -> Any:
        column = self._column(collection, predicate.field)
        return predicate.value if column is None else coerce(column, predicate.value)

    def _select(self, collection: str, predicates: Sequence[Predicate]) -> list[Record]:
        records = self._collections.get(collection, [])
        try:
            wanted = [(p.field, self._wanted(collection, p)) for p in predicates]
        except Uncoercible:
            # A value that cannot fit the column matches nothing
            return []
        return [
            record
            for record in records
            if all(field in record and record[field] == value for field, value in wanted)
        ]

    def _insert(self, collection: str, records: Iterable[Record]) -> list[Record]:
        # A bad record anywhere in the batch writes nothing
        batch = [self._coerced(collection, record) for record in records]
        stored_records = self._collections.setdefault(collection, [])
        inserted = []
        for stored in batch:
            next_id = self._next_ids.get(collection, 1)
            if stored.get("id") is None:
                stored["id"] = next_id
                self._next_ids[collection] = next_id + 1
            elif isinstance(stored["id"], int):
                # Keep generated ids ahead of explicit ones
                self._next_ids[collection] = max(next_id, stored["id"] + 1)
            stored_records.append(stored)
            inserted.append(stored)
        logger.debug("Inserted records", collection=collection, count=len(inserted))
        return inserted
