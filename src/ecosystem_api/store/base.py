"""Record store interface."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..engine.filters import Predicate

Record = dict[str, Any]


class RecordStore(Protocol):
    """
    CRUD primitives over named record collections.

    Stores answer unknown collections or fields with an empty result rather
    than failing. Any other failure is raised as ``StoreError``.
    """

    async def fetch_all(
        self, collection: str, limit: int | None = None, offset: int | None = None
    ) -> list[Record]:
        """Fetch every record of a collection in stable (id) order."""
        ...

    async def fetch_where(
        self,
        collection: str,
        predicates: Sequence[Predicate],
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Record]:
        """Fetch the records matching every predicate by equality."""
        ...

    async def count(self, collection: str, predicates: Sequence[Predicate]) -> int:
        """Count the records matching every predicate."""
        ...

    async def insert_many(self, collection: str, records: Sequence[Record]) -> list[Record]:
        """Insert records and return them as stored, in input order."""
        ...

    async def update_many(
        self, collection: str, records: Sequence[Record], key_field: str = "id"
    ) -> list[Record]:
        """Update records matched by ``key_field`` and return them as stored."""
        ...

    async def delete_many(
        self, collection: str, records: Sequence[Record], key_field: str = "id"
    ) -> list[Record]:
        """Delete records matched by ``key_field`` and return the deleted rows."""
        ...
