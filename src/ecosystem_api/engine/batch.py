"""
Batched add/update/delete mutations.

Batches are handed to the record store in a single call. Whether the store
applies them all-or-nothing is its own contract; this layer only rejects
malformed input and never retries.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..errors import EmptyBatchError, ValidationError
from ..logging import get_logger
from ..store.base import Record, RecordStore

logger = get_logger(__name__)


class BatchMutationCoordinator:
    """Validate batch inputs and forward them to a record store."""

    def __init__(self, store: RecordStore, key_field: str = "id"):
        self.store = store
        self.key_field = key_field

    async def add(self, collection: str, inputs: Sequence[Mapping]) -> list[Record]:
        """Insert a non-empty batch of records."""
        if not inputs:
            logger.info("Rejected empty batch add", collection=collection)
            raise EmptyBatchError("No input data")

        records = [self._as_record(item) for item in inputs]
        logger.info("Batch add", collection=collection, size=len(records))
        return await self.store.insert_many(collection, records)

    async def update(self, collection: str, inputs: Sequence[Mapping]) -> list[Record]:
        """Update records matched by key. An empty batch updates nothing."""
        records = self._keyed(collection, inputs)
        logger.info("Batch update", collection=collection, size=len(records))
        return await self.store.update_many(collection, records, key_field=self.key_field)

    async def delete(self, collection: str, inputs: Sequence[Mapping]) -> list[Record]:
        """Delete records matched by key. An empty batch deletes nothing."""
        records = self._keyed(collection, inputs)
        logger.info("Batch delete", collection=collection, size=len(records))
        return await self.store.delete_many(collection, records, key_field=self.key_field)

    def _keyed(self, collection: str, inputs: Sequence[Mapping]) -> list[Record]:
        records = [self._as_record(item) for item in inputs]
        for position, record in enumerate(records):
            if record.get(self.key_field) is None:
                logger.info(
                    "Rejected batch item without key",
                    collection=collection,
                    position=position,
                )
                raise ValidationError(
                    f"Batch item {position} is missing '{self.key_field}'"
                )
        return records

    @staticmethod
    def _as_record(item: Mapping) -> Record:
        if not isinstance(item, Mapping):
            raise ValidationError(f"Batch items must be records, got {type(item).__name__}")
        return dict(item)
