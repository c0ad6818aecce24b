"""SQLAlchemy-backed record store."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import MetaData, Table, delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from ..database.connection import get_async_engine
from ..database.models import Base
from ..errors import StoreError
from ..logging import get_logger
from .base import Record
from .coercion import Uncoercible, coerce

if TYPE_CHECKING:
    from ..engine.filters import Predicate

logger = get_logger(__name__)


class SqlRecordStore:
    """Record store over the tables of a SQLAlchemy ``MetaData``."""

    def __init__(self, engine: AsyncEngine | None = None, metadata: MetaData = Base.metadata):
        self._engine = engine
        self.metadata = metadata

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            self._engine = get_async_engine()
        return self._engine

    def _table(self, collection: str) -> Table | None:
        return self.metadata.tables.get(collection)

    def _writable_table(self, collection: str) -> Table:
        table = self._table(collection)
        if table is None:
            raise StoreError(f"Unknown collection '{collection}'")
        return table

    def _conditions(self, table: Table, predicates: Sequence[Predicate]) -> list | None:
        """Build WHERE clauses, or None when no row can match."""
        conditions = []
        for predicate in predicates:
            column = table.c.get(predicate.field)
            if column is None:
                logger.debug(
                    "Unknown filter field", collection=table.name, field=predicate.field
                )
                return None
            try:
                conditions.append(column == coerce(column, predicate.value))
            except Uncoercible:
                logger.debug(
                    "Filter value does not fit column",
                    collection=table.name,
                    field=predicate.field,
                )
                return None
        return conditions

    def _values(self, table: Table, record: Record, exclude: str | None = None) -> dict:
        values = {}
        for field, value in record.items():
            if field == exclude:
                continue
            column = table.c.get(field)
            if column is None:
                raise StoreError(f"Unknown field '{field}' for collection '{table.name}'")
            try:
                values[field] = coerce(column, value)
            except Uncoercible as e:
                raise StoreError(
                    f"Invalid value for field '{field}' of collection '{table.name}'"
                ) from e
        return values

    def _key_value(self, table: Table, key_field: str, record: Record) -> Any:
        return self._values(table, {key_field: record.get(key_field)})[key_field]

    async def _read(self, stmt) -> list[Record]:
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(stmt)
                return [dict(row._mapping) for row in result]
        except SQLAlchemyError as e:
            logger.error("Record store read failed", error=str(e))
            raise StoreError(f"Record store read failed: {e}") from e

    async def fetch_all(
        self, collection: str, limit: int | None = None, offset: int | None = None
    ) -> list[Record]:
        table = self._table(collection)
        if table is None:
            return []
        stmt = select(table).order_by(*table.primary_key.columns).limit(limit).offset(offset)
        return await self._read(stmt)

    async def fetch_where(
        self,
        collection: str,
        predicates: Sequence[Predicate],
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Record]:
        table = self._table(collection)
        if table is None:
            return []
        conditions = self._conditions(table, predicates)
        if conditions is None:
            return []
        stmt = (
            select(table)
            .where(*conditions)
            .order_by(*table.primary_key.columns)
            .limit(limit)
            .offset(offset)
        )
        return await self._read(stmt)

    async def count(self, collection: str, predicates: Sequence[Predicate]) -> int:
        table = self._table(collection)
        if table is None:
            return 0
        conditions = self._conditions(table, predicates)
        if conditions is None:
            return 0
        stmt = select(func.count()).select_from(table).where(*conditions)
        try:
            async with self.engine.connect() as conn:
                return (await conn.execute(stmt)).scalar_one()
        except SQLAlchemyError as e:
            logger.error("Record store count failed", error=str(e))
            raise StoreError(f"Record store count failed: {e}") from e

    async def insert_many(self, collection: str, records: Sequence[Record]) -> list[Record]:
        table = self._writable_table(collection)
        rows = [self._values(table, record) for record in records]

        async def write(conn: AsyncConnection) -> list[Record]:
            inserted = []
            for values in rows:
                result = await conn.execute(insert(table).values(**values).returning(table))
                inserted.append(dict(result.one()._mapping))
            return inserted

        return await self._write(collection, "insert", write)

    async def update_many(
        self, collection: str, records: Sequence[Record], key_field: str = "id"
    ) -> list[Record]:
        table = self._writable_table(collection)
        key = table.c[key_field]
        changes = [
            (self._key_value(table, key_field, r), self._values(table, r, exclude=key_field))
            for r in records
        ]

        async def write(conn: AsyncConnection) -> list[Record]:
            updated = []
            for key_value, values in changes:
                if values:
                    stmt = update(table).where(key == key_value).values(**values).returning(table)
                else:
                    stmt = select(table).where(key == key_value)
                row = (await conn.execute(stmt)).one_or_none()
                if row is not None:
                    updated.append(dict(row._mapping))
            return updated

        return await self._write(collection, "update", write)

    async def delete_many(
        self, collection: str, records: Sequence[Record], key_field: str = "id"
    ) -> list[Record]:
        table = self._writable_table(collection)
        key = table.c[key_field]
        keys = [self._key_value(table, key_field, r) for r in records]

        async def write(conn: AsyncConnection) -> list[Record]:
            deleted = []
            for key_value in keys:
                stmt = delete(table).where(key == key_value).returning(table)
                deleted.extend(dict(row._mapping) for row in await conn.execute(stmt))
            return deleted

        return await self._write(collection, "delete", write)

    async def _write(self, collection: str, operation: str, write) -> list[Record]:
        """Run a batch write in one transaction; any failure rolls back the batch."""
        try:
            async with self.engine.begin() as conn:
                affected = await write(conn)
        except SQLAlchemyError as e:
            logger.error(
                "Record store write failed",
                collection=collection,
                operation=operation,
                error=str(e),
            )
            raise StoreError(f"Record store {operation} failed: {e}") from e
        logger.info(
            "Record store write", collection=collection, operation=operation, rows=len(affected)
        )
        return affected
