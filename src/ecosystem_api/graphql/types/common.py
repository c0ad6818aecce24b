"""
Shared GraphQL type helpers
"""

import dataclasses
from typing import Any, Self

import strawberry


class RecordType:
    """Mixin for Strawberry types built from store records."""

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Self:
        """Build the type from a record; fields missing from the record are null."""
        values = {
            field.name: record.get(field.name)
            for field in dataclasses.fields(cls)  # type: ignore[arg-type]
            if field.init
        }
        return cls(**values)


@strawberry.type
class Error:
    """A failure reported inside a mutation payload."""

    message: str
    code: str | None = None
