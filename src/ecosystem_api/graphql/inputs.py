"""
Conversion of Strawberry input objects into records and filter descriptors.

Input fields default to ``strawberry.UNSET``; a field is present when its
value is anything else, an explicit ``null`` included.
"""

import dataclasses
from enum import Enum
from typing import Any

import strawberry


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def present_fields(obj: Any) -> dict[str, Any]:
    """Return the fields of an input object that were supplied, in declaration order."""
    if obj is None or obj is strawberry.UNSET:
        return {}
    return {
        field.name: _plain(value)
        for field in dataclasses.fields(obj)
        if (value := getattr(obj, field.name)) is not strawberry.UNSET
    }


def to_records(inputs: list[Any] | None) -> list[dict[str, Any]]:
    """Convert a list of input objects into records."""
    return [present_fields(item) for item in inputs or []]
