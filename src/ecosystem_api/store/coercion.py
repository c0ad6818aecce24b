"""Conversion of wire values to column types."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Column


class Uncoercible(Exception):
    """A value cannot be represented in a column's type."""


def coerce(column: Column, value: Any) -> Any:
    """Convert a wire value (e.g. a GraphQL ID string) to the column's type."""
    if value is None:
        return None
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return value
    if isinstance(value, python_type):
        return value
    if python_type is bool:
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
        raise Uncoercible(column.name)
    try:
        return python_type(value)
    except (TypeError, ValueError) as e:
        raise Uncoercible(column.name) from e
