"""
Filter descriptor validation.

A filter descriptor maps field names to desired values. Only keys that are
present count as predicates; the order in which they were supplied is kept.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..errors import EmptyFilterError, TooManyFiltersError
from ..logging import get_logger

logger = get_logger(__name__)

# Predicate caps per query shape
SINGLE_PREDICATE = 1
COMPOSITE_PREDICATES = 2


@dataclass(frozen=True)
class Predicate:
    """One (field, value) equality test."""

    field: str
    value: Any


def collect_predicates(descriptor: Mapping[str, Any], max_predicates: int) -> list[Predicate]:
    """
    Turn a filter descriptor into an ordered list of predicates.

    Field names are not checked here. Unknown fields are passed on to the
    record store, which answers them with an empty result.

    Args:
        descriptor: Present filter keys and their values, in supplied order
        max_predicates: Largest number of predicates the query accepts

    Returns:
        Predicates in supplied order

    Raises:
        EmptyFilterError: If no key is present
        TooManyFiltersError: If more than ``max_predicates`` keys are present
    """
    predicates = [Predicate(field, value) for field, value in descriptor.items()]

    if not predicates:
        logger.info("Rejected empty filter")
        raise EmptyFilterError("Choose at least one filter parameter")

    if len(predicates) > max_predicates:
        logger.info(
            "Rejected filter with too many parameters",
            fields=[p.field for p in predicates],
            max_predicates=max_predicates,
        )
        if max_predicates == 1:
            raise TooManyFiltersError("Choose one parameter only")
        raise TooManyFiltersError(f"Choose no more than {max_predicates} parameters")

    return predicates


def split_primary(predicates: list[Predicate]) -> tuple[Predicate, Predicate | None]:
    """Label the first predicate primary and the second, if any, secondary."""
    match predicates:
        case [primary]:
            return primary, None
        case [primary, secondary]:
            return primary, secondary
        case _:
            raise ValueError(f"Expected one or two predicates, got {len(predicates)}")
