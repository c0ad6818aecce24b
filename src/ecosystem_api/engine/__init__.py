"""Query and mutation resolution engine."""

from .batch import BatchMutationCoordinator
from .filters import COMPOSITE_PREDICATES, SINGLE_PREDICATE, Predicate, collect_predicates
from .relationships import RelationshipSpec, parse_category, resolve_related, select_related

__all__ = [
    "BatchMutationCoordinator",
    "COMPOSITE_PREDICATES",
    "SINGLE_PREDICATE",
    "Predicate",
    "RelationshipSpec",
    "collect_predicates",
    "parse_category",
    "resolve_related",
    "select_related",
]
