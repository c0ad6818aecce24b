"""
Foreign-key relationship resolution between record collections.

Nested fields are expanded one hop at a time: each requested field fetches
its related collection and keeps the records whose foreign key matches the
parent. Results keep the order of the fetched collection and are always
lists, even for relationships that hold at most one record.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..store.base import Record

CollectionFetcher = Callable[[str], Awaitable[Sequence[Record]]]


@dataclass(frozen=True)
class RelationshipSpec:
    """Static declaration of one nested field."""

    collection: str
    parent_field: str
    child_field: str


def _field_value(parent: Any, name: str) -> Any:
    if isinstance(parent, Mapping):
        return parent.get(name)
    return getattr(parent, name, None)


def select_related(
    parent: Any, spec: RelationshipSpec, related: Sequence[Record]
) -> list[Record]:
    """Return the records of ``related`` that point at ``parent``, in fetch order."""
    key = _field_value(parent, spec.parent_field)
    return [record for record in related if record.get(spec.child_field) == key]


async def resolve_related(
    parent: Any, spec: RelationshipSpec, fetch: CollectionFetcher
) -> list[Record]:
    """Fetch the related collection once and select the parent's records."""
    related = await fetch(spec.collection)
    return select_related(parent, spec, related)


def parse_category(value: str | None) -> list[str] | None:
    """Parse a bracket-wrapped comma list such as ``"{Technical,Growth}"``."""
    if value is None:
        return None
    return value[1:-1].split(",")


def with_parsed_category(record: Record) -> Record:
    """Return a copy of a core unit record with its category parsed into a list."""
    category = record.get("category")
    if not isinstance(category, str):
        return record
    return {**record, "category": parse_category(category)}


# Core units
CORE_UNIT_BUDGET_STATEMENTS = RelationshipSpec("budget_statements", "id", "cu_id")
CORE_UNIT_MIPS = RelationshipSpec("cu_mips", "id", "cu_id")
CORE_UNIT_SOCIAL_MEDIA_CHANNELS = RelationshipSpec("social_media_channels", "id", "cu_id")
CORE_UNIT_CONTRIBUTOR_COMMITMENTS = RelationshipSpec("contributor_commitments", "id", "cu_id")
CORE_UNIT_GITHUB_CONTRIBUTIONS = RelationshipSpec("cu_github_contributions", "id", "cu_id")
CORE_UNIT_ROADMAPS = RelationshipSpec("roadmaps", "id", "owner_cu_id")

# Budget statements
BUDGET_STATEMENT_FTES = RelationshipSpec("budget_statement_ftes", "id", "budget_statement_id")
BUDGET_STATEMENT_MKR_VESTS = RelationshipSpec(
    "budget_statement_mkr_vests", "id", "budget_statement_id"
)
BUDGET_STATEMENT_WALLETS = RelationshipSpec(
    "budget_statement_wallets", "id", "budget_statement_id"
)
WALLET_LINE_ITEMS = RelationshipSpec(
    "budget_statement_line_items", "id", "budget_statement_wallet_id"
)
WALLET_PAYMENTS = RelationshipSpec(
    "budget_statement_payments", "id", "budget_statement_wallet_id"
)

# Roadmaps
ROADMAP_STAKEHOLDERS = RelationshipSpec("roadmap_stakeholders", "id", "roadmap_id")
ROADMAP_OUTPUTS = RelationshipSpec("roadmap_outputs", "id", "roadmap_id")
ROADMAP_MILESTONES = RelationshipSpec("milestones", "id", "roadmap_id")
ROADMAP_STAKEHOLDER_ROLE = RelationshipSpec("stakeholder_roles", "stakeholder_role_id", "id")
ROADMAP_STAKEHOLDER_STAKEHOLDER = RelationshipSpec("stakeholders", "stakeholder_id", "id")
STAKEHOLDER_ROADMAP_STAKEHOLDERS = RelationshipSpec(
    "roadmap_stakeholders", "id", "stakeholder_id"
)
ROADMAP_OUTPUT_OUTPUT = RelationshipSpec("outputs", "output_id", "id")
ROADMAP_OUTPUT_TYPE = RelationshipSpec("output_types", "output_type_id", "id")
MILESTONE_TASK = RelationshipSpec("tasks", "task_id", "id")
TASK_REVIEWS = RelationshipSpec("reviews", "id", "task_id")
