"""
Filter inputs for single-record queries.

Every field defaults to ``UNSET`` so that only the fields a client actually
supplies become predicates. Declaration order is the order predicates are
applied in.
"""

import strawberry

from ..types.budget_statement import BudgetStatus
from ..types.roadmap import ConfidenceLevel, ReviewOutcome, RoadmapStatus, TaskStatus

UNSET = strawberry.UNSET


@strawberry.input
class CoreUnitFilter:
    id: strawberry.ID | None = UNSET
    code: str | None = UNSET
    name: str | None = UNSET
    short_code: str | None = UNSET


@strawberry.input
class BudgetStatementFilter:
    id: strawberry.ID | None = UNSET
    cu_id: strawberry.ID | None = UNSET
    month: str | None = UNSET
    comments: str | None = UNSET
    budget_status: BudgetStatus | None = UNSET
    publication_url: str | None = UNSET
    cu_code: str | None = UNSET


@strawberry.input
class BudgetStatementFTEsFilter:
    id: strawberry.ID | None = UNSET
    budget_statement_id: strawberry.ID | None = UNSET
    month: str | None = UNSET
    ftes: float | None = UNSET


@strawberry.input
class BudgetStatementMKRVestFilter:
    id: strawberry.ID | None = UNSET
    budget_statement_id: strawberry.ID | None = UNSET
    vesting_date: str | None = UNSET
    mkr_amount: float | None = UNSET
    mkr_amount_old: float | None = UNSET
    comments: str | None = UNSET


@strawberry.input
class BudgetStatementWalletFilter:
    id: strawberry.ID | None = UNSET
    budget_statement_id: strawberry.ID | None = UNSET
    name: str | None = UNSET
    address: str | None = UNSET
    current_balance: float | None = UNSET
    topup_transfer: float | None = UNSET
    comments: str | None = UNSET


@strawberry.input
class BudgetStatementLineItemFilter:
    id: strawberry.ID | None = UNSET
    budget_statement_wallet_id: strawberry.ID | None = UNSET
    month: str | None = UNSET
    position: int | None = UNSET
    group: str | None = UNSET
    budget_category: str | None = UNSET
    forecast: float | None = UNSET
    actual: float | None = UNSET
    comments: str | None = UNSET


@strawberry.input
class BudgetStatementPaymentFilter:
    id: strawberry.ID | None = UNSET
    budget_statement_wallet_id: strawberry.ID | None = UNSET
    transaction_date: str | None = UNSET
    transaction_id: str | None = UNSET
    budget_statement_line_item_id: int | None = UNSET
    comments: str | None = UNSET


@strawberry.input
class RoadmapFilter:
    id: strawberry.ID | None = UNSET
    owner_cu_id: strawberry.ID | None = UNSET
    roadmap_code: str | None = UNSET
    roadmap_name: str | None = UNSET
    comments: str | None = UNSET
    roadmap_status: RoadmapStatus | None = UNSET
    strategic_initiative: bool | None = UNSET


@strawberry.input
class RoadmapStakeholderFilter:
    id: strawberry.ID | None = UNSET
    stakeholder_id: strawberry.ID | None = UNSET
    roadmap_id: strawberry.ID | None = UNSET
    stakeholder_role_id: strawberry.ID | None = UNSET


@strawberry.input
class StakeholderFilter:
    id: strawberry.ID | None = UNSET
    name: str | None = UNSET
    stakeholder_contributor_id: strawberry.ID | None = UNSET
    stakeholder_cu_code: str | None = UNSET


@strawberry.input
class StakeholderRoleFilter:
    id: strawberry.ID | None = UNSET
    stakeholder_role_name: str | None = UNSET


@strawberry.input
class RoadmapOutputFilter:
    id: strawberry.ID | None = UNSET
    output_id: strawberry.ID | None = UNSET
    roadmap_id: strawberry.ID | None = UNSET
    output_type_id: strawberry.ID | None = UNSET


@strawberry.input
class OutputFilter:
    id: strawberry.ID | None = UNSET
    name: str | None = UNSET
    # Not a column of outputs; filtering on it matches nothing
    roadmap_id: strawberry.ID | None = UNSET
    output_url: str | None = UNSET


@strawberry.input
class OutputTypeFilter:
    id: strawberry.ID | None = UNSET
    output_type: str | None = UNSET


@strawberry.input
class MilestoneFilter:
    id: strawberry.ID | None = UNSET
    roadmap_id: strawberry.ID | None = UNSET
    task_id: strawberry.ID | None = UNSET


@strawberry.input
class TaskFilter:
    id: strawberry.ID | None = UNSET
    parent_id: strawberry.ID | None = UNSET
    task_name: str | None = UNSET
    task_status: TaskStatus | None = UNSET
    owner_stakeholder_id: strawberry.ID | None = UNSET
    start_date: str | None = UNSET
    target: str | None = UNSET
    completed_percentage: float | None = UNSET
    confidence_level: ConfidenceLevel | None = UNSET


@strawberry.input
class ReviewFilter:
    id: strawberry.ID | None = UNSET
    task_id: strawberry.ID | None = UNSET
    review_date: str | None = UNSET
    review_outcome: ReviewOutcome | None = UNSET
