"""
Root GraphQL query definitions
"""

import strawberry

from ..resolvers.common import resolve_collection, resolve_filtered
from ..types.budget_statement import (
    BudgetStatement,
    BudgetStatementFTEs,
    BudgetStatementLineItem,
    BudgetStatementMKRVest,
    BudgetStatementPayment,
    BudgetStatementWallet,
)
from ..types.contributor_commitment import ContributorCommitment
from ..types.core_unit import CoreUnit
from ..types.roadmap import (
    Milestone,
    Output,
    OutputType,
    Review,
    Roadmap,
    RoadmapOutput,
    RoadmapStakeholder,
    Stakeholder,
    StakeholderRole,
    Task,
)
from .filters import (
    BudgetStatementFilter,
    BudgetStatementFTEsFilter,
    BudgetStatementLineItemFilter,
    BudgetStatementMKRVestFilter,
    BudgetStatementPaymentFilter,
    BudgetStatementWalletFilter,
    CoreUnitFilter,
    MilestoneFilter,
    OutputFilter,
    OutputTypeFilter,
    ReviewFilter,
    RoadmapFilter,
    RoadmapOutputFilter,
    RoadmapStakeholderFilter,
    StakeholderFilter,
    StakeholderRoleFilter,
    TaskFilter,
)


@strawberry.type
class Query:
    """Root GraphQL query type."""

    # Core units
    @strawberry.field
    async def core_units(
        self, info: strawberry.Info, limit: int | None = None, offset: int | None = None
    ) -> list[CoreUnit]:
        """Retrieve information about all core units."""
        from ..resolvers.core_unit import resolve_core_units

        return await resolve_core_units(info, limit, offset)

    @strawberry.field
    async def core_unit(
        self, info: strawberry.Info, filter: CoreUnitFilter | None = None
    ) -> list[CoreUnit]:
        """Retrieve core units matching one filter field."""
        from ..resolvers.core_unit import resolve_core_unit

        return await resolve_core_unit(info, filter)

    @strawberry.field
    async def contributor_commitments(self, info: strawberry.Info) -> list[ContributorCommitment]:
        return await resolve_collection(info, "contributor_commitments", ContributorCommitment)

    @strawberry.field
    async def contributor_commitment(
        self, info: strawberry.Info, cu_code: str | None = strawberry.UNSET
    ) -> list[ContributorCommitment]:
        """Retrieve the contributor commitments of one core unit by its code."""
        descriptor = {} if cu_code is strawberry.UNSET else {"cu_code": cu_code}
        return await resolve_filtered(
            info, "contributor_commitments", ContributorCommitment, descriptor
        )

    # Budget statements
    @strawberry.field
    async def budget_statements(
        self, info: strawberry.Info, limit: int | None = None, offset: int | None = None
    ) -> list[BudgetStatement]:
        return await resolve_collection(
            info, "budget_statements", BudgetStatement, limit=limit, offset=offset
        )

    @strawberry.field
    async def budget_statement(
        self, info: strawberry.Info, filter: BudgetStatementFilter | None = None
    ) -> list[BudgetStatement]:
        """Retrieve budget statements matching up to two filter fields."""
        from ..resolvers.budget_statement import resolve_budget_statement

        return await resolve_budget_statement(info, filter)

    @strawberry.field(name="budgetStatementFTEs")
    async def budget_statement_ftes(self, info: strawberry.Info) -> list[BudgetStatementFTEs]:
        return await resolve_collection(info, "budget_statement_ftes", BudgetStatementFTEs)

    @strawberry.field(name="budgetStatementFTE")
    async def budget_statement_fte(
        self, info: strawberry.Info, filter: BudgetStatementFTEsFilter | None = None
    ) -> list[BudgetStatementFTEs]:
        return await resolve_filtered(info, "budget_statement_ftes", BudgetStatementFTEs, filter)

    @strawberry.field(name="budgetStatementMKRVests")
    async def budget_statement_mkr_vests(
        self, info: strawberry.Info
    ) -> list[BudgetStatementMKRVest]:
        return await resolve_collection(info, "budget_statement_mkr_vests", BudgetStatementMKRVest)

    @strawberry.field(name="budgetStatementMKRVest")
    async def budget_statement_mkr_vest(
        self, info: strawberry.Info, filter: BudgetStatementMKRVestFilter | None = None
    ) -> list[BudgetStatementMKRVest]:
        return await resolve_filtered(
            info, "budget_statement_mkr_vests", BudgetStatementMKRVest, filter
        )

    @strawberry.field
    async def budget_statement_wallets(self, info: strawberry.Info) -> list[BudgetStatementWallet]:
        return await resolve_collection(info, "budget_statement_wallets", BudgetStatementWallet)

    @strawberry.field
    async def budget_statement_wallet(
        self, info: strawberry.Info, filter: BudgetStatementWalletFilter | None = None
    ) -> list[BudgetStatementWallet]:
        return await resolve_filtered(
            info, "budget_statement_wallets", BudgetStatementWallet, filter
        )

    @strawberry.field
    async def budget_statement_line_items(
        self, info: strawberry.Info, limit: int | None = None, offset: int | None = None
    ) -> list[BudgetStatementLineItem]:
        return await resolve_collection(
            info, "budget_statement_line_items", BudgetStatementLineItem, limit=limit, offset=offset
        )

    @strawberry.field
    async def budget_statement_line_item(
        self, info: strawberry.Info, filter: BudgetStatementLineItemFilter | None = None
    ) -> list[BudgetStatementLineItem]:
        return await resolve_filtered(
            info, "budget_statement_line_items", BudgetStatementLineItem, filter
        )

    @strawberry.field
    async def budget_statement_payments(
        self, info: strawberry.Info
    ) -> list[BudgetStatementPayment]:
        return await resolve_collection(info, "budget_statement_payments", BudgetStatementPayment)

    @strawberry.field
    async def budget_statement_payment(
        self, info: strawberry.Info, filter: BudgetStatementPaymentFilter | None = None
    ) -> list[BudgetStatementPayment]:
        return await resolve_filtered(
            info, "budget_statement_payments", BudgetStatementPayment, filter
        )

    # Roadmaps
    @strawberry.field
    async def roadmaps(self, info: strawberry.Info) -> list[Roadmap]:
        return await resolve_collection(info, "roadmaps", Roadmap)

    @strawberry.field
    async def roadmap(
        self, info: strawberry.Info, filter: RoadmapFilter | None = None
    ) -> list[Roadmap]:
        return await resolve_filtered(info, "roadmaps", Roadmap, filter)

    @strawberry.field
    async def roadmap_stakeholders(self, info: strawberry.Info) -> list[RoadmapStakeholder]:
        return await resolve_collection(info, "roadmap_stakeholders", RoadmapStakeholder)

    @strawberry.field
    async def roadmap_stakeholder(
        self, info: strawberry.Info, filter: RoadmapStakeholderFilter | None = None
    ) -> list[RoadmapStakeholder]:
        return await resolve_filtered(info, "roadmap_stakeholders", RoadmapStakeholder, filter)

    @strawberry.field
    async def stakeholders(self, info: strawberry.Info) -> list[Stakeholder]:
        return await resolve_collection(info, "stakeholders", Stakeholder)

    @strawberry.field
    async def stakeholder(
        self, info: strawberry.Info, filter: StakeholderFilter | None = None
    ) -> list[Stakeholder]:
        return await resolve_filtered(info, "stakeholders", Stakeholder, filter)

    @strawberry.field
    async def stakeholder_roles(self, info: strawberry.Info) -> list[StakeholderRole]:
        return await resolve_collection(info, "stakeholder_roles", StakeholderRole)

    @strawberry.field
    async def stakeholder_role(
        self, info: strawberry.Info, filter: StakeholderRoleFilter | None = None
    ) -> list[StakeholderRole]:
        return await resolve_filtered(info, "stakeholder_roles", StakeholderRole, filter)

    @strawberry.field
    async def roadmap_outputs(self, info: strawberry.Info) -> list[RoadmapOutput]:
        return await resolve_collection(info, "roadmap_outputs", RoadmapOutput)

    @strawberry.field
    async def roadmap_output(
        self, info: strawberry.Info, filter: RoadmapOutputFilter | None = None
    ) -> list[RoadmapOutput]:
        return await resolve_filtered(info, "roadmap_outputs", RoadmapOutput, filter)

    @strawberry.field
    async def outputs(self, info: strawberry.Info) -> list[Output]:
        return await resolve_collection(info, "outputs", Output)

    @strawberry.field
    async def output(
        self, info: strawberry.Info, filter: OutputFilter | None = None
    ) -> list[Output]:
        return await resolve_filtered(info, "outputs", Output, filter)

    @strawberry.field
    async def output_types(self, info: strawberry.Info) -> list[OutputType]:
        return await resolve_collection(info, "output_types", OutputType)

    @strawberry.field
    async def output_type(
        self, info: strawberry.Info, filter: OutputTypeFilter | None = None
    ) -> list[OutputType]:
        return await resolve_filtered(info, "output_types", OutputType, filter)

    @strawberry.field
    async def milestones(self, info: strawberry.Info) -> list[Milestone]:
        return await resolve_collection(info, "milestones", Milestone)

    @strawberry.field
    async def milestone(
        self, info: strawberry.Info, filter: MilestoneFilter | None = None
    ) -> list[Milestone]:
        return await resolve_filtered(info, "milestones", Milestone, filter)

    @strawberry.field
    async def tasks(self, info: strawberry.Info) -> list[Task]:
        return await resolve_collection(info, "tasks", Task)

    @strawberry.field
    async def task(self, info: strawberry.Info, filter: TaskFilter | None = None) -> list[Task]:
        return await resolve_filtered(info, "tasks", Task, filter)

    @strawberry.field
    async def reviews(self, info: strawberry.Info) -> list[Review]:
        return await resolve_collection(info, "reviews", Review)

    @strawberry.field
    async def review(
        self, info: strawberry.Info, filter: ReviewFilter | None = None
    ) -> list[Review]:
        return await resolve_filtered(info, "reviews", Review, filter)
