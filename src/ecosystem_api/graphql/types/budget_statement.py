"""
Budget statement GraphQL type definitions
"""

from enum import Enum

import strawberry

from ...engine import relationships
from ..resolvers.common import resolve_relationship
from .common import Error, RecordType


@strawberry.enum
class BudgetStatus(Enum):
    """Review status of a budget statement."""

    Final = "Final"
    Draft = "Draft"
    SubmittedToAuditor = "SubmittedToAuditor"
    AwaitingCorrections = "AwaitingCorrections"


@strawberry.type
class BudgetStatementFTEs(RecordType):
    id: strawberry.ID
    budget_statement_id: strawberry.ID | None
    month: str | None
    ftes: float | None


@strawberry.type
class BudgetStatementMKRVest(RecordType):
    id: strawberry.ID
    budget_statement_id: strawberry.ID | None
    vesting_date: str | None
    mkr_amount: float | None
    mkr_amount_old: float | None
    comments: str | None


@strawberry.type
class BudgetStatementLineItem(RecordType):
    """A forecast or actual expense of a wallet for one month."""

    id: strawberry.ID
    budget_statement_wallet_id: strawberry.ID | None
    month: str | None
    position: int | None
    group: str | None
    budget_category: str | None
    forecast: float | None
    actual: float | None
    comments: str | None
    canonical_budget_category: str | None
    headcount_expense: bool | None


@strawberry.type
class BudgetStatementPayment(RecordType):
    id: strawberry.ID
    budget_statement_wallet_id: strawberry.ID | None
    transaction_date: str | None
    transaction_id: str | None
    budget_statement_line_item_id: int | None
    comments: str | None


@strawberry.type
class BudgetStatementWallet(RecordType):
    """Wallet reported in a budget statement."""

    id: strawberry.ID
    budget_statement_id: strawberry.ID | None
    name: str | None
    address: str | None
    current_balance: float | None
    topup_transfer: float | None
    comments: str | None

    @strawberry.field
    async def budget_statement_line_item(
        self,
        info: strawberry.Info,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[BudgetStatementLineItem]:
        """Line items of this wallet, paginated over the wallet's own items."""
        from ..resolvers.budget_statement import resolve_wallet_line_items

        return await resolve_wallet_line_items(self, info, offset, limit)

    @strawberry.field
    async def budget_statement_payment(
        self, info: strawberry.Info
    ) -> list[BudgetStatementPayment]:
        return await resolve_relationship(
            self, info, relationships.WALLET_PAYMENTS, BudgetStatementPayment
        )


@strawberry.type
class BudgetStatement(RecordType):
    """Monthly budget statement of a core unit."""

    id: strawberry.ID
    cu_id: strawberry.ID | None
    cu_code: str | None
    month: str | None
    comments: str | None
    budget_status: BudgetStatus | None
    publication_url: str | None

    @strawberry.field(name="budgetStatementFTEs")
    async def budget_statement_ftes(self, info: strawberry.Info) -> list[BudgetStatementFTEs]:
        return await resolve_relationship(
            self, info, relationships.BUDGET_STATEMENT_FTES, BudgetStatementFTEs
        )

    @strawberry.field(name="budgetStatementMKRVest")
    async def budget_statement_mkr_vest(
        self, info: strawberry.Info
    ) -> list[BudgetStatementMKRVest]:
        return await resolve_relationship(
            self, info, relationships.BUDGET_STATEMENT_MKR_VESTS, BudgetStatementMKRVest
        )

    @strawberry.field
    async def budget_statement_wallet(
        self, info: strawberry.Info
    ) -> list[BudgetStatementWallet]:
        return await resolve_relationship(
            self, info, relationships.BUDGET_STATEMENT_WALLETS, BudgetStatementWallet
        )


@strawberry.type
class BudgetStatementPayload:
    """Result of adding a single budget statement."""

    errors: list[Error]
    budget_statement: list[BudgetStatement]
