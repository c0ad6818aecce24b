"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.budget_statement import (
    BudgetStatement,
    BudgetStatementLineItem,
    BudgetStatementPayload,
    BudgetStatementWallet,
    BudgetStatus,
)
from ..types.user import User, UserPayload

UNSET = strawberry.UNSET


# Input types for mutations. Optional fields default to UNSET so that only
# supplied fields are written.
@strawberry.input
class BudgetStatementInput:
    cu_id: strawberry.ID | None = UNSET
    cu_code: str | None = UNSET
    month: str | None = UNSET
    comments: str | None = UNSET
    budget_status: BudgetStatus | None = UNSET
    publication_url: str | None = UNSET


@strawberry.input
class BudgetStatementBatchAddInput:
    cu_id: strawberry.ID | None = UNSET
    month: str | None = UNSET
    comments: str | None = UNSET
    budget_status: BudgetStatus | None = UNSET
    publication_url: str | None = UNSET
    cu_code: str | None = UNSET


@strawberry.input
class LineItemsBatchAddInput:
    budget_statement_wallet_id: strawberry.ID
    month: str | None = UNSET
    position: int | None = UNSET
    group: str | None = UNSET
    budget_category: str | None = UNSET
    forecast: float | None = UNSET
    actual: float | None = UNSET
    comments: str | None = UNSET
    canonical_budget_category: str | None = UNSET
    headcount_expense: bool | None = UNSET


@strawberry.input
class LineItemsBatchUpdateInput:
    """Line item changes; ``id`` selects the item, other supplied fields are written."""

    id: strawberry.ID | None = UNSET
    budget_statement_wallet_id: strawberry.ID | None = UNSET
    month: str | None = UNSET
    position: int | None = UNSET
    group: str | None = UNSET
    budget_category: str | None = UNSET
    forecast: float | None = UNSET
    actual: float | None = UNSET
    comments: str | None = UNSET
    canonical_budget_category: str | None = UNSET
    headcount_expense: bool | None = UNSET


@strawberry.input
class LineItemsBatchDeleteInput:
    id: strawberry.ID | None = UNSET
    budget_statement_wallet_id: strawberry.ID | None = UNSET
    month: str | None = UNSET
    position: int | None = UNSET
    group: str | None = UNSET
    budget_category: str | None = UNSET
    forecast: float | None = UNSET
    actual: float | None = UNSET
    comments: str | None = UNSET
    canonical_budget_category: str | None = UNSET
    headcount_expense: bool | None = UNSET


@strawberry.input
class BudgetStatementWalletBatchAddInput:
    budget_statement_id: strawberry.ID
    name: str | None = UNSET
    address: str | None = UNSET
    current_balance: float | None = UNSET
    topup_transfer: float | None = UNSET
    comments: str | None = UNSET


@strawberry.input
class UserInput:
    cu_id: strawberry.ID
    user_name: str
    password: str


@strawberry.input
class AuthInput:
    user_name: str
    password: str


@strawberry.input
class UpdatePassword:
    user_name: str
    password: str
    new_password: str


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Budget statement mutations
    @strawberry.mutation
    async def budget_statement_add(
        self, info: strawberry.Info, input: BudgetStatementInput | None = None
    ) -> BudgetStatementPayload:
        """Add a budget statement, reporting validation failures in the payload."""
        from ..resolvers.budget_statement import add_budget_statement

        return await add_budget_statement(info, input)

    @strawberry.mutation
    async def budget_statements_batch_add(
        self, info: strawberry.Info, input: list[BudgetStatementBatchAddInput] | None = None
    ) -> list[BudgetStatement]:
        """Add several budget statements at once."""
        from ..resolvers.budget_statement import batch_add_budget_statements

        return await batch_add_budget_statements(info, input)

    @strawberry.mutation
    async def budget_line_items_batch_add(
        self, info: strawberry.Info, input: list[LineItemsBatchAddInput] | None = None
    ) -> list[BudgetStatementLineItem]:
        from ..resolvers.budget_statement import batch_add_line_items

        return await batch_add_line_items(info, input)

    @strawberry.mutation
    async def budget_line_items_batch_update(
        self, info: strawberry.Info, input: list[LineItemsBatchUpdateInput] | None = None
    ) -> list[BudgetStatementLineItem]:
        from ..resolvers.budget_statement import batch_update_line_items

        return await batch_update_line_items(info, input)

    @strawberry.mutation
    async def budget_line_items_batch_delete(
        self, info: strawberry.Info, input: list[LineItemsBatchDeleteInput] | None = None
    ) -> list[BudgetStatementLineItem]:
        from ..resolvers.budget_statement import batch_delete_line_items

        return await batch_delete_line_items(info, input)

    @strawberry.mutation
    async def budget_statement_wallet_batch_add(
        self, info: strawberry.Info, input: list[BudgetStatementWalletBatchAddInput] | None = None
    ) -> list[BudgetStatementWallet]:
        from ..resolvers.budget_statement import batch_add_wallets

        return await batch_add_wallets(info, input)

    # User mutations
    @strawberry.mutation
    async def user_create(self, info: strawberry.Info, input: UserInput | None = None) -> User:
        """Create a user. Requires a session allowed to manage the system."""
        from ..resolvers.user import create_user

        return await create_user(info, input)

    @strawberry.mutation
    async def user_login(self, info: strawberry.Info, input: AuthInput) -> UserPayload:
        from ..resolvers.user import login_user

        return await login_user(info, input)

    @strawberry.mutation
    async def user_change_password(self, info: strawberry.Info, input: UpdatePassword) -> User:
        """Change a password. Requires a session and the current password."""
        from ..resolvers.user import change_password

        return await change_password(info, input)
