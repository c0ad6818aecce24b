from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry

from ...engine.filters import COMPOSITE_PREDICATES
from ...engine.relationships import WALLET_LINE_ITEMS, resolve_related
from ...errors import ValidationError
from ...logging import get_logger
from ..context import collection_fetcher, get_batch_coordinator
from ..inputs import present_fields, to_records
from .common import resolve_filtered

if TYPE_CHECKING:
    from ..mutations.root import BudgetStatementInput
    from ..queries.filters import BudgetStatementFilter
    from ..types.budget_statement import (
        BudgetStatement,
        BudgetStatementLineItem,
        BudgetStatementPayload,
        BudgetStatementWallet,
    )

logger = get_logger(__name__)

BUDGET_STATEMENTS = "budget_statements"
BUDGET_STATEMENT_WALLETS = "budget_statement_wallets"
BUDGET_STATEMENT_LINE_ITEMS = "budget_statement_line_items"

# Fields a budget statement cannot be stored without
REQUIRED_STATEMENT_FIELDS = ("cu_id", "month")


# Query resolvers
async def resolve_budget_statement(
    info: strawberry.Info, filter: BudgetStatementFilter | None
) -> list[BudgetStatement]:
    """Resolve budget statements matching up to two filter fields."""
    from ..types.budget_statement import BudgetStatement

    return await resolve_filtered(
        info, BUDGET_STATEMENTS, BudgetStatement, filter, max_predicates=COMPOSITE_PREDICATES
    )


async def resolve_wallet_line_items(
    wallet: BudgetStatementWallet,
    info: strawberry.Info,
    offset: int | None,
    limit: int | None,
) -> list[BudgetStatementLineItem]:
    """
    Resolve the line items of a wallet.

    Pagination applies to the wallet's own items, after they have been
    selected from the full collection.
    """
    from ..types.budget_statement import BudgetStatementLineItem

    items = await resolve_related(wallet, WALLET_LINE_ITEMS, collection_fetcher(info))
    start = offset or 0
    end = None if limit is None else start + limit
    return [BudgetStatementLineItem.from_record(item) for item in items[start:end]]


# Mutation resolvers
async def batch_add_budget_statements(
    info: strawberry.Info, inputs: list[Any] | None
) -> list[BudgetStatement]:
    from ..types.budget_statement import BudgetStatement

    records = await get_batch_coordinator(info).add(BUDGET_STATEMENTS, to_records(inputs))
    return [BudgetStatement.from_record(record) for record in records]


async def batch_add_line_items(
    info: strawberry.Info, inputs: list[Any] | None
) -> list[BudgetStatementLineItem]:
    from ..types.budget_statement import BudgetStatementLineItem

    records = await get_batch_coordinator(info).add(
        BUDGET_STATEMENT_LINE_ITEMS, to_records(inputs)
    )
    return [BudgetStatementLineItem.from_record(record) for record in records]


async def batch_update_line_items(
    info: strawberry.Info, inputs: list[Any] | None
) -> list[BudgetStatementLineItem]:
    from ..types.budget_statement import BudgetStatementLineItem

    records = await get_batch_coordinator(info).update(
        BUDGET_STATEMENT_LINE_ITEMS, to_records(inputs)
    )
    return [BudgetStatementLineItem.from_record(record) for record in records]


async def batch_delete_line_items(
    info: strawberry.Info, inputs: list[Any] | None
) -> list[BudgetStatementLineItem]:
    """Delete line items by id; the other supplied fields are ignored."""
    from ..types.budget_statement import BudgetStatementLineItem

    targets = [
        {"id": record["id"]} if "id" in record else record for record in to_records(inputs)
    ]
    records = await get_batch_coordinator(info).delete(BUDGET_STATEMENT_LINE_ITEMS, targets)
    return [BudgetStatementLineItem.from_record(record) for record in records]


async def batch_add_wallets(
    info: strawberry.Info, inputs: list[Any] | None
) -> list[BudgetStatementWallet]:
    from ..types.budget_statement import BudgetStatementWallet

    records = await get_batch_coordinator(info).add(BUDGET_STATEMENT_WALLETS, to_records(inputs))
    return [BudgetStatementWallet.from_record(record) for record in records]


async def add_budget_statement(
    info: strawberry.Info, input: BudgetStatementInput | None
) -> BudgetStatementPayload:
    """
    Add a single budget statement.

    Validation failures are returned in the payload's ``errors`` instead of
    failing the whole response.
    """
    from ..types.budget_statement import BudgetStatement, BudgetStatementPayload
    from ..types.common import Error

    record = present_fields(input)
    try:
        missing = [name for name in REQUIRED_STATEMENT_FIELDS if record.get(name) is None]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        [stored] = await get_batch_coordinator(info).add(BUDGET_STATEMENTS, [record])
    except ValidationError as e:
        logger.info("Budget statement rejected", reason=e.message)
        return BudgetStatementPayload(
            errors=[Error(message=e.message, code=e.kind.name)], budget_statement=[]
        )

    return BudgetStatementPayload(errors=[], budget_statement=[BudgetStatement.from_record(stored)])
