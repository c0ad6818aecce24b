from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...engine.relationships import with_parsed_category
from .common import resolve_collection, resolve_filtered

if TYPE_CHECKING:
    from ..queries.filters import CoreUnitFilter
    from ..types.core_unit import CoreUnit

CORE_UNITS = "core_units"


async def resolve_core_units(
    info: strawberry.Info, limit: int | None, offset: int | None
) -> list[CoreUnit]:
    """Resolve all core units with their category parsed into a list."""
    from ..types.core_unit import CoreUnit

    return await resolve_collection(
        info, CORE_UNITS, CoreUnit, limit=limit, offset=offset, transform=with_parsed_category
    )


async def resolve_core_unit(info: strawberry.Info, filter: CoreUnitFilter | None) -> list[CoreUnit]:
    """Resolve the core units matching a single-field filter."""
    from ..types.core_unit import CoreUnit

    return await resolve_filtered(
        info, CORE_UNITS, CoreUnit, filter, transform=with_parsed_category
    )
