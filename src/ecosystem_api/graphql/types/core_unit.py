"""
Core unit GraphQL type definitions
"""

from enum import Enum
from typing import TYPE_CHECKING, Annotated

import strawberry

from ...engine import relationships
from ..resolvers.common import resolve_relationship
from .common import RecordType

if TYPE_CHECKING:
    from .budget_statement import BudgetStatement
    from .contributor_commitment import ContributorCommitment
    from .roadmap import Roadmap


@strawberry.enum
class CoreUnitCategory(Enum):
    """Type of work a core unit performs."""

    Technical = "Technical"
    Support = "Support"
    Operational = "Operational"
    Business = "Business"
    RWAs = "RWAs"
    Growth = "Growth"
    Finance = "Finance"
    Legal = "Legal"


@strawberry.type
class CuMip(RecordType):
    """MIP 39/40/41 details of a core unit."""

    id: strawberry.ID
    cu_id: strawberry.ID | None
    mip_code: str | None
    mip_title: str | None
    mip_status: str | None
    mip_url: str | None
    forum_url: str | None
    accepted: str | None


@strawberry.type
class SocialMediaChannels(RecordType):
    id: strawberry.ID
    cu_id: strawberry.ID | None
    forum_tag: str | None
    twitter: str | None
    youtube: str | None
    discord: str | None
    linked_in: str | None
    website: str | None


@strawberry.type
class CuGithubContribution(RecordType):
    id: strawberry.ID
    cu_id: strawberry.ID | None
    org_id: strawberry.ID | None
    repo_id: strawberry.ID | None


@strawberry.type
class CoreUnit(RecordType):
    """Core unit type for GraphQL API."""

    id: strawberry.ID
    code: str | None = strawberry.field(
        description="Core Unit code - as defined within the Core Units' MIP39"
    )
    name: str | None
    image: str | None = strawberry.field(description="Logo image reference")
    category: list[CoreUnitCategory | None] | None
    sentence_description: str | None
    paragraph_description: str | None
    paragraph_image: str | None
    short_code: str | None

    @strawberry.field
    async def cu_mip(self, info: strawberry.Info) -> list[CuMip]:
        """Details on MIPs 39/40/41 of this core unit."""
        return await resolve_relationship(self, info, relationships.CORE_UNIT_MIPS, CuMip)

    @strawberry.field
    async def budget_statements(
        self, info: strawberry.Info
    ) -> list[Annotated["BudgetStatement", strawberry.lazy(".budget_statement")]]:
        """Budget statements of this core unit."""
        from .budget_statement import BudgetStatement

        return await resolve_relationship(
            self, info, relationships.CORE_UNIT_BUDGET_STATEMENTS, BudgetStatement
        )

    @strawberry.field
    async def social_media_channels(self, info: strawberry.Info) -> list[SocialMediaChannels]:
        return await resolve_relationship(
            self, info, relationships.CORE_UNIT_SOCIAL_MEDIA_CHANNELS, SocialMediaChannels
        )

    @strawberry.field
    async def contributor_commitment(
        self, info: strawberry.Info
    ) -> list[Annotated["ContributorCommitment", strawberry.lazy(".contributor_commitment")]]:
        """Work basis of the contributors of this core unit."""
        from .contributor_commitment import ContributorCommitment

        return await resolve_relationship(
            self, info, relationships.CORE_UNIT_CONTRIBUTOR_COMMITMENTS, ContributorCommitment
        )

    @strawberry.field
    async def cu_github_contribution(self, info: strawberry.Info) -> list[CuGithubContribution]:
        return await resolve_relationship(
            self, info, relationships.CORE_UNIT_GITHUB_CONTRIBUTIONS, CuGithubContribution
        )

    @strawberry.field(name="roadMap")
    async def road_map(
        self, info: strawberry.Info
    ) -> list[Annotated["Roadmap", strawberry.lazy(".roadmap")]]:
        """Roadmaps owned by this core unit."""
        from .roadmap import Roadmap

        return await resolve_relationship(self, info, relationships.CORE_UNIT_ROADMAPS, Roadmap)
