"""
Roadmap GraphQL type definitions
"""

from enum import Enum

import strawberry

from ...engine import relationships
from ..resolvers.common import resolve_relationship
from .common import RecordType


@strawberry.enum
class RoadmapStatus(Enum):
    Todo = "Todo"
    InProgress = "InProgress"
    Done = "Done"


@strawberry.enum
class TaskStatus(Enum):
    ToDo = "ToDo"
    InProgress = "InProgress"
    Done = "Done"
    WontDo = "WontDo"
    Blocked = "Blocked"
    Backlog = "Backlog"


@strawberry.enum
class ConfidenceLevel(Enum):
    High = "High"
    Medium = "Medium"
    Low = "Low"


@strawberry.enum
class ReviewOutcome(Enum):
    Red = "Red"
    Yellow = "Yellow"
    Green = "Green"


@strawberry.type
class StakeholderRole(RecordType):
    id: strawberry.ID
    stakeholder_role_name: str


@strawberry.type
class Stakeholder(RecordType):
    id: strawberry.ID
    name: str | None
    stakeholder_contributor_id: strawberry.ID | None
    stakeholder_cu_code: str | None

    @strawberry.field
    async def roadmap_stakeholder(self, info: strawberry.Info) -> list["RoadmapStakeholder"]:
        """Roadmaps this stakeholder takes part in."""
        return await resolve_relationship(
            self, info, relationships.STAKEHOLDER_ROADMAP_STAKEHOLDERS, RoadmapStakeholder
        )


@strawberry.type
class RoadmapStakeholder(RecordType):
    """Link between a roadmap, a stakeholder and the stakeholder's role."""

    id: strawberry.ID
    stakeholder_id: strawberry.ID
    roadmap_id: strawberry.ID
    stakeholder_role_id: strawberry.ID

    @strawberry.field
    async def stakeholder_role(self, info: strawberry.Info) -> list[StakeholderRole]:
        return await resolve_relationship(
            self, info, relationships.ROADMAP_STAKEHOLDER_ROLE, StakeholderRole
        )

    @strawberry.field
    async def stakeholder(self, info: strawberry.Info) -> list[Stakeholder]:
        return await resolve_relationship(
            self, info, relationships.ROADMAP_STAKEHOLDER_STAKEHOLDER, Stakeholder
        )


@strawberry.type
class Output(RecordType):
    id: strawberry.ID
    name: str | None
    output_url: str | None
    output_date: str | None


@strawberry.type
class OutputType(RecordType):
    id: strawberry.ID
    output_type: str | None


@strawberry.type
class RoadmapOutput(RecordType):
    id: strawberry.ID
    output_id: strawberry.ID | None
    roadmap_id: strawberry.ID | None
    output_type_id: strawberry.ID | None

    @strawberry.field
    async def output(self, info: strawberry.Info) -> list[Output]:
        return await resolve_relationship(self, info, relationships.ROADMAP_OUTPUT_OUTPUT, Output)

    @strawberry.field
    async def output_type(self, info: strawberry.Info) -> list[OutputType]:
        return await resolve_relationship(
            self, info, relationships.ROADMAP_OUTPUT_TYPE, OutputType
        )


@strawberry.type
class Review(RecordType):
    id: strawberry.ID
    task_id: strawberry.ID
    review_date: str
    review_outcome: ReviewOutcome


@strawberry.type
class Task(RecordType):
    """Unit of work tracked against a roadmap milestone."""

    id: strawberry.ID
    parent_id: strawberry.ID | None
    task_name: str | None
    task_status: TaskStatus | None
    owner_stakeholder_id: strawberry.ID | None
    start_date: str | None
    target: str | None
    completed_percentage: float | None
    confidence_level: ConfidenceLevel | None
    comments: str | None

    @strawberry.field
    async def review(self, info: strawberry.Info) -> list[Review]:
        return await resolve_relationship(self, info, relationships.TASK_REVIEWS, Review)


@strawberry.type
class Milestone(RecordType):
    id: strawberry.ID
    roadmap_id: strawberry.ID
    task_id: strawberry.ID

    @strawberry.field
    async def task(self, info: strawberry.Info) -> list[Task]:
        return await resolve_relationship(self, info, relationships.MILESTONE_TASK, Task)


@strawberry.type
class Roadmap(RecordType):
    """Work performed and planned by a core unit."""

    id: strawberry.ID
    owner_cu_id: strawberry.ID | None
    roadmap_code: str | None
    roadmap_name: str | None
    comments: str | None
    roadmap_status: RoadmapStatus | None
    strategic_initiative: bool | None
    roadmap_summary: str | None

    @strawberry.field
    async def roadmap_stakeholder(self, info: strawberry.Info) -> list[RoadmapStakeholder]:
        return await resolve_relationship(
            self, info, relationships.ROADMAP_STAKEHOLDERS, RoadmapStakeholder
        )

    @strawberry.field
    async def roadmap_output(self, info: strawberry.Info) -> list[RoadmapOutput]:
        return await resolve_relationship(
            self, info, relationships.ROADMAP_OUTPUTS, RoadmapOutput
        )

    @strawberry.field
    async def milestone(self, info: strawberry.Info) -> list[Milestone]:
        return await resolve_relationship(self, info, relationships.ROADMAP_MILESTONES, Milestone)
