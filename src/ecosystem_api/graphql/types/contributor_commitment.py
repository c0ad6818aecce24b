"""
Contributor commitment GraphQL type definitions
"""

from enum import Enum

import strawberry

from .common import RecordType


@strawberry.enum(name="COMMITMENT")
class Commitment(Enum):
    """Work basis of a contributor."""

    FULLTIME = "FULLTIME"
    PARTTIME = "PARTTIME"
    VARIABLE = "VARIABLE"
    INACTIVE = "INACTIVE"


@strawberry.type
class ContributorCommitment(RecordType):
    id: strawberry.ID
    cu_id: strawberry.ID | None
    cu_code: str | None
    contributor_id: strawberry.ID | None
    start_date: str | None
    commitment: Commitment | None
