"""
User GraphQL type definitions
"""

import strawberry

from ...auth.gate import PublicUser


@strawberry.type
class User:
    """User type for GraphQL API. Password hashes are never exposed."""

    id: strawberry.ID | None
    cu_id: strawberry.ID | None
    user_name: str | None

    @classmethod
    def from_public(cls, user: PublicUser) -> "User":
        return cls(id=user.id, cu_id=user.cu_id, user_name=user.user_name)


@strawberry.type
class UserPayload:
    user: User | None
    auth_token: str
