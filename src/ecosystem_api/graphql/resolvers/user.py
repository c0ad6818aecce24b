from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...auth.gate import NOT_AUTHENTICATED
from ...errors import AuthenticationError, ValidationError
from ..context import get_auth_context_from_info, get_auth_gate

if TYPE_CHECKING:
    from ..mutations.root import AuthInput, UpdatePassword, UserInput
    from ..types.user import User, UserPayload


async def login_user(info: strawberry.Info, input: AuthInput) -> UserPayload:
    """Verify credentials and return the user with a fresh session token."""
    from ..types.user import User, UserPayload

    result = await get_auth_gate(info).login(input.user_name, input.password)
    return UserPayload(user=User.from_public(result.user), auth_token=result.token)


async def create_user(info: strawberry.Info, input: UserInput | None) -> User:
    """
    Create a user on behalf of the authenticated caller.

    The caller's session is checked before the input is looked at.
    """
    from ..types.user import User

    actor = get_auth_context_from_info(info)
    if input is None:
        if not actor.is_authenticated:
            raise AuthenticationError(NOT_AUTHENTICATED)
        raise ValidationError("No input data")

    user = await get_auth_gate(info).create_user(
        actor, input.cu_id, input.user_name, input.password
    )
    return User.from_public(user)


async def change_password(info: strawberry.Info, input: UpdatePassword) -> User:
    from ..types.user import User

    actor = get_auth_context_from_info(info)
    user = await get_auth_gate(info).change_password(
        actor, input.user_name, input.password, input.new_password
    )
    return User.from_public(user)
