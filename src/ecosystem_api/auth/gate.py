"""
Credential verification and capability checks.

Login, user creation and password changes all report failures with a
deliberately generic ``AuthenticationError`` so callers cannot tell an
unknown username from a wrong password. The specific reason is logged.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..engine.filters import Predicate
from ..errors import (
    AuthenticationError,
    EcosystemError,
    NoSuchUserError,
    NotFoundError,
    ValidationError,
    WrongPasswordError,
)
from ..logging import get_logger
from ..store.base import Record, RecordStore
from .context import AuthContext
from .passwords import hash_password, verify_password
from .tokens import SessionTokenIssuer

logger = get_logger(__name__)

CORE_UNITS = "core_units"
USERS = "users"
USER_ROLES = "user_roles"
USER_PERMISSIONS = "user_permissions"

# Capability required to manage users, checked against the system resource class
MANAGE = "Manage"
SYSTEM = "System"
CORE_UNIT = "CoreUnit"

LOGIN_FAILED = "Invalid username or password"
NOT_AUTHENTICATED = "Not authenticated, login first"
NOT_AUTHORIZED = "You are not authorized"
PASSWORD_CHANGE_FAILED = "Password change rejected"


@dataclass(frozen=True)
class PublicUser:
    """User fields safe to return to callers."""

    id: int | str
    cu_id: int | str | None
    user_name: str


@dataclass(frozen=True)
class LoginResult:
    user: PublicUser
    token: str


class AuthGate:
    """Gate privileged operations behind credentials and capabilities."""

    def __init__(
        self,
        store: RecordStore,
        issuer: SessionTokenIssuer,
        bcrypt_rounds: int | None = None,
    ):
        self.store = store
        self.issuer = issuer
        self.bcrypt_rounds = bcrypt_rounds

    async def login(self, user_name: str, password: str) -> LoginResult:
        """Verify credentials and issue a signed session token."""
        try:
            user = await self._find_user(user_name)
            if not await verify_password(password, user.get("password")):
                raise WrongPasswordError("Password does not match")
            cu_id = await self.owning_unit_id(user["id"])
        except (NotFoundError, AuthenticationError) as e:
            logger.info("Login rejected", user_name=user_name, reason=type(e).__name__)
            raise AuthenticationError(LOGIN_FAILED) from None

        token = self.issuer.issue(user["id"], cu_id, user["user_name"])
        logger.info("User logged in", user_id=str(user["id"]))
        return LoginResult(
            user=PublicUser(id=user["id"], cu_id=cu_id, user_name=user["user_name"]),
            token=token,
        )

    async def owning_unit_id(self, user_id: int | str) -> int | str:
        """Resolve the first non-null resource linked to a user."""
        roles = await self.store.fetch_where(USER_ROLES, [Predicate("user_id", user_id)])
        resources = [r for r in roles if r is not None and r.get("resource_id") is not None]
        if not resources:
            raise NotFoundError(f"No resource linked to user {user_id}")
        return resources[0]["resource_id"]

    async def has_capability(
        self, actor_id: int | str, capability: str = MANAGE, resource: str = SYSTEM
    ) -> bool:
        """Grant iff at least one matching permission row exists."""
        count = await self.store.count(
            USER_PERMISSIONS,
            [
                Predicate("user_id", actor_id),
                Predicate("resource", resource),
                Predicate("permission", capability),
            ],
        )
        return count > 0

    async def create_user(
        self,
        actor: AuthContext | None,
        cu_id: int | str | None,
        user_name: str,
        password: str,
    ) -> PublicUser:
        """Create a user on behalf of an actor allowed to manage the system."""
        if actor is None or not actor.is_authenticated:
            logger.info("User creation without session rejected")
            raise AuthenticationError(NOT_AUTHENTICATED)

        if not await self.has_capability(actor.user_id):
            logger.info("User creation not permitted", actor_id=actor.user_id)
            raise AuthenticationError(NOT_AUTHORIZED)

        if cu_id is not None and not await self.store.count(
            CORE_UNITS, [Predicate("id", cu_id)]
        ):
            logger.info("User creation for unknown core unit rejected", cu_id=str(cu_id))
            raise ValidationError(f"Unknown core unit: {cu_id}")

        hashed = await hash_password(password, self.bcrypt_rounds)
        [user] = await self.store.insert_many(USERS, [{"user_name": user_name, "password": hashed}])
        if cu_id is not None:
            cu_id = await self._link_owning_unit(user, cu_id)

        logger.info("User created", user_id=str(user["id"]), actor_id=actor.user_id)
        return PublicUser(id=user["id"], cu_id=cu_id, user_name=user["user_name"])

    async def _link_owning_unit(self, user: Record, cu_id: int | str) -> int | str:
        """Record the user's owning unit; the user row is removed if that fails."""
        try:
            [role] = await self.store.insert_many(
                USER_ROLES,
                [{"user_id": user["id"], "resource": CORE_UNIT, "resource_id": cu_id}],
            )
        except EcosystemError:
            logger.warning("Owning unit link failed, removing new user", user_id=str(user["id"]))
            await self.store.delete_many(USERS, [{"id": user["id"]}])
            raise
        return role["resource_id"]

    async def change_password(
        self,
        actor: AuthContext | None,
        user_name: str,
        password: str,
        new_password: str,
    ) -> PublicUser:
        """Replace a password after re-verifying the old one."""
        if actor is None or not actor.is_authenticated:
            logger.info("Password change without session rejected", user_name=user_name)
            raise AuthenticationError(PASSWORD_CHANGE_FAILED)

        try:
            user = await self._find_user(user_name)
            if not await verify_password(password, user.get("password")):
                raise WrongPasswordError("Password does not match")
        except (NotFoundError, AuthenticationError) as e:
            logger.info(
                "Password change rejected", user_name=user_name, reason=type(e).__name__
            )
            raise AuthenticationError(PASSWORD_CHANGE_FAILED) from None

        hashed = await hash_password(new_password, self.bcrypt_rounds)
        await self.store.update_many(USERS, [{"id": user["id"], "password": hashed}])

        try:
            cu_id = await self.owning_unit_id(user["id"])
        except NotFoundError:
            cu_id = None

        logger.info("Password changed", user_id=str(user["id"]), actor_id=actor.user_id)
        return PublicUser(id=user["id"], cu_id=cu_id, user_name=user["user_name"])

    async def _find_user(self, user_name: str) -> Record:
        users = await self.store.fetch_where(USERS, [Predicate("user_name", user_name)])
        if not users:
            raise NoSuchUserError(f"No user named {user_name!r}")
        return users[0]
