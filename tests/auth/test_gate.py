"""
Tests for the credential and capability gate
"""

from unittest.mock import AsyncMock, patch

import pytest

from ecosystem_api.auth.context import AuthContext
from ecosystem_api.auth.gate import LOGIN_FAILED, AuthGate
from ecosystem_api.auth.passwords import verify_password
from ecosystem_api.engine.filters import Predicate
from ecosystem_api.errors import (
    AuthenticationError,
    ErrorKind,
    NotFoundError,
    StoreError,
    ValidationError,
)


@pytest.fixture
def gate(memory_store, issuer):
    return AuthGate(memory_store, issuer, bcrypt_rounds=4)


def session_for(issuer, user_id, cu_id, user_name) -> AuthContext:
    token = issuer.issue(user_id, cu_id, user_name)
    return AuthContext(claims=issuer.verify(token), token=token)


class TestLogin:
    """Tests for AuthGate.login."""

    @pytest.mark.asyncio
    async def test_success(self, gate, issuer):
        result = await gate.login("admin", "admin-pass")

        assert result.user.id == 1
        assert result.user.cu_id == 1
        assert result.user.user_name == "admin"
        claims = issuer.verify(result.token)
        assert claims.user_id == "1"
        assert claims.cu_id == "1"
        assert claims.user_name == "admin"

    @pytest.mark.asyncio
    async def test_failures_are_indistinguishable(self, gate, memory_store):
        """Unknown user, wrong password and missing role fail the same way."""
        await memory_store.insert_many(
            "users", [{"user_name": "orphan", "password": (await gate_hash("orphan-pass"))}]
        )
        messages = []
        for user_name, password in [
            ("nobody", "whatever"),
            ("admin", "wrong-pass"),
            ("orphan", "orphan-pass"),
        ]:
            with pytest.raises(AuthenticationError) as exc_info:
                await gate.login(user_name, password)
            assert type(exc_info.value) is AuthenticationError
            assert exc_info.value.__cause__ is None
            messages.append(exc_info.value.message)

        assert messages == [LOGIN_FAILED] * 3

    @pytest.mark.asyncio
    async def test_skips_roles_without_resource(self, gate, memory_store):
        await memory_store.insert_many(
            "user_roles",
            [
                {"user_id": 3, "role_id": 9, "resource": "CoreUnit", "resource_id": None},
                {"user_id": 3, "role_id": 9, "resource": "CoreUnit", "resource_id": 5},
            ],
        )
        assert await gate.owning_unit_id(3) == 5

    @pytest.mark.asyncio
    async def test_owning_unit_missing(self, gate):
        with pytest.raises(NotFoundError):
            await gate.owning_unit_id(999)


class TestCapability:
    """Tests for AuthGate.has_capability."""

    @pytest.mark.asyncio
    async def test_granted(self, gate):
        assert await gate.has_capability("1") is True

    @pytest.mark.asyncio
    async def test_denied(self, gate):
        assert await gate.has_capability("2") is False

    @pytest.mark.asyncio
    async def test_counts_matching_rows(self, gate, memory_store):
        memory_store.count = AsyncMock(return_value=0)

        assert await gate.has_capability(5, capability="Audit", resource="CoreUnit") is False
        memory_store.count.assert_awaited_once_with(
            "user_permissions",
            [
                Predicate("user_id", 5),
                Predicate("resource", "CoreUnit"),
                Predicate("permission", "Audit"),
            ],
        )


class TestCreateUser:
    """Tests for AuthGate.create_user."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("actor", [None, AuthContext()])
    async def test_without_session_rejected_before_input(self, gate, memory_store, actor):
        """Anonymous callers are rejected before any store access."""
        with patch.object(memory_store, "count", AsyncMock()) as count:
            with pytest.raises(AuthenticationError) as exc_info:
                await gate.create_user(actor, None, None, None)

        count.assert_not_called()
        assert exc_info.value.kind is ErrorKind.AUTHENTICATION

    @pytest.mark.asyncio
    async def test_without_capability_rejected(self, gate, issuer, memory_store):
        actor = session_for(issuer, 2, 2, "member")

        with pytest.raises(AuthenticationError, match="not authorized"):
            await gate.create_user(actor, 2, "newbie", "newbie-pass")

        assert await memory_store.fetch_where("users", [Predicate("user_name", "newbie")]) == []

    @pytest.mark.asyncio
    async def test_creates_user_and_role(self, gate, issuer, memory_store):
        actor = session_for(issuer, 1, 1, "admin")

        user = await gate.create_user(actor, "2", "newbie", "newbie-pass")

        assert user.user_name == "newbie"
        assert user.cu_id == 2
        [stored] = await memory_store.fetch_where("users", [Predicate("user_name", "newbie")])
        assert stored["password"] != "newbie-pass"
        assert await verify_password("newbie-pass", stored["password"])
        assert await gate.owning_unit_id(stored["id"]) == 2

    @pytest.mark.asyncio
    async def test_created_user_can_log_in(self, gate, issuer):
        actor = session_for(issuer, 1, 1, "admin")
        await gate.create_user(actor, 2, "newbie", "newbie-pass")

        result = await gate.login("newbie", "newbie-pass")

        assert result.user.cu_id == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("cu_id", ["not-a-number", 999])
    async def test_unknown_core_unit_rejected_before_writes(
        self, gate, issuer, memory_store, cu_id
    ):
        actor = session_for(issuer, 1, 1, "admin")

        with patch.object(memory_store, "insert_many", wraps=memory_store.insert_many) as insert:
            with pytest.raises(ValidationError, match="Unknown core unit"):
                await gate.create_user(actor, cu_id, "ghost", "ghost-pass")

        insert.assert_not_called()
        assert await memory_store.fetch_where("users", [Predicate("user_name", "ghost")]) == []

    @pytest.mark.asyncio
    async def test_failed_role_link_removes_user(self, gate, issuer, memory_store):
        """A user without an owning unit is never left behind."""
        actor = session_for(issuer, 1, 1, "admin")
        real_insert = memory_store.insert_many

        async def insert_many(collection, records):
            if collection == "user_roles":
                raise StoreError("Record store insert failed")
            return await real_insert(collection, records)

        with patch.object(memory_store, "insert_many", side_effect=insert_many):
            with pytest.raises(StoreError):
                await gate.create_user(actor, 2, "ghost", "ghost-pass")

        assert await memory_store.fetch_where("users", [Predicate("user_name", "ghost")]) == []
        user = await gate.create_user(actor, 2, "ghost", "ghost-pass")
        assert user.user_name == "ghost"

    @pytest.mark.asyncio
    @pytest.mark.integration
    async def test_uncoercible_unit_leaves_no_user_in_sql_store(self, sql_store, issuer):
        await sql_store.insert_many("core_units", [{"id": 1, "code": "SES-001"}])
        await sql_store.insert_many(
            "users", [{"id": 1, "user_name": "admin", "password": await gate_hash("pw")}]
        )
        await sql_store.insert_many(
            "user_permissions",
            [{"user_id": 1, "resource": "System", "permission": "Manage"}],
        )
        gate = AuthGate(sql_store, issuer, bcrypt_rounds=4)

        with pytest.raises(ValidationError):
            await gate.create_user(
                session_for(issuer, 1, 1, "admin"), "not-a-number", "ghost", "ghost-pass"
            )

        assert await sql_store.fetch_where("users", [Predicate("user_name", "ghost")]) == []


class TestChangePassword:
    """Tests for AuthGate.change_password."""

    @pytest.mark.asyncio
    async def test_requires_session(self, gate):
        with pytest.raises(AuthenticationError):
            await gate.change_password(AuthContext(), "member", "member-pass", "new-pass")

    @pytest.mark.asyncio
    async def test_requires_old_password(self, gate, issuer):
        """A valid session alone is not enough."""
        actor = session_for(issuer, 2, 2, "member")

        with pytest.raises(AuthenticationError):
            await gate.change_password(actor, "member", "wrong-pass", "new-pass")

        await gate.login("member", "member-pass")

    @pytest.mark.asyncio
    async def test_changes_password(self, gate, issuer):
        actor = session_for(issuer, 2, 2, "member")

        user = await gate.change_password(actor, "member", "member-pass", "new-pass")

        assert user.user_name == "member"
        assert user.cu_id == 2
        await gate.login("member", "new-pass")
        with pytest.raises(AuthenticationError):
            await gate.login("member", "member-pass")

    @pytest.mark.asyncio
    async def test_unknown_user_rejected(self, gate, issuer):
        actor = session_for(issuer, 2, 2, "member")

        with pytest.raises(AuthenticationError):
            await gate.change_password(actor, "nobody", "x", "y")


async def gate_hash(password: str) -> str:
    from ecosystem_api.auth.passwords import hash_password

    return await hash_password(password, rounds=4)
