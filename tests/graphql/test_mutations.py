"""
Integration tests for GraphQL mutations over the in-memory store
"""

from unittest.mock import patch

import pytest

from ecosystem_api.engine.filters import Predicate


class TestLineItemBatchMutations:
    """Tests for budgetLineItemsBatchAdd/Update/Delete."""

    @pytest.mark.asyncio
    async def test_add_empty_batch_rejected(self, execute, memory_store):
        with patch.object(memory_store, "insert_many", wraps=memory_store.insert_many) as insert:
            result = await execute("mutation { budgetLineItemsBatchAdd(input: []) { id } }")

        assert result.data is None
        assert result.errors[0].message == "No input data"
        assert result.errors[0].extensions == {"code": "VALIDATION"}
        insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_add_without_input_rejected(self, execute):
        result = await execute("mutation { budgetLineItemsBatchAdd { id } }")

        assert result.errors[0].message == "No input data"

    @pytest.mark.asyncio
    async def test_add_line_items(self, execute, memory_store):
        query = """
        mutation Add($items: [LineItemsBatchAddInput!]) {
            budgetLineItemsBatchAdd(input: $items) { id budgetStatementWalletId budgetCategory }
        }
        """
        result = await execute(
            query,
            variables={
                "items": [
                    {"budgetStatementWalletId": "21", "budgetCategory": "Hardware"},
                    {"budgetStatementWalletId": "21", "budgetCategory": "Rent"},
                ]
            },
        )

        assert result.errors is None
        added = result.data["budgetLineItemsBatchAdd"]
        assert [item["budgetCategory"] for item in added] == ["Hardware", "Rent"]
        assert {item["budgetStatementWalletId"] for item in added} == {"21"}
        assert await memory_store.count(
            "budget_statement_line_items", [Predicate("budget_statement_wallet_id", 21)]
        ) == 3

    @pytest.mark.asyncio
    async def test_update_keeps_omitted_fields(self, execute, memory_store):
        result = await execute(
            'mutation { budgetLineItemsBatchUpdate(input: [{id: "30", actual: 99}]) '
            "{ id actual budgetCategory } }"
        )

        assert result.errors is None
        assert result.data["budgetLineItemsBatchUpdate"] == [
            {"id": "30", "actual": 99.0, "budgetCategory": "Compensation"}
        ]
        [stored] = await memory_store.fetch_where(
            "budget_statement_line_items", [Predicate("id", 30)]
        )
        assert stored["position"] == 1

    @pytest.mark.asyncio
    async def test_update_without_id_rejected(self, execute):
        result = await execute(
            "mutation { budgetLineItemsBatchUpdate(input: [{actual: 1}]) { id } }"
        )

        assert result.errors[0].message == "Batch item 0 is missing 'id'"

    @pytest.mark.asyncio
    async def test_update_empty_batch_is_noop(self, execute):
        result = await execute("mutation { budgetLineItemsBatchUpdate(input: []) { id } }")

        assert result.errors is None
        assert result.data["budgetLineItemsBatchUpdate"] == []

    @pytest.mark.asyncio
    async def test_delete_by_id(self, execute, memory_store):
        result = await execute(
            'mutation { budgetLineItemsBatchDelete(input: [{id: "32", actual: 0}]) '
            "{ id budgetCategory } }"
        )

        assert result.errors is None
        assert result.data["budgetLineItemsBatchDelete"] == [
            {"id": "32", "budgetCategory": "Software"}
        ]
        remaining = await memory_store.fetch_all("budget_statement_line_items")
        assert [item["id"] for item in remaining] == [30, 31, 33]


class TestBudgetStatementMutations:
    """Tests for budget statement and wallet mutations."""

    @pytest.mark.asyncio
    async def test_add_reports_missing_fields_in_payload(self, execute):
        result = await execute(
            'mutation { budgetStatementAdd(input: {cuCode: "SES-001"}) '
            "{ errors { message code } budgetStatement { id } } }"
        )

        assert result.errors is None
        payload = result.data["budgetStatementAdd"]
        assert payload["budgetStatement"] == []
        assert payload["errors"] == [
            {"message": "Missing required fields: cu_id, month", "code": "VALIDATION"}
        ]

    @pytest.mark.asyncio
    async def test_add_statement(self, execute):
        result = await execute(
            'mutation { budgetStatementAdd(input: {cuId: "2", month: "2022-06-01", '
            "budgetStatus: Draft}) { errors { message } budgetStatement { cuId month } } }"
        )

        payload = result.data["budgetStatementAdd"]
        assert payload["errors"] == []
        assert payload["budgetStatement"] == [{"cuId": "2", "month": "2022-06-01"}]

    @pytest.mark.asyncio
    async def test_batch_add_statements(self, execute, memory_store):
        result = await execute(
            'mutation { budgetStatementsBatchAdd(input: [{cuId: "2", month: "2022-07-01", '
            "budgetStatus: Final}]) { id budgetStatus } }"
        )

        assert result.errors is None
        [added] = result.data["budgetStatementsBatchAdd"]
        assert added["budgetStatus"] == "Final"
        [stored] = await memory_store.fetch_where(
            "budget_statements", [Predicate("id", int(added["id"]))]
        )
        assert stored["budget_status"] == "Final"

    @pytest.mark.asyncio
    async def test_batch_add_wallets(self, execute):
        result = await execute(
            'mutation { budgetStatementWalletBatchAdd(input: [{budgetStatementId: "12", '
            'name: "Operations"}]) { name budgetStatementId budgetStatementLineItem { id } } }'
        )

        assert result.errors is None
        assert result.data["budgetStatementWalletBatchAdd"] == [
            {"name": "Operations", "budgetStatementId": "12", "budgetStatementLineItem": []}
        ]


class TestUserMutations:
    """Tests for login, user creation and password changes."""

    LOGIN = """
    mutation Login($userName: String!, $password: String!) {
        userLogin(input: {userName: $userName, password: $password}) {
            user { id cuId userName }
            authToken
        }
    }
    """

    @pytest.mark.asyncio
    async def test_login(self, execute, issuer):
        result = await execute(self.LOGIN, {"userName": "admin", "password": "admin-pass"})

        assert result.errors is None
        payload = result.data["userLogin"]
        assert payload["user"] == {"id": "1", "cuId": "1", "userName": "admin"}
        claims = issuer.verify(payload["authToken"])
        assert claims.user_name == "admin"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "user_name,password",
        [("admin", "wrong"), ("nobody", "admin-pass")],
    )
    async def test_login_failure_is_generic(self, execute, user_name, password):
        result = await execute(self.LOGIN, {"userName": user_name, "password": password})

        assert result.data is None
        assert result.errors[0].message == "Invalid username or password"
        assert result.errors[0].extensions == {"code": "AUTHENTICATION"}

    CREATE = """
    mutation {
        userCreate(input: {cuId: "2", userName: "newcomer", password: "s3cret"}) {
            cuId userName
        }
    }
    """

    @pytest.mark.asyncio
    async def test_create_requires_session(self, execute):
        result = await execute(self.CREATE)

        assert result.errors[0].message == "Not authenticated, login first"

    @pytest.mark.asyncio
    async def test_create_requires_manage_permission(self, execute, member_session):
        result = await execute(self.CREATE, auth=member_session)

        assert result.errors[0].message == "You are not authorized"

    @pytest.mark.asyncio
    async def test_admin_creates_user(self, execute, admin_session, memory_store):
        result = await execute(self.CREATE, auth=admin_session)

        assert result.errors is None
        assert result.data["userCreate"] == {"cuId": "2", "userName": "newcomer"}

        login = await execute(self.LOGIN, {"userName": "newcomer", "password": "s3cret"})
        assert login.data["userLogin"]["user"]["cuId"] == "2"

    @pytest.mark.asyncio
    async def test_create_for_unknown_core_unit(self, execute, admin_session, memory_store):
        result = await execute(
            'mutation { userCreate(input: {cuId: "abc", userName: "ghost", password: "pw"}) '
            "{ id } }",
            auth=admin_session,
        )

        assert result.errors[0].extensions == {"code": "VALIDATION"}
        assert await memory_store.fetch_where("users", [Predicate("user_name", "ghost")]) == []

    @pytest.mark.asyncio
    async def test_create_without_input(self, execute, admin_session):
        result = await execute("mutation { userCreate { id } }", auth=admin_session)

        assert result.errors[0].message == "No input data"

    CHANGE = """
    mutation Change($password: String!) {
        userChangePassword(
            input: {userName: "member", password: $password, newPassword: "rotated"}
        ) { userName cuId }
    }
    """

    @pytest.mark.asyncio
    async def test_change_password(self, execute, member_session):
        result = await execute(self.CHANGE, {"password": "member-pass"}, auth=member_session)

        assert result.errors is None
        assert result.data["userChangePassword"] == {"userName": "member", "cuId": "2"}

        login = await execute(self.LOGIN, {"userName": "member", "password": "rotated"})
        assert login.errors is None

    @pytest.mark.asyncio
    async def test_change_password_rejects_wrong_password(self, execute, member_session):
        result = await execute(self.CHANGE, {"password": "guess"}, auth=member_session)

        assert result.errors[0].message == "Password change rejected"

    @pytest.mark.asyncio
    async def test_change_password_requires_session(self, execute):
        result = await execute(self.CHANGE, {"password": "member-pass"})

        assert result.errors[0].message == "Password change rejected"
