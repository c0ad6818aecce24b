"""
Tests for building the auth context from the Authorization header
"""

import pytest

from ecosystem_api.auth.middleware import get_auth_context
from ecosystem_api.auth.tokens import get_token_issuer
from ecosystem_api.config import settings
from ecosystem_api.logging import user_id_ctx


class TestGetAuthContext:
    """Tests for get_auth_context."""

    @pytest.mark.asyncio
    async def test_missing_header_is_anonymous(self, issuer):
        auth = await get_auth_context(None, issuer=issuer)
        assert auth.is_authenticated is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", ["Token abc", "Bearer", "Bearer   ", "abc"])
    async def test_malformed_header_is_anonymous(self, issuer, header):
        auth = await get_auth_context(header, issuer=issuer)
        assert auth.is_authenticated is False

    @pytest.mark.asyncio
    async def test_invalid_token_is_anonymous(self, issuer):
        auth = await get_auth_context("Bearer not.a.token", issuer=issuer)
        assert auth.is_authenticated is False

    @pytest.mark.asyncio
    async def test_valid_token(self, issuer):
        token = issuer.issue(1, 1, "admin")

        auth = await get_auth_context(f"Bearer {token}", issuer=issuer)

        assert auth.is_authenticated is True
        assert auth.user_id == "1"
        assert auth.cu_id == "1"
        assert auth.user_name == "admin"
        assert auth.token == token
        assert user_id_ctx.get() == "1"

    @pytest.mark.asyncio
    async def test_token_without_configured_secret_is_anonymous(self, monkeypatch):
        monkeypatch.setattr(settings, "jwt_secret", None)
        get_token_issuer.cache_clear()

        auth = await get_auth_context("Bearer abc.def.ghi")

        assert auth.is_authenticated is False
