"""Signed session tokens."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache

import jwt
from jwt.exceptions import InvalidTokenError

from ..config import settings
from ..errors import AuthenticationError
from ..logging import get_logger

logger = get_logger(__name__)

# Sessions are signed with one symmetric key and expire after a week
TOKEN_ALGORITHM = "HS256"
TOKEN_EXPIRY = timedelta(days=7)


@dataclass(frozen=True)
class SessionClaims:
    """Decoded payload of a session token."""

    user_id: str
    cu_id: str | None
    user_name: str
    issued_at: datetime
    expires_at: datetime


class SessionTokenIssuer:
    """Issue and verify self-contained session tokens with one symmetric key."""

    def __init__(self, secret_key: str):
        if not secret_key:
            raise ValueError("A signing secret is required to issue session tokens")
        self.secret_key = secret_key

    def issue(self, user_id: int | str, cu_id: int | str | None, user_name: str) -> str:
        """Sign a token for an authenticated user."""
        now = datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "id": str(user_id),
            "cuId": None if cu_id is None else str(cu_id),
            "userName": user_name,
            "iat": now,
            "exp": now + TOKEN_EXPIRY,
        }
        return jwt.encode(payload, self.secret_key, algorithm=TOKEN_ALGORITHM)

    def verify(self, token: str) -> SessionClaims:
        """Verify a token's signature and expiry and return its claims."""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[TOKEN_ALGORITHM],
                options={
                    "require": ["sub", "iat", "exp"],
                    "verify_exp": True,
                    "verify_iat": True,
                },
            )
        except InvalidTokenError as e:
            logger.warning("Session token validation failed", error=str(e))
            raise AuthenticationError("Invalid session token") from e

        return SessionClaims(
            user_id=payload["sub"],
            cu_id=payload.get("cuId"),
            user_name=payload.get("userName", ""),
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )


@lru_cache(maxsize=1)
def get_token_issuer() -> SessionTokenIssuer:
    """Process-wide issuer built once from settings."""
    if not settings.jwt_secret:
        raise RuntimeError("ECOSYSTEM_JWT_SECRET must be set to issue or verify session tokens")
    return SessionTokenIssuer(settings.jwt_secret)
