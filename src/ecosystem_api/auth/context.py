"""Authentication context for request handling."""

from __future__ import annotations

from dataclasses import dataclass

from .tokens import SessionClaims


@dataclass(frozen=True)
class AuthContext:
    """Runtime authentication context for a request."""

    claims: SessionClaims | None = None
    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        """Check if the request carries a verified session."""
        return self.claims is not None

    @property
    def user_id(self) -> str | None:
        return self.claims.user_id if self.claims else None

    @property
    def cu_id(self) -> str | None:
        return self.claims.cu_id if self.claims else None

    @property
    def user_name(self) -> str | None:
        return self.claims.user_name if self.claims else None


ANONYMOUS = AuthContext()
