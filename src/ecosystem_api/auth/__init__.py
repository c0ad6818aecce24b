"""Authentication and authorization for the Ecosystem API."""

from .context import AuthContext
from .gate import AuthGate, LoginResult, PublicUser
from .middleware import get_auth_context
from .tokens import SessionClaims, SessionTokenIssuer, get_token_issuer

__all__ = [
    "AuthContext",
    "AuthGate",
    "LoginResult",
    "PublicUser",
    "SessionClaims",
    "SessionTokenIssuer",
    "get_auth_context",
    "get_token_issuer",
]
