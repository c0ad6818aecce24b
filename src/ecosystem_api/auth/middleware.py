"""Session extraction from request headers."""

from __future__ import annotations

from fastapi import Header

from ..config import settings
from ..errors import AuthenticationError
from ..logging import get_logger, user_id_ctx
from .context import AuthContext
from .tokens import SessionTokenIssuer, get_token_issuer

logger = get_logger(__name__)


async def get_auth_context(
    authorization: str | None = Header(None),
    issuer: SessionTokenIssuer | None = None,
) -> AuthContext:
    """
    Build the authentication context from an Authorization header.

    Missing, malformed, expired or tampered tokens yield an anonymous
    context. Privileged operations reject anonymous contexts themselves.

    Args:
        authorization: Authorization header (Bearer token)
        issuer: Token issuer; defaults to the process-wide issuer

    Returns:
        AuthContext, authenticated only when the token verifies
    """
    if not authorization:
        return AuthContext()

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        logger.warning("Invalid authorization format received")
        return AuthContext()

    if issuer is None:
        if not settings.jwt_secret:
            logger.warning(
                "Session token ignored, no signing secret configured",
                env_var="ECOSYSTEM_JWT_SECRET",
            )
            return AuthContext()
        issuer = get_token_issuer()

    token = token.strip()
    try:
        claims = issuer.verify(token)
    except AuthenticationError:
        return AuthContext()

    user_id_ctx.set(claims.user_id)
    return AuthContext(claims=claims, token=token)
