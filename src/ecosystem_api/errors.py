"""
Error taxonomy shared by the resolution engine, auth gate and record stores.

Every error carries a kind from a closed enumeration so callers can branch on
``error.kind`` instead of message text. GraphQL responses expose the kind as
``extensions.code``.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    """Closed set of failure categories."""

    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    STORE = "store"


class EcosystemError(Exception):
    """Base class for all errors raised by the API core."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict[str, str]:
        return {"code": self.kind.name}


class ValidationError(EcosystemError):
    """Request input rejected before reaching the store."""

    kind = ErrorKind.VALIDATION


class TooManyFiltersError(ValidationError):
    """More filter predicates were supplied than the query accepts."""


class EmptyFilterError(ValidationError):
    """A filter was supplied without any predicate."""


class EmptyBatchError(ValidationError):
    """A batch add was requested with no records."""


class AuthenticationError(EcosystemError):
    """Credentials, session or capability check failed."""

    kind = ErrorKind.AUTHENTICATION


class WrongPasswordError(AuthenticationError):
    """Plaintext password does not match the stored hash."""


class NotFoundError(EcosystemError):
    """A lookup returned no matching record."""

    kind = ErrorKind.NOT_FOUND


class NoSuchUserError(NotFoundError):
    """No user record exists for the given username."""


class StoreError(EcosystemError):
    """The backing record store failed."""

    kind = ErrorKind.STORE
