"""Salted adaptive password hashing (bcrypt)."""

from __future__ import annotations

import asyncio

import bcrypt

from ..config import settings


async def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash a password with a fresh random salt."""
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    hashed = await asyncio.to_thread(bcrypt.hashpw, password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


async def verify_password(password: str, hashed: str | None) -> bool:
    """Check a plaintext password against a stored hash."""
    if not hashed:
        return False
    try:
        return await asyncio.to_thread(
            bcrypt.checkpw, password.encode("utf-8"), hashed.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
