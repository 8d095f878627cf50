"""Port for password hashing and verification."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

HashStrategy: TypeAlias = Callable[[str], str]
VerifyStrategy: TypeAlias = Callable[[str, str], bool | Awaitable[bool]]


class PasswordHasherPort(Protocol):
    """Password hashing/verification contract."""

    def hash_password(self, password: str) -> str:
        """Hash plaintext password for storage."""

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        """Verify plaintext password against stored hash."""
