"""Domain errors raised by credential fields."""

from __future__ import annotations


class CredentialFieldError(ValueError):
    """Base error for credential field hashing and verification failures."""

    def __init__(self, message: str, *, field_name: str) -> None:
        super().__init__(f"{message}: field={field_name}")
        self.field_name = field_name


class HashingFailedError(CredentialFieldError):
    """Raised when the hash strategy cannot produce a representation."""

    def __init__(self, *, field_name: str) -> None:
        super().__init__("password hashing failed", field_name=field_name)


class VerificationError(CredentialFieldError):
    """Base error for failed verification attempts."""


class NoHashAvailableError(VerificationError):
    """Raised when verify runs before any password was set or loaded."""

    def __init__(self, *, field_name: str) -> None:
        super().__init__(
            "password was not set, so verification is not possible",
            field_name=field_name,
        )


class StrategyFailedError(VerificationError):
    """Raised when the verify strategy cannot interpret the stored hash."""

    def __init__(self, *, field_name: str) -> None:
        super().__init__("password verification strategy failed", field_name=field_name)
