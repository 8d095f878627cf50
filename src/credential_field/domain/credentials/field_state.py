"""Lifecycle states of a credential field."""

from __future__ import annotations

from enum import StrEnum


class CredentialFieldState(StrEnum):
    """Conceptual states derived from pending value and cached hash."""

    EMPTY = "EMPTY"
    PENDING_PLAINTEXT = "PENDING_PLAINTEXT"
    HASHED = "HASHED"


def resolve_field_state(
    *,
    pending_value: str | None,
    password_hash: str | None,
) -> CredentialFieldState:
    """Derive field state; a cached hash wins over any pending value."""

    if password_hash is not None:
        return CredentialFieldState.HASHED
    if pending_value is not None:
        return CredentialFieldState.PENDING_PLAINTEXT
    return CredentialFieldState.EMPTY
