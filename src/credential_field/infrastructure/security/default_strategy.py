"""Pinned default password hashing algorithm and hasher factory."""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache
from typing import Final

from credential_field.application.ports.password_hasher_port import PasswordHasherPort
from credential_field.config.settings import load_settings
from credential_field.infrastructure.security.password_hasher import BcryptPasswordHasher

PASSWORD_DEFAULT: Final = "bcrypt"


class UnsupportedHashAlgorithmError(ValueError):
    """Raised when no hasher is registered for the requested algorithm."""

    def __init__(self, *, algorithm: str) -> None:
        super().__init__(f"unsupported password hash algorithm: {algorithm}")
        self.algorithm = algorithm


_HASHER_FACTORIES: Final[dict[str, Callable[[int], PasswordHasherPort]]] = {
    "bcrypt": lambda rounds: BcryptPasswordHasher(rounds=rounds),
}


def build_password_hasher(*, algorithm: str, rounds: int) -> PasswordHasherPort:
    """Build the hasher registered for one algorithm name."""

    factory = _HASHER_FACTORIES.get(algorithm)
    if factory is None:
        raise UnsupportedHashAlgorithmError(algorithm=algorithm)
    return factory(rounds)


@lru_cache(maxsize=1)
def default_password_hasher() -> PasswordHasherPort:
    """Return the process-wide default hasher configured from settings."""

    settings = load_settings()
    return build_password_hasher(
        algorithm=settings.password_hash_algorithm,
        rounds=settings.bcrypt_rounds,
    )
