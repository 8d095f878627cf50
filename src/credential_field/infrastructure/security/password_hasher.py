"""Bcrypt password hasher adapter."""

from __future__ import annotations

import bcrypt

from credential_field.application.ports.password_hasher_port import PasswordHasherPort

DEFAULT_BCRYPT_ROUNDS = 12
BCRYPT_MAX_PASSWORD_BYTES = 72


def encode_secret(password: str) -> bytes:
    """Return the bytes bcrypt sees for one password.

    bcrypt only reads the first 72 bytes; newer releases raise instead of
    truncating, so the cut happens here on both the hash and verify paths.
    Lone surrogates are kept as-is instead of failing the encode.
    """

    return password.encode("utf-8", "surrogatepass")[:BCRYPT_MAX_PASSWORD_BYTES]


class BcryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using bcrypt.

    Hashes are self-describing (``$2b$<cost>$<salt><digest>``), so hashes
    produced under an older cost keep verifying after ``rounds`` changes.
    """

    def __init__(self, *, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash_password(self, password: str) -> str:
        hashed = bcrypt.hashpw(encode_secret(password), bcrypt.gensalt(rounds=self._rounds))
        return hashed.decode("utf-8")

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        # Malformed hashes raise ValueError; callers decide how to surface it.
        return bcrypt.checkpw(encode_secret(password), password_hash.encode("utf-8"))
