"""Password field that hashes on write and verifies on demand."""

from __future__ import annotations

import asyncio
import hmac
import inspect
import logging

from credential_field.application.fields.typed_field import TypedField
from credential_field.application.ports.password_hasher_port import (
    HashStrategy,
    VerifyStrategy,
)
from credential_field.domain.credentials.destination import DestinationKind
from credential_field.domain.credentials.errors import (
    HashingFailedError,
    NoHashAvailableError,
    StrategyFailedError,
)
from credential_field.domain.credentials.field_state import (
    CredentialFieldState,
    resolve_field_state,
)
from credential_field.domain.credentials.password_suggester import suggest_password
from credential_field.infrastructure.security.default_strategy import default_password_hasher

logger = logging.getLogger(__name__)


def _default_hash(password: str) -> str:
    return default_password_hasher().hash_password(password)


def _default_verify(password: str, password_hash: str) -> bool:
    return default_password_hasher().verify_password(
        password=password,
        password_hash=password_hash,
    )


class PasswordField(TypedField):
    """Credential attribute that never exposes the stored hash to storage reads.

    The hash of the last committed or loaded password is kept on the instance
    so ``verify`` can run right after a save or a load. ``hash_method`` and
    ``verify_method`` replace the default bcrypt strategies independently.

    Cloning (``copy.copy``/``copy.deepcopy``) rebinds the typecast hooks to
    the clone and resets both strategies to the defaults. Re-inject custom
    strategies on the clone when they are still wanted.

    An asynchronous ``verify_method`` only works through ``averify``; sync
    ``verify`` reports it as ``StrategyFailedError``.
    """

    field_type = "password"

    def __init__(
        self,
        name: str,
        *,
        hash_method: HashStrategy | None = None,
        verify_method: VerifyStrategy | None = None,
    ) -> None:
        self.hash_method = hash_method
        self.verify_method = verify_method
        self._password_hash: str | None = None
        self._value_loaded = False
        super().__init__(name)

    def init(self) -> None:
        self._set_default_typecast_methods()

    def _set_default_typecast_methods(self) -> None:
        self.typecast = (self.encode, self.decode)

    def _post_clone(self) -> None:
        self.hash_method = None
        self.verify_method = None
        super()._post_clone()

    @property
    def state(self) -> CredentialFieldState:
        return resolve_field_state(pending_value=self.get(), password_hash=self._password_hash)

    @property
    def has_hash(self) -> bool:
        return self._password_hash is not None

    def normalize(self, value: str | None) -> str | None:
        """Drop the cached hash on every write, even when the value is unchanged."""

        self._password_hash = None
        self._value_loaded = False
        return super().normalize(value)

    def load(self, stored: str | None, *, destination: DestinationKind) -> None:
        super().load(stored, destination=destination)
        self._value_loaded = True

    def save(self) -> str | None:
        """Return the hash to persist, or nothing when no new password was set."""

        # A loaded raw value is the stored hash (or nothing), never plaintext.
        if self._value_loaded:
            return self.typecast_save(None)
        return super().save()

    def encode(self, password: str | None) -> str | None:
        """Hash the pending plaintext on commit and cache the result.

        Invoked by ``save``; do not call it directly. ``None`` keeps any
        existing hash and persists nothing.
        """

        if password is None:
            return None

        hash_strategy = self.hash_method or _default_hash
        try:
            password_hash = hash_strategy(password)
        except Exception as error:
            logger.warning(
                "password_field_hash_failed field=%s error_type=%s",
                self.name,
                type(error).__name__,
            )
            raise HashingFailedError(field_name=self.name) from error

        self._password_hash = password_hash
        logger.debug("password_field_hash_computed field=%s", self.name)
        return password_hash

    def decode(self, stored_hash: str, destination: DestinationKind) -> str | None:
        """Cache a loaded hash and expose it only to rendering destinations.

        Invoked by ``load``; do not call it directly.
        """

        self._password_hash = stored_hash
        logger.debug(
            "password_field_hash_loaded field=%s destination=%s",
            self.name,
            destination.value,
        )
        if destination.is_rendering:
            return stored_hash
        return None

    def verify(self, candidate: str) -> bool:
        """Return whether ``candidate`` matches the stored or pending password."""

        password_hash = self._password_hash
        if password_hash is None:
            return self._compare_pending(candidate)

        verify_strategy = self.verify_method or _default_verify
        try:
            verified = verify_strategy(candidate, password_hash)
        except Exception as error:
            raise self._strategy_failed(error) from error

        if inspect.isawaitable(verified):
            if inspect.iscoroutine(verified):
                verified.close()
            error = TypeError("verify_method is asynchronous; use averify instead")
            raise self._strategy_failed(error) from error
        return bool(verified)

    async def averify(self, candidate: str) -> bool:
        """Async variant of ``verify`` that keeps the event loop free.

        Synchronous strategies run in a worker thread. Any awaitable a strategy
        returns is awaited on the loop. The hash is read before the first
        suspension point.
        """

        password_hash = self._password_hash
        if password_hash is None:
            return self._compare_pending(candidate)

        verify_strategy = self.verify_method or _default_verify
        try:
            if inspect.iscoroutinefunction(verify_strategy):
                verified = verify_strategy(candidate, password_hash)
            else:
                verified = await asyncio.to_thread(verify_strategy, candidate, password_hash)
            if inspect.isawaitable(verified):
                verified = await verified
        except Exception as error:
            raise self._strategy_failed(error) from error
        return bool(verified)

    def suggest_password(self, length: int = 4, words: int = 1) -> str:
        """Return an easy to memorize random password suggestion."""

        return suggest_password(length=length, words=words)

    def _compare_pending(self, candidate: str) -> bool:
        # Password set but not committed yet: compare against the raw value.
        pending = self.get()
        if pending is None:
            raise NoHashAvailableError(field_name=self.name)
        return hmac.compare_digest(
            pending.encode("utf-8", "surrogatepass"),
            candidate.encode("utf-8", "surrogatepass"),
        )

    def _strategy_failed(self, error: Exception) -> StrategyFailedError:
        logger.warning(
            "password_field_verify_failed field=%s error_type=%s",
            self.name,
            type(error).__name__,
        )
        return StrategyFailedError(field_name=self.name)
