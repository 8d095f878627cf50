from __future__ import annotations

from collections.abc import Iterator

import pytest

from credential_field.config.settings import load_settings
from credential_field.infrastructure.security.default_strategy import default_password_hasher


@pytest.fixture(autouse=True)
def _fast_default_hasher(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.delenv("PASSWORD_HASH_ALGORITHM", raising=False)
    load_settings.cache_clear()
    default_password_hasher.cache_clear()
    yield
    load_settings.cache_clear()
    default_password_hasher.cache_clear()
