"""Pronounceable password suggestions built from kana-like syllables.

Four syllables give 116,985,856 combinations. Use ``words`` to join several
groups with spaces when a longer suggestion is needed.
"""

from __future__ import annotations

import secrets
from typing import Final

_FIVE_VOWEL_ONSETS: Final = ("", "k", "s", "t", "n", "h", "m", "r", "w", "g", "z", "d", "b", "p")
_THREE_VOWEL_ONSETS: Final = ("y", "ky", "sh", "ch", "ny", "my", "ry", "gy", "j", "py", "by")
_FIVE_VOWELS: Final = ("a", "i", "u", "e", "o")
_THREE_VOWELS: Final = ("a", "u", "o")


def _build_syllables() -> tuple[str, ...]:
    syllables = ["n"]
    syllables.extend(onset + vowel for onset in _FIVE_VOWEL_ONSETS for vowel in _FIVE_VOWELS)
    syllables.extend(onset + vowel for onset in _THREE_VOWEL_ONSETS for vowel in _THREE_VOWELS)
    return tuple(syllables)


SYLLABLES: Final[tuple[str, ...]] = _build_syllables()


def suggest_password(*, length: int = 4, words: int = 1) -> str:
    """Return ``words`` space-separated groups of ``length`` random syllables."""

    if length < 1:
        raise ValueError("length must be at least 1")
    if words < 1:
        raise ValueError("words must be at least 1")
    return " ".join(
        "".join(secrets.choice(SYLLABLES) for _ in range(length)) for _ in range(words)
    )
