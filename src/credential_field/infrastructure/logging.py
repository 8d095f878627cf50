"""Process logging setup for the credential entrypoints."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(level: str) -> int:
    """Map a LOG_LEVEL setting to a logging level, falling back to INFO."""

    resolved = logging.getLevelName(level.strip().upper() or "INFO")
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(*, level: str) -> int:
    """Install the shared log format and return the level that was applied."""

    resolved_level = resolve_log_level(level)
    logging.basicConfig(level=resolved_level, format=_LOG_FORMAT)
    return resolved_level
