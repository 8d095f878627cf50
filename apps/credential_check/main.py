"""credential-check entrypoint: verify a stdin password against a stored hash file."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from credential_field.application.fields.password_field import PasswordField
from credential_field.config.settings import load_settings
from credential_field.domain.credentials.destination import DestinationKind
from credential_field.domain.credentials.errors import VerificationError
from credential_field.infrastructure.logging import configure_logging

logger = logging.getLogger(__name__)

EXIT_MATCH = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2


def check_credential(*, hash_file: Path, candidate: str) -> bool:
    """Load one stored hash as a storage read and verify the candidate."""

    field = PasswordField("password")
    stored_hash = hash_file.read_text(encoding="utf-8").strip()
    field.load(stored_hash, destination=DestinationKind.STORAGE)
    return field.verify(candidate)


def main(argv: Sequence[str] | None = None, *, stdin: TextIO | None = None) -> int:
    """Run credential check and return process exit code."""

    configure_logging(level=load_settings().log_level)
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        logger.error("credential_check_usage expected=1 got=%s", len(args))
        return EXIT_ERROR

    hash_file = Path(args[0])
    candidate = (stdin or sys.stdin).readline().rstrip("\r\n")
    try:
        matched = check_credential(hash_file=hash_file, candidate=candidate)
    except (OSError, VerificationError) as error:
        logger.error("credential_check_failed path=%s error=%s", hash_file, error)
        return EXIT_ERROR

    logger.info("credential_check_completed path=%s matched=%s", hash_file, matched)
    return EXIT_MATCH if matched else EXIT_MISMATCH


if __name__ == "__main__":
    sys.exit(main())
