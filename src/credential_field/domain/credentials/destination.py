"""Destination kinds for values read back out of a typed field."""

from __future__ import annotations

from enum import StrEnum


class DestinationKind(StrEnum):
    """Closed set of consumers a loaded field value can flow to."""

    RENDERING = "rendering"
    STORAGE = "storage"

    @property
    def is_rendering(self) -> bool:
        """Return whether the destination is meant for human display."""

        return self is DestinationKind.RENDERING
