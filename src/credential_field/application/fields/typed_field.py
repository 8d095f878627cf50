"""Generic typed field with normalize and typecast hooks."""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any, ClassVar, Self, TypeAlias

from credential_field.domain.credentials.destination import DestinationKind

SaveHook: TypeAlias = Callable[[str | None], str | None]
LoadHook: TypeAlias = Callable[[str, DestinationKind], str | None]


class TypedField:
    """Raw value holder for one record attribute.

    ``set`` writes through ``normalize``. ``save`` and ``load`` are the commit
    and load paths of the owning record and run the typecast hook pair.
    """

    field_type: ClassVar[str] = "string"

    def __init__(self, name: str) -> None:
        self.name = name
        self._value: str | None = None
        self.typecast: tuple[SaveHook, LoadHook] | None = None
        self.init()

    def init(self) -> None:
        """Subclass hook run at the end of construction and after cloning."""

    def normalize(self, value: str | None) -> str | None:
        return value

    def set(self, value: str | None) -> None:
        self._value = self.normalize(value)

    def get(self) -> str | None:
        return self._value

    def typecast_save(self, value: str | None) -> str | None:
        if self.typecast is None:
            return value
        return self.typecast[0](value)

    def typecast_load(self, stored: str | None, destination: DestinationKind) -> str | None:
        if stored is None:
            return None
        if self.typecast is None:
            return stored
        return self.typecast[1](stored, destination)

    def save(self) -> str | None:
        """Return the value to persist for the current raw value."""

        return self.typecast_save(self.get())

    def load(self, stored: str | None, *, destination: DestinationKind) -> None:
        """Populate the raw value from storage without running ``normalize``."""

        self._value = self.typecast_load(stored, destination)

    def _post_clone(self) -> None:
        self.init()

    def __copy__(self) -> Self:
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._post_clone()
        return clone

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        clone = self.__class__.__new__(self.__class__)
        memo[id(self)] = clone
        clone.__dict__.update(copy.deepcopy(self.__dict__, memo))
        clone._post_clone()
        return clone

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, type={self.field_type!r})"
