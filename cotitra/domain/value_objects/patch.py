"""FieldPatch: tri-state value for partial updates.

A field in a partial update is either not supplied (Unset), explicitly
cleared (Clear) or set to a concrete value (SetTo). Adapters build patches
from raw mappings with ``FieldPatch.from_raw``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Mapping, TypeVar

T = TypeVar("T")


class PatchKind(str, Enum):
    UNSET = "unset"
    CLEAR = "clear"
    SET = "set"


@dataclass(frozen=True)
class FieldPatch(Generic[T]):
    kind: PatchKind = PatchKind.UNSET
    value: T | None = None

    @classmethod
    def unset(cls) -> FieldPatch[T]:
        return cls(PatchKind.UNSET)

    @classmethod
    def clear(cls) -> FieldPatch[T]:
        return cls(PatchKind.CLEAR)

    @classmethod
    def set_to(cls, value: T) -> FieldPatch[T]:
        return cls(PatchKind.SET, value)

    @classmethod
    def from_raw(cls, data: Mapping[str, Any], key: str) -> FieldPatch[Any]:
        """Absent key → Unset, explicit None → Clear, anything else → SetTo."""
        if key not in data:
            return cls.unset()
        if data[key] is None:
            return cls.clear()
        return cls.set_to(data[key])

    @property
    def is_unset(self) -> bool:
        return self.kind == PatchKind.UNSET

    @property
    def is_clear(self) -> bool:
        return self.kind == PatchKind.CLEAR

    @property
    def is_set(self) -> bool:
        return self.kind == PatchKind.SET

    def resolved(self) -> T | None:
        """Value to persist: the set value, or None for Clear."""
        if self.is_unset:
            raise ValueError("An unset patch has no value to persist")
        return self.value if self.is_set else None
