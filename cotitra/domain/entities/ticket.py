"""Ticket entity: a maintenance request on the shared property."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Mapping

from cotitra.domain.value_objects.enums import TicketStatus
from cotitra.domain.value_objects.patch import FieldPatch


@dataclass
class Ticket:
    id: str
    title: str
    description: str
    status: TicketStatus = TicketStatus.NEW
    created_by: str | None = None
    assigned_to: str | None = None
    archived: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_mutable(self) -> bool:
        return not self.archived


@dataclass
class CreateTicketData:
    """Raw caller input for CreateTicket.

    ``status`` is accepted so adapters can pass the request through untouched;
    the use case always creates tickets as NEW.
    """

    title: str | None
    description: str | None
    created_by: str | None
    status: str | None = None


@dataclass(frozen=True)
class NewTicket:
    """Validated, trimmed ticket handed to the repository."""

    title: str
    description: str
    created_by: str
    status: TicketStatus = TicketStatus.NEW


@dataclass(frozen=True)
class UpdateTicketData:
    title: FieldPatch[str] = field(default_factory=FieldPatch.unset)
    description: FieldPatch[str] = field(default_factory=FieldPatch.unset)
    status: FieldPatch[Any] = field(default_factory=FieldPatch.unset)
    assigned_to: FieldPatch[str] = field(default_factory=FieldPatch.unset)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> UpdateTicketData:
        return cls(**{f.name: FieldPatch.from_raw(data, f.name) for f in fields(cls)})

    def changed_fields(self) -> list[str]:
        return [f.name for f in fields(self) if not getattr(self, f.name).is_unset]

    def is_empty(self) -> bool:
        return not self.changed_fields()

    def as_values(self) -> dict[str, Any]:
        """Column → value mapping for the supplied fields (Clear → None)."""
        return {name: getattr(self, name).resolved() for name in self.changed_fields()}
