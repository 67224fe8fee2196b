"""Request/response models for the HTTP API (camelCase on the wire)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from cotitra.domain.value_objects.enums import TicketStatus


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class _RequestModel(_ApiModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


# ─── Requests ────────────────────────────────────────────────────────


class TicketCreateRequest(_RequestModel):
    title: str | None = None
    description: str | None = None
    # Accepted for compatibility, ignored: new tickets are always NEW.
    status: str | None = None


class TicketUpdateRequest(_RequestModel):
    """Only the fields present in the body are applied; null clears a field."""

    title: str | None = None
    description: str | None = None
    status: str | None = None
    assigned_to: str | None = None


class CommentCreateRequest(_RequestModel):
    content: str | None = None


class LoginRequest(_RequestModel):
    email: str
    password: str


# ─── Responses ───────────────────────────────────────────────────────


class UserPublicResponse(_ApiModel):
    id: str
    first_name: str
    last_name: str


class TicketResponse(_ApiModel):
    id: str
    title: str
    description: str
    status: TicketStatus
    created_by: str | None = None
    assigned_to: str | None = None
    archived: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CommentResponse(_ApiModel):
    id: str
    ticket_id: str
    content: str
    author: UserPublicResponse
    created_at: datetime | None = None


class ErrorResponse(BaseModel):
    error: str
    code: str | None = None
    field: str | None = None
