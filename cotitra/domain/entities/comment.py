"""Comment entity: an append-only remark attached to a ticket."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from cotitra.domain.entities.user import UserPublic


@dataclass
class Comment:
    id: str
    ticket_id: str
    content: str
    author: UserPublic
    created_at: datetime | None = None


@dataclass
class AddCommentData:
    """Raw caller input for AddComment; validated by the use case."""

    ticket_id: str | None
    content: str | None
    author_id: str | None


@dataclass(frozen=True)
class NewComment:
    """Validated, trimmed comment handed to the repository."""

    ticket_id: str
    content: str
    author_id: str
