"""Port interface for notification email rendering."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cotitra.domain.entities.comment import Comment
from cotitra.domain.entities.ticket import Ticket
from cotitra.domain.entities.user import User
from cotitra.domain.value_objects.enums import TicketStatus


@dataclass(frozen=True)
class EmailTemplate:
    subject: str
    html_body: str
    text_body: str


class EmailTemplateRenderer(ABC):
    """Pure renderers; user-controlled text in HTML output must be escaped."""

    @abstractmethod
    def ticket_created(self, ticket: Ticket) -> EmailTemplate:
        ...

    @abstractmethod
    def ticket_assigned(self, ticket: Ticket, assignee: User) -> EmailTemplate:
        ...

    @abstractmethod
    def ticket_status_changed(
        self, ticket: Ticket, old_status: TicketStatus, new_status: TicketStatus
    ) -> EmailTemplate:
        ...

    @abstractmethod
    def comment_added(self, ticket: Ticket, comment: Comment) -> EmailTemplate:
        ...
