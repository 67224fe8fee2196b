"""In-memory fakes of the application ports."""

from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timezone

import pytest

from cotitra.application.ports.comment_repo import CommentRepository
from cotitra.application.ports.email_port import EmailMessage, EmailTransport
from cotitra.application.ports.template_port import EmailTemplate, EmailTemplateRenderer
from cotitra.application.ports.ticket_repo import TicketRepository
from cotitra.application.ports.user_repo import UserRepository
from cotitra.domain.entities.comment import Comment
from cotitra.domain.entities.ticket import Ticket
from cotitra.domain.entities.user import UserPublic
from cotitra.domain.errors import ArchivedStateError, EmailServiceError

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeUserRepo(UserRepository):
    def __init__(self, users=()):
        self.users = {u.id: u for u in users}
        # Members resolvable by id but absent from the listing.
        self.hide_from_listing = False

    async def find_all(self):
        if self.hide_from_listing:
            return []
        return list(self.users.values())

    async def find_by_id(self, user_id):
        return self.users.get(user_id)

    async def find_by_email(self, email):
        return next((u for u in self.users.values() if u.email.lower() == email), None)


class FakeTicketRepo(TicketRepository):
    def __init__(self):
        self.tickets: dict[str, Ticket] = {}
        self.calls: list[str] = []
        self.find_error: Exception | None = None
        # Simulates a concurrent archive between the read and the write.
        self.archive_before_update = False

    def add(self, **kwargs) -> Ticket:
        now = datetime.now(timezone.utc)
        ticket = Ticket(id=str(uuid.uuid4()), created_at=now, updated_at=now, **kwargs)
        self.tickets[ticket.id] = ticket
        return ticket

    async def find_all(self):
        self.calls.append("find_all")
        return list(self.tickets.values())

    async def find_by_id(self, ticket_id):
        self.calls.append("find_by_id")
        if self.find_error is not None:
            raise self.find_error
        ticket = self.tickets.get(ticket_id)
        return replace(ticket) if ticket else None

    async def create(self, data):
        self.calls.append("create")
        return replace(
            self.add(
                title=data.title,
                description=data.description,
                status=data.status,
                created_by=data.created_by,
            )
        )

    async def update(self, ticket_id, changes):
        self.calls.append("update")
        ticket = self.tickets.get(ticket_id)
        if ticket is None:
            return None
        if self.archive_before_update:
            ticket.archived = True
        if ticket.archived:
            raise ArchivedStateError(ticket_id)
        for name, value in changes.as_values().items():
            setattr(ticket, name, value)
        ticket.updated_at = datetime.now(timezone.utc)
        return replace(ticket)

    async def archive(self, ticket_id):
        self.calls.append("archive")
        ticket = self.tickets.get(ticket_id)
        if ticket is None:
            return None
        ticket.archived = True
        return replace(ticket)


class FakeCommentRepo(CommentRepository):
    def __init__(self, user_repo: FakeUserRepo):
        self._users = user_repo
        self.comments: list[Comment] = []

    async def find_by_ticket_id(self, ticket_id):
        return [c for c in self.comments if c.ticket_id == ticket_id]

    async def create(self, data):
        author = self._users.users.get(data.author_id)
        comment = Comment(
            id=str(uuid.uuid4()),
            ticket_id=data.ticket_id,
            content=data.content,
            author=author.to_public() if author else UserPublic(data.author_id, "", ""),
            created_at=datetime.now(timezone.utc),
        )
        self.comments.append(comment)
        return comment


class FakeEmail(EmailTransport):
    def __init__(self):
        self.sent: list[EmailMessage] = []
        self.fail = False

    async def send(self, message):
        if self.fail:
            raise EmailServiceError("smtp down")
        self.sent.append(message)


class FakeTemplates(EmailTemplateRenderer):
    def __init__(self):
        self.rendered: list[tuple] = []
        self.error: Exception | None = None

    def _render(self, kind, *args):
        if self.error is not None:
            raise self.error
        self.rendered.append((kind, *args))
        return EmailTemplate(subject=kind, html_body=f"<p>{kind}</p>", text_body=kind)

    def ticket_created(self, ticket):
        return self._render("ticket_created", ticket)

    def ticket_assigned(self, ticket, assignee):
        return self._render("ticket_assigned", ticket, assignee)

    def ticket_status_changed(self, ticket, old_status, new_status):
        return self._render("ticket_status_changed", ticket, old_status, new_status)

    def comment_added(self, ticket, comment):
        return self._render("comment_added", ticket, comment)


# ─── Fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def user_repo(alice, bob):
    return FakeUserRepo([alice, bob])


@pytest.fixture
def ticket_repo():
    return FakeTicketRepo()


@pytest.fixture
def comment_repo(user_repo):
    return FakeCommentRepo(user_repo)


@pytest.fixture
def email():
    return FakeEmail()


@pytest.fixture
def templates():
    return FakeTemplates()


@pytest.fixture
def ticket(ticket_repo, alice):
    return ticket_repo.add(title="Fuite", description="Robinet du garage", created_by=alice.id)
