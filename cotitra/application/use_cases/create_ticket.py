"""CreateTicketUseCase: validate, persist as NEW, notify every member."""

from __future__ import annotations

import logging

from cotitra.application.ports.email_port import EmailTransport
from cotitra.application.ports.template_port import EmailTemplateRenderer
from cotitra.application.ports.ticket_repo import TicketRepository
from cotitra.application.ports.user_repo import UserRepository
from cotitra.application.use_cases.notifications import (
    NotificationOutcome,
    deliver,
    notify_safely,
    recipients_for,
)
from cotitra.domain.entities.ticket import CreateTicketData, NewTicket, Ticket
from cotitra.domain.errors import ReferenceValidationError
from cotitra.domain.policies.validation import (
    is_valid_id,
    validate_description,
    validate_title,
)
from cotitra.domain.value_objects.enums import TicketStatus


class CreateTicketUseCase:
    """Orchestrates ticket creation."""

    def __init__(
        self,
        ticket_repo: TicketRepository,
        user_repo: UserRepository,
        email: EmailTransport,
        templates: EmailTemplateRenderer,
        logger: logging.Logger | None = None,
    ):
        self._tickets = ticket_repo
        self._users = user_repo
        self._email = email
        self._templates = templates
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, data: CreateTicketData) -> Ticket:
        """Create a ticket and notify all members.

        Any ``status`` supplied by the caller is ignored: new tickets are
        always NEW.

        Raises:
            FieldValidationError: title or description is invalid.
            ReferenceValidationError: ``created_by`` is not an existing user.
        """
        title = validate_title(data.title)
        description = validate_description(data.description)
        creator_id = await self._resolve_creator(data.created_by)

        ticket = await self._tickets.create(
            NewTicket(
                title=title,
                description=description,
                created_by=creator_id,
                status=TicketStatus.NEW,
            )
        )
        self._logger.info("Ticket %s created by %s", ticket.id, creator_id)

        await notify_safely(
            "ticket_created",
            lambda: self._notify_created(ticket),
            self._logger,
            ticket_id=ticket.id,
        )
        return ticket

    async def _resolve_creator(self, created_by: str | None) -> str:
        if not is_valid_id(created_by):
            raise ReferenceValidationError("Utilisateur invalide", field="created_by")
        user = await self._users.find_by_id(created_by)
        if user is None:
            raise ReferenceValidationError("Utilisateur invalide", field="created_by")
        return user.id

    async def _notify_created(self, ticket: Ticket) -> NotificationOutcome:
        users = await self._users.find_all()
        if not users:
            return NotificationOutcome.SKIPPED
        template = self._templates.ticket_created(ticket)
        return await deliver(self._email, recipients_for(users), template)
