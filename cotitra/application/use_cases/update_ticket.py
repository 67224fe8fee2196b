"""UpdateTicketUseCase: partial update of an active ticket."""

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
from cotitra.domain.entities.ticket import Ticket, UpdateTicketData
from cotitra.domain.errors import (
    ArchivedStateError,
    FieldValidationError,
    ReferenceValidationError,
)
from cotitra.domain.policies.validation import (
    is_valid_id,
    normalize_assignee,
    validate_description,
    validate_status,
    validate_title,
)
from cotitra.domain.value_objects.patch import FieldPatch


class UpdateTicketUseCase:
    """Orchestrates ticket updates and the resulting notifications."""

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

    async def execute(self, ticket_id: str, changes: UpdateTicketData) -> Ticket | None:
        """Apply *changes* to a ticket.

        Pipeline:
        1. Validate the patch shape (no repository call on failure)
        2. Load the ticket (None when missing)
        3. Refuse any change to an archived ticket
        4. Normalize (trim, Clear for blank assignee) and check the assignee
        5. Conditional write, then notify on status / assignee changes

        Raises:
            FieldValidationError: empty patch or an invalid field.
            ArchivedStateError: the ticket is archived.
            ReferenceValidationError: the assignee is not an existing user.
        """
        self._validate(changes)

        existing = await self._tickets.find_by_id(ticket_id)
        if existing is None:
            return None
        if not existing.is_mutable():
            raise ArchivedStateError(ticket_id)

        normalized = self._normalize(changes)
        await self._check_assignee(normalized.assigned_to)

        updated = await self._tickets.update(ticket_id, normalized)
        if updated is None:
            return None
        self._logger.info(
            "Ticket %s updated (%s)", ticket_id, ", ".join(normalized.changed_fields())
        )

        if normalized.status.is_set and existing.status != updated.status:
            await notify_safely(
                "ticket_status_changed",
                lambda: self._notify_status_changed(existing, updated),
                self._logger,
                ticket_id=ticket_id,
            )

        if (
            normalized.assigned_to.is_set
            and updated.assigned_to
            and updated.assigned_to != existing.assigned_to
        ):
            await notify_safely(
                "ticket_assigned",
                lambda: self._notify_assigned(updated, updated.assigned_to),
                self._logger,
                ticket_id=ticket_id,
            )

        return updated

    @staticmethod
    def _validate(changes: UpdateTicketData) -> None:
        if changes.is_empty():
            raise FieldValidationError(
                "Au moins un champ doit être fourni pour la mise à jour"
            )
        if not changes.title.is_unset:
            validate_title(changes.title.value)
        if not changes.description.is_unset:
            validate_description(changes.description.value)
        if not changes.status.is_unset:
            validate_status(changes.status.value)
        if changes.assigned_to.is_set and not isinstance(changes.assigned_to.value, str):
            raise FieldValidationError("Assignation invalide", field="assigned_to")

    @staticmethod
    def _normalize(changes: UpdateTicketData) -> UpdateTicketData:
        title = changes.title
        if title.is_set:
            title = FieldPatch.set_to(validate_title(title.value))

        description = changes.description
        if description.is_set:
            description = FieldPatch.set_to(validate_description(description.value))

        status = changes.status
        if status.is_set:
            status = FieldPatch.set_to(validate_status(status.value))

        assigned_to = changes.assigned_to
        if assigned_to.is_set:
            assignee = normalize_assignee(assigned_to.value)
            assigned_to = FieldPatch.set_to(assignee) if assignee else FieldPatch.clear()

        return UpdateTicketData(
            title=title, description=description, status=status, assigned_to=assigned_to
        )

    async def _check_assignee(self, assigned_to: FieldPatch[str]) -> None:
        if not assigned_to.is_set:
            return
        if not is_valid_id(assigned_to.value) or await self._users.find_by_id(
            assigned_to.value
        ) is None:
            raise ReferenceValidationError("Utilisateur invalide", field="assigned_to")

    async def _notify_status_changed(self, old: Ticket, new: Ticket) -> NotificationOutcome:
        users = await self._users.find_all()
        if not users:
            return NotificationOutcome.SKIPPED
        template = self._templates.ticket_status_changed(new, old.status, new.status)
        return await deliver(self._email, recipients_for(users), template)

    async def _notify_assigned(self, ticket: Ticket, assignee_id: str) -> NotificationOutcome:
        assignee = await self._users.find_by_id(assignee_id)
        if assignee is None:
            return NotificationOutcome.SKIPPED
        template = self._templates.ticket_assigned(ticket, assignee)
        return await deliver(self._email, recipients_for([assignee]), template)
