"""AddCommentUseCase: append a comment and notify every member."""

from __future__ import annotations

import logging

from cotitra.application.ports.comment_repo import CommentRepository
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
from cotitra.domain.entities.comment import AddCommentData, Comment, NewComment
from cotitra.domain.errors import FieldValidationError
from cotitra.domain.policies.validation import is_valid_id, validate_comment_content


class AddCommentUseCase:
    """Orchestrates comment creation."""

    def __init__(
        self,
        comment_repo: CommentRepository,
        ticket_repo: TicketRepository,
        user_repo: UserRepository,
        email: EmailTransport,
        templates: EmailTemplateRenderer,
        logger: logging.Logger | None = None,
    ):
        self._comments = comment_repo
        self._tickets = ticket_repo
        self._users = user_repo
        self._email = email
        self._templates = templates
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, data: AddCommentData) -> Comment:
        """Persist a trimmed comment; the notify phase never raises.

        Raises:
            FieldValidationError: ticket id, content or author is invalid.
        """
        new_comment = self._validate(data)

        comment = await self._comments.create(new_comment)
        self._logger.info("Comment %s added to ticket %s", comment.id, comment.ticket_id)

        await notify_safely(
            "comment_added",
            lambda: self._notify_comment(comment),
            self._logger,
            ticket_id=comment.ticket_id,
        )
        return comment

    @staticmethod
    def _validate(data: AddCommentData) -> NewComment:
        # Checked before any repository call to avoid a wasted round trip.
        if not is_valid_id(data.ticket_id):
            raise FieldValidationError("L'ID du ticket est requis", field="ticket_id")

        content = validate_comment_content(data.content)

        author_id = data.author_id.strip() if isinstance(data.author_id, str) else ""
        if not is_valid_id(author_id):
            raise FieldValidationError(
                "L'auteur du commentaire est requis", field="author_id"
            )
        return NewComment(ticket_id=data.ticket_id, content=content, author_id=author_id)

    async def _notify_comment(self, comment: Comment) -> NotificationOutcome:
        ticket = await self._tickets.find_by_id(comment.ticket_id)
        if ticket is None:
            return NotificationOutcome.SKIPPED
        users = await self._users.find_all()
        if not users:
            return NotificationOutcome.SKIPPED
        template = self._templates.comment_added(ticket, comment)
        return await deliver(self._email, recipients_for(users), template)
