"""CommentService: facade grouping the comment use cases for the adapters."""

from __future__ import annotations

import logging

from cotitra.application.ports.comment_repo import CommentRepository
from cotitra.application.ports.email_port import EmailTransport
from cotitra.application.ports.template_port import EmailTemplateRenderer
from cotitra.application.ports.ticket_repo import TicketRepository
from cotitra.application.ports.user_repo import UserRepository
from cotitra.application.use_cases.add_comment import AddCommentUseCase
from cotitra.application.use_cases.get_comments import GetCommentsUseCase
from cotitra.domain.entities.comment import AddCommentData, Comment


class CommentService:
    def __init__(
        self,
        comment_repo: CommentRepository,
        ticket_repo: TicketRepository,
        user_repo: UserRepository,
        email: EmailTransport,
        templates: EmailTemplateRenderer,
        logger: logging.Logger | None = None,
    ):
        self._get_comments = GetCommentsUseCase(comment_repo)
        self._add_comment = AddCommentUseCase(
            comment_repo, ticket_repo, user_repo, email, templates, logger=logger
        )

    async def get_comments_by_ticket_id(self, ticket_id: str) -> list[Comment]:
        return await self._get_comments.execute(ticket_id)

    async def add_comment(self, data: AddCommentData) -> Comment:
        return await self._add_comment.execute(data)
