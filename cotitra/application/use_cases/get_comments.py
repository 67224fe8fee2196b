"""GetCommentsUseCase: comments of one ticket, oldest first."""

from __future__ import annotations

from cotitra.application.ports.comment_repo import CommentRepository
from cotitra.domain.entities.comment import Comment


class GetCommentsUseCase:
    def __init__(self, comment_repo: CommentRepository):
        self._comments = comment_repo

    async def execute(self, ticket_id: str) -> list[Comment]:
        return await self._comments.find_by_ticket_id(ticket_id)
