"""Port interface for comment persistence."""

from abc import ABC, abstractmethod

from cotitra.domain.entities.comment import Comment, NewComment


class CommentRepository(ABC):
    @abstractmethod
    async def find_by_ticket_id(self, ticket_id: str) -> list[Comment]:
        """Comments of a ticket, oldest first."""
        ...

    @abstractmethod
    async def create(self, data: NewComment) -> Comment:
        """Persist and commit a comment."""
        ...
