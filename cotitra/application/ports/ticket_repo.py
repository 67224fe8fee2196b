"""Port interface for ticket persistence."""

from abc import ABC, abstractmethod

from cotitra.domain.entities.ticket import NewTicket, Ticket, UpdateTicketData


class TicketRepository(ABC):
    @abstractmethod
    async def find_all(self) -> list[Ticket]:
        ...

    @abstractmethod
    async def find_by_id(self, ticket_id: str) -> Ticket | None:
        ...

    @abstractmethod
    async def create(self, data: NewTicket) -> Ticket:
        """Persist and commit a new ticket; id and timestamps are assigned here."""
        ...

    @abstractmethod
    async def update(self, ticket_id: str, changes: UpdateTicketData) -> Ticket | None:
        """Apply and commit *changes* atomically, only while the ticket is not archived.

        Returns None when the ticket does not exist.

        Raises:
            ArchivedStateError: the ticket exists but is archived at write time.
        """
        ...

    @abstractmethod
    async def archive(self, ticket_id: str) -> Ticket | None:
        """Set and commit ``archived = True`` unconditionally; None when the ticket is missing."""
        ...
