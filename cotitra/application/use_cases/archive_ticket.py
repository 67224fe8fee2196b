"""ArchiveTicketUseCase: one-way move of a ticket to the archived state."""

from __future__ import annotations

import logging

from cotitra.application.ports.ticket_repo import TicketRepository
from cotitra.domain.entities.ticket import Ticket

logger = logging.getLogger(__name__)


class ArchiveTicketUseCase:
    """Archiving is a quiet administrative action: no notification is sent."""

    def __init__(self, ticket_repo: TicketRepository):
        self._tickets = ticket_repo

    async def execute(self, ticket_id: str) -> Ticket | None:
        """Archive a ticket; re-archiving returns the already archived ticket."""
        ticket = await self._tickets.archive(ticket_id)
        if ticket is not None:
            logger.info("Ticket %s archived", ticket_id)
        return ticket
