"""Read-only ticket use cases."""

from __future__ import annotations

from cotitra.application.ports.ticket_repo import TicketRepository
from cotitra.domain.entities.ticket import Ticket


class GetTicketsUseCase:
    def __init__(self, ticket_repo: TicketRepository):
        self._tickets = ticket_repo

    async def execute(self) -> list[Ticket]:
        return await self._tickets.find_all()


class GetTicketByIdUseCase:
    def __init__(self, ticket_repo: TicketRepository):
        self._tickets = ticket_repo

    async def execute(self, ticket_id: str) -> Ticket | None:
        return await self._tickets.find_by_id(ticket_id)
