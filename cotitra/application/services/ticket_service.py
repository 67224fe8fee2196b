"""TicketService: facade grouping the ticket use cases for the adapters."""

from __future__ import annotations

import logging

from cotitra.application.ports.email_port import EmailTransport
from cotitra.application.ports.template_port import EmailTemplateRenderer
from cotitra.application.ports.ticket_repo import TicketRepository
from cotitra.application.ports.user_repo import UserRepository
from cotitra.application.use_cases.archive_ticket import ArchiveTicketUseCase
from cotitra.application.use_cases.create_ticket import CreateTicketUseCase
from cotitra.application.use_cases.get_tickets import GetTicketByIdUseCase, GetTicketsUseCase
from cotitra.application.use_cases.update_ticket import UpdateTicketUseCase
from cotitra.domain.entities.ticket import CreateTicketData, Ticket, UpdateTicketData


class TicketService:
    def __init__(
        self,
        ticket_repo: TicketRepository,
        user_repo: UserRepository,
        email: EmailTransport,
        templates: EmailTemplateRenderer,
        logger: logging.Logger | None = None,
    ):
        self._get_tickets = GetTicketsUseCase(ticket_repo)
        self._get_ticket_by_id = GetTicketByIdUseCase(ticket_repo)
        self._create_ticket = CreateTicketUseCase(
            ticket_repo, user_repo, email, templates, logger=logger
        )
        self._update_ticket = UpdateTicketUseCase(
            ticket_repo, user_repo, email, templates, logger=logger
        )
        self._archive_ticket = ArchiveTicketUseCase(ticket_repo)

    async def get_all_tickets(self) -> list[Ticket]:
        return await self._get_tickets.execute()

    async def get_ticket_by_id(self, ticket_id: str) -> Ticket | None:
        return await self._get_ticket_by_id.execute(ticket_id)

    async def create_ticket(self, data: CreateTicketData) -> Ticket:
        return await self._create_ticket.execute(data)

    async def update_ticket(self, ticket_id: str, changes: UpdateTicketData) -> Ticket | None:
        return await self._update_ticket.execute(ticket_id, changes)

    async def archive_ticket(self, ticket_id: str) -> Ticket | None:
        return await self._archive_ticket.execute(ticket_id)
