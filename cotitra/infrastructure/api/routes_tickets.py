"""Ticket endpoints: list, detail, create, update, archive."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from cotitra.application.services.ticket_service import TicketService
from cotitra.domain.entities.ticket import CreateTicketData, UpdateTicketData
from cotitra.infrastructure.api.dependencies import get_current_user_id, get_ticket_service
from cotitra.infrastructure.api.schemas import (
    TicketCreateRequest,
    TicketResponse,
    TicketUpdateRequest,
)

router = APIRouter(prefix="/tickets", tags=["tickets"])


@router.get("", response_model=list[TicketResponse])
async def list_tickets(service: TicketService = Depends(get_ticket_service)):
    """List all tickets, newest first (archived included)."""
    return await service.get_all_tickets()


@router.post("", response_model=TicketResponse, status_code=201)
async def create_ticket(
    body: TicketCreateRequest,
    user_id: str | None = Depends(get_current_user_id),
    service: TicketService = Depends(get_ticket_service),
):
    """Create a ticket on behalf of the acting member."""
    return await service.create_ticket(
        CreateTicketData(
            title=body.title,
            description=body.description,
            created_by=user_id,
            status=body.status,
        )
    )


@router.get("/{ticket_id}", response_model=TicketResponse)
async def get_ticket(ticket_id: str, service: TicketService = Depends(get_ticket_service)):
    ticket = await service.get_ticket_by_id(ticket_id)
    if ticket is None:
        raise HTTPException(status_code=404, detail="Ticket non trouvé")
    return ticket


@router.patch("/{ticket_id}", response_model=TicketResponse)
async def update_ticket(
    ticket_id: str,
    body: TicketUpdateRequest,
    service: TicketService = Depends(get_ticket_service),
):
    """Partial update: absent fields are untouched, null clears the assignee."""
    changes = UpdateTicketData.from_mapping(body.model_dump(exclude_unset=True))
    ticket = await service.update_ticket(ticket_id, changes)
    if ticket is None:
        raise HTTPException(status_code=404, detail="Ticket non trouvé")
    return ticket


@router.patch("/{ticket_id}/archive", response_model=TicketResponse)
async def archive_ticket(ticket_id: str, service: TicketService = Depends(get_ticket_service)):
    ticket = await service.archive_ticket(ticket_id)
    if ticket is None:
        raise HTTPException(status_code=404, detail="Ticket non trouvé")
    return ticket
