import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock

from cotitra.domain.entities.ticket import CreateTicketData, Ticket
from cotitra.domain.errors import ArchivedStateError, FieldValidationError, InvalidIdError
from cotitra.domain.value_objects.enums import TicketStatus

USER_ID = str(uuid.uuid4())


def _make_ticket(**overrides) -> Ticket:
    now = datetime.now(timezone.utc)
    values = dict(
        id=str(uuid.uuid4()),
        title="Fuite",
        description="Cave inondée",
        status=TicketStatus.NEW,
        created_by=USER_ID,
        created_at=now,
        updated_at=now,
    )
    values.update(overrides)
    return Ticket(**values)


def test_list_tickets_uses_camel_case(api):
    client, services = api
    ticket = _make_ticket(assigned_to=USER_ID)
    services["tickets"].get_all_tickets = AsyncMock(return_value=[ticket])

    response = client.get("/api/tickets")

    assert response.status_code == 200
    body = response.json()
    assert body[0]["id"] == ticket.id
    assert body[0]["createdBy"] == USER_ID
    assert body[0]["assignedTo"] == USER_ID
    assert body[0]["status"] == "NEW"
    assert body[0]["archived"] is False


def test_create_ticket_returns_created(api):
    client, services = api
    ticket = _make_ticket()
    services["tickets"].create_ticket = AsyncMock(return_value=ticket)

    response = client.post(
        "/api/tickets",
        json={"title": "Fuite", "description": "Cave inondée"},
        headers={"X-User-Id": USER_ID},
    )

    assert response.status_code == 201
    assert response.json()["id"] == ticket.id
    services["tickets"].create_ticket.assert_awaited_once_with(
        CreateTicketData(title="Fuite", description="Cave inondée", created_by=USER_ID)
    )


def test_create_ticket_validation_error_is_400(api):
    client, services = api
    services["tickets"].create_ticket = AsyncMock(
        side_effect=FieldValidationError("Le titre est requis", field="title")
    )

    response = client.post("/api/tickets", json={"description": "x"}, headers={"X-User-Id": USER_ID})

    assert response.status_code == 400
    assert response.json() == {
        "error": "Le titre est requis",
        "code": "FieldValidationError",
        "field": "title",
    }


def test_unknown_body_field_is_400(api):
    client, _ = api
    response = client.post("/api/tickets", json={"title": "t", "priority": "high"})
    assert response.status_code == 400
    assert response.json()["error"] == "Requête invalide"


def test_get_ticket_not_found(api):
    client, services = api
    services["tickets"].get_ticket_by_id = AsyncMock(return_value=None)

    response = client.get(f"/api/tickets/{uuid.uuid4()}")

    assert response.status_code == 404


def test_get_ticket_invalid_id_is_400(api):
    client, services = api
    services["tickets"].get_ticket_by_id = AsyncMock(side_effect=InvalidIdError("42"))

    response = client.get("/api/tickets/42")

    assert response.status_code == 400
    assert response.json()["error"] == "ID invalide"


def test_update_ticket_passes_only_supplied_fields(api):
    client, services = api
    ticket = _make_ticket(status=TicketStatus.IN_PROGRESS)
    services["tickets"].update_ticket = AsyncMock(return_value=ticket)

    response = client.patch(
        f"/api/tickets/{ticket.id}", json={"status": "IN_PROGRESS", "assignedTo": None}
    )

    assert response.status_code == 200
    assert response.json()["status"] == "IN_PROGRESS"
    ticket_id, changes = services["tickets"].update_ticket.await_args.args
    assert ticket_id == ticket.id
    assert changes.status.value == "IN_PROGRESS"
    assert changes.assigned_to.is_clear
    assert changes.title.is_unset
    assert changes.description.is_unset


def test_update_archived_ticket_is_400(api):
    client, services = api
    services["tickets"].update_ticket = AsyncMock(side_effect=ArchivedStateError("t"))

    response = client.patch(f"/api/tickets/{uuid.uuid4()}", json={"title": "x"})

    assert response.status_code == 400
    assert response.json()["code"] == "ArchivedStateError"


def test_update_missing_ticket_is_404(api):
    client, services = api
    services["tickets"].update_ticket = AsyncMock(return_value=None)

    response = client.patch(f"/api/tickets/{uuid.uuid4()}", json={"title": "x"})

    assert response.status_code == 404


def test_archive_ticket(api):
    client, services = api
    ticket = _make_ticket(archived=True)
    services["tickets"].archive_ticket = AsyncMock(return_value=ticket)

    response = client.patch(f"/api/tickets/{ticket.id}/archive")

    assert response.status_code == 200
    assert response.json()["archived"] is True
    services["tickets"].archive_ticket.assert_awaited_once_with(ticket.id)


def test_unexpected_error_is_500(api):
    client, services = api
    services["tickets"].get_all_tickets = AsyncMock(side_effect=RuntimeError("db down"))

    response = client.get("/api/tickets")

    assert response.status_code == 500
    assert response.json() == {"error": "Erreur interne du serveur"}
