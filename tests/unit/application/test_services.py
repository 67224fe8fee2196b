"""Tests for the service facades used by the HTTP adapter."""

import pytest

from cotitra.application.services.comment_service import CommentService
from cotitra.application.services.ticket_service import TicketService
from cotitra.application.services.user_service import UserService
from cotitra.domain.entities.comment import AddCommentData
from cotitra.domain.entities.ticket import CreateTicketData, UpdateTicketData
from cotitra.domain.entities.user import UserPublic
from cotitra.domain.value_objects.enums import TicketStatus


@pytest.fixture
def ticket_service(ticket_repo, user_repo, email, templates):
    return TicketService(ticket_repo, user_repo, email, templates)


@pytest.fixture
def comment_service(comment_repo, ticket_repo, user_repo, email, templates):
    return CommentService(comment_repo, ticket_repo, user_repo, email, templates)


@pytest.mark.asyncio
async def test_ticket_lifecycle_through_service(ticket_service, alice, bob):
    created = await ticket_service.create_ticket(
        CreateTicketData(title="Ascenseur", description="En panne", created_by=alice.id)
    )
    assert [t.id for t in await ticket_service.get_all_tickets()] == [created.id]

    updated = await ticket_service.update_ticket(
        created.id, UpdateTicketData.from_mapping({"status": "IN_PROGRESS", "assigned_to": bob.id})
    )
    assert updated.status == TicketStatus.IN_PROGRESS
    assert updated.assigned_to == bob.id

    archived = await ticket_service.archive_ticket(created.id)
    assert archived.archived is True
    assert (await ticket_service.get_ticket_by_id(created.id)).archived is True


@pytest.mark.asyncio
async def test_get_ticket_by_id_missing(ticket_service, unknown_id):
    assert await ticket_service.get_ticket_by_id(unknown_id) is None


@pytest.mark.asyncio
async def test_comment_service_adds_and_lists(comment_service, ticket, alice, bob):
    first = await comment_service.add_comment(
        AddCommentData(ticket_id=ticket.id, content="Premier", author_id=alice.id)
    )
    second = await comment_service.add_comment(
        AddCommentData(ticket_id=ticket.id, content="Second", author_id=bob.id)
    )
    comments = await comment_service.get_comments_by_ticket_id(ticket.id)
    assert [c.id for c in comments] == [first.id, second.id]


@pytest.mark.asyncio
async def test_user_service_returns_public_projections(user_repo, alice, bob):
    service = UserService(user_repo)

    users = await service.get_users()
    assert set(users) == {alice.to_public(), bob.to_public()}
    assert all(isinstance(u, UserPublic) for u in users)

    assert await service.get_user_by_id(alice.id) == alice.to_public()


@pytest.mark.asyncio
async def test_user_service_missing_user(user_repo, unknown_id):
    assert await UserService(user_repo).get_user_by_id(unknown_id) is None
