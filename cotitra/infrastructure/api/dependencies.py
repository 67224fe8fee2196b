"""FastAPI dependency injection: wires adapters into the application services."""

from __future__ import annotations

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from cotitra.adapters.persistence.database import get_session
from cotitra.adapters.persistence.repositories import (
    SqlCommentRepository,
    SqlTicketRepository,
    SqlUserRepository,
)
from cotitra.application.ports.email_port import EmailTransport
from cotitra.application.ports.template_port import EmailTemplateRenderer
from cotitra.application.services.auth_service import AuthService
from cotitra.application.services.comment_service import CommentService
from cotitra.application.services.ticket_service import TicketService
from cotitra.application.services.user_service import UserService


def get_email_transport(request: Request) -> EmailTransport:
    """Transport built once by the app factory and kept on ``app.state``."""
    return request.app.state.email_transport


def get_templates(request: Request) -> EmailTemplateRenderer:
    return request.app.state.email_templates


def get_current_user_id(x_user_id: str | None = Header(default=None)) -> str | None:
    """Acting member, as established by the upstream authentication layer."""
    return x_user_id


def get_ticket_service(
    session: AsyncSession = Depends(get_session),
    email: EmailTransport = Depends(get_email_transport),
    templates: EmailTemplateRenderer = Depends(get_templates),
) -> TicketService:
    return TicketService(
        ticket_repo=SqlTicketRepository(session),
        user_repo=SqlUserRepository(session),
        email=email,
        templates=templates,
    )


def get_comment_service(
    session: AsyncSession = Depends(get_session),
    email: EmailTransport = Depends(get_email_transport),
    templates: EmailTemplateRenderer = Depends(get_templates),
) -> CommentService:
    return CommentService(
        comment_repo=SqlCommentRepository(session),
        ticket_repo=SqlTicketRepository(session),
        user_repo=SqlUserRepository(session),
        email=email,
        templates=templates,
    )


def get_user_service(session: AsyncSession = Depends(get_session)) -> UserService:
    return UserService(SqlUserRepository(session))


def get_auth_service(session: AsyncSession = Depends(get_session)) -> AuthService:
    return AuthService(SqlUserRepository(session))
