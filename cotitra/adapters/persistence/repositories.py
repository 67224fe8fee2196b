"""SQLAlchemy repository implementations."""

from __future__ import annotations

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from cotitra.adapters.persistence.models import CommentModel, TicketModel, UserModel
from cotitra.application.ports.comment_repo import CommentRepository
from cotitra.application.ports.ticket_repo import TicketRepository
from cotitra.application.ports.user_repo import UserRepository
from cotitra.domain.entities.comment import Comment, NewComment
from cotitra.domain.entities.ticket import NewTicket, Ticket, UpdateTicketData
from cotitra.domain.entities.user import User
from cotitra.domain.errors import ArchivedStateError
from cotitra.domain.policies.validation import ensure_valid_id
from cotitra.domain.value_objects.enums import TicketStatus

# ─── Mappers ─────────────────────────────────────────────────────────


def _user_to_domain(m: UserModel) -> User:
    return User(
        id=m.id,
        first_name=m.first_name,
        last_name=m.last_name,
        email=m.email,
        password_hash=m.password_hash,
    )


def _ticket_to_domain(m: TicketModel) -> Ticket:
    return Ticket(
        id=m.id,
        title=m.title,
        description=m.description,
        status=TicketStatus(m.status),
        created_by=m.created_by,
        assigned_to=m.assigned_to,
        archived=m.archived,
        created_at=m.created_at,
        updated_at=m.updated_at,
    )


def _comment_to_domain(m: CommentModel) -> Comment:
    return Comment(
        id=m.id,
        ticket_id=m.ticket_id,
        content=m.content,
        author=_user_to_domain(m.author).to_public(),
        created_at=m.created_at,
    )


def _ticket_values(changes: UpdateTicketData) -> dict:
    values = changes.as_values()
    if isinstance(values.get("status"), TicketStatus):
        values["status"] = values["status"].value
    return values


# ─── Repositories ────────────────────────────────────────────────────
# Every write commits before returning; callers notify after the commit.


class SqlTicketRepository(TicketRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def find_all(self) -> list[Ticket]:
        result = await self._s.execute(
            select(TicketModel).order_by(TicketModel.created_at.desc(), TicketModel.id)
        )
        return [_ticket_to_domain(m) for m in result.scalars()]

    async def find_by_id(self, ticket_id: str) -> Ticket | None:
        m = await self._s.get(TicketModel, ensure_valid_id(ticket_id))
        return _ticket_to_domain(m) if m else None

    async def create(self, data: NewTicket) -> Ticket:
        m = TicketModel(
            title=data.title,
            description=data.description,
            status=data.status.value,
            created_by=data.created_by,
            archived=False,
        )
        self._s.add(m)
        await self._s.flush()
        await self._s.refresh(m)
        await self._s.commit()
        return _ticket_to_domain(m)

    async def update(self, ticket_id: str, changes: UpdateTicketData) -> Ticket | None:
        ensure_valid_id(ticket_id)
        # Conditional write: the archived guard is part of the UPDATE itself.
        result = await self._s.execute(
            update(TicketModel)
            .where(TicketModel.id == ticket_id, TicketModel.archived.is_(False))
            .values(**_ticket_values(changes), updated_at=func.now())
            .returning(TicketModel)
            .execution_options(populate_existing=True)
        )
        m = result.scalar_one_or_none()
        if m is not None:
            await self._s.commit()
            return _ticket_to_domain(m)

        if await self._s.get(TicketModel, ticket_id) is not None:
            raise ArchivedStateError(ticket_id)
        return None

    async def archive(self, ticket_id: str) -> Ticket | None:
        ensure_valid_id(ticket_id)
        result = await self._s.execute(
            update(TicketModel)
            .where(TicketModel.id == ticket_id)
            .values(archived=True, updated_at=func.now())
            .returning(TicketModel)
            .execution_options(populate_existing=True)
        )
        m = result.scalar_one_or_none()
        if m is None:
            return None
        await self._s.commit()
        return _ticket_to_domain(m)


class SqlCommentRepository(CommentRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def find_by_ticket_id(self, ticket_id: str) -> list[Comment]:
        result = await self._s.execute(
            select(CommentModel)
            .options(selectinload(CommentModel.author))
            .where(CommentModel.ticket_id == ensure_valid_id(ticket_id))
            .order_by(CommentModel.created_at, CommentModel.id)
        )
        return [_comment_to_domain(m) for m in result.scalars()]

    async def create(self, data: NewComment) -> Comment:
        m = CommentModel(
            ticket_id=ensure_valid_id(data.ticket_id),
            content=data.content,
            author_id=ensure_valid_id(data.author_id),
        )
        self._s.add(m)
        await self._s.flush()
        await self._s.refresh(m, attribute_names=["created_at", "author"])
        await self._s.commit()
        return _comment_to_domain(m)


class SqlUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def find_all(self) -> list[User]:
        result = await self._s.execute(
            select(UserModel).order_by(UserModel.last_name, UserModel.first_name)
        )
        return [_user_to_domain(m) for m in result.scalars()]

    async def find_by_id(self, user_id: str) -> User | None:
        m = await self._s.get(UserModel, ensure_valid_id(user_id))
        return _user_to_domain(m) if m else None

    async def find_by_email(self, email: str) -> User | None:
        result = await self._s.execute(
            select(UserModel).where(func.lower(UserModel.email) == email.strip().lower())
        )
        m = result.scalar_one_or_none()
        return _user_to_domain(m) if m else None
