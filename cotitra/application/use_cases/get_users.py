"""Read-only user use cases."""

from __future__ import annotations

from cotitra.application.ports.user_repo import UserRepository
from cotitra.domain.entities.user import User


class GetUsersUseCase:
    def __init__(self, user_repo: UserRepository):
        self._users = user_repo

    async def execute(self) -> list[User]:
        return await self._users.find_all()


class GetUserByIdUseCase:
    def __init__(self, user_repo: UserRepository):
        self._users = user_repo

    async def execute(self, user_id: str) -> User | None:
        return await self._users.find_by_id(user_id)
