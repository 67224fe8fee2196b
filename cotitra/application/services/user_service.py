"""UserService: public (email-free) views of the members."""

from __future__ import annotations

from cotitra.application.ports.user_repo import UserRepository
from cotitra.application.use_cases.get_users import GetUserByIdUseCase, GetUsersUseCase
from cotitra.domain.entities.user import UserPublic


class UserService:
    def __init__(self, user_repo: UserRepository):
        self._get_users = GetUsersUseCase(user_repo)
        self._get_user_by_id = GetUserByIdUseCase(user_repo)

    async def get_users(self) -> list[UserPublic]:
        return [user.to_public() for user in await self._get_users.execute()]

    async def get_user_by_id(self, user_id: str) -> UserPublic | None:
        user = await self._get_user_by_id.execute(user_id)
        return user.to_public() if user else None
