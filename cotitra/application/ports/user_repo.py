"""Port interface for user lookups."""

from abc import ABC, abstractmethod

from cotitra.domain.entities.user import User


class UserRepository(ABC):
    @abstractmethod
    async def find_all(self) -> list[User]:
        ...

    @abstractmethod
    async def find_by_id(self, user_id: str) -> User | None:
        ...

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None:
        ...
