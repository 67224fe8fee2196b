"""User entity: a member of the organization."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserPublic:
    """Projection safe to send across the trust boundary (no email, no password)."""

    id: str
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass
class User:
    id: str
    first_name: str
    last_name: str
    email: str
    password_hash: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_public(self) -> UserPublic:
        return UserPublic(id=self.id, first_name=self.first_name, last_name=self.last_name)
