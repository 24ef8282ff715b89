"""Abstract repository for the User aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from ims.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: UUID) -> User | None:
        """Return a user by ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by normalized email, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""
