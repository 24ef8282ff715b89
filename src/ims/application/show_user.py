"""Application services: Show User and Current User queries."""

from __future__ import annotations

from uuid import UUID

from ims.application.current_user import require_actor
from ims.application.dto import UserDTO
from ims.application.user_mapper import UserMapper
from ims.domain.exceptions import UserNotFoundError
from ims.domain.repository.user_repository import UserRepository


class ShowUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: UUID) -> UserDTO:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserMapper.to_dto(user)


class CurrentUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, actor_id: UUID | None) -> UserDTO:
        """Return the signed-in user."""
        user_id = require_actor(actor_id, "view the current user")
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserMapper.to_dto(user)
