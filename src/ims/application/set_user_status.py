"""Application services: Activate / Deactivate User use cases.

Both are idempotent; an inactive user cannot sign in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from ims.application.current_user import require_actor
from ims.application.dto import UserDTO
from ims.application.user_mapper import UserMapper
from ims.domain.exceptions import UserNotFoundError
from ims.domain.model.user import User
from ims.domain.repository.user_repository import UserRepository
from ims.logging_config import get_logger

logger = get_logger("application.users")


class _UserStatusHandler(ABC):

    _action = ""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: UUID, actor_id: UUID | None) -> UserDTO:
        require_actor(actor_id, f"{self._action} users")

        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        self._apply(user)
        self._user_repo.save(user)
        logger.info(f"user_{self._action}d", extra={"user_id": user.id})
        return UserMapper.to_dto(user)

    @abstractmethod
    def _apply(self, user: User) -> None:
        """Change the user's status in place."""


class ActivateUserHandler(_UserStatusHandler):
    _action = "activate"

    def _apply(self, user: User) -> None:
        user.activate()


class DeactivateUserHandler(_UserStatusHandler):
    _action = "deactivate"

    def _apply(self, user: User) -> None:
        user.deactivate()
