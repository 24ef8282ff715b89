"""Application service: Update User use case."""

from __future__ import annotations

from uuid import UUID

from ims.application.current_user import require_actor
from ims.application.dto import UserDTO
from ims.application.user_mapper import UserMapper
from ims.domain.exceptions import DuplicateEmailError, UserNotFoundError
from ims.domain.model.value_objects import Email
from ims.domain.repository.user_repository import UserRepository
from ims.logging_config import get_logger

logger = get_logger("application.users")


class UpdateUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        user_id: UUID,
        first_name: str,
        last_name: str,
        email: str,
        actor_id: UUID | None,
    ) -> UserDTO:
        require_actor(actor_id, "update users")

        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        address = Email.create(email)
        holder = self._user_repo.get_by_email(address.value)
        if holder is not None and holder.id != user.id:
            raise DuplicateEmailError(address.value)

        user.update_information(first_name, last_name, address)
        self._user_repo.save(user)
        logger.info("user_updated", extra={"user_id": user.id})
        return UserMapper.to_dto(user)
