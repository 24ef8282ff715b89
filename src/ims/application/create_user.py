"""Application service: Create User use case."""

from __future__ import annotations

from uuid import UUID

from ims.application.current_user import require_actor
from ims.application.dto import UserDTO
from ims.application.password_hasher import PasswordHasher
from ims.application.user_mapper import UserMapper
from ims.domain.exceptions import DuplicateEmailError, ValidationError
from ims.domain.model.user import User
from ims.domain.model.value_objects import Email
from ims.domain.repository.user_repository import UserRepository
from ims.logging_config import get_logger

logger = get_logger("application.users")

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 100


def check_password(password: str | None) -> str:
    if not password:
        raise ValidationError("Password is required")
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
        )
    if len(password) > PASSWORD_MAX_LENGTH:
        raise ValidationError(
            f"Password cannot exceed {PASSWORD_MAX_LENGTH} characters"
        )
    return password


class CreateUserHandler:

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def handle(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        actor_id: UUID | None,
    ) -> UserDTO:
        """Register a new operator.  Emails are unique, ignoring case."""
        require_actor(actor_id, "create users")
        address = Email.create(email)
        check_password(password)

        if self._user_repo.get_by_email(address.value) is not None:
            raise DuplicateEmailError(address.value)

        user = User.create(
            first_name=first_name,
            last_name=last_name,
            email=address,
            password_hash=self._hasher.hash_password(password),
        )
        self._user_repo.save(user)
        logger.info("user_created", extra={"user_id": user.id, "email": user.email.value})
        return UserMapper.to_dto(user)
