"""Application service: Login use case.

Token issuance is not part of this system: a successful login returns
the authenticated user, whose id the caller then passes as ``actor_id``.
"""

from __future__ import annotations

from ims.application.dto import AuthenticationResult
from ims.application.password_hasher import PasswordHasher
from ims.application.user_mapper import UserMapper
from ims.domain.exceptions import InvalidCredentialsError
from ims.domain.model.value_objects import Email
from ims.domain.repository.user_repository import UserRepository
from ims.logging_config import get_logger

logger = get_logger("application.users")


class LoginUserHandler:

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def handle(self, email: str, password: str) -> AuthenticationResult:
        """Check credentials.

        Unknown email, wrong password and a deactivated account all fail
        with the same InvalidCredentialsError.
        """
        address = Email.create(email)
        user = self._user_repo.get_by_email(address.value)

        if (
            user is None
            or not self._hasher.verify_password(password or "", user.password_hash)
            or not user.is_active
        ):
            logger.info("login_failed", extra={"email": address.value})
            raise InvalidCredentialsError()

        logger.info("login_succeeded", extra={"user_id": user.id})
        return AuthenticationResult(user=UserMapper.to_dto(user))
