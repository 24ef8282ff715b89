"""Initial data: the default administrator account."""

from __future__ import annotations

from ims.application.password_hasher import PasswordHasher
from ims.domain.model.user import User
from ims.domain.model.value_objects import Email
from ims.domain.repository.user_repository import UserRepository
from ims.logging_config import get_logger

logger = get_logger("infrastructure.seed")

ADMIN_EMAIL = "admin@inventoryapp.com"
ADMIN_PASSWORD = "Admin@123"
ADMIN_FIRST_NAME = "System"
ADMIN_LAST_NAME = "Administrator"


def seed_admin(user_repo: UserRepository, hasher: PasswordHasher) -> bool:
    """Create the administrator if missing.  Returns True when created."""
    if user_repo.get_by_email(ADMIN_EMAIL) is not None:
        return False

    admin = User.create(
        first_name=ADMIN_FIRST_NAME,
        last_name=ADMIN_LAST_NAME,
        email=Email.create(ADMIN_EMAIL),
        password_hash=hasher.hash_password(ADMIN_PASSWORD),
    )
    user_repo.save(admin)
    logger.info("admin_seeded", extra={"user_id": admin.id, "email": ADMIN_EMAIL})
    return True
