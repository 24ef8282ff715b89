"""Maps User aggregates to UserDTO."""

from __future__ import annotations

from ims.application.dto import UserDTO, format_timestamp
from ims.domain.model.user import User


class UserMapper:

    @staticmethod
    def to_dto(user: User) -> UserDTO:
        return UserDTO(
            id=user.id,
            first_name=user.name.first_name,
            last_name=user.name.last_name,
            full_name=user.full_name,
            email=user.email.value,
            is_active=user.is_active,
            created_at=format_timestamp(user.created_at),
            updated_at=format_timestamp(user.updated_at),
        )
