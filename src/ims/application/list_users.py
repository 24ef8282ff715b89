"""Application service: List Users use case (query)."""

from __future__ import annotations

from ims.application.dto import UserDTO
from ims.application.user_mapper import UserMapper
from ims.domain.repository.user_repository import UserRepository


class ListUsersHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self) -> list[UserDTO]:
        """Every user, ordered by first then last name."""
        users = sorted(
            self._user_repo.list_all(),
            key=lambda u: (u.name.first_name.casefold(), u.name.last_name.casefold()),
        )
        return [UserMapper.to_dto(u) for u in users]
