"""SQLAlchemy-backed implementation of UserRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ims.domain.exceptions import DuplicateEmailError
from ims.domain.model.user import User
from ims.domain.model.value_objects import Email, PersonName
from ims.domain.repository.user_repository import UserRepository
from ims.infrastructure.persistence.orm import UserRow


class SqlUserRepository(UserRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: UUID) -> User | None:
        row = self._session.get(UserRow, user_id)
        return self._to_domain(row) if row is not None else None

    def get_by_email(self, email: str) -> User | None:
        stmt = select(UserRow).where(UserRow.email == email.strip().lower())
        row = self._session.scalars(stmt).first()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[User]:
        return [self._to_domain(row) for row in self._session.scalars(select(UserRow)).all()]

    def save(self, user: User) -> None:
        row = self._session.get(UserRow, user.id)
        if row is None:
            row = UserRow(id=user.id)
            self._session.add(row)
        row.first_name = user.name.first_name
        row.last_name = user.name.last_name
        row.email = user.email.value
        row.password_hash = user.password_hash
        row.is_active = user.is_active
        row.created_at = user.created_at
        row.updated_at = user.updated_at
        try:
            self._session.flush()
        except IntegrityError as exc:
            raise DuplicateEmailError(user.email.value) from exc

    @staticmethod
    def _to_domain(row: UserRow) -> User:
        return User(
            id=row.id,
            name=PersonName(row.first_name, row.last_name),
            email=Email(row.email),
            password_hash=row.password_hash,
            is_active=row.is_active,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
