"""User aggregate: an operator who can sign in and move stock."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Email, PersonName


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    id: UUID
    name: PersonName
    email: Email
    password_hash: str
    is_active: bool = True
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def full_name(self) -> str:
        return self.name.full_name

    @staticmethod
    def create(
        first_name: str,
        last_name: str,
        email: Email,
        password_hash: str,
    ) -> User:
        if email is None:
            raise ValidationError("Email is required")
        _check_hash(password_hash)
        now = _utcnow()
        return User(
            id=uuid4(),
            name=PersonName(first_name, last_name),
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )

    def update_information(self, first_name: str, last_name: str, email: Email) -> None:
        if email is None:
            raise ValidationError("Email is required")
        self.name = PersonName(first_name, last_name)
        self.email = email
        self.updated_at = _utcnow()

    def change_password(self, new_password_hash: str) -> None:
        _check_hash(new_password_hash)
        self.password_hash = new_password_hash
        self.updated_at = _utcnow()

    def activate(self) -> None:
        if self.is_active:
            return
        self.is_active = True
        self.updated_at = _utcnow()

    def deactivate(self) -> None:
        if not self.is_active:
            return
        self.is_active = False
        self.updated_at = _utcnow()


def _check_hash(password_hash: str) -> None:
    if not password_hash or not password_hash.strip():
        raise ValidationError("Password hash cannot be empty")
