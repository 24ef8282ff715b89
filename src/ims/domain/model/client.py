"""Client aggregate: individual customers and business customers.

Clients are never removed; ``deactivate()`` hides them from listings
while keeping the record for history.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import ClassVar
from uuid import uuid4

from ims.domain.exceptions import InvalidClientDataError, ValidationError
from ims.domain.model.enums import ClientType
from ims.domain.model.value_objects import Email, Nipt

PHONE_MAX_LENGTH = 20
NAME_MAX_LENGTH = 50

_PHONE_RE = re.compile(r"^[\d\s\+\-\(\)]+$")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def _check_email(raw: str | None) -> str | None:
    if _blank_to_none(raw) is None:
        return None
    try:
        return Email.create(raw).value
    except ValidationError as exc:
        raise InvalidClientDataError(f"Invalid email format: '{raw}'") from exc


def _check_phone(raw: str | None, label: str = "Phone number") -> str | None:
    value = _blank_to_none(raw)
    if value is None:
        return None
    value = value.strip()
    if len(value) > PHONE_MAX_LENGTH:
        raise InvalidClientDataError(
            f"{label} cannot exceed {PHONE_MAX_LENGTH} characters"
        )
    if not _PHONE_RE.match(value):
        raise InvalidClientDataError(
            f"Invalid {label.lower()} format: '{raw}'. "
            f"Only digits, spaces, +, -, (, ) are allowed."
        )
    return value


def _check_name(raw: str | None, label: str) -> str:
    if raw is None or not raw.strip():
        raise InvalidClientDataError(f"{label} cannot be empty")
    trimmed = raw.strip()
    if len(trimmed) > NAME_MAX_LENGTH:
        raise InvalidClientDataError(
            f"{label} must be between 1 and {NAME_MAX_LENGTH} characters"
        )
    return trimmed


def _check_optional_name(raw: str | None, label: str) -> str | None:
    if _blank_to_none(raw) is None:
        return None
    return _check_name(raw, label)


@dataclass(kw_only=True)
class Client:
    """Abstract base for both kinds of customer.

    ``__init__`` reconstitutes persisted clients as-is; new ones go
    through the variant ``create()`` factories, which validate.
    """

    client_type: ClassVar[ClientType]

    id: str
    created_by: str
    address: str | None = None
    email: str | None = None
    phone_number: str | None = None
    notes: str | None = None
    updated_by: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if type(self) is Client:
            raise TypeError("Client is abstract; create one of its variants")

    def update_common_fields(
        self,
        address: str | None,
        email: str | None,
        phone_number: str | None,
        notes: str | None,
        updated_by: str | None = None,
    ) -> None:
        """Replace contact details.

        Everything is validated before anything is assigned, so a
        rejected update leaves the client as it was.
        """
        checked_email = _check_email(email)
        checked_phone = _check_phone(phone_number)
        self.address = address
        self.email = checked_email
        self.phone_number = checked_phone
        self.notes = notes
        self._touch(updated_by)

    def activate(self) -> None:
        self.is_active = True
        self.updated_at = _utcnow()

    def deactivate(self, updated_by: str | None = None) -> None:
        """Soft delete.  Calling it again is a no-op apart from the timestamp."""
        self.is_active = False
        self._touch(updated_by)

    def _touch(self, updated_by: str | None) -> None:
        if updated_by is not None:
            self.updated_by = updated_by
        self.updated_at = _utcnow()


@dataclass(kw_only=True)
class IndividualClient(Client):
    client_type: ClassVar[ClientType] = ClientType.INDIVIDUAL

    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @staticmethod
    def create(
        first_name: str,
        last_name: str,
        created_by: str,
        address: str | None = None,
        email: str | None = None,
        phone_number: str | None = None,
        notes: str | None = None,
    ) -> IndividualClient:
        return IndividualClient(
            id=str(uuid4()),
            first_name=_check_name(first_name, "First name"),
            last_name=_check_name(last_name, "Last name"),
            address=address,
            email=_check_email(email),
            phone_number=_check_phone(phone_number),
            notes=notes,
            created_by=created_by,
        )

    def update_personal_info(
        self,
        first_name: str,
        last_name: str,
        address: str | None,
        email: str | None,
        phone_number: str | None,
        notes: str | None,
        updated_by: str | None = None,
    ) -> None:
        checked_first = _check_name(first_name, "First name")
        checked_last = _check_name(last_name, "Last name")
        self.update_common_fields(address, email, phone_number, notes, updated_by)
        self.first_name = checked_first
        self.last_name = checked_last


@dataclass(kw_only=True)
class BusinessClient(Client):
    client_type: ClassVar[ClientType] = ClientType.BUSINESS

    nipt: Nipt
    contact_person_first_name: str
    contact_person_last_name: str
    contact_person_phone_number: str | None = None
    owner_first_name: str | None = None
    owner_last_name: str | None = None
    owner_phone_number: str | None = None

    @property
    def owner_full_name(self) -> str | None:
        if not self.owner_first_name or not self.owner_last_name:
            return None
        return f"{self.owner_first_name} {self.owner_last_name}"

    @property
    def contact_person_full_name(self) -> str:
        return f"{self.contact_person_first_name} {self.contact_person_last_name}"

    @staticmethod
    def create(
        nipt: Nipt,
        contact_person_first_name: str,
        contact_person_last_name: str,
        created_by: str,
        owner_first_name: str | None = None,
        owner_last_name: str | None = None,
        owner_phone_number: str | None = None,
        contact_person_phone_number: str | None = None,
        address: str | None = None,
        email: str | None = None,
        phone_number: str | None = None,
        notes: str | None = None,
    ) -> BusinessClient:
        if nipt is None:
            raise InvalidClientDataError("NIPT is required for business clients")
        return BusinessClient(
            id=str(uuid4()),
            nipt=nipt,
            contact_person_first_name=_check_name(
                contact_person_first_name, "Contact person first name"
            ),
            contact_person_last_name=_check_name(
                contact_person_last_name, "Contact person last name"
            ),
            contact_person_phone_number=_check_phone(
                contact_person_phone_number, "Contact person phone number"
            ),
            owner_first_name=_check_optional_name(owner_first_name, "Owner first name"),
            owner_last_name=_check_optional_name(owner_last_name, "Owner last name"),
            owner_phone_number=_check_phone(owner_phone_number, "Owner phone number"),
            address=address,
            email=_check_email(email),
            phone_number=_check_phone(phone_number),
            notes=notes,
            created_by=created_by,
        )

    def update_business_info(
        self,
        nipt: Nipt,
        contact_person_first_name: str,
        contact_person_last_name: str,
        owner_first_name: str | None,
        owner_last_name: str | None,
        owner_phone_number: str | None,
        contact_person_phone_number: str | None,
        address: str | None,
        email: str | None,
        phone_number: str | None,
        notes: str | None,
        updated_by: str | None = None,
    ) -> None:
        if nipt is None:
            raise InvalidClientDataError("NIPT is required for business clients")
        contact_first = _check_name(contact_person_first_name, "Contact person first name")
        contact_last = _check_name(contact_person_last_name, "Contact person last name")
        owner_first = _check_optional_name(owner_first_name, "Owner first name")
        owner_last = _check_optional_name(owner_last_name, "Owner last name")
        owner_phone = _check_phone(owner_phone_number, "Owner phone number")
        contact_phone = _check_phone(
            contact_person_phone_number, "Contact person phone number"
        )
        self.update_common_fields(address, email, phone_number, notes, updated_by)
        self.nipt = nipt
        self.contact_person_first_name = contact_first
        self.contact_person_last_name = contact_last
        self.contact_person_phone_number = contact_phone
        self.owner_first_name = owner_first
        self.owner_last_name = owner_last
        self.owner_phone_number = owner_phone


CLIENT_VARIANTS: dict[ClientType, type[Client]] = {
    variant.client_type: variant for variant in (IndividualClient, BusinessClient)
}
