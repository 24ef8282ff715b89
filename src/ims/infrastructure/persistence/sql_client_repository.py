"""SQLAlchemy-backed implementation of ClientRepository."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ims.domain.exceptions import DuplicateNiptError
from ims.domain.model.client import BusinessClient, Client, IndividualClient
from ims.domain.model.enums import ClientType
from ims.domain.model.value_objects import Nipt
from ims.domain.repository.client_repository import ClientRepository
from ims.infrastructure.persistence.orm import ClientRow


class SqlClientRepository(ClientRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ClientRepository interface -------------------------------------------

    def get_by_id(self, client_id: str) -> Client | None:
        row = self._session.get(ClientRow, client_id)
        return self._to_domain(row) if row is not None else None

    def get_business_by_nipt(
        self, nipt: str, active_only: bool = True
    ) -> BusinessClient | None:
        stmt = select(ClientRow).where(
            ClientRow.client_type == int(ClientType.BUSINESS),
            ClientRow.nipt == nipt.strip().upper(),
        )
        if active_only:
            stmt = stmt.where(ClientRow.is_active.is_(True))
        row = self._session.scalars(stmt).first()
        return self._to_domain(row) if row is not None else None

    def list_all(self, include_inactive: bool = False) -> list[Client]:
        stmt = select(ClientRow)
        if not include_inactive:
            stmt = stmt.where(ClientRow.is_active.is_(True))
        return [self._to_domain(row) for row in self._session.scalars(stmt).all()]

    def save(self, client: Client) -> None:
        row = self._session.get(ClientRow, client.id)
        if row is None:
            row = ClientRow(id=client.id)
            self._session.add(row)
        for key, value in self._to_columns(client).items():
            setattr(row, key, value)
        try:
            self._session.flush()
        except IntegrityError as exc:
            if isinstance(client, BusinessClient) and "nipt" in str(exc.orig).lower():
                raise DuplicateNiptError(client.nipt.value) from exc
            raise

    # --- Mapping helpers ------------------------------------------------------

    @staticmethod
    def _to_columns(client: Client) -> dict[str, Any]:
        columns: dict[str, Any] = {
            "client_type": int(client.client_type),
            "address": client.address,
            "email": client.email,
            "phone_number": client.phone_number,
            "notes": client.notes,
            "created_at": client.created_at,
            "updated_at": client.updated_at,
            "created_by": client.created_by,
            "updated_by": client.updated_by,
            "is_active": client.is_active,
        }
        match client:
            case IndividualClient():
                columns.update(first_name=client.first_name, last_name=client.last_name)
            case BusinessClient():
                columns.update(
                    nipt=client.nipt.value,
                    owner_first_name=client.owner_first_name,
                    owner_last_name=client.owner_last_name,
                    owner_phone_number=client.owner_phone_number,
                    contact_person_first_name=client.contact_person_first_name,
                    contact_person_last_name=client.contact_person_last_name,
                    contact_person_phone_number=client.contact_person_phone_number,
                )
        return columns

    @staticmethod
    def _to_domain(row: ClientRow) -> Client:
        common = dict(
            id=row.id,
            address=row.address,
            email=row.email,
            phone_number=row.phone_number,
            notes=row.notes,
            created_at=row.created_at,
            updated_at=row.updated_at,
            created_by=row.created_by,
            updated_by=row.updated_by,
            is_active=row.is_active,
        )
        if ClientType(row.client_type) is ClientType.BUSINESS:
            return BusinessClient(
                **common,
                nipt=Nipt(row.nipt),
                contact_person_first_name=row.contact_person_first_name,
                contact_person_last_name=row.contact_person_last_name,
                contact_person_phone_number=row.contact_person_phone_number,
                owner_first_name=row.owner_first_name,
                owner_last_name=row.owner_last_name,
                owner_phone_number=row.owner_phone_number,
            )
        return IndividualClient(
            **common, first_name=row.first_name, last_name=row.last_name
        )
