"""Maps Client aggregates to their display DTOs."""

from __future__ import annotations

from typing import Any

from ims.application.dto import (
    BusinessClientDTO,
    ClientDTO,
    IndividualClientDTO,
    format_timestamp,
)
from ims.domain.model.client import BusinessClient, Client, IndividualClient


class ClientMapper:

    @staticmethod
    def to_dto(client: Client) -> ClientDTO:
        base = ClientMapper._base_fields(client)

        match client:
            case IndividualClient():
                return IndividualClientDTO(
                    **base,
                    first_name=client.first_name,
                    last_name=client.last_name,
                    full_name=client.full_name,
                )
            case BusinessClient():
                return BusinessClientDTO(
                    **base,
                    nipt=client.nipt.value,
                    contact_person_first_name=client.contact_person_first_name,
                    contact_person_last_name=client.contact_person_last_name,
                    contact_person_full_name=client.contact_person_full_name,
                    contact_person_phone_number=client.contact_person_phone_number,
                    owner_first_name=client.owner_first_name,
                    owner_last_name=client.owner_last_name,
                    owner_full_name=client.owner_full_name,
                    owner_phone_number=client.owner_phone_number,
                )
            case _:
                return ClientDTO(**base)

    @staticmethod
    def _base_fields(client: Client) -> dict[str, Any]:
        return {
            "id": client.id,
            "client_type": client.client_type.label,
            "client_type_id": int(client.client_type),
            "address": client.address,
            "email": client.email,
            "phone_number": client.phone_number,
            "notes": client.notes,
            "created_at": format_timestamp(client.created_at),
            "updated_at": format_timestamp(client.updated_at),
            "created_by": client.created_by,
            "updated_by": client.updated_by,
            "is_active": client.is_active,
        }
