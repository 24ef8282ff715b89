"""Application services: Update Individual / Business Client use cases."""

from __future__ import annotations

from uuid import UUID

from ims.application.client_mapper import ClientMapper
from ims.application.current_user import require_actor
from ims.application.dto import BusinessClientSpec, ClientDTO, IndividualClientSpec
from ims.domain.exceptions import ClientNotFoundError, DuplicateNiptError
from ims.domain.model.client import BusinessClient, IndividualClient
from ims.domain.model.value_objects import Nipt
from ims.domain.repository.client_repository import ClientRepository
from ims.logging_config import get_logger

logger = get_logger("application.clients")


class UpdateIndividualClientHandler:

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    def handle(
        self, client_id: str, spec: IndividualClientSpec, actor_id: UUID | None
    ) -> ClientDTO:
        updated_by = require_actor(actor_id, "update clients")

        client = self._client_repo.get_by_id(client_id)
        if not isinstance(client, IndividualClient):
            raise ClientNotFoundError(client_id)

        client.update_personal_info(
            first_name=spec.first_name,
            last_name=spec.last_name,
            address=spec.address,
            email=spec.email,
            phone_number=spec.phone_number,
            notes=spec.notes,
            updated_by=str(updated_by),
        )
        self._client_repo.save(client)
        logger.info("client_updated", extra={"client_id": client.id})
        return ClientMapper.to_dto(client)


class UpdateBusinessClientHandler:

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    def handle(
        self, client_id: str, spec: BusinessClientSpec, actor_id: UUID | None
    ) -> ClientDTO:
        """Replace a business client's details.

        Changing the NIPT is allowed as long as no other active business
        client holds the new one.
        """
        updated_by = require_actor(actor_id, "update clients")

        client = self._client_repo.get_by_id(client_id)
        if not isinstance(client, BusinessClient):
            raise ClientNotFoundError(client_id)

        nipt = Nipt(spec.nipt)
        if nipt != client.nipt:
            holder = self._client_repo.get_business_by_nipt(nipt.value)
            if holder is not None and holder.id != client.id:
                raise DuplicateNiptError(nipt.value)

        client.update_business_info(
            nipt=nipt,
            contact_person_first_name=spec.contact_person_first_name,
            contact_person_last_name=spec.contact_person_last_name,
            owner_first_name=spec.owner_first_name,
            owner_last_name=spec.owner_last_name,
            owner_phone_number=spec.owner_phone_number,
            contact_person_phone_number=spec.contact_person_phone_number,
            address=spec.address,
            email=spec.email,
            phone_number=spec.phone_number,
            notes=spec.notes,
            updated_by=str(updated_by),
        )
        self._client_repo.save(client)
        logger.info("client_updated", extra={"client_id": client.id})
        return ClientMapper.to_dto(client)
