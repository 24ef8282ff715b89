"""Application services: Create Individual / Business Client use cases."""

from __future__ import annotations

from uuid import UUID

from ims.application.client_mapper import ClientMapper
from ims.application.current_user import require_actor
from ims.application.dto import BusinessClientSpec, ClientDTO, IndividualClientSpec
from ims.domain.exceptions import DuplicateNiptError
from ims.domain.model.client import BusinessClient, IndividualClient
from ims.domain.model.value_objects import Nipt
from ims.domain.repository.client_repository import ClientRepository
from ims.logging_config import get_logger

logger = get_logger("application.clients")


class CreateIndividualClientHandler:

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    def handle(self, spec: IndividualClientSpec, actor_id: UUID | None) -> ClientDTO:
        created_by = require_actor(actor_id, "create clients")

        client = IndividualClient.create(
            first_name=spec.first_name,
            last_name=spec.last_name,
            address=spec.address,
            email=spec.email,
            phone_number=spec.phone_number,
            notes=spec.notes,
            created_by=str(created_by),
        )
        self._client_repo.save(client)
        logger.info(
            "client_created",
            extra={"client_id": client.id, "client_type": client.client_type.label},
        )
        return ClientMapper.to_dto(client)


class CreateBusinessClientHandler:

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    def handle(self, spec: BusinessClientSpec, actor_id: UUID | None) -> ClientDTO:
        """Register a business customer.

        The NIPT must not already belong to an active business client.
        """
        created_by = require_actor(actor_id, "create clients")
        nipt = Nipt(spec.nipt)

        if self._client_repo.get_business_by_nipt(nipt.value) is not None:
            raise DuplicateNiptError(nipt.value)

        client = BusinessClient.create(
            nipt=nipt,
            contact_person_first_name=spec.contact_person_first_name,
            contact_person_last_name=spec.contact_person_last_name,
            contact_person_phone_number=spec.contact_person_phone_number,
            owner_first_name=spec.owner_first_name,
            owner_last_name=spec.owner_last_name,
            owner_phone_number=spec.owner_phone_number,
            address=spec.address,
            email=spec.email,
            phone_number=spec.phone_number,
            notes=spec.notes,
            created_by=str(created_by),
        )
        self._client_repo.save(client)
        logger.info(
            "client_created",
            extra={"client_id": client.id, "client_type": client.client_type.label},
        )
        return ClientMapper.to_dto(client)
