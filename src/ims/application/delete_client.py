"""Application service: Delete Client use case (soft delete)."""

from __future__ import annotations

from uuid import UUID

from ims.application.current_user import require_actor
from ims.domain.exceptions import ClientNotFoundError
from ims.domain.repository.client_repository import ClientRepository
from ims.logging_config import get_logger

logger = get_logger("application.clients")


class DeleteClientHandler:

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    def handle(self, client_id: str, actor_id: UUID | None) -> None:
        updated_by = require_actor(actor_id, "delete clients")

        client = self._client_repo.get_by_id(client_id)
        if client is None:
            raise ClientNotFoundError(client_id)

        client.deactivate(updated_by=str(updated_by))
        self._client_repo.save(client)
        logger.info("client_deleted", extra={"client_id": client.id})
