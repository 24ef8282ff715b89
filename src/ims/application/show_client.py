"""Application service: Show Client use case (query)."""

from __future__ import annotations

from ims.application.client_mapper import ClientMapper
from ims.application.dto import ClientDTO
from ims.domain.exceptions import ClientNotFoundError
from ims.domain.repository.client_repository import ClientRepository


class ShowClientHandler:

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    def handle(self, client_id: str) -> ClientDTO:
        client = self._client_repo.get_by_id(client_id)
        if client is None:
            raise ClientNotFoundError(client_id)
        return ClientMapper.to_dto(client)
