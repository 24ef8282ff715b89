"""Application service: List Clients use case (query)."""

from __future__ import annotations

from ims.application.client_mapper import ClientMapper
from ims.application.dto import ClientDTO
from ims.domain.model.client import Client
from ims.domain.model.enums import ClientType
from ims.domain.repository.client_repository import ClientRepository


def newest_first(clients: list[Client]) -> list[Client]:
    return sorted(clients, key=lambda c: c.created_at, reverse=True)


class ListClientsHandler:

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    def handle(
        self,
        client_type_id: int | None = None,
        include_inactive: bool = False,
    ) -> list[ClientDTO]:
        """List clients newest first.

        Without a type filter, individuals come before businesses.
        """
        client_type = ClientType.from_id(client_type_id, "client type")
        clients = newest_first(self._client_repo.list_all(include_inactive))

        if client_type is not None:
            clients = [c for c in clients if c.client_type == client_type]
        else:
            # stable sort keeps newest-first inside each type
            clients.sort(key=lambda c: int(c.client_type))

        return [ClientMapper.to_dto(c) for c in clients]
