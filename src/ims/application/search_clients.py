"""Application service: Search Clients use case (query)."""

from __future__ import annotations

from ims.application.client_mapper import ClientMapper
from ims.application.dto import ClientDTO
from ims.application.list_clients import newest_first
from ims.domain.model.client import BusinessClient, Client, IndividualClient
from ims.domain.model.enums import ClientType
from ims.domain.repository.client_repository import ClientRepository


def _searchable_text(client: Client) -> list[str]:
    fields = [client.email, client.phone_number]
    match client:
        case IndividualClient():
            fields += [client.first_name, client.last_name]
        case BusinessClient():
            fields += [
                client.nipt.value,
                client.contact_person_first_name,
                client.contact_person_last_name,
                client.owner_first_name,
                client.owner_last_name,
            ]
    return [f.casefold() for f in fields if f]


class SearchClientsHandler:

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    def handle(
        self,
        term: str | None = None,
        client_type_id: int | None = None,
        include_inactive: bool = False,
    ) -> list[ClientDTO]:
        """Case-insensitive substring search, newest first.

        Matches email, phone, individual names, NIPT and the contact
        person and owner names of businesses.  A blank term matches all.
        """
        client_type = ClientType.from_id(client_type_id, "client type")
        clients = self._client_repo.list_all(include_inactive)

        if client_type is not None:
            clients = [c for c in clients if c.client_type == client_type]

        if term and term.strip():
            needle = term.strip().casefold()
            clients = [
                c for c in clients if any(needle in text for text in _searchable_text(c))
            ]

        return [ClientMapper.to_dto(c) for c in newest_first(clients)]
