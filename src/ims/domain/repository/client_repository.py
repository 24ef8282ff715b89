"""Abstract repository for the Client aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.client import BusinessClient, Client


class ClientRepository(ABC):

    @abstractmethod
    def get_by_id(self, client_id: str) -> Client | None:
        """Return a client by its ID, or None if not found."""

    @abstractmethod
    def get_business_by_nipt(
        self, nipt: str, active_only: bool = True
    ) -> BusinessClient | None:
        """Return the business client registered under a NIPT."""

    @abstractmethod
    def list_all(self, include_inactive: bool = False) -> list[Client]:
        """Return clients in no particular order."""

    @abstractmethod
    def save(self, client: Client) -> None:
        """Persist a new or updated client."""
