"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations live in the infrastructure
layer (SQL) and in the test fakes (in-memory).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from ims.domain.model.enums import ProductType
from ims.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: UUID) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str, product_type: ProductType) -> Product | None:
        """Return the product with this name (case-insensitive) in a category."""

    @abstractmethod
    def list_all(self, include_inactive: bool = False) -> list[Product]:
        """Return products ordered by name."""

    @abstractmethod
    def list_by_type(
        self, product_type: ProductType, include_inactive: bool = False
    ) -> list[Product]:
        """Return the products of one category ordered by name."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
