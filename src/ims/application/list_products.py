"""Application service: List Products use case (query)."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.application.product_mapper import ProductMapper
from ims.domain.model.enums import ProductType
from ims.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD
from ims.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._low_stock_threshold = low_stock_threshold

    def handle(
        self,
        product_type_id: int | None = None,
        include_inactive: bool = False,
    ) -> list[ProductDTO]:
        """List the catalog, optionally narrowed to one category, by name."""
        product_type = ProductType.from_id(product_type_id, "product type")
        if product_type is None:
            products = self._product_repo.list_all(include_inactive)
        else:
            products = self._product_repo.list_by_type(product_type, include_inactive)
        return [ProductMapper.to_dto(p, self._low_stock_threshold) for p in products]
