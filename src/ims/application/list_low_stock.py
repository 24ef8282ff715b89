"""Application service: List Low-Stock Products use case (query)."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.application.product_mapper import ProductMapper
from ims.domain.exceptions import ValidationError
from ims.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD
from ims.domain.repository.product_repository import ProductRepository


class ListLowStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._low_stock_threshold = low_stock_threshold

    def handle(self, threshold: int | None = None) -> list[ProductDTO]:
        """Active products at or below the threshold, emptiest first."""
        if threshold is None:
            threshold = self._low_stock_threshold
        if threshold < 0:
            raise ValidationError("Threshold cannot be negative")

        products = [
            p for p in self._product_repo.list_all() if p.is_low_stock(threshold)
        ]
        products.sort(key=lambda p: (p.stock_quantity, p.name.key))
        return [ProductMapper.to_dto(p, threshold) for p in products]
