"""Application service: Show Product use case (query)."""

from __future__ import annotations

from uuid import UUID

from ims.application.dto import ProductDTO
from ims.application.product_mapper import ProductMapper
from ims.domain.exceptions import ProductNotFoundError
from ims.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD
from ims.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._low_stock_threshold = low_stock_threshold

    def handle(self, product_id: UUID) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return ProductMapper.to_dto(product, self._low_stock_threshold)
