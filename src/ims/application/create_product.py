"""Application service: Create Product use case."""

from __future__ import annotations

from ims.application.dto import ProductDTO, ProductSpec
from ims.application.product_factory import build_product
from ims.application.product_mapper import ProductMapper
from ims.domain.exceptions import DuplicateProductNameError
from ims.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD
from ims.domain.repository.product_repository import ProductRepository
from ims.logging_config import get_logger

logger = get_logger("application.products")


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._low_stock_threshold = low_stock_threshold

    def handle(self, spec: ProductSpec) -> ProductDTO:
        """Add a new product to the catalog.

        The ProductSpec subclass decides the category.  Names must be unique
        within a category, ignoring case.
        """
        product = build_product(spec)

        if self._product_repo.get_by_name(product.name.value, product.product_type):
            raise DuplicateProductNameError(product.name.value, product.product_type.label)

        self._product_repo.save(product)
        logger.info(
            "product_created",
            extra={
                "product_id": product.id,
                "product_type": product.product_type.label,
                "product_name": product.name.value,
            },
        )
        return ProductMapper.to_dto(product, self._low_stock_threshold)
