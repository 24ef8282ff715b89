"""Application service: Update Product use case."""

from __future__ import annotations

from uuid import UUID

from ims.application.dto import ProductDTO, ProductSpec
from ims.application.product_factory import apply_spec
from ims.application.product_mapper import ProductMapper
from ims.domain.exceptions import DuplicateProductNameError, ProductNotFoundError
from ims.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD
from ims.domain.model.value_objects import ProductName
from ims.domain.repository.product_repository import ProductRepository
from ims.logging_config import get_logger

logger = get_logger("application.products")


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._low_stock_threshold = low_stock_threshold

    def handle(self, product_id: UUID, spec: ProductSpec) -> ProductDTO:
        """Replace a product's catalog details.

        The product must exist and belong to the category of the given ProductSpec;
        a product of another category counts as not found.  Stock is
        never touched here.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None or product.product_type != spec.product_type:
            raise ProductNotFoundError(product_id)

        name = ProductName.create(spec.name)
        existing = self._product_repo.get_by_name(name.value, product.product_type)
        if existing is not None and existing.id != product.id:
            raise DuplicateProductNameError(name.value, product.product_type.label)

        apply_spec(product, spec)
        self._product_repo.save(product)
        logger.info(
            "product_updated",
            extra={"product_id": product.id, "product_name": product.name.value},
        )
        return ProductMapper.to_dto(product, self._low_stock_threshold)
