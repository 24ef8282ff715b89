"""Application service: Delete Product use case.

Deleting is a soft delete: the product is deactivated and disappears
from listings, but its stock history stays intact.
"""

from __future__ import annotations

from uuid import UUID

from ims.domain.exceptions import ProductNotFoundError
from ims.domain.repository.product_repository import ProductRepository
from ims.logging_config import get_logger

logger = get_logger("application.products")


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: UUID) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        product.validate_can_be_deleted()
        product.deactivate()
        self._product_repo.save(product)
        logger.info("product_deleted", extra={"product_id": product.id})
