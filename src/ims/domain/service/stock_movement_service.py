"""Domain service: Stock Movement.

A stock change touches two aggregates: the Product (its stock level)
and the StockHistory log.  This service performs both in one step so
the product's stock and its audit trail can never disagree.

Validate-then-mutate: every check runs before the product is touched,
so a rejected movement leaves nothing half-applied.
"""

from __future__ import annotations

from uuid import UUID

from ims.domain.exceptions import InsufficientStockError, ValidationError
from ims.domain.model.product import Product
from ims.domain.model.stock_history import StockHistory
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.stock_history_repository import StockHistoryRepository


class StockMovementService:

    def __init__(
        self,
        product_repo: ProductRepository,
        history_repo: StockHistoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._history_repo = history_repo

    def add(
        self,
        product: Product,
        quantity: int,
        changed_by: UUID,
        reason: str | None = None,
    ) -> StockHistory:
        """Add stock and log it.  Returns the history record."""
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than zero")

        record = StockHistory.create_addition(
            product_id=product.id,
            quantity_added=quantity,
            quantity_after=product.stock_quantity + quantity,
            reason=reason,
            changed_by=changed_by,
        )
        product.add_stock(quantity)
        self._product_repo.save(product)
        self._history_repo.add(record)
        return record

    def remove(
        self,
        product: Product,
        quantity: int,
        changed_by: UUID,
        reason: str | None = None,
    ) -> StockHistory:
        """Remove stock and log it.  Returns the history record.

        Raises InsufficientStockError with the requested and available
        quantities before any mutation if there is not enough on hand.
        """
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than zero")
        if quantity > product.stock_quantity:
            raise InsufficientStockError(product.id, quantity, product.stock_quantity)

        record = StockHistory.create_removal(
            product_id=product.id,
            quantity_removed=quantity,
            quantity_after=product.stock_quantity - quantity,
            reason=reason,
            changed_by=changed_by,
        )
        product.remove_stock(quantity)
        self._product_repo.save(product)
        self._history_repo.add(record)
        return record
