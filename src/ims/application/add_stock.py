"""Application service: Add Stock use case."""

from __future__ import annotations

from uuid import UUID

from ims.application.current_user import require_actor
from ims.domain.exceptions import ProductNotFoundError, ValidationError
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.stock_history_repository import StockHistoryRepository
from ims.domain.service.stock_movement_service import StockMovementService
from ims.logging_config import get_logger

logger = get_logger("application.stock")

REASON_MAX_LENGTH = 500


def check_reason(reason: str | None) -> str | None:
    if reason is None or not reason.strip():
        return None
    if len(reason) > REASON_MAX_LENGTH:
        raise ValidationError(f"Reason cannot exceed {REASON_MAX_LENGTH} characters")
    return reason.strip()


class AddStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        history_repo: StockHistoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._stock_service = StockMovementService(product_repo, history_repo)

    def handle(
        self,
        product_id: UUID,
        quantity: int,
        actor_id: UUID | None,
        reason: str | None = None,
    ) -> int:
        """Receive stock for a product and return the new stock level.

        The product and its history record are saved together.
        """
        changed_by = require_actor(actor_id, "add stock")
        reason = check_reason(reason)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        record = self._stock_service.add(product, quantity, changed_by, reason)
        logger.info(
            "stock_added",
            extra={
                "product_id": product.id,
                "quantity": quantity,
                "quantity_after": record.quantity_after,
                "changed_by": changed_by,
            },
        )
        return product.stock_quantity
