"""StockHistory: the append-only audit trail of stock movements.

One record is written for every successful ``add_stock`` / ``remove_stock``.
Records are frozen; there is no way to edit or delete one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from ims.domain.exceptions import ValidationError

ADDED = "Added"
REMOVED = "Removed"

_NIL_UUID = UUID(int=0)


@dataclass(frozen=True)
class StockHistory:
    """A single stock movement.

    ``quantity_changed`` is signed: positive for additions, negative for
    removals.  ``quantity_after`` is the product's stock level once the
    movement was applied.
    """

    id: UUID
    product_id: UUID
    quantity_changed: int
    quantity_after: int
    change_type: str
    changed_by: UUID
    reason: str | None = None
    changed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create_addition(
        product_id: UUID,
        quantity_added: int,
        quantity_after: int,
        reason: str | None,
        changed_by: UUID,
    ) -> StockHistory:
        if quantity_added <= 0:
            raise ValidationError("Quantity added must be positive")
        _check_ids(product_id, changed_by)
        return StockHistory(
            id=uuid4(),
            product_id=product_id,
            quantity_changed=quantity_added,
            quantity_after=quantity_after,
            change_type=ADDED,
            reason=reason,
            changed_by=changed_by,
        )

    @staticmethod
    def create_removal(
        product_id: UUID,
        quantity_removed: int,
        quantity_after: int,
        reason: str | None,
        changed_by: UUID,
    ) -> StockHistory:
        if quantity_removed <= 0:
            raise ValidationError("Quantity removed must be positive")
        _check_ids(product_id, changed_by)
        return StockHistory(
            id=uuid4(),
            product_id=product_id,
            quantity_changed=-quantity_removed,
            quantity_after=quantity_after,
            change_type=REMOVED,
            reason=reason,
            changed_by=changed_by,
        )


def _check_ids(product_id: UUID, changed_by: UUID) -> None:
    if product_id is None or product_id == _NIL_UUID:
        raise ValidationError("Product ID cannot be empty")
    if changed_by is None or changed_by == _NIL_UUID:
        raise ValidationError("Changed by user ID cannot be empty")
