"""Application service: Stock History use case (query)."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from ims.application.dto import StockHistoryDTO, format_timestamp
from ims.domain.exceptions import ValidationError
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.stock_history_repository import (
    DEFAULT_HISTORY_LIMIT,
    StockHistoryRepository,
)
from ims.domain.repository.user_repository import UserRepository


class StockHistoryHandler:

    def __init__(
        self,
        history_repo: StockHistoryRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository,
    ) -> None:
        self._history_repo = history_repo
        self._product_repo = product_repo
        self._user_repo = user_repo

    def handle(
        self,
        product_id: UUID | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> list[StockHistoryDTO]:
        """Return stock movements, newest first.

        Each row carries the product's name and the acting user's full
        name.  Rows whose product or user no longer resolves are left out.
        """
        if limit <= 0:
            raise ValidationError("Limit must be greater than zero")
        if from_date is not None and to_date is not None and from_date > to_date:
            raise ValidationError("From date must not be after to date")

        records = self._history_repo.list_for(
            product_id=product_id, from_date=from_date, to_date=to_date, limit=limit
        )

        product_names: dict[UUID, str | None] = {}
        user_names: dict[UUID, str | None] = {}
        rows: list[StockHistoryDTO] = []

        for record in records:
            if record.product_id not in product_names:
                product = self._product_repo.get_by_id(record.product_id)
                product_names[record.product_id] = product.name.value if product else None
            if record.changed_by not in user_names:
                user = self._user_repo.get_by_id(record.changed_by)
                user_names[record.changed_by] = user.full_name if user else None

            product_name = product_names[record.product_id]
            changed_by_name = user_names[record.changed_by]
            if product_name is None or changed_by_name is None:
                continue

            rows.append(
                StockHistoryDTO(
                    id=record.id,
                    product_id=record.product_id,
                    product_name=product_name,
                    quantity_changed=record.quantity_changed,
                    quantity_after=record.quantity_after,
                    change_type=record.change_type,
                    reason=record.reason,
                    changed_by=record.changed_by,
                    changed_by_name=changed_by_name,
                    changed_at=format_timestamp(record.changed_at),
                )
            )
        return rows
