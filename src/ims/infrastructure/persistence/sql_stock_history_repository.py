"""SQLAlchemy-backed implementation of StockHistoryRepository.

Only inserts and selects: the audit log is never rewritten.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from ims.domain.model.stock_history import StockHistory
from ims.domain.repository.stock_history_repository import (
    DEFAULT_HISTORY_LIMIT,
    StockHistoryRepository,
)
from ims.infrastructure.persistence.orm import StockHistoryRow


class SqlStockHistoryRepository(StockHistoryRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, record: StockHistory) -> None:
        self._session.add(
            StockHistoryRow(
                id=record.id,
                product_id=record.product_id,
                quantity_changed=record.quantity_changed,
                quantity_after=record.quantity_after,
                change_type=record.change_type,
                reason=record.reason,
                changed_by=record.changed_by,
                changed_at=record.changed_at,
            )
        )
        self._session.flush()

    def list_for(
        self,
        product_id: UUID | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> list[StockHistory]:
        stmt = select(StockHistoryRow)
        if product_id is not None:
            stmt = stmt.where(StockHistoryRow.product_id == product_id)
        if from_date is not None:
            stmt = stmt.where(StockHistoryRow.changed_at >= from_date)
        if to_date is not None:
            stmt = stmt.where(StockHistoryRow.changed_at <= to_date)
        stmt = stmt.order_by(StockHistoryRow.changed_at.desc()).limit(limit)

        return [
            StockHistory(
                id=row.id,
                product_id=row.product_id,
                quantity_changed=row.quantity_changed,
                quantity_after=row.quantity_after,
                change_type=row.change_type,
                reason=row.reason,
                changed_by=row.changed_by,
                changed_at=row.changed_at,
            )
            for row in self._session.scalars(stmt).all()
        ]
