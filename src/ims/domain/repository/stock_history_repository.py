"""Abstract repository for StockHistory records.

The audit log is append-only: there is ``add`` and there are queries,
nothing else.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID

from ims.domain.model.stock_history import StockHistory

DEFAULT_HISTORY_LIMIT = 50


class StockHistoryRepository(ABC):

    @abstractmethod
    def add(self, record: StockHistory) -> None:
        """Append a record to the log."""

    @abstractmethod
    def list_for(
        self,
        product_id: UUID | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> list[StockHistory]:
        """Return matching records, newest first, at most ``limit`` of them.

        Date bounds are inclusive.
        """
