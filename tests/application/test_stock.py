"""Integration tests for stock movements and the stock history query."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from ims.application.add_stock import AddStockHandler
from ims.application.remove_stock import RemoveStockHandler
from ims.application.stock_history import StockHistoryHandler
from ims.domain.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    UnauthorizedError,
    ValidationError,
)
from ims.domain.model.product import AromaBombelProduct, BatteryProduct
from ims.domain.model.stock_history import StockHistory
from ims.domain.model.user import User
from ims.domain.model.value_objects import Email, Money, ProductName
from tests.fakes import FakeProductRepository, FakeStockHistoryRepository, FakeUserRepository


class Env:

    def __init__(self) -> None:
        self.user = User.create("Ana", "Hoxha", Email.create("ana@example.com"), "hash")
        self.product = AromaBombelProduct.create(
            name=ProductName.create("Lavender"), price=Money.create("15")
        )
        self.battery = BatteryProduct.create(
            name=ProductName.create("AA Pack"), price=Money.create("3")
        )
        self.products = FakeProductRepository([self.product, self.battery])
        self.history = FakeStockHistoryRepository()
        self.users = FakeUserRepository([self.user])

    def add(self, quantity, reason=None, product=None, actor=None):
        handler = AddStockHandler(self.products, self.history)
        return handler.handle((product or self.product).id, quantity, actor or self.user.id, reason)

    def remove(self, quantity, reason=None, product=None, actor=None):
        handler = RemoveStockHandler(self.products, self.history)
        return handler.handle((product or self.product).id, quantity, actor or self.user.id, reason)

    def history_query(self, **kwargs):
        return StockHistoryHandler(self.history, self.products, self.users).handle(**kwargs)


@pytest.fixture
def env() -> Env:
    return Env()


class TestAddStock:

    def test_returns_new_level(self, env):
        assert env.add(10) == 10
        assert env.add(5) == 15
        assert env.product.stock_quantity == 15

    def test_records_history(self, env):
        env.add(10, reason="  Delivery  ")
        [record] = env.history.all()
        assert record.quantity_changed == 10
        assert record.quantity_after == 10
        assert record.reason == "Delivery"
        assert record.changed_by == env.user.id

    def test_requires_actor(self, env):
        with pytest.raises(UnauthorizedError, match="authenticated"):
            AddStockHandler(env.products, env.history).handle(env.product.id, 1, None)
        assert env.product.stock_quantity == 0

    def test_unknown_product(self, env):
        with pytest.raises(ProductNotFoundError):
            env.add(1, product=AromaBombelProduct.create(
                name=ProductName.create("Ghost"), price=Money.create("1")
            ))

    @pytest.mark.parametrize("qty", [0, -2])
    def test_quantity_must_be_positive(self, env, qty):
        with pytest.raises(ValidationError):
            env.add(qty)
        assert env.history.all() == []

    def test_reason_limit(self, env):
        with pytest.raises(ValidationError, match="500"):
            env.add(1, reason="x" * 501)

    def test_blank_reason_stored_as_none(self, env):
        env.add(1, reason="   ")
        assert env.history.all()[0].reason is None


class TestRemoveStock:

    def test_returns_new_level(self, env):
        env.add(10)
        assert env.remove(4) == 6

    def test_insufficient_stock(self, env):
        env.add(3)
        with pytest.raises(InsufficientStockError) as exc_info:
            env.remove(5)
        assert exc_info.value.requested == 5
        assert exc_info.value.available == 3
        assert env.product.stock_quantity == 3
        assert len(env.history.all()) == 1

    def test_removal_history_is_negative(self, env):
        env.add(10)
        env.remove(4, reason="Sold")
        removal = [r for r in env.history.all() if r.change_type == "Removed"][0]
        assert removal.quantity_changed == -4
        assert removal.quantity_after == 6

    def test_requires_actor(self, env):
        env.add(3)
        with pytest.raises(UnauthorizedError):
            RemoveStockHandler(env.products, env.history).handle(env.product.id, 1, None)


class TestStockHistory:

    def _backdate(self, env, days):
        """Shift every record back in time by ``days``."""
        for key, record in list(env.history._store.items()):
            env.history._store[key] = replace(
                record, changed_at=record.changed_at - timedelta(days=days)
            )

    def test_enriched_rows_newest_first(self, env):
        env.add(10, reason="Delivery")
        self._backdate(env, 1)
        env.remove(3)
        rows = env.history_query()
        assert [r.change_type for r in rows] == ["Removed", "Added"]
        assert rows[0].product_name == "Lavender"
        assert rows[0].changed_by_name == "Ana Hoxha"
        assert rows[1].reason == "Delivery"
        assert rows[1].changed_at.endswith("UTC")

    def test_filter_by_product(self, env):
        env.add(1)
        env.add(2, product=env.battery)
        rows = env.history_query(product_id=env.battery.id)
        assert [r.product_name for r in rows] == ["AA Pack"]

    def test_date_bounds_inclusive(self, env):
        env.add(1)
        self._backdate(env, 10)
        env.add(2)
        now = datetime.now(timezone.utc)
        rows = env.history_query(from_date=now - timedelta(days=1), to_date=now + timedelta(minutes=1))
        assert [r.quantity_changed for r in rows] == [2]

    def test_limit(self, env):
        for _ in range(5):
            env.add(1)
        assert len(env.history_query(limit=3)) == 3

    def test_limit_must_be_positive(self, env):
        with pytest.raises(ValidationError, match="Limit"):
            env.history_query(limit=0)

    def test_from_after_to_rejected(self, env):
        now = datetime.now(timezone.utc)
        with pytest.raises(ValidationError, match="From date"):
            env.history_query(from_date=now, to_date=now - timedelta(days=1))

    def test_rows_with_unknown_user_skipped(self, env):
        env.add(1)
        env.history.add(
            StockHistory.create_addition(env.product.id, 1, 2, None, uuid4())
        )
        rows = env.history_query()
        assert len(rows) == 1
        assert rows[0].changed_by_name == "Ana Hoxha"
