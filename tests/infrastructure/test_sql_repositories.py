"""Tests for the SQLAlchemy repositories against in-memory SQLite."""

from dataclasses import replace
from datetime import timedelta
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from ims.domain.exceptions import DuplicateEmailError, DuplicateNiptError, DuplicateProductNameError
from ims.domain.model.client import BusinessClient, IndividualClient
from ims.domain.model.enums import BatterySize, ColorType, DevicePlugType, ProductType, TasteType
from ims.domain.model.product import (
    AromaBombelProduct,
    AromaDeviceProduct,
    BatteryProduct,
)
from ims.domain.model.stock_history import StockHistory
from ims.domain.model.user import User
from ims.domain.model.value_objects import Email, Money, Nipt, ProductName
from ims.infrastructure.persistence import database
from ims.infrastructure.persistence.sql_client_repository import SqlClientRepository
from ims.infrastructure.persistence.sql_product_repository import SqlProductRepository
from ims.infrastructure.persistence.sql_stock_history_repository import SqlStockHistoryRepository
from ims.infrastructure.persistence.sql_user_repository import SqlUserRepository


@pytest.fixture
def session():
    database.init_engine_from_url("sqlite://")
    database.create_tables()
    s = database.get_session()
    yield s
    s.close()
    database.reset_engine()


def _bombel(name="Lavender") -> AromaBombelProduct:
    return AromaBombelProduct.create(
        name=ProductName.create(name), price=Money.create("15.50"), taste=TasteType.SWEET
    )


def _user(email="ana@example.com") -> User:
    return User.create("Ana", "Hoxha", Email.create(email), "hash")


class TestSqlProductRepository:

    def test_round_trip_keeps_variant(self, session):
        repo = SqlProductRepository(session)
        device = AromaDeviceProduct.create(
            name=ProductName.create("Diffuser"),
            price=Money.create("120", "EUR"),
            plug_type=DevicePlugType.WITHOUT_PLUG,
            color=ColorType.WHITE,
            square_meter=Decimal("45.50"),
        )
        repo.save(device)
        session.expire_all()

        loaded = repo.get_by_id(device.id)
        assert isinstance(loaded, AromaDeviceProduct)
        assert loaded.plug_type is DevicePlugType.WITHOUT_PLUG
        assert loaded.color is ColorType.WHITE
        assert loaded.square_meter == Decimal("45.50")
        assert loaded.price == Money.create("120", "EUR")
        assert loaded.created_at.tzinfo is not None

    def test_get_by_name_is_case_insensitive(self, session):
        repo = SqlProductRepository(session)
        repo.save(_bombel("Lavender"))
        assert repo.get_by_name("LAVENDER", ProductType.AROMA_BOMBEL) is not None
        assert repo.get_by_name("Lavender", ProductType.AROMA_BOTTLE) is None

    def test_unique_name_per_category(self, session):
        repo = SqlProductRepository(session)
        repo.save(_bombel("Lavender"))
        with pytest.raises(DuplicateProductNameError):
            repo.save(_bombel("lavender"))

    def test_update_existing_row(self, session):
        repo = SqlProductRepository(session)
        product = _bombel()
        repo.save(product)
        product.add_stock(7)
        repo.save(product)
        assert repo.get_by_id(product.id).stock_quantity == 7

    def test_lists_hide_inactive_and_sort_by_name(self, session):
        repo = SqlProductRepository(session)
        battery = BatteryProduct.create(
            name=ProductName.create("aa pack"), price=Money.create("3"), size=BatterySize.LR9
        )
        gone = _bombel("Zinnia")
        gone.deactivate()
        for p in (_bombel("Rose"), battery, gone):
            repo.save(p)

        assert [p.name.value for p in repo.list_all()] == ["aa pack", "Rose"]
        assert len(repo.list_all(include_inactive=True)) == 3
        assert [p.name.value for p in repo.list_by_type(ProductType.BATTERY)] == ["aa pack"]
        assert repo.list_by_type(ProductType.BATTERY)[0].size is BatterySize.LR9


class TestSqlClientRepository:

    def test_round_trip_individual(self, session):
        repo = SqlClientRepository(session)
        client = IndividualClient.create("Ana", "Hoxha", created_by="admin", email="ana@example.com")
        repo.save(client)
        loaded = repo.get_by_id(client.id)
        assert isinstance(loaded, IndividualClient)
        assert loaded.full_name == "Ana Hoxha"

    def test_round_trip_business(self, session):
        repo = SqlClientRepository(session)
        client = BusinessClient.create(
            nipt=Nipt("K12345678A"),
            contact_person_first_name="Besa",
            contact_person_last_name="Kola",
            owner_first_name="Dritan",
            owner_last_name="Leka",
            created_by="admin",
        )
        repo.save(client)
        loaded = repo.get_business_by_nipt("k12345678a")
        assert isinstance(loaded, BusinessClient)
        assert loaded.owner_full_name == "Dritan Leka"

    def test_active_nipt_unique(self, session):
        repo = SqlClientRepository(session)
        first = BusinessClient.create(Nipt("K12345678A"), "Besa", "Kola", created_by="admin")
        repo.save(first)
        with pytest.raises(DuplicateNiptError):
            repo.save(BusinessClient.create(Nipt("K12345678A"), "Arta", "Meta", created_by="admin"))

    def test_other_integrity_errors_are_not_reported_as_duplicate_nipt(self, session):
        repo = SqlClientRepository(session)
        client = BusinessClient.create(Nipt("K12345678A"), "Besa", "Kola", created_by="admin")
        client.created_by = None
        with pytest.raises(IntegrityError, match="created_by"):
            repo.save(client)

    def test_inactive_nipt_can_be_reused(self, session):
        repo = SqlClientRepository(session)
        first = BusinessClient.create(Nipt("K12345678A"), "Besa", "Kola", created_by="admin")
        first.deactivate("admin")
        repo.save(first)
        repo.save(BusinessClient.create(Nipt("K12345678A"), "Arta", "Meta", created_by="admin"))
        assert repo.get_business_by_nipt("K12345678A").contact_person_first_name == "Arta"
        assert len(repo.list_all(include_inactive=True)) == 2
        assert len(repo.list_all()) == 1


class TestSqlUserRepository:

    def test_round_trip(self, session):
        repo = SqlUserRepository(session)
        user = _user()
        repo.save(user)
        loaded = repo.get_by_email("ANA@example.com")
        assert loaded.id == user.id
        assert loaded.full_name == "Ana Hoxha"

    def test_unique_email(self, session):
        repo = SqlUserRepository(session)
        repo.save(_user())
        with pytest.raises(DuplicateEmailError):
            repo.save(_user())


class TestSqlStockHistoryRepository:

    def _seed(self, session):
        products = SqlProductRepository(session)
        users = SqlUserRepository(session)
        product, user = _bombel(), _user()
        products.save(product)
        users.save(user)
        return product, user

    def test_newest_first_with_limit(self, session):
        product, user = self._seed(session)
        repo = SqlStockHistoryRepository(session)
        older = StockHistory.create_addition(product.id, 5, 5, "Delivery", user.id)
        older = replace(older, changed_at=older.changed_at - timedelta(hours=1))
        newer = StockHistory.create_removal(product.id, 2, 3, None, user.id)
        repo.add(older)
        repo.add(newer)

        rows = repo.list_for(product_id=product.id)
        assert [r.id for r in rows] == [newer.id, older.id]
        assert rows[1].reason == "Delivery"
        assert rows[0].quantity_changed == -2
        assert len(repo.list_for(limit=1)) == 1

    def test_date_filter(self, session):
        product, user = self._seed(session)
        repo = SqlStockHistoryRepository(session)
        record = StockHistory.create_addition(product.id, 1, 1, None, user.id)
        repo.add(record)
        assert repo.list_for(from_date=record.changed_at, to_date=record.changed_at) != []
        assert repo.list_for(from_date=record.changed_at + timedelta(seconds=1)) == []
