"""SQLAlchemy table mappings.

Rows are plain persistence records; repositories translate them to and
from domain aggregates.  Both hierarchies are stored one table per
hierarchy: a discriminator column plus nullable variant columns.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import ClassVar
from uuid import UUID as PyUUID

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator


class UUIDString(TypeDecorator):
    """UUID stored as String(36) for cross-database portability."""

    impl = String(36)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None:
            return str(value)
        return None

    def process_result_value(self, value, dialect):
        if value is not None:
            return PyUUID(value)
        return None


class UTCDateTime(TypeDecorator):
    """Timezone-aware datetimes, always UTC.

    SQLite has no timezone support, so values go in as naive UTC there
    and come back with the UTC tzinfo reattached.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Base(DeclarativeBase):

    type_annotation_map: ClassVar[dict] = {
        Decimal: Numeric(18, 2),
        datetime: UTCDateTime(),
        PyUUID: UUIDString(),
    }


class ProductRow(Base):
    __tablename__ = "products"
    __table_args__ = (
        Index("ux_products_name_type", "name_key", "product_type", unique=True),
        CheckConstraint("stock_quantity >= 0", name="ck_products_stock_non_negative"),
    )

    id: Mapped[PyUUID] = mapped_column(primary_key=True)
    product_type: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    # case-folded name backing the per-category unique index
    name_key: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(String(1000))
    price: Mapped[Decimal] = mapped_column(nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    photo_url: Mapped[str | None] = mapped_column(String(2048))
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(nullable=False)
    updated_at: Mapped[datetime] = mapped_column(nullable=False)

    # AromaBombel / AromaBottle
    taste: Mapped[int | None] = mapped_column(Integer)
    # AromaDevice / SanitizingDevice
    color: Mapped[int | None] = mapped_column(Integer)
    format: Mapped[str | None] = mapped_column(String(200))
    programs: Mapped[str | None] = mapped_column(String(2000))
    plug_type: Mapped[int | None] = mapped_column(Integer)
    square_meter: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    # Battery
    battery_type: Mapped[str | None] = mapped_column(String(100))
    battery_size: Mapped[int | None] = mapped_column(Integer)
    brand: Mapped[str | None] = mapped_column(String(100))


class ClientRow(Base):
    __tablename__ = "clients"
    __table_args__ = (
        Index(
            "ux_clients_active_nipt",
            "nipt",
            unique=True,
            sqlite_where=text("is_active = 1"),
            postgresql_where=text("is_active"),
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    client_type: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    address: Mapped[str | None] = mapped_column(String(500))
    email: Mapped[str | None] = mapped_column(String(256))
    phone_number: Mapped[str | None] = mapped_column(String(20))
    notes: Mapped[str | None] = mapped_column(String(2000))
    created_at: Mapped[datetime] = mapped_column(nullable=False)
    updated_at: Mapped[datetime] = mapped_column(nullable=False)
    created_by: Mapped[str] = mapped_column(String(36), nullable=False)
    updated_by: Mapped[str | None] = mapped_column(String(36))
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Individual
    first_name: Mapped[str | None] = mapped_column(String(50))
    last_name: Mapped[str | None] = mapped_column(String(50))
    # Business
    nipt: Mapped[str | None] = mapped_column(String(10))
    owner_first_name: Mapped[str | None] = mapped_column(String(50))
    owner_last_name: Mapped[str | None] = mapped_column(String(50))
    owner_phone_number: Mapped[str | None] = mapped_column(String(20))
    contact_person_first_name: Mapped[str | None] = mapped_column(String(50))
    contact_person_last_name: Mapped[str | None] = mapped_column(String(50))
    contact_person_phone_number: Mapped[str | None] = mapped_column(String(20))


class UserRow(Base):
    __tablename__ = "users"

    id: Mapped[PyUUID] = mapped_column(primary_key=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(256), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(nullable=False)
    updated_at: Mapped[datetime] = mapped_column(nullable=False)


class StockHistoryRow(Base):
    """Append-only; repositories never update or delete these rows."""

    __tablename__ = "stock_histories"

    id: Mapped[PyUUID] = mapped_column(primary_key=True)
    product_id: Mapped[PyUUID] = mapped_column(
        ForeignKey("products.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    quantity_changed: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity_after: Mapped[int] = mapped_column(Integer, nullable=False)
    change_type: Mapped[str] = mapped_column(String(20), nullable=False)
    reason: Mapped[str | None] = mapped_column(String(500))
    changed_by: Mapped[PyUUID] = mapped_column(
        ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    changed_at: Mapped[datetime] = mapped_column(nullable=False, index=True)
