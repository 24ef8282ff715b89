"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ims.domain.exceptions import DuplicateProductNameError
from ims.domain.model.enums import (
    BatterySize,
    ColorType,
    DevicePlugType,
    ProductType,
    TasteType,
)
from ims.domain.model.product import (
    AromaBombelProduct,
    AromaBottleProduct,
    AromaDeviceProduct,
    BatteryProduct,
    Product,
    SanitizingDeviceProduct,
)
from ims.domain.model.value_objects import Money, ProductName
from ims.domain.repository.product_repository import ProductRepository
from ims.infrastructure.persistence.orm import ProductRow

_VARIANT_COLUMNS = (
    "taste",
    "color",
    "format",
    "programs",
    "plug_type",
    "square_meter",
    "battery_type",
    "battery_size",
    "brand",
)


def _enum_id(member) -> int | None:
    return int(member) if member is not None else None


def _enum(enum_cls, value: int | None):
    return enum_cls(value) if value is not None else None


class SqlProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: UUID) -> Product | None:
        row = self._session.get(ProductRow, product_id)
        return self._to_domain(row) if row is not None else None

    def get_by_name(self, name: str, product_type: ProductType) -> Product | None:
        stmt = select(ProductRow).where(
            ProductRow.name_key == name.strip().casefold(),
            ProductRow.product_type == int(product_type),
        )
        row = self._session.scalars(stmt).first()
        return self._to_domain(row) if row is not None else None

    def list_all(self, include_inactive: bool = False) -> list[Product]:
        stmt = select(ProductRow)
        if not include_inactive:
            stmt = stmt.where(ProductRow.is_active.is_(True))
        return self._list(stmt)

    def list_by_type(
        self, product_type: ProductType, include_inactive: bool = False
    ) -> list[Product]:
        stmt = select(ProductRow).where(ProductRow.product_type == int(product_type))
        if not include_inactive:
            stmt = stmt.where(ProductRow.is_active.is_(True))
        return self._list(stmt)

    def save(self, product: Product) -> None:
        row = self._session.get(ProductRow, product.id)
        if row is None:
            row = ProductRow(id=product.id)
            self._session.add(row)
        for key, value in self._to_columns(product).items():
            setattr(row, key, value)
        try:
            self._session.flush()
        except IntegrityError as exc:
            if "name" in str(exc.orig).lower():
                raise DuplicateProductNameError(
                    product.name.value, product.product_type.label
                ) from exc
            raise

    # --- Mapping helpers ------------------------------------------------------

    def _list(self, stmt) -> list[Product]:
        rows = self._session.scalars(stmt.order_by(ProductRow.name_key)).all()
        return [self._to_domain(row) for row in rows]

    @staticmethod
    def _to_columns(product: Product) -> dict[str, Any]:
        columns: dict[str, Any] = {
            "product_type": int(product.product_type),
            "name": product.name.value,
            "name_key": product.name.key,
            "description": product.description,
            "price": product.price.amount,
            "currency": product.price.currency,
            "photo_url": product.photo_url,
            "stock_quantity": product.stock_quantity,
            "is_active": product.is_active,
            "created_at": product.created_at,
            "updated_at": product.updated_at,
        }
        columns.update(dict.fromkeys(_VARIANT_COLUMNS))

        match product:
            case AromaBombelProduct() | AromaBottleProduct():
                columns["taste"] = _enum_id(product.taste)
            case AromaDeviceProduct():
                columns.update(
                    color=_enum_id(product.color),
                    format=product.format,
                    programs=product.programs,
                    plug_type=int(product.plug_type),
                    square_meter=product.square_meter,
                )
            case SanitizingDeviceProduct():
                columns.update(
                    color=_enum_id(product.color),
                    format=product.format,
                    programs=product.programs,
                    plug_type=int(product.plug_type),
                )
            case BatteryProduct():
                columns.update(
                    battery_type=product.type,
                    battery_size=_enum_id(product.size),
                    brand=product.brand,
                )
        return columns

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        common = dict(
            id=row.id,
            name=ProductName(row.name),
            price=Money(row.price, row.currency),
            description=row.description,
            photo_url=row.photo_url,
            stock_quantity=row.stock_quantity,
            is_active=row.is_active,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
        product_type = ProductType(row.product_type)

        if product_type is ProductType.AROMA_BOMBEL:
            return AromaBombelProduct(**common, taste=_enum(TasteType, row.taste))
        if product_type is ProductType.AROMA_BOTTLE:
            return AromaBottleProduct(**common, taste=_enum(TasteType, row.taste))
        if product_type is ProductType.AROMA_DEVICE:
            return AromaDeviceProduct(
                **common,
                plug_type=DevicePlugType(row.plug_type),
                color=_enum(ColorType, row.color),
                format=row.format,
                programs=row.programs,
                square_meter=row.square_meter,
            )
        if product_type is ProductType.SANITIZING_DEVICE:
            return SanitizingDeviceProduct(
                **common,
                plug_type=DevicePlugType(row.plug_type),
                color=_enum(ColorType, row.color),
                format=row.format,
                programs=row.programs,
            )
        return BatteryProduct(
            **common,
            type=row.battery_type,
            size=_enum(BatterySize, row.battery_size),
            brand=row.brand,
        )
