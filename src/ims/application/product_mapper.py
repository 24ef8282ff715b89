"""Maps Product aggregates to their display DTOs."""

from __future__ import annotations

from typing import Any

from ims.application.dto import (
    AromaBombelProductDTO,
    AromaBottleProductDTO,
    AromaDeviceProductDTO,
    BatteryProductDTO,
    ProductDTO,
    SanitizingDeviceProductDTO,
    format_timestamp,
)
from ims.domain.model.enums import CatalogEnum
from ims.domain.model.product import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    AromaBombelProduct,
    AromaBottleProduct,
    AromaDeviceProduct,
    BatteryProduct,
    Product,
    SanitizingDeviceProduct,
)


def _label(member: CatalogEnum | None) -> str | None:
    return member.label if member is not None else None


def _id(member: CatalogEnum | None) -> int | None:
    return int(member) if member is not None else None


class ProductMapper:

    @staticmethod
    def to_dto(
        product: Product, low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    ) -> ProductDTO:
        base = ProductMapper._base_fields(product, low_stock_threshold)

        match product:
            case AromaBombelProduct():
                return AromaBombelProductDTO(
                    **base, taste=_label(product.taste), taste_id=_id(product.taste)
                )
            case AromaBottleProduct():
                return AromaBottleProductDTO(
                    **base, taste=_label(product.taste), taste_id=_id(product.taste)
                )
            case AromaDeviceProduct():
                return AromaDeviceProductDTO(
                    **base,
                    plug_type=product.plug_type.label,
                    plug_type_id=int(product.plug_type),
                    color=_label(product.color),
                    color_id=_id(product.color),
                    format=product.format,
                    programs=product.programs,
                    square_meter=product.square_meter,
                )
            case SanitizingDeviceProduct():
                return SanitizingDeviceProductDTO(
                    **base,
                    plug_type=product.plug_type.label,
                    plug_type_id=int(product.plug_type),
                    color=_label(product.color),
                    color_id=_id(product.color),
                    format=product.format,
                    programs=product.programs,
                )
            case BatteryProduct():
                return BatteryProductDTO(
                    **base,
                    type=product.type,
                    size=_label(product.size),
                    size_id=_id(product.size),
                    brand=product.brand,
                )
            case _:
                # Unknown variant: show what every product has.
                return ProductDTO(**base)

    @staticmethod
    def _base_fields(product: Product, low_stock_threshold: int) -> dict[str, Any]:
        return {
            "id": product.id,
            "name": product.name.value,
            "description": product.description,
            "product_type": product.product_type.label,
            "product_type_id": int(product.product_type),
            "price": product.price.amount,
            "currency": product.price.currency,
            "photo_url": product.photo_url,
            "stock_quantity": product.stock_quantity,
            "is_active": product.is_active,
            "is_low_stock": product.is_low_stock(low_stock_threshold),
            "created_at": format_timestamp(product.created_at),
            "updated_at": format_timestamp(product.updated_at),
        }
