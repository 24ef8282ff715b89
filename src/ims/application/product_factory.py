"""Turns product input specs into Product aggregates.

Shared by the create and update use cases so both apply the same
input rules: positive price, bounded free-text fields, an http(s)
photo URL and catalog ids that exist.
"""

from __future__ import annotations

from decimal import Decimal
from urllib.parse import urlparse

from ims.application.dto import (
    AromaBombelSpec,
    AromaBottleSpec,
    AromaDeviceSpec,
    BatterySpec,
    ProductSpec,
    SanitizingDeviceSpec,
)
from ims.domain.exceptions import ValidationError
from ims.domain.model.enums import BatterySize, ColorType, DevicePlugType, TasteType
from ims.domain.model.product import (
    AromaBombelProduct,
    AromaBottleProduct,
    AromaDeviceProduct,
    BatteryProduct,
    Product,
    SanitizingDeviceProduct,
    check_square_meter,
)
from ims.domain.model.value_objects import Money, ProductName

DESCRIPTION_MAX_LENGTH = 1000
FORMAT_MAX_LENGTH = 200
PROGRAMS_MAX_LENGTH = 2000
BATTERY_TEXT_MAX_LENGTH = 100


def _check_length(value: str | None, limit: int, label: str) -> None:
    if value is not None and len(value) > limit:
        raise ValidationError(f"{label} cannot exceed {limit} characters")


def _check_photo_url(url: str | None) -> None:
    if url is None or not url.strip():
        return
    parsed = urlparse(url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError("Photo URL must be a valid http or https URL")


def _optional(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


def basic_info(spec: ProductSpec) -> tuple[ProductName, str | None, Money, str | None]:
    """Validate the fields every spec shares."""
    name = ProductName.create(spec.name)
    description = _optional(spec.description)
    _check_length(description, DESCRIPTION_MAX_LENGTH, "Description")
    if spec.currency is None or len(spec.currency.strip()) != 3:
        raise ValidationError("Currency code must be exactly 3 characters")
    price = Money.create(spec.price, spec.currency)
    if price.amount <= Decimal("0"):
        raise ValidationError("Price must be greater than zero")
    photo_url = _optional(spec.photo_url)
    _check_photo_url(photo_url)
    return name, description, price, photo_url


def _device_fields(
    spec: AromaDeviceSpec | SanitizingDeviceSpec,
) -> tuple[ColorType | None, str | None, str | None, DevicePlugType]:
    if spec.plug_type_id is None:
        raise ValidationError("Plug type is required")
    plug_type = DevicePlugType.from_id(spec.plug_type_id, "plug type")
    color = ColorType.from_id(spec.color_id, "color")
    fmt = _optional(spec.format)
    programs = _optional(spec.programs)
    _check_length(fmt, FORMAT_MAX_LENGTH, "Format")
    _check_length(programs, PROGRAMS_MAX_LENGTH, "Programs")
    return color, fmt, programs, plug_type


def _battery_fields(spec: BatterySpec) -> tuple[str | None, BatterySize | None, str | None]:
    battery_type = _optional(spec.type)
    brand = _optional(spec.brand)
    _check_length(battery_type, BATTERY_TEXT_MAX_LENGTH, "Battery type")
    _check_length(brand, BATTERY_TEXT_MAX_LENGTH, "Brand")
    return battery_type, BatterySize.from_id(spec.size_id, "battery size"), brand


def build_product(spec: ProductSpec) -> Product:
    """Validate a spec and create the matching new product."""
    name, description, price, photo_url = basic_info(spec)
    common = dict(name=name, price=price, description=description, photo_url=photo_url)

    match spec:
        case AromaBombelSpec():
            taste = TasteType.from_id(spec.taste_id, "taste")
            return AromaBombelProduct.create(**common, taste=taste)
        case AromaBottleSpec():
            taste = TasteType.from_id(spec.taste_id, "taste")
            return AromaBottleProduct.create(**common, taste=taste)
        case AromaDeviceSpec():
            color, fmt, programs, plug_type = _device_fields(spec)
            return AromaDeviceProduct.create(
                **common,
                plug_type=plug_type,
                color=color,
                format=fmt,
                programs=programs,
                square_meter=spec.square_meter,
            )
        case SanitizingDeviceSpec():
            color, fmt, programs, plug_type = _device_fields(spec)
            return SanitizingDeviceProduct.create(
                **common,
                plug_type=plug_type,
                color=color,
                format=fmt,
                programs=programs,
            )
        case BatterySpec():
            battery_type, size, brand = _battery_fields(spec)
            return BatteryProduct.create(
                **common, type=battery_type, size=size, brand=brand
            )
        case _:
            raise ValidationError(f"Unsupported product spec: {type(spec).__name__}")


def apply_spec(product: Product, spec: ProductSpec) -> None:
    """Validate a spec and write it onto an existing product of the same type.

    All validation happens before the first assignment.
    """
    name, description, price, photo_url = basic_info(spec)

    match (product, spec):
        case (AromaBombelProduct(), AromaBombelSpec()) | (
            AromaBottleProduct(),
            AromaBottleSpec(),
        ):
            taste = TasteType.from_id(spec.taste_id, "taste")
            product.update_basic_info(name, description, price, photo_url)
            product.update_specific_info(taste)
        case (AromaDeviceProduct(), AromaDeviceSpec()):
            color, fmt, programs, plug_type = _device_fields(spec)
            check_square_meter(spec.square_meter)
            product.update_basic_info(name, description, price, photo_url)
            product.update_specific_info(color, fmt, programs, plug_type, spec.square_meter)
        case (SanitizingDeviceProduct(), SanitizingDeviceSpec()):
            color, fmt, programs, plug_type = _device_fields(spec)
            product.update_basic_info(name, description, price, photo_url)
            product.update_specific_info(color, fmt, programs, plug_type)
        case (BatteryProduct(), BatterySpec()):
            battery_type, size, brand = _battery_fields(spec)
            product.update_basic_info(name, description, price, photo_url)
            product.update_specific_info(battery_type, size, brand)
        case _:
            raise ValidationError(
                f"Cannot apply {type(spec).__name__} to a {product.product_type.label} product"
            )
