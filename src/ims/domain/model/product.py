"""Product aggregate and its five catalog variants.

The catalog is a closed set: every product is exactly one of the
variants below, identified by its ``product_type`` tag.  Common state
and the stock rules live on the abstract base; each variant adds its
own descriptive fields and an ``update_specific_info`` method.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import ClassVar
from uuid import UUID, uuid4

from ims.domain.exceptions import (
    CannotDeleteProductWithStockError,
    InsufficientStockError,
    ValidationError,
)
from ims.domain.model.enums import (
    BatterySize,
    ColorType,
    DevicePlugType,
    ProductType,
    TasteType,
)
from ims.domain.model.value_objects import Money, ProductName

DEFAULT_LOW_STOCK_THRESHOLD = 10


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(kw_only=True)
class Product:
    """Aggregate root for anything that can be stocked.

    Invariants:
    - ``stock_quantity`` is never negative
    - stock only changes through ``add_stock`` / ``remove_stock``

    Use the variant ``create()`` factories for new products.  The
    ``__init__`` is kept simple so repositories can reconstitute
    persisted rows without re-validating.
    """

    product_type: ClassVar[ProductType]

    id: UUID
    name: ProductName
    price: Money
    description: str | None = None
    photo_url: str | None = None
    stock_quantity: int = 0
    is_active: bool = True
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if type(self) is Product:
            raise TypeError("Product is abstract; create one of its variants")

    # --- Catalog info -----------------------------------------------------------

    def update_basic_info(
        self,
        name: ProductName,
        description: str | None,
        price: Money,
        photo_url: str | None,
    ) -> None:
        if name is None:
            raise ValidationError("Product name is required")
        if price is None:
            raise ValidationError("Product price is required")
        self.name = name
        self.description = description
        self.price = price
        self.photo_url = photo_url
        self._touch()

    # --- Stock ------------------------------------------------------------------

    def add_stock(self, quantity: int) -> int:
        """Increase stock and return the new level."""
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than zero")
        self.stock_quantity += quantity
        self._touch()
        return self.stock_quantity

    def remove_stock(self, quantity: int) -> int:
        """Decrease stock and return the new level.

        Raises before touching ``stock_quantity`` if the quantity is not
        positive or exceeds what is on hand.
        """
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than zero")
        if quantity > self.stock_quantity:
            raise InsufficientStockError(self.id, quantity, self.stock_quantity)
        self.stock_quantity -= quantity
        self._touch()
        return self.stock_quantity

    def is_low_stock(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
        return self.stock_quantity <= threshold

    # --- Lifecycle --------------------------------------------------------------

    def activate(self) -> None:
        self.is_active = True
        self._touch()

    def deactivate(self) -> None:
        self.is_active = False
        self._touch()

    def validate_can_be_deleted(self) -> None:
        if self.stock_quantity > 0:
            raise CannotDeleteProductWithStockError(self.name.value, self.stock_quantity)

    def _touch(self) -> None:
        self.updated_at = _utcnow()


@dataclass(kw_only=True)
class AromaBombelProduct(Product):
    product_type: ClassVar[ProductType] = ProductType.AROMA_BOMBEL

    taste: TasteType | None = None

    @staticmethod
    def create(
        name: ProductName,
        price: Money,
        description: str | None = None,
        photo_url: str | None = None,
        taste: TasteType | None = None,
    ) -> AromaBombelProduct:
        return AromaBombelProduct(
            id=uuid4(),
            name=name,
            price=price,
            description=description,
            photo_url=photo_url,
            taste=taste,
        )

    def update_specific_info(self, taste: TasteType | None) -> None:
        self.taste = taste
        self._touch()


@dataclass(kw_only=True)
class AromaBottleProduct(Product):
    product_type: ClassVar[ProductType] = ProductType.AROMA_BOTTLE

    taste: TasteType | None = None

    @staticmethod
    def create(
        name: ProductName,
        price: Money,
        description: str | None = None,
        photo_url: str | None = None,
        taste: TasteType | None = None,
    ) -> AromaBottleProduct:
        return AromaBottleProduct(
            id=uuid4(),
            name=name,
            price=price,
            description=description,
            photo_url=photo_url,
            taste=taste,
        )

    def update_specific_info(self, taste: TasteType | None) -> None:
        self.taste = taste
        self._touch()


def check_square_meter(square_meter: Decimal | None) -> None:
    if square_meter is None:
        return
    if not square_meter.is_finite():
        raise ValidationError(f"Invalid square meter coverage: {square_meter}")
    if square_meter < 0:
        raise ValidationError("Square meter coverage cannot be negative")


@dataclass(kw_only=True)
class AromaDeviceProduct(Product):
    product_type: ClassVar[ProductType] = ProductType.AROMA_DEVICE

    plug_type: DevicePlugType
    color: ColorType | None = None
    format: str | None = None
    programs: str | None = None
    square_meter: Decimal | None = None

    @staticmethod
    def create(
        name: ProductName,
        price: Money,
        plug_type: DevicePlugType,
        description: str | None = None,
        photo_url: str | None = None,
        color: ColorType | None = None,
        format: str | None = None,
        programs: str | None = None,
        square_meter: Decimal | None = None,
    ) -> AromaDeviceProduct:
        if plug_type is None:
            raise ValidationError("Plug type is required for aroma devices")
        check_square_meter(square_meter)
        return AromaDeviceProduct(
            id=uuid4(),
            name=name,
            price=price,
            description=description,
            photo_url=photo_url,
            plug_type=plug_type,
            color=color,
            format=format,
            programs=programs,
            square_meter=square_meter,
        )

    def update_specific_info(
        self,
        color: ColorType | None,
        format: str | None,
        programs: str | None,
        plug_type: DevicePlugType,
        square_meter: Decimal | None,
    ) -> None:
        if plug_type is None:
            raise ValidationError("Plug type is required for aroma devices")
        check_square_meter(square_meter)
        self.color = color
        self.format = format
        self.programs = programs
        self.plug_type = plug_type
        self.square_meter = square_meter
        self._touch()


@dataclass(kw_only=True)
class SanitizingDeviceProduct(Product):
    product_type: ClassVar[ProductType] = ProductType.SANITIZING_DEVICE

    plug_type: DevicePlugType
    color: ColorType | None = None
    format: str | None = None
    programs: str | None = None

    @staticmethod
    def create(
        name: ProductName,
        price: Money,
        plug_type: DevicePlugType,
        description: str | None = None,
        photo_url: str | None = None,
        color: ColorType | None = None,
        format: str | None = None,
        programs: str | None = None,
    ) -> SanitizingDeviceProduct:
        if plug_type is None:
            raise ValidationError("Plug type is required for sanitizing devices")
        return SanitizingDeviceProduct(
            id=uuid4(),
            name=name,
            price=price,
            description=description,
            photo_url=photo_url,
            plug_type=plug_type,
            color=color,
            format=format,
            programs=programs,
        )

    def update_specific_info(
        self,
        color: ColorType | None,
        format: str | None,
        programs: str | None,
        plug_type: DevicePlugType,
    ) -> None:
        if plug_type is None:
            raise ValidationError("Plug type is required for sanitizing devices")
        self.color = color
        self.format = format
        self.programs = programs
        self.plug_type = plug_type
        self._touch()


@dataclass(kw_only=True)
class BatteryProduct(Product):
    product_type: ClassVar[ProductType] = ProductType.BATTERY

    type: str | None = None
    size: BatterySize | None = None
    brand: str | None = None

    @staticmethod
    def create(
        name: ProductName,
        price: Money,
        description: str | None = None,
        photo_url: str | None = None,
        type: str | None = None,
        size: BatterySize | None = None,
        brand: str | None = None,
    ) -> BatteryProduct:
        return BatteryProduct(
            id=uuid4(),
            name=name,
            price=price,
            description=description,
            photo_url=photo_url,
            type=type,
            size=size,
            brand=brand,
        )

    def update_specific_info(
        self,
        type: str | None,
        size: BatterySize | None,
        brand: str | None,
    ) -> None:
        self.type = type
        self.size = size
        self.brand = brand
        self._touch()


PRODUCT_VARIANTS: dict[ProductType, type[Product]] = {
    variant.product_type: variant
    for variant in (
        AromaBombelProduct,
        AromaBottleProduct,
        AromaDeviceProduct,
        SanitizingDeviceProduct,
        BatteryProduct,
    )
}
