"""Unit tests for the Product aggregate and its variants."""

from decimal import Decimal

import pytest

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
from ims.domain.model.product import (
    PRODUCT_VARIANTS,
    AromaBombelProduct,
    AromaDeviceProduct,
    BatteryProduct,
    Product,
    SanitizingDeviceProduct,
)
from ims.domain.model.value_objects import Money, ProductName


def _bombel(stock: int = 0) -> AromaBombelProduct:
    p = AromaBombelProduct.create(
        name=ProductName.create("Lavender Bombel"),
        price=Money.create("15.00"),
        taste=TasteType.FLOWER,
    )
    p.stock_quantity = stock
    return p


class TestProductCreation:

    def test_new_product_defaults(self):
        p = _bombel()
        assert p.stock_quantity == 0
        assert p.is_active
        assert p.product_type is ProductType.AROMA_BOMBEL
        assert p.taste is TasteType.FLOWER

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            Product(id=None, name=ProductName.create("Xx"), price=Money.create("1"))

    def test_device_requires_plug_type(self):
        with pytest.raises(ValidationError, match="Plug type is required"):
            AromaDeviceProduct.create(
                name=ProductName.create("Diffuser"),
                price=Money.create("40"),
                plug_type=None,
            )

    def test_device_rejects_negative_square_meter(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            AromaDeviceProduct.create(
                name=ProductName.create("Diffuser"),
                price=Money.create("40"),
                plug_type=DevicePlugType.WITH_PLUG,
                square_meter=Decimal("-1"),
            )

    @pytest.mark.parametrize("square_meter", ["NaN", "Infinity", "-Infinity", "sNaN"])
    def test_device_rejects_non_finite_square_meter(self, square_meter):
        with pytest.raises(ValidationError, match="Invalid square meter coverage"):
            AromaDeviceProduct.create(
                name=ProductName.create("Diffuser"),
                price=Money.create("40"),
                plug_type=DevicePlugType.WITH_PLUG,
                square_meter=Decimal(square_meter),
            )

    def test_variant_registry_covers_every_type(self):
        assert set(PRODUCT_VARIANTS) == set(ProductType)


class TestStock:

    def test_add_stock(self):
        p = _bombel()
        assert p.add_stock(5) == 5
        assert p.stock_quantity == 5

    @pytest.mark.parametrize("qty", [0, -3])
    def test_add_non_positive_rejected(self, qty):
        p = _bombel()
        with pytest.raises(ValidationError, match="greater than zero"):
            p.add_stock(qty)

    def test_remove_stock(self):
        p = _bombel(stock=10)
        assert p.remove_stock(4) == 6

    def test_remove_more_than_available_leaves_stock(self):
        p = _bombel(stock=3)
        with pytest.raises(InsufficientStockError) as exc_info:
            p.remove_stock(5)
        assert exc_info.value.requested == 5
        assert exc_info.value.available == 3
        assert p.stock_quantity == 3

    def test_remove_everything(self):
        p = _bombel(stock=3)
        assert p.remove_stock(3) == 0

    def test_low_stock_is_inclusive(self):
        assert _bombel(stock=10).is_low_stock(10)
        assert not _bombel(stock=11).is_low_stock(10)

    def test_stock_changes_touch_updated_at(self):
        p = _bombel()
        before = p.updated_at
        p.add_stock(1)
        assert p.updated_at >= before


class TestLifecycle:

    def test_cannot_delete_with_stock(self):
        with pytest.raises(CannotDeleteProductWithStockError, match="3 units"):
            _bombel(stock=3).validate_can_be_deleted()

    def test_can_delete_when_empty(self):
        _bombel().validate_can_be_deleted()

    def test_deactivate_and_activate(self):
        p = _bombel()
        p.deactivate()
        assert not p.is_active
        p.activate()
        assert p.is_active


class TestUpdates:

    def test_update_basic_info(self):
        p = _bombel()
        p.update_basic_info(
            ProductName.create("Rose Bombel"), "New", Money.create("9.99"), None
        )
        assert p.name.value == "Rose Bombel"
        assert p.price == Money.create("9.99")
        assert p.description == "New"

    def test_update_sanitizing_device(self):
        p = SanitizingDeviceProduct.create(
            name=ProductName.create("Sanitizer"),
            price=Money.create("60"),
            plug_type=DevicePlugType.WITH_PLUG,
        )
        p.update_specific_info(ColorType.BLUE, "Tower", "Auto", DevicePlugType.WITHOUT_PLUG)
        assert p.color is ColorType.BLUE
        assert p.plug_type is DevicePlugType.WITHOUT_PLUG

    def test_update_battery(self):
        p = BatteryProduct.create(name=ProductName.create("AA Pack"), price=Money.create("3"))
        p.update_specific_info("Alkaline", BatterySize.LR6, "Duracell")
        assert (p.type, p.size, p.brand) == ("Alkaline", BatterySize.LR6, "Duracell")
