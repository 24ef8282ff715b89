"""Closed catalog enumerations.

Each member carries a stable integer id (what gets persisted and what
callers pass in) and a human-readable label shown in listings.
"""

from __future__ import annotations

from enum import Enum

from ims.domain.exceptions import ValidationError


class CatalogEnum(int, Enum):

    def __new__(cls, value: int, label: str):
        member = int.__new__(cls, value)
        member._value_ = value
        member.label = label
        return member

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_id(cls, value: int | None, field: str):
        """Resolve an id to a member.

        ``None`` passes through so optional fields stay optional.
        """
        if value is None:
            return None
        try:
            return cls(int(value))
        except (ValueError, TypeError) as exc:
            raise ValidationError(f"Invalid {field}: {value!r}") from exc


class ProductType(CatalogEnum):
    AROMA_BOMBEL = 1, "AromaBombel"
    AROMA_BOTTLE = 2, "AromaBottle"
    AROMA_DEVICE = 3, "AromaDevice"
    SANITIZING_DEVICE = 4, "SanitizingDevice"
    BATTERY = 5, "Battery"


class ClientType(CatalogEnum):
    INDIVIDUAL = 1, "Individual"
    BUSINESS = 2, "Business"


class TasteType(CatalogEnum):
    FLOWER = 1, "Flower"
    SWEET = 2, "Sweet"
    FRESH = 3, "Fresh"
    FRUIT = 4, "Fruit"


class ColorType(CatalogEnum):
    RED = 1, "Red"
    BLUE = 2, "Blue"
    GREEN = 3, "Green"
    YELLOW = 4, "Yellow"
    ORANGE = 5, "Orange"
    PURPLE = 6, "Purple"
    PINK = 7, "Pink"
    BROWN = 8, "Brown"
    BLACK = 9, "Black"
    WHITE = 10, "White"
    GRAY = 11, "Gray"


class DevicePlugType(CatalogEnum):
    WITH_PLUG = 1, "WithPlug"
    WITHOUT_PLUG = 2, "WithoutPlug"


class BatterySize(CatalogEnum):
    LR6 = 1, "LR6"
    LR9 = 2, "LR9"
