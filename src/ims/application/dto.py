"""Data Transfer Objects: plain containers that cross layer boundaries.

Specs are the inputs the CLI hands to a handler; DTOs are what comes
back.  Neither exposes domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from ims.domain.model.enums import ProductType
from ims.domain.model.value_objects import DEFAULT_CURRENCY

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)

# ---------------------------------------------------------------------------
# Product input specs: one per catalog variant
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class ProductSpec:
    """Input: the fields every product has."""

    product_type = None

    name: str
    price: Decimal | str
    currency: str = DEFAULT_CURRENCY
    description: str | None = None
    photo_url: str | None = None


@dataclass(frozen=True, kw_only=True)
class AromaBombelSpec(ProductSpec):
    product_type = ProductType.AROMA_BOMBEL

    taste_id: int | None = None


@dataclass(frozen=True, kw_only=True)
class AromaBottleSpec(ProductSpec):
    product_type = ProductType.AROMA_BOTTLE

    taste_id: int | None = None


@dataclass(frozen=True, kw_only=True)
class AromaDeviceSpec(ProductSpec):
    product_type = ProductType.AROMA_DEVICE

    plug_type_id: int
    color_id: int | None = None
    format: str | None = None
    programs: str | None = None
    square_meter: Decimal | None = None


@dataclass(frozen=True, kw_only=True)
class SanitizingDeviceSpec(ProductSpec):
    product_type = ProductType.SANITIZING_DEVICE

    plug_type_id: int
    color_id: int | None = None
    format: str | None = None
    programs: str | None = None


@dataclass(frozen=True, kw_only=True)
class BatterySpec(ProductSpec):
    product_type = ProductType.BATTERY

    type: str | None = None
    size_id: int | None = None
    brand: str | None = None


# ---------------------------------------------------------------------------
# Client input specs
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class ContactSpec:
    """Input: contact details shared by both kinds of client."""

    address: str | None = None
    email: str | None = None
    phone_number: str | None = None
    notes: str | None = None


@dataclass(frozen=True, kw_only=True)
class IndividualClientSpec(ContactSpec):
    first_name: str
    last_name: str


@dataclass(frozen=True, kw_only=True)
class BusinessClientSpec(ContactSpec):
    nipt: str
    contact_person_first_name: str
    contact_person_last_name: str
    contact_person_phone_number: str | None = None
    owner_first_name: str | None = None
    owner_last_name: str | None = None
    owner_phone_number: str | None = None


# ---------------------------------------------------------------------------
# Product outputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: UUID
    name: str
    description: str | None
    product_type: str
    product_type_id: int
    price: Decimal
    currency: str
    photo_url: str | None
    stock_quantity: int
    is_active: bool
    is_low_stock: bool
    created_at: str
    updated_at: str

    @property
    def display_price(self) -> str:
        return f"{self.price:.2f} {self.currency}"


@dataclass(frozen=True, kw_only=True)
class AromaBombelProductDTO(ProductDTO):
    taste: str | None = None
    taste_id: int | None = None


@dataclass(frozen=True, kw_only=True)
class AromaBottleProductDTO(ProductDTO):
    taste: str | None = None
    taste_id: int | None = None


@dataclass(frozen=True, kw_only=True)
class AromaDeviceProductDTO(ProductDTO):
    plug_type: str
    plug_type_id: int
    color: str | None = None
    color_id: int | None = None
    format: str | None = None
    programs: str | None = None
    square_meter: Decimal | None = None


@dataclass(frozen=True, kw_only=True)
class SanitizingDeviceProductDTO(ProductDTO):
    plug_type: str
    plug_type_id: int
    color: str | None = None
    color_id: int | None = None
    format: str | None = None
    programs: str | None = None


@dataclass(frozen=True, kw_only=True)
class BatteryProductDTO(ProductDTO):
    type: str | None = None
    size: str | None = None
    size_id: int | None = None
    brand: str | None = None


@dataclass(frozen=True)
class StockHistoryDTO:
    """Output: one audit row, enriched with display names."""

    id: UUID
    product_id: UUID
    product_name: str
    quantity_changed: int
    quantity_after: int
    change_type: str
    reason: str | None
    changed_by: UUID
    changed_by_name: str
    changed_at: str


# ---------------------------------------------------------------------------
# Client outputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class ClientDTO:
    id: str
    client_type: str
    client_type_id: int
    address: str | None
    email: str | None
    phone_number: str | None
    notes: str | None
    created_at: str
    updated_at: str
    created_by: str
    updated_by: str | None
    is_active: bool

    @property
    def display_name(self) -> str:
        return self.id


@dataclass(frozen=True, kw_only=True)
class IndividualClientDTO(ClientDTO):
    first_name: str
    last_name: str
    full_name: str

    @property
    def display_name(self) -> str:
        return self.full_name


@dataclass(frozen=True, kw_only=True)
class BusinessClientDTO(ClientDTO):
    nipt: str
    contact_person_first_name: str
    contact_person_last_name: str
    contact_person_full_name: str
    contact_person_phone_number: str | None = None
    owner_first_name: str | None = None
    owner_last_name: str | None = None
    owner_full_name: str | None = None
    owner_phone_number: str | None = None

    @property
    def display_name(self) -> str:
        return f"{self.nipt} ({self.contact_person_full_name})"


# ---------------------------------------------------------------------------
# User outputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UserDTO:
    id: UUID
    first_name: str
    last_name: str
    full_name: str
    email: str
    is_active: bool
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class AuthenticationResult:
    """Output of a successful sign-in."""

    user: UserDTO
