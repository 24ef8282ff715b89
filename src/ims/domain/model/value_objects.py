"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ims.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "ALL"


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors.  The currency
    is a three-letter code, always stored upper-case.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if not isinstance(self.currency, str) or not self.currency.strip():
            raise ValidationError("Currency is required")
        currency = self.currency.strip().upper()
        if len(currency) != 3 or not currency.isalpha():
            raise ValidationError(
                f"Currency code must be exactly 3 letters, got {self.currency!r}"
            )
        object.__setattr__(self, "currency", currency)

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    __add__ = add
    __sub__ = subtract

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        amount: str | float | int | Decimal,
        currency: str = DEFAULT_CURRENCY,
    ) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        return Money(value, currency)


_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class Email:
    """An e-mail address, normalized to lower case."""

    value: str

    @staticmethod
    def create(raw: str | None) -> Email:
        if raw is None or not raw.strip():
            raise ValidationError("Email cannot be empty")
        normalized = raw.strip().lower()
        if not _EMAIL_RE.match(normalized):
            raise ValidationError(f"Invalid email format: {raw}")
        return Email(normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class ProductName:
    """A product display name.

    Two names that differ only in letter case are the same name, which is
    what the per-category uniqueness rule relies on.
    """

    MIN_LENGTH = 2
    MAX_LENGTH = 200

    value: str

    @staticmethod
    def create(raw: str | None) -> ProductName:
        if raw is None or not raw.strip():
            raise ValidationError("Product name cannot be empty")
        trimmed = raw.strip()
        if len(trimmed) < ProductName.MIN_LENGTH:
            raise ValidationError(
                f"Product name must be at least {ProductName.MIN_LENGTH} characters long"
            )
        if len(trimmed) > ProductName.MAX_LENGTH:
            raise ValidationError(
                f"Product name cannot exceed {ProductName.MAX_LENGTH} characters"
            )
        return ProductName(trimmed)

    @property
    def key(self) -> str:
        """Case-folded form used for equality and unique indexes."""
        return self.value.casefold()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductName):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.value


_NIPT_RE = re.compile(r"^[A-Z0-9]{10}$")


@dataclass(frozen=True)
class Nipt:
    """Albanian business tax identifier: 10 letters or digits."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("NIPT cannot be empty")
        normalized = self.value.strip().upper()
        if not _NIPT_RE.match(normalized):
            raise ValidationError(
                "NIPT must be exactly 10 alphanumeric characters (letters and digits)"
            )
        object.__setattr__(self, "value", normalized)

    @staticmethod
    def is_valid(raw: str | None) -> bool:
        if raw is None or not raw.strip():
            return False
        return bool(_NIPT_RE.match(raw.strip().upper()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PersonName:
    """First and last name of a person, 1..50 characters each."""

    MAX_LENGTH = 50

    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "first_name", self._clean(self.first_name, "First name"))
        object.__setattr__(self, "last_name", self._clean(self.last_name, "Last name"))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name

    @staticmethod
    def _clean(raw: str | None, label: str) -> str:
        if raw is None or not raw.strip():
            raise ValidationError(f"{label} cannot be empty")
        trimmed = raw.strip()
        if len(trimmed) > PersonName.MAX_LENGTH:
            raise ValidationError(
                f"{label} must be between 1 and {PersonName.MAX_LENGTH} characters"
            )
        return trimmed
