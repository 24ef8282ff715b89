"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Email, Money, Nipt, PersonName, ProductName


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "ALL"

    def test_create_factory_from_string(self):
        m = Money.create("25.99", "eur")
        assert m.amount == Decimal("25.99")
        assert m.currency == "EUR"

    def test_create_factory_from_int(self):
        assert Money.create(10).amount == Decimal("10")

    def test_create_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.create("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    @pytest.mark.parametrize("currency", ["", "EU", "EURO", "12A"])
    def test_bad_currency_rejected(self, currency):
        with pytest.raises(ValidationError):
            Money(Decimal("1"), currency)

    def test_addition(self):
        assert Money.create("10") + Money.create("5.50") == Money.create("15.50")

    def test_subtraction(self):
        assert Money.create("10") - Money.create("3") == Money.create("7")

    def test_subtraction_below_zero_rejected(self):
        with pytest.raises(ValidationError, match="negative"):
            Money.create("3") - Money.create("10")

    def test_mixed_currencies_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.create("1", "ALL") + Money.create("1", "EUR")

    def test_comparison(self):
        assert Money.create("1") < Money.create("2")
        assert Money.create("2") >= Money.create("2")

    def test_str(self):
        assert str(Money.create("15")) == "15.00 ALL"


# ── Email ────────────────────────────────────────────────────────────────────


class TestEmail:

    def test_normalized_to_lower_case(self):
        assert Email.create("  Admin@Example.COM ").value == "admin@example.com"

    @pytest.mark.parametrize("raw", ["", "   ", None, "no-at-sign", "a@b", "a b@c.de"])
    def test_invalid_rejected(self, raw):
        with pytest.raises(ValidationError):
            Email.create(raw)


# ── ProductName ──────────────────────────────────────────────────────────────


class TestProductName:

    def test_trims(self):
        assert ProductName.create("  Lavender  ").value == "Lavender"

    def test_equality_ignores_case(self):
        assert ProductName.create("Lavender") == ProductName.create("LAVENDER")
        assert hash(ProductName.create("Lavender")) == hash(ProductName.create("lavender"))

    def test_too_short(self):
        with pytest.raises(ValidationError, match="at least 2"):
            ProductName.create("A")

    def test_too_long(self):
        with pytest.raises(ValidationError, match="cannot exceed 200"):
            ProductName.create("x" * 201)

    @pytest.mark.parametrize("name", ["ab", "x" * 200])
    def test_length_bounds_accepted(self, name):
        assert ProductName.create(name).value == name

    def test_empty(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            ProductName.create("  ")


# ── Nipt ─────────────────────────────────────────────────────────────────────


class TestNipt:

    def test_upper_cased(self):
        assert Nipt("k12345678a").value == "K12345678A"

    @pytest.mark.parametrize("raw", ["K1234567", "K12345678AB", "K1234-678A", ""])
    def test_invalid_rejected(self, raw):
        with pytest.raises(ValidationError):
            Nipt(raw)

    def test_is_valid(self):
        assert Nipt.is_valid("L01234567B")
        assert not Nipt.is_valid("short")
        assert not Nipt.is_valid(None)


# ── PersonName ───────────────────────────────────────────────────────────────


class TestPersonName:

    def test_full_name(self):
        assert PersonName(" Ana ", "Hoxha").full_name == "Ana Hoxha"

    def test_blank_first_name(self):
        with pytest.raises(ValidationError, match="First name cannot be empty"):
            PersonName("", "Hoxha")

    def test_long_last_name(self):
        with pytest.raises(ValidationError, match="Last name must be between 1 and 50"):
            PersonName("Ana", "x" * 51)
