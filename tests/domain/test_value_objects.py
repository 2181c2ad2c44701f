"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from freshcart.domain.exceptions import ValidationError
from freshcart.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_of_factory_from_string(self):
        assert Money.of("4.99").amount == Decimal("4.99")

    def test_of_factory_from_float_uses_its_string_form(self):
        assert Money.of(4.99).amount == Decimal("4.99")

    def test_zero_is_allowed(self):
        assert Money.zero().amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-0.01"))

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("four dollars")

    def test_infinite_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("Infinity")

    def test_multiplication_is_exact(self):
        assert Money.of("4.99") * 5 == Money.of("24.95")

    def test_multiplication_by_bool_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * True

    def test_total_of_many(self):
        amounts = [Money.of("0.10")] * 3
        assert Money.total(amounts) == Money.of("0.30")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.of("10", "USD") + Money.of("5", "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.995")) == "$10.00"
        assert str(Money.of("3", "EUR")) == "€3.00"
        assert str(Money.of("3", "CHF")) == "3.00 CHF"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)
