"""Tests for value_types: number conversion and integer-mode scaling."""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from numfield.value_types import (
    NumberInputValue,
    from_scaled_integer,
    to_decimal,
    to_scaled_integer,
)


class TestToDecimal:
    """Caller-supplied numbers become Decimal."""

    def test_int(self) -> None:
        assert to_decimal(42) == Decimal(42)

    def test_float_uses_shortest_repr(self) -> None:
        assert to_decimal(0.1) == Decimal("0.1")

    def test_decimal_passthrough(self) -> None:
        value = Decimal("1.50")
        assert to_decimal(value) is value

    @pytest.mark.parametrize("value", [True, "1", None, [1]])
    def test_non_numbers_rejected(self, value: object) -> None:
        with pytest.raises(TypeError, match="Expected a number"):
            to_decimal(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [float("nan"), float("-inf"), Decimal("sNaN")])
    def test_non_finite_rejected(self, value: float | Decimal) -> None:
        with pytest.raises(ValueError, match="finite"):
            to_decimal(value)


class TestScaling:
    """Integer mode shifts the decimal point by the fraction digits."""

    def test_from_scaled_integer(self) -> None:
        assert str(from_scaled_integer(Decimal(1050), 2)) == "10.50"

    def test_to_scaled_integer_rounds_half_up(self) -> None:
        assert to_scaled_integer(Decimal("10.505"), 2) == 1051
        assert to_scaled_integer(Decimal("-10.505"), 2) == -1051

    def test_zero_fraction_digits(self) -> None:
        assert to_scaled_integer(Decimal(7), 0) == 7

    def test_wide_values_not_rounded(self) -> None:
        """28 integer digits plus fraction digits scale exactly."""
        value = Decimal("9999999999999999999999999999.99")
        assert to_scaled_integer(value, 2) == 999999999999999999999999999999

    @given(scaled=st.integers(min_value=-(10**30), max_value=10**30), digits=st.integers(0, 6))
    def test_round_trip(self, scaled: int, digits: int) -> None:
        """PROPERTY: to_scaled_integer(from_scaled_integer(n, d), d) == n."""
        assert to_scaled_integer(from_scaled_integer(Decimal(scaled), digits), digits) == scaled


class TestNumberInputValue:
    """The (number, formatted) pair reported to observers."""

    def test_str_is_formatted(self) -> None:
        assert str(NumberInputValue(Decimal(5), "$5.00")) == "$5.00"

    def test_frozen(self) -> None:
        value = NumberInputValue(None, "")
        with pytest.raises(AttributeError):
            value.formatted = "x"  # type: ignore[misc]
