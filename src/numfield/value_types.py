"""Core value types shared by the formatting and controller packages.

Defines:
    - NumericValue: Union of numbers accepted from callers
    - NumberInputValue: Externally visible (number, formatted) pair
    - ValueCallback: Protocol for on_input/on_change observers
    - to_decimal: Lossless conversion of NumericValue to Decimal

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Protocol, TypeAlias

from numfield.constants import DECIMAL_WORKING_PRECISION

__all__ = [
    "NumberInputValue",
    "NumericValue",
    "ValueCallback",
    "from_scaled_integer",
    "to_decimal",
    "to_scaled_integer",
]

NumericValue: TypeAlias = int | float | Decimal


@dataclass(frozen=True, slots=True)
class NumberInputValue:
    """Number currently held by a number input and the text showing it.

    Attributes:
        number: Canonical value. Decimal (or None when the field is empty);
            an int scaled by 10**maximum_fraction_digits in integer mode.
        formatted: Text displayed in the field, "" when empty.

    Example:
        >>> value = NumberInputValue(number=Decimal("1234"), formatted="$1,234")
        >>> str(value)
        '$1,234'
    """

    number: Decimal | int | None
    formatted: str

    def __str__(self) -> str:
        """Return the displayed text."""
        return self.formatted


class ValueCallback(Protocol):
    """Observer notified with the current value of a number input."""

    def __call__(self, value: NumberInputValue, /) -> None: ...


def to_decimal(value: NumericValue) -> Decimal:
    """Convert a caller-supplied number to Decimal.

    Floats go through str() so that 0.1 becomes Decimal("0.1") rather than
    its binary expansion.

    Args:
        value: int, float or Decimal

    Returns:
        Equivalent Decimal

    Raises:
        TypeError: If value is not a number (bool included)
        ValueError: If value is NaN or infinite
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        msg = f"Expected a number, got {type(value).__name__}"
        raise TypeError(msg)
    if isinstance(value, float):
        value = Decimal(str(value))
    elif isinstance(value, int):
        value = Decimal(value)
    if not value.is_finite():
        msg = f"Expected a finite number, got {value}"
        raise ValueError(msg)
    return value


def from_scaled_integer(value: Decimal, fraction_digits: int) -> Decimal:
    """Shift the decimal point of value fraction_digits places to the left.

    Example:
        >>> from_scaled_integer(Decimal(1050), 2)
        Decimal('10.50')
    """
    with localcontext(prec=DECIMAL_WORKING_PRECISION):
        return value.scaleb(-fraction_digits)


def to_scaled_integer(value: Decimal, fraction_digits: int) -> int:
    """Express value in units of 10**-fraction_digits.

    Digits beyond fraction_digits are rounded half up.

    Example:
        >>> to_scaled_integer(Decimal("10.5"), 2)
        1050
    """
    with localcontext(prec=DECIMAL_WORKING_PRECISION):
        return int(value.scaleb(fraction_digits).quantize(Decimal(1), rounding=ROUND_HALF_UP))
