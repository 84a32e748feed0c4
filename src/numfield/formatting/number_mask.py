"""Mask strategies turning raw field text into a number or a text to keep.

A mask receives the text the field holds after an edit and the text it held
before, and answers with either:

- ConformedNumber: a number was typed, with these fraction digits so far
- str: display this text as is (incomplete input, rejected edit, or "")

Two strategies exist, selected once per configuration:

- DefaultNumberMask: digits, one decimal symbol and a sign typed freely
- AutoDecimalDigitsNumberMask: every typed digit shifts in from the right,
  the decimal symbol is never typed ("1", "12", "123" -> 0.01, 0.12, 1.23)

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Protocol

from numfield.value_types import from_scaled_integer

if TYPE_CHECKING:
    from .number_format import NumberFormat

__all__ = [
    "AutoDecimalDigitsNumberMask",
    "ConformedNumber",
    "DefaultNumberMask",
    "NumberMask",
    "create_number_mask",
]

logger = logging.getLogger(__name__)

_LEADING_ZEROS = re.compile(r"^0+(0$|[^0])")


def _remove_leading_zeros(digits: str) -> str:
    """Drop leading zeros but keep a single "0" ("007" -> "7", "000" -> "0")."""
    return _LEADING_ZEROS.sub(r"\1", digits)


@dataclass(frozen=True, slots=True)
class ConformedNumber:
    """Number recognized in the field text.

    Attributes:
        number_value: Parsed value (may be negative zero)
        fraction_digits: Fraction digits typed so far, as text ("50" for 1.50)
    """

    number_value: Decimal
    fraction_digits: str


class NumberMask(Protocol):
    """Strategy conforming raw field text."""

    def conform_to_mask(
        self, text: str, previous_conformed_value: str = ""
    ) -> str | ConformedNumber: ...


class DefaultNumberMask:
    """Free-form decimal entry."""

    __slots__ = ("_number_format",)

    def __init__(self, number_format: NumberFormat) -> None:
        self._number_format = number_format

    def conform_to_mask(
        self, text: str, previous_conformed_value: str = ""
    ) -> str | ConformedNumber:
        """Conform text typed into the field.

        Args:
            text: Field text after the edit
            previous_conformed_value: Field text before the edit

        Returns:
            ConformedNumber for numeric input, otherwise the text to display
        """
        fmt = self._number_format
        negative = fmt.is_negative(text)
        value = fmt.strip_minus_symbol(fmt.strip_currency_symbol(text))

        incomplete = self._check_incomplete_value(value, negative, previous_conformed_value)
        if incomplete is not None:
            return incomplete

        if fmt.decimal_symbol is not None:
            integer, separator, fraction = value.partition(fmt.decimal_symbol)
        else:
            integer, separator, fraction = value, "", ""
        integer_digits = _remove_leading_zeros(fmt.only_digits(integer))
        fraction_digits = fmt.only_digits(fraction)[: fmt.maximum_fraction_digits]

        if separator and not fraction_digits:
            logger.debug("Rejected decimal symbol without fraction digits in %r", text)
            return previous_conformed_value
        if not integer_digits:
            return ""
        return ConformedNumber(
            number_value=Decimal(f"{'-' if negative else ''}{integer_digits}.{fraction_digits}"),
            fraction_digits=fraction_digits,
        )

    def _check_incomplete_value(
        self, value: str, negative: bool, previous_conformed_value: str
    ) -> str | None:
        """Text to display for input that is not a number yet, else None."""
        fmt = self._number_format
        if value == "" and negative:
            lone_sign = fmt.insert_currency_symbol("", negative=True)
            # Deleting from a lone sign clears the field
            if previous_conformed_value in (lone_sign, fmt.minus_symbol):
                return ""
            return lone_sign
        if fmt.decimal_symbol is not None and fmt.maximum_fraction_digits > 0:
            if fmt.is_fraction_incomplete(value):
                return fmt.insert_currency_symbol(value, negative=negative)
            if value.startswith(fmt.decimal_symbol):
                return fmt.insert_currency_symbol(fmt.to_fraction(value), negative=negative)
        return None


class AutoDecimalDigitsNumberMask:
    """Fixed fraction digits filled from the right."""

    __slots__ = ("_number_format",)

    def __init__(self, number_format: NumberFormat) -> None:
        self._number_format = number_format

    def conform_to_mask(
        self, text: str, previous_conformed_value: str = ""
    ) -> str | ConformedNumber:
        """Conform text typed into the field.

        All digits form one integer divided by 10**maximum_fraction_digits.
        Deleting the last digit of a zero value clears the field.

        Args:
            text: Field text after the edit
            previous_conformed_value: Field text before the edit

        Returns:
            ConformedNumber, or "" when the field is cleared
        """
        fmt = self._number_format
        digits_count = fmt.maximum_fraction_digits
        if text == "" or (
            fmt.parse(previous_conformed_value) == 0
            and fmt.strip_currency_symbol(previous_conformed_value)[:-1]
            == fmt.strip_currency_symbol(text)
        ):
            return ""
        negative = fmt.is_negative(text)
        digits = _remove_leading_zeros(fmt.only_digits(text)) or "0"
        number_value = from_scaled_integer(
            Decimal(f"{'-' if negative else ''}{digits}"), digits_count
        )
        fraction_digits = digits.zfill(digits_count + 1)[-digits_count:] if digits_count else ""
        return ConformedNumber(number_value=number_value, fraction_digits=fraction_digits)


def create_number_mask(number_format: NumberFormat, *, auto_decimal_digits: bool) -> NumberMask:
    """Select the mask strategy for a configuration."""
    if auto_decimal_digits:
        return AutoDecimalDigitsNumberMask(number_format)
    return DefaultNumberMask(number_format)
