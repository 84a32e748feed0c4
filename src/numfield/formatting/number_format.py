"""Locale-aware number and currency format of a number input.

NumberFormat converts between Decimal values and the text a number input
displays, and exposes the symbols the input controller needs to reason
about that text (affixes, separators, fraction digit bounds).

Rendering goes through Babel (via LocaleContext); the affixes are read once
from a rendered sample (see introspection.derive_symbols) and inserted
around the digits, so that positive and negative values always carry
exactly the prefix/suffix the controller strips and measures.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import re
import unicodedata
from decimal import Decimal

from numfield.constants import (
    DECIMAL_SYMBOLS,
    DEFAULT_MAXIMUM_FRACTION_DIGITS,
    UNBOUNDED_MAXIMUM_FRACTION_DIGITS,
)
from numfield.diagnostics import ConfigurationError, ErrorTemplate
from numfield.locale_utils import get_system_locale
from numfield.options import CustomCurrency, NumberInputOptions, PrecisionRange

from .introspection import derive_symbols
from .locale_context import LocaleContext

__all__ = ["INTEGER_PATTERN", "NumberFormat"]

# Integer part without leading zeros
INTEGER_PATTERN: str = r"(0|[1-9][0-9]*)"


class NumberFormat:
    """Formatter bound to one locale, currency and precision.

    Attributes:
        locale: Locale code in effect (host locale when the option is absent)
        currency: ISO 4217 code, CustomCurrency, or None
        prefix: Text before the digits of a non-negative value
        suffix: Text after the digits
        negative_prefix: Text before the digits of a negative value
        minus_symbol: Locale minus sign
        decimal_symbol: Decimal symbol, None when the currency has no minor unit
        grouping_symbol: Thousands separator
        minimum_fraction_digits: Fraction digits always rendered
        maximum_fraction_digits: Fraction digits accepted and rendered at most

    Example:
        >>> fmt = NumberFormat(NumberInputOptions(locale="de-DE", currency="EUR"))
        >>> fmt.format(Decimal("-1234.5"))
        '-1.234,50\\xa0€'
        >>> fmt.parse("1.234,5\\xa0€")
        Decimal('1234.5')
    """

    __slots__ = (
        "_context",
        "currency",
        "decimal_symbol",
        "grouping_symbol",
        "locale",
        "maximum_fraction_digits",
        "minimum_fraction_digits",
        "minus_symbol",
        "negative_prefix",
        "prefix",
        "suffix",
    )

    def __init__(self, options: NumberInputOptions) -> None:
        """Resolve symbols and fraction digits for the given options.

        Args:
            options: Number input options (locale, currency, precision)

        Raises:
            ConfigurationError: If currency is not a known ISO 4217 code
        """
        self.locale = options.locale or get_system_locale()
        self._context = LocaleContext.create(self.locale)

        currency = options.currency
        if isinstance(currency, str):
            currency = currency.upper()
            if not self._context.is_currency(currency):
                raise ConfigurationError(ErrorTemplate.unknown_currency(currency, self.locale))
        self.currency: str | CustomCurrency | None = currency

        symbols = derive_symbols(self.locale, currency if isinstance(currency, str) else None)
        self.decimal_symbol: str | None = symbols.decimal_symbol
        self.grouping_symbol: str = symbols.thousands_separator_symbol
        self.minus_symbol: str = self._context.minus_sign

        precision = options.precision
        if self.decimal_symbol is None:
            self.minimum_fraction_digits = self.maximum_fraction_digits = 0
        elif isinstance(precision, int):
            self.minimum_fraction_digits = self.maximum_fraction_digits = precision
        elif isinstance(precision, PrecisionRange):
            self.minimum_fraction_digits = precision.min
            self.maximum_fraction_digits = (
                UNBOUNDED_MAXIMUM_FRACTION_DIGITS if precision.max is None else precision.max
            )
        elif isinstance(currency, str):
            self.minimum_fraction_digits = self.maximum_fraction_digits = symbols.decimal_length
        else:
            self.minimum_fraction_digits = 0
            self.maximum_fraction_digits = DEFAULT_MAXIMUM_FRACTION_DIGITS

        if isinstance(currency, str):
            self.prefix: str = symbols.prefix
            self.suffix: str = symbols.suffix
            negative = self._context.format_currency(-1, currency=currency)
            self.negative_prefix: str = negative[: negative.index("1")]
        else:
            affixes = currency or CustomCurrency()
            self.prefix = affixes.prefix
            self.suffix = affixes.suffix
            self.negative_prefix = f"{self.minus_symbol}{self.prefix}"

    def __repr__(self) -> str:
        return (
            f"NumberFormat(locale={self.locale!r}, currency={self.currency!r}, "
            f"fraction_digits=({self.minimum_fraction_digits}, {self.maximum_fraction_digits}))"
        )

    def parse(self, text: str | None) -> Decimal | None:
        """Parse displayed text back to a number.

        Accepts the text with or without affixes, grouping symbols placed
        the way the locale groups (or none at all), and a trailing decimal
        symbol without fraction digits.

        Args:
            text: Displayed text

        Returns:
            Parsed Decimal, or None when text is empty or not a number

        Examples:
            >>> fmt = NumberFormat(NumberInputOptions(locale="en-US", currency="USD"))
            >>> fmt.parse("-$1,234.")
            Decimal('-1234')
            >>> fmt.parse("$12,34") is None
            True
        """
        if not text:
            return None
        negative = self.is_negative(text)
        text = self.strip_minus_symbol(self.strip_currency_symbol(self.normalize_digits(text)))
        fraction = (
            rf"(?:{re.escape(self.decimal_symbol)}([0-9]*))?" if self.decimal_symbol else ""
        )
        match = re.fullmatch(rf"{INTEGER_PATTERN}{fraction}", self.strip_grouping_symbol(text))
        if match is None:
            return None
        integer_text = text.split(self.decimal_symbol)[0] if self.decimal_symbol else text
        if not self.is_valid_integer_format(integer_text, int(match.group(1))):
            return None
        fraction_digits = match.group(2) if self.decimal_symbol else None
        return Decimal(f"{'-' if negative else ''}{match.group(1)}.{fraction_digits or ''}")

    def is_valid_integer_format(self, formatted: str, integer: int) -> bool:
        """Check that formatted is integer rendered with or without grouping."""
        return formatted in {
            self._context.format_number(integer, maximum_fraction_digits=0, use_grouping=True),
            self._context.format_number(integer, maximum_fraction_digits=0, use_grouping=False),
        }

    def format(
        self,
        number: Decimal,
        *,
        use_grouping: bool = True,
        minimum_fraction_digits: int | None = None,
        maximum_fraction_digits: int | None = None,
    ) -> str:
        """Render number with affixes.

        Args:
            number: Value to render; negative zero renders the negative prefix
            use_grouping: Insert grouping symbols (default: True)
            minimum_fraction_digits: Override of the configured minimum
            maximum_fraction_digits: Override of the configured maximum

        Returns:
            Displayable text

        Raises:
            FormattingError: If Babel cannot render the number
        """
        digits = self._context.format_number(
            number.copy_abs(),
            minimum_fraction_digits=(
                self.minimum_fraction_digits
                if minimum_fraction_digits is None
                else minimum_fraction_digits
            ),
            maximum_fraction_digits=(
                self.maximum_fraction_digits
                if maximum_fraction_digits is None
                else maximum_fraction_digits
            ),
            use_grouping=use_grouping,
        )
        return self.insert_currency_symbol(digits, negative=number.is_signed())

    def insert_currency_symbol(self, formatted_number: str, *, negative: bool) -> str:
        """Wrap unsigned digits in the (negative) prefix and the suffix."""
        prefix = self.negative_prefix if negative else self.prefix
        return f"{prefix}{formatted_number}{self.suffix}"

    def normalize_decimal_symbol(self, text: str, start: int) -> str:
        """Replace the first decimal-like symbol at or after start.

        Whatever decimal key the user pressed ("," "." or U+066B) becomes
        the locale decimal symbol.
        """
        if self.decimal_symbol is None:
            return text
        for symbol in DECIMAL_SYMBOLS:
            text = text[:start] + text[start:].replace(symbol, self.decimal_symbol, 1)
        return text

    @staticmethod
    def normalize_digits(text: str) -> str:
        """Map non-ASCII decimal digits (e.g. Arabic-Indic) to ASCII."""
        if text.isascii():
            return text
        return "".join(
            str(unicodedata.decimal(char)) if char.isdecimal() else char for char in text
        )

    def only_digits(self, text: str) -> str:
        """Keep only the digits of text, as ASCII."""
        return re.sub(r"[^0-9]", "", self.normalize_digits(text))

    def strip_currency_symbol(self, text: str) -> str:
        """Remove the first prefix and the first suffix occurrence."""
        if self.prefix:
            text = text.replace(self.prefix, "", 1)
        if self.suffix:
            text = text.replace(self.suffix, "", 1)
        return text

    def strip_minus_symbol(self, text: str) -> str:
        """Remove the locale minus sign, or a typed ASCII hyphen-minus."""
        if self.minus_symbol in text:
            return text.replace(self.minus_symbol, "", 1)
        return text.replace("-", "", 1)

    def strip_grouping_symbol(self, text: str) -> str:
        """Remove all grouping symbols."""
        return text.replace(self.grouping_symbol, "")

    def is_negative(self, text: str) -> bool:
        """Check whether text starts with a negative sign (with or without prefix)."""
        return text.startswith(self.negative_prefix) or text.replace(
            "-", self.minus_symbol, 1
        ).startswith(self.minus_symbol)

    def is_fraction_incomplete(self, text: str) -> bool:
        """Check for an integer followed by a bare decimal symbol ("12.")."""
        if self.decimal_symbol is None:
            return False
        pattern = rf"{INTEGER_PATTERN}{re.escape(self.decimal_symbol)}"
        text = self.normalize_digits(self.strip_grouping_symbol(text))
        return re.fullmatch(pattern, text) is not None

    def to_fraction(self, text: str) -> str:
        """Complete text starting with the decimal symbol (".5" -> "0.5")."""
        decimal_symbol = self.decimal_symbol or ""
        digits = self.only_digits(text[len(decimal_symbol):])[: self.maximum_fraction_digits]
        return f"0{decimal_symbol}{digits}"
