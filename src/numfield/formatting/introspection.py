"""Locale-format introspection.

Reads the affixes and separators of a locale's number or currency format by
rendering a known sample number and slicing around its digits. The result
describes how a NumberFormat must wrap and split the numbers it renders.

Pure lookup: results are cached per (locale, currency).

Python 3.13+. Uses Babel through LocaleContext.
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass

from numfield.constants import MAX_LOCALE_CACHE_SIZE, SAMPLE_NUMBER

from .locale_context import LocaleContext

__all__ = ["CurrencyFormatSymbols", "derive_symbols"]

logger = logging.getLogger(__name__)

# Digits of SAMPLE_NUMBER with an optional grouping symbol between each pair,
# then an optional decimal symbol followed by zero fraction digits.
_SAMPLE_PATTERN = re.compile(
    r"(?P<prefix>.*?)1\D?2\D?3(?P<group>\D?)4\D?5\D?6"
    r"(?:(?P<decimal>\D)(?P<fraction>0+))?(?P<suffix>.*)",
    re.DOTALL,
)


@dataclass(frozen=True, slots=True)
class CurrencyFormatSymbols:
    """Affixes and separators of a rendered number.

    Attributes:
        prefix: Text before the digits of a positive number ("$", "")
        suffix: Text after the digits of a positive number ("", "\\xa0€")
        thousands_separator_symbol: Grouping symbol
        decimal_symbol: Decimal symbol, None when the format shows no fraction
        decimal_length: Fraction digits shown by the format (JPY: 0, USD: 2)
    """

    prefix: str
    suffix: str
    thousands_separator_symbol: str
    decimal_symbol: str | None
    decimal_length: int


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def derive_symbols(locale_code: str, currency: str | None = None) -> CurrencyFormatSymbols:
    """Derive affixes and separators for a locale and optional currency.

    With a currency code the sample is rendered in the locale's standard
    currency format; without one it is rendered as a plain number with one
    fraction digit, so the decimal symbol is always present.

    Args:
        locale_code: BCP 47 locale identifier
        currency: ISO 4217 currency code, or None for plain numbers

    Returns:
        CurrencyFormatSymbols for the rendered sample

    Examples:
        >>> derive_symbols("en-US", "USD")
        CurrencyFormatSymbols(prefix='$', suffix='', thousands_separator_symbol=',', \
decimal_symbol='.', decimal_length=2)

        >>> derive_symbols("ja-JP", "JPY").decimal_symbol is None
        True
    """
    ctx = LocaleContext.create(locale_code)
    if currency is not None:
        sample = ctx.format_currency(SAMPLE_NUMBER, currency=currency)
    else:
        sample = ctx.format_number(
            SAMPLE_NUMBER, minimum_fraction_digits=1, maximum_fraction_digits=1
        )

    match = _SAMPLE_PATTERN.fullmatch(sample)
    if match is None:
        logger.warning(
            "Cannot read number format of '%s' from sample %r; using CLDR symbols",
            locale_code,
            sample,
        )
        return CurrencyFormatSymbols(
            prefix="",
            suffix="",
            thousands_separator_symbol=ctx.group_symbol,
            decimal_symbol=ctx.decimal_symbol,
            decimal_length=0 if currency is None else 2,
        )

    fraction = match.group("fraction") or ""
    return CurrencyFormatSymbols(
        prefix=match.group("prefix"),
        suffix=match.group("suffix"),
        thousands_separator_symbol=match.group("group") or ctx.group_symbol,
        decimal_symbol=match.group("decimal"),
        decimal_length=len(fraction),
    )
