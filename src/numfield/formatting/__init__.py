"""Locale-aware number formatting and input masks.

Public API:
    NumberFormat - Render/parse numbers and expose locale symbols
    LocaleContext - Cached Babel locale with number/currency rendering
    derive_symbols - Affixes and separators read from a sample rendering
    DefaultNumberMask, AutoDecimalDigitsNumberMask - Mask strategies
    create_number_mask - Strategy selection

Python 3.13+. Uses Babel for CLDR data.
"""

from .introspection import CurrencyFormatSymbols, derive_symbols
from .locale_context import LocaleContext
from .number_format import NumberFormat
from .number_mask import (
    AutoDecimalDigitsNumberMask,
    ConformedNumber,
    DefaultNumberMask,
    NumberMask,
    create_number_mask,
)

__all__ = [
    "AutoDecimalDigitsNumberMask",
    "ConformedNumber",
    "CurrencyFormatSymbols",
    "DefaultNumberMask",
    "LocaleContext",
    "NumberFormat",
    "NumberMask",
    "create_number_mask",
    "derive_symbols",
]
