"""Shared constants for numfield.

Centralized configuration constants used across the formatting and
controller packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Numeric limits: exact-integer envelope for Decimal values
- Cache limits: memory bounds for per-locale caches
- Locale defaults: fallbacks when the host does not specify a locale
- Input symbols: keystrokes treated as a decimal separator

Python 3.13+. Zero external dependencies.
"""

from decimal import DefaultContext, Decimal

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Numeric limits
    "MAX_SAFE_INTEGER",
    "SAMPLE_NUMBER",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Locale defaults
    "DEFAULT_LOCALE",
    "DEFAULT_MAXIMUM_FRACTION_DIGITS",
    "UNBOUNDED_MAXIMUM_FRACTION_DIGITS",
    "DECIMAL_WORKING_PRECISION",
    # Input symbols
    "DECIMAL_SYMBOLS",
]

# ============================================================================
# NUMERIC LIMITS
# ============================================================================

# Largest integer the default decimal context represents exactly.
# DefaultContext.prec is 28 significant digits, so every integer with at
# most 28 digits survives arithmetic without rounding. Bounds of a value
# range are clamped into [-MAX_SAFE_INTEGER, MAX_SAFE_INTEGER] and typed
# numbers above it keep the previous rendering.
MAX_SAFE_INTEGER: Decimal = Decimal(10) ** DefaultContext.prec - 1

# Sample rendered once per locale/currency to read affixes and separators.
# Six distinct digits: "1" marks the prefix end, "3" precedes the grouping
# symbol, "6" precedes the decimal symbol.
SAMPLE_NUMBER: int = 123456

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Used when neither the options nor the environment name a locale.
DEFAULT_LOCALE: str = "en_US"

# Fraction digits of a plain (non-currency) number without precision option.
DEFAULT_MAXIMUM_FRACTION_DIGITS: int = 2

# Upper fraction digit bound of an open-ended precision range.
UNBOUNDED_MAXIMUM_FRACTION_DIGITS: int = 20

# Decimal precision for rendering and rescaling. A value may carry
# MAX_SAFE_INTEGER-sized integer digits plus the widest fraction, and none
# of those digits may be rounded away while it is formatted or scaled.
DECIMAL_WORKING_PRECISION: int = DefaultContext.prec + UNBOUNDED_MAXIMUM_FRACTION_DIGITS

# ============================================================================
# INPUT SYMBOLS
# ============================================================================

# Keys accepted as "the decimal separator" regardless of locale:
# full stop, comma, and ARABIC DECIMAL SEPARATOR (U+066B).
DECIMAL_SYMBOLS: tuple[str, ...] = (",", ".", "٫")
