"""Locale context for cached, Babel-backed number rendering.

This module provides locale-aware formatting without global state mutation.
Uses Babel for CLDR-compliant number and currency formatting.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Each NumberFormat owns a LocaleContext (shared through the cache)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from numfield.constants import (
    DECIMAL_WORKING_PRECISION,
    DEFAULT_LOCALE,
    MAX_LOCALE_CACHE_SIZE,
)
from numfield.diagnostics import ErrorTemplate, FormattingError
from numfield.locale_utils import get_babel_locale, normalize_locale

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for formatting operations.

    Use LocaleContext.create() factory to construct instances with proper
    validation. Direct construction bypasses validation and the cache.

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.format_number(1234.5, maximum_fraction_digits=2)
        '1,234.5'

        >>> ctx = LocaleContext.create('en-IN')
        >>> ctx.format_number(1234567)
        '12,34,567'

        >>> # Invalid locales fall back to en_US with warning logged
        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable. Cache operations are protected by RLock.
    """

    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to
        en_US. This method always succeeds.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'en-US', 'de-DE')

        Returns:
            LocaleContext instance. For unknown/invalid locales, uses en_US
            rules while preserving the original locale_code for debugging.
        """
        # "en-US", "en_US" map to the same cache entry
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = get_babel_locale(cache_key)
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
            )
            babel_locale = get_babel_locale(DEFAULT_LOCALE)
            used_fallback = True
        except ValueError as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code,
                e,
                DEFAULT_LOCALE,
            )
            babel_locale = get_babel_locale(DEFAULT_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        # Double-check: another thread may have created it meanwhile
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Args:
            locale_code: BCP 47 locale identifier

        Returns:
            LocaleContext instance with valid locale

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = get_babel_locale(locale_code)
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except ValueError as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    @property
    def decimal_symbol(self) -> str:
        """CLDR decimal separator of the locale."""
        return str(babel_numbers.get_decimal_symbol(self._babel_locale))

    @property
    def group_symbol(self) -> str:
        """CLDR grouping (thousands) separator of the locale."""
        return str(babel_numbers.get_group_symbol(self._babel_locale))

    @property
    def minus_sign(self) -> str:
        """Text preceding the digits of a negative plain number.

        Read from a rendering of -1 rather than the CLDR symbol table so
        that bidi marks some locales place around the sign are included.
        """
        rendered = self.format_number(-1, maximum_fraction_digits=0, use_grouping=False)
        return rendered[: rendered.index("1")]

    def integer_pattern(self, *, use_grouping: bool = True) -> str:
        """Integer part of a CLDR number pattern.

        Grouping sizes come from the locale's decimal pattern, so locales
        with a secondary grouping size keep it (en_IN: ``#,##,##0``).
        """
        if not use_grouping:
            return "0"
        primary, secondary = self._babel_locale.decimal_formats[None].grouping
        if primary == secondary:
            return "#," + "#" * (primary - 1) + "0"
        return "#," + "#" * secondary + "," + "#" * (primary - 1) + "0"

    def format_number(
        self,
        value: int | float | Decimal,
        *,
        minimum_fraction_digits: int = 0,
        maximum_fraction_digits: int = 3,
        use_grouping: bool = True,
    ) -> str:
        """Format number with locale-specific separators.

        Args:
            value: Number to format (int, float, or Decimal)
            minimum_fraction_digits: Minimum decimal places (default: 0)
            maximum_fraction_digits: Maximum decimal places (default: 3)
            use_grouping: Use thousands separator (default: True)

        Returns:
            Formatted number string according to locale rules

        Raises:
            FormattingError: If Babel cannot render the value

        Examples:
            >>> ctx = LocaleContext.create('de-DE')
            >>> ctx.format_number(1234.5, minimum_fraction_digits=2)
            '1.234,50'

            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_number(1234.5, use_grouping=False)
            '1234.5'
        """
        # '#,##0' = integer with grouping
        # '#,##0.0##' = 1-3 decimal places with grouping
        # '0.00' = exactly 2 decimal places, no grouping
        integer_part = self.integer_pattern(use_grouping=use_grouping)
        minimum_fraction_digits = min(minimum_fraction_digits, maximum_fraction_digits)
        if maximum_fraction_digits == 0:
            format_pattern = integer_part
        else:
            required = "0" * minimum_fraction_digits
            optional = "#" * (maximum_fraction_digits - minimum_fraction_digits)
            format_pattern = f"{integer_part}.{required}{optional}"

        try:
            # Babel quantizes in the current decimal context
            with localcontext(prec=DECIMAL_WORKING_PRECISION):
                return str(
                    babel_numbers.format_decimal(
                        value,
                        format=format_pattern,
                        locale=self._babel_locale,
                    )
                )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            diagnostic = ErrorTemplate.formatting_failed(value, self.locale_code, str(e))
            raise FormattingError(diagnostic, fallback_value=str(value)) from e

    def format_currency(self, value: int | float | Decimal, *, currency: str) -> str:
        """Format currency with the locale's standard currency pattern.

        Args:
            value: Monetary amount (int, float, or Decimal)
            currency: ISO 4217 currency code (EUR, USD, JPY, BHD, etc.)

        Returns:
            Formatted currency string according to locale rules

        Raises:
            FormattingError: If Babel cannot render the value

        Examples:
            >>> LocaleContext.create('en-US').format_currency(123.45, currency='EUR')
            '€123.45'

            >>> LocaleContext.create('ja-JP').format_currency(12345, currency='JPY')
            '￥12,345'

        CLDR Compliance:
            Automatically applies currency-specific decimal places:
            - JPY: 0 decimals
            - BHD, KWD, OMR: 3 decimals
            - Most others: 2 decimals
        """
        try:
            with localcontext(prec=DECIMAL_WORKING_PRECISION):
                return str(
                    babel_numbers.format_currency(
                        value,
                        currency,
                        locale=self._babel_locale,
                        currency_digits=True,
                        format_type="standard",
                    )
                )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            diagnostic = ErrorTemplate.formatting_failed(value, self.locale_code, str(e))
            raise FormattingError(diagnostic, fallback_value=f"{currency} {value}") from e

    def is_currency(self, currency: str) -> bool:
        """Check whether currency is an ISO 4217 code known to CLDR."""
        try:
            babel_numbers.validate_currency(currency)
        except babel_numbers.UnknownCurrencyError:
            return False
        return True
