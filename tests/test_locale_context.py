"""Tests for LocaleContext - cached Babel locale with number rendering.

Tests immutable locale configuration, thread-safe caching, and CLDR-compliant
formatting for numbers and currency via Babel integration.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from unittest.mock import patch

import pytest
from hypothesis import given
from hypothesis import strategies as st

from numfield.constants import MAX_LOCALE_CACHE_SIZE
from numfield.diagnostics import DiagnosticCode, FormattingError
from numfield.formatting import LocaleContext
from numfield.locale_utils import get_babel_locale

# ============================================================================
# Cache Management Tests
# ============================================================================


class TestLocaleContextCacheManagement:
    """Test LocaleContext cache operations (clear_cache, cache_size)."""

    def test_clear_cache_empties_cache(self) -> None:
        """clear_cache() empties the cache."""
        LocaleContext.create("en-US")
        assert LocaleContext.cache_size() > 0

        LocaleContext.clear_cache()
        assert LocaleContext.cache_size() == 0

    def test_cache_returns_same_instance(self) -> None:
        """Cache returns the same instance for same locale (identity caching)."""
        LocaleContext.clear_cache()
        assert LocaleContext.create("en-US") is LocaleContext.create("en-US")

    def test_bcp47_and_posix_share_entry(self) -> None:
        """'en-US' and 'en_US' normalize to one cache entry."""
        LocaleContext.clear_cache()
        LocaleContext.create("en-US")
        LocaleContext.create("en_US")
        assert LocaleContext.cache_size() == 1

    def test_cache_bounded(self) -> None:
        """The cache evicts least recently used entries beyond its limit."""
        LocaleContext.clear_cache()
        for index in range(MAX_LOCALE_CACHE_SIZE + 5):
            # Unknown locales fall back but are cached under their own key
            LocaleContext.create(f"xx-{index}")
        assert LocaleContext.cache_size() == MAX_LOCALE_CACHE_SIZE
        LocaleContext.clear_cache()


# ============================================================================
# Construction and Fallback Tests
# ============================================================================


class TestLocaleContextCreation:
    """create() falls back to en_US, create_or_raise() raises."""

    def test_valid_locale(self) -> None:
        ctx = LocaleContext.create("de-DE")
        assert ctx.locale_code == "de-DE"
        assert ctx.is_fallback is False
        assert str(ctx.babel_locale) == "de_DE"

    def test_unknown_locale_falls_back_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        LocaleContext.clear_cache()
        with caplog.at_level(logging.WARNING, logger="numfield.formatting.locale_context"):
            ctx = LocaleContext.create("zz-ZZ")
        assert ctx.is_fallback is True
        assert str(ctx.babel_locale) == "en_US"
        assert "Falling back to en_US" in caplog.text

    def test_babel_locale_shared_with_locale_utils(self) -> None:
        LocaleContext.clear_cache()
        assert LocaleContext.create("de_DE").babel_locale is get_babel_locale("de_DE")

    def test_create_or_raise_unknown_locale(self) -> None:
        with pytest.raises(ValueError, match="Unknown locale identifier"):
            LocaleContext.create_or_raise("zz-ZZ")

    def test_create_or_raise_valid_locale(self) -> None:
        assert LocaleContext.create_or_raise("fr-FR").is_fallback is False


# ============================================================================
# Symbols
# ============================================================================


class TestLocaleSymbols:
    """CLDR symbols exposed by the context."""

    def test_en_us_symbols(self) -> None:
        ctx = LocaleContext.create("en-US")
        assert ctx.decimal_symbol == "."
        assert ctx.group_symbol == ","
        assert ctx.minus_sign == "-"

    def test_de_de_symbols(self) -> None:
        ctx = LocaleContext.create("de-DE")
        assert ctx.decimal_symbol == ","
        assert ctx.group_symbol == "."

    def test_integer_pattern_uniform_grouping(self) -> None:
        ctx = LocaleContext.create("en-US")
        assert ctx.integer_pattern() == "#,##0"
        assert ctx.integer_pattern(use_grouping=False) == "0"

    def test_integer_pattern_secondary_grouping(self) -> None:
        """Indian grouping: first group of three, then groups of two."""
        assert LocaleContext.create("en-IN").integer_pattern() == "#,##,##0"


# ============================================================================
# Number Formatting
# ============================================================================


class TestFormatNumber:
    """format_number() builds a CLDR pattern from digit bounds."""

    def test_optional_fraction_digits(self) -> None:
        ctx = LocaleContext.create("en-US")
        assert ctx.format_number(Decimal("1234.5"), maximum_fraction_digits=2) == "1,234.5"

    def test_required_fraction_digits(self) -> None:
        ctx = LocaleContext.create("en-US")
        result = ctx.format_number(
            Decimal("1234.5"), minimum_fraction_digits=2, maximum_fraction_digits=2
        )
        assert result == "1,234.50"

    def test_no_fraction_digits(self) -> None:
        ctx = LocaleContext.create("en-US")
        assert ctx.format_number(Decimal(1234), maximum_fraction_digits=0) == "1,234"

    def test_without_grouping(self) -> None:
        ctx = LocaleContext.create("en-US")
        assert ctx.format_number(1234567, use_grouping=False) == "1234567"

    def test_locale_separators(self) -> None:
        ctx = LocaleContext.create("de-DE")
        result = ctx.format_number(
            Decimal("1234567.8"), minimum_fraction_digits=2, maximum_fraction_digits=2
        )
        assert result == "1.234.567,80"

    def test_indian_grouping(self) -> None:
        assert LocaleContext.create("en-IN").format_number(1234567) == "12,34,567"

    def test_minimum_above_maximum_is_capped(self) -> None:
        ctx = LocaleContext.create("en-US")
        result = ctx.format_number(
            Decimal("1.5"), minimum_fraction_digits=4, maximum_fraction_digits=1
        )
        assert result == "1.5"

    def test_babel_failure_raises_formatting_error(self) -> None:
        ctx = LocaleContext.create("en-US")
        with patch(
            "numfield.formatting.locale_context.babel_numbers.format_decimal",
            side_effect=ValueError("boom"),
        ):
            with pytest.raises(FormattingError) as exc_info:
                ctx.format_number(Decimal(5))
        assert exc_info.value.fallback_value == "5"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.FORMATTING_FAILED

    @given(
        value=st.decimals(
            min_value=0, max_value=10**15, allow_nan=False, allow_infinity=False, places=2
        ).map(abs)
    )
    def test_plain_rendering_matches_decimal(self, value: Decimal) -> None:
        """PROPERTY: en-US without grouping renders the same digits as Decimal."""
        ctx = LocaleContext.create("en-US")
        result = ctx.format_number(
            value, minimum_fraction_digits=2, maximum_fraction_digits=2, use_grouping=False
        )
        assert result == f"{value:.2f}"


# ============================================================================
# Currency Formatting
# ============================================================================


class TestFormatCurrency:
    """format_currency() uses the locale's standard currency pattern."""

    def test_prefix_currency(self) -> None:
        assert LocaleContext.create("en-US").format_currency(Decimal("1234.5"), currency="USD") == (
            "$1,234.50"
        )

    def test_suffix_currency(self) -> None:
        result = LocaleContext.create("de-DE").format_currency(Decimal("1234.5"), currency="EUR")
        assert result == "1.234,50\xa0€"

    def test_currency_digits_from_cldr(self) -> None:
        assert LocaleContext.create("en-US").format_currency(1234, currency="JPY") == "¥1,234"

    def test_negative_currency(self) -> None:
        assert LocaleContext.create("en-US").format_currency(-1, currency="USD") == "-$1.00"

    def test_is_currency(self) -> None:
        ctx = LocaleContext.create("en-US")
        assert ctx.is_currency("EUR")
        assert not ctx.is_currency("NOPE")
