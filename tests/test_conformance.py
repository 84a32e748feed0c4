"""Tests for reconcile_text - one conformance pass.

Property-Based Tests:
    Re-conforming a committed rendering while unfocused is idempotent.
    Sign suppression never lets a negative rendering through.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from numfield.constants import MAX_SAFE_INTEGER
from numfield.controller import ConformanceResult, reconcile_text
from numfield.enums import FocusState
from numfield.formatting import NumberFormat, create_number_mask
from numfield.options import DistractionFree, NumberInputOptions

ALL_HIDDEN = DistractionFree(True, True, True)
NOTHING_HIDDEN = DistractionFree(False, False, False)


def conform(
    raw_text: str | None,
    prior: str = "",
    *,
    options: NumberInputOptions | None = None,
    focus_state: FocusState = FocusState.UNFOCUSED,
    suppression: DistractionFree = ALL_HIDDEN,
    allow_negative: bool = True,
    pending_decimal_insertion: int | None = None,
    hide_negligible_decimal_digits: bool = False,
) -> ConformanceResult:
    fmt = NumberFormat(options or NumberInputOptions(locale="en-US", currency="USD"))
    return reconcile_text(
        raw_text,
        prior,
        number_format=fmt,
        number_mask=create_number_mask(fmt, auto_decimal_digits=False),
        focus_state=focus_state,
        suppression=suppression,
        allow_negative=allow_negative,
        pending_decimal_insertion=pending_decimal_insertion,
        hide_negligible_decimal_digits=hide_negligible_decimal_digits,
    )


class TestEmptyInput:
    """Empty text means no value."""

    @pytest.mark.parametrize("raw_text", ["", None])
    def test_no_value(self, raw_text: str | None) -> None:
        assert conform(raw_text, "$12") == ConformanceResult("", None)


class TestUnfocused:
    """Full formatting while the field is not focused."""

    def test_integer_gets_affixes_and_grouping(self) -> None:
        assert conform("1234") == ConformanceResult("$1,234", Decimal(1234))

    def test_half_typed_fraction_not_padded(self) -> None:
        """Only typed fraction digits are shown, up to the maximum."""
        assert conform("$1,234.5").displayed_text == "$1,234.5"

    def test_committed_rendering_keeps_minimum_digits(self) -> None:
        assert conform("$1,234.50").displayed_text == "$1,234.50"

    def test_negative(self) -> None:
        assert conform("-1234") == ConformanceResult("-$1,234", Decimal(-1234))

    def test_lone_sign_has_no_number(self) -> None:
        assert conform("-") == ConformanceResult("-$", None)

    def test_text_and_number_agree(self) -> None:
        result = conform("$12.")
        assert result.displayed_text == "$12."
        assert result.number == Decimal(12)


class TestFocused:
    """Distraction-free rendering while focused."""

    def test_all_hidden(self) -> None:
        result = conform("1234", focus_state=FocusState.FOCUSED)
        assert result == ConformanceResult("1234", Decimal(1234))

    def test_negative_prefix_becomes_minus(self) -> None:
        result = conform("-1234", focus_state=FocusState.FOCUSED)
        assert result == ConformanceResult("-1234", Decimal(-1234))

    def test_grouping_kept_when_not_hidden(self) -> None:
        result = conform(
            "1234",
            focus_state=FocusState.FOCUSED,
            suppression=DistractionFree(hide_grouping_symbol=False),
        )
        assert result.displayed_text == "1,234"

    def test_nothing_hidden(self) -> None:
        result = conform("1234", focus_state=FocusState.FOCUSED, suppression=NOTHING_HIDDEN)
        assert result.displayed_text == "$1,234"

    def test_typed_fraction_digits_shown(self) -> None:
        result = conform("$1,234.5", focus_state=FocusState.FOCUSED)
        assert result.displayed_text == "1234.5"

    def test_negligible_digits_hidden_on_focus_pass(self) -> None:
        result = conform(
            "$1,234.50", focus_state=FocusState.FOCUSED, hide_negligible_decimal_digits=True
        )
        assert result == ConformanceResult("1234.5", Decimal("1234.5"))

    def test_negligible_digits_kept_without_flag(self) -> None:
        result = conform("$1,234.50", focus_state=FocusState.FOCUSED)
        assert result.displayed_text == "1234.50"

    def test_suffix_currency_stripped(self) -> None:
        result = conform(
            "1.234,50\xa0€",
            options=NumberInputOptions(locale="de-DE", currency="EUR"),
            focus_state=FocusState.FOCUSED,
            hide_negligible_decimal_digits=True,
        )
        assert result == ConformanceResult("1234,5", Decimal("1234.5"))


class TestPendingDecimalInsertion:
    """A typed decimal key becomes the locale decimal symbol."""

    def test_comma_normalized(self) -> None:
        result = conform(
            "12,5",
            options=NumberInputOptions(locale="en-US"),
            focus_state=FocusState.FOCUSED,
            pending_decimal_insertion=2,
        )
        assert result == ConformanceResult("12.5", Decimal("12.5"))

    def test_without_marker_comma_is_grouping(self) -> None:
        result = conform("12,5", options=NumberInputOptions(locale="en-US"))
        assert result == ConformanceResult("125", Decimal(125))


class TestSignSuppression:
    """allow_negative=False replaces the negative prefix."""

    def test_negative_number_made_positive(self) -> None:
        assert conform("-1234", allow_negative=False) == ConformanceResult("$1,234", Decimal(1234))

    def test_lone_sign_dropped(self) -> None:
        assert conform("-", allow_negative=False) == ConformanceResult("$", None)

    @given(
        raw_text=st.text(alphabet="0123456789-.$,", max_size=12),
        focused=st.booleans(),
    )
    def test_no_negative_rendering(self, raw_text: str, focused: bool) -> None:
        """PROPERTY: with allow_negative=False no rendering is negative."""
        result = conform(
            raw_text,
            focus_state=FocusState.FOCUSED if focused else FocusState.UNFOCUSED,
            allow_negative=False,
        )
        assert not result.displayed_text.startswith("-")
        assert result.number is None or not result.number.is_signed()


class TestSafeIntegerCeiling:
    """Numbers beyond MAX_SAFE_INTEGER keep the previous rendering."""

    def test_above_ceiling_keeps_prior_text(self) -> None:
        raw_text = str(int(MAX_SAFE_INTEGER) + 1)
        assert conform(raw_text, "$5") == ConformanceResult("$5", Decimal(5))

    def test_below_ceiling_accepted(self) -> None:
        raw_text = str(int(MAX_SAFE_INTEGER))
        assert conform(raw_text, "$5", suppression=NOTHING_HIDDEN).number == MAX_SAFE_INTEGER

    def test_negative_beyond_ceiling_keeps_prior_text(self) -> None:
        raw_text = f"-{int(MAX_SAFE_INTEGER) + 1}"
        assert conform(raw_text, "$5").displayed_text == "$5"


class TestIdempotence:
    """Conforming a committed rendering again changes nothing."""

    @given(
        value=st.decimals(
            min_value=-(10**12), max_value=10**12, allow_nan=False, allow_infinity=False, places=2
        )
    )
    def test_unfocused_rendering_stable(self, value: Decimal) -> None:
        """PROPERTY: reconcile(format(v)) == format(v) while unfocused."""
        fmt = NumberFormat(NumberInputOptions(locale="en-US", currency="USD"))
        text = fmt.format(value)
        result = conform(text, text)
        assert result.displayed_text == text
        assert result.number == value
