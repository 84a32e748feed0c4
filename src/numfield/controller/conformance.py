"""Conformance pass: raw field text to displayed text and number.

One pass takes the text the field holds after an edit (or a value rendered
for a commit) and the text displayed before, and produces the text to
display plus the number it parses to:

1. Empty text means no value.
2. A decimal symbol typed at a recorded offset becomes the locale symbol.
3. The mask strategy conforms the text, yielding a number or literal text.
4. Numbers render with fraction digits depending on focus; numbers beyond
   MAX_SAFE_INTEGER keep the previous text.
5. Sign and currency symbols are suppressed per configuration and focus.
6. The number is re-parsed from the final text, so text and number agree.

Clamping into the value range is not part of a pass; the controller clamps
committed values before rendering them.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from numfield.constants import MAX_SAFE_INTEGER
from numfield.enums import FocusState
from numfield.formatting.number_mask import ConformedNumber

if TYPE_CHECKING:
    from numfield.formatting import NumberFormat, NumberMask
    from numfield.options import DistractionFree

__all__ = ["ConformanceResult", "reconcile_text"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConformanceResult:
    """Outcome of one conformance pass.

    Attributes:
        displayed_text: Text to write into the field ("" for no value)
        number: displayed_text parsed back, None when it holds no number
    """

    displayed_text: str
    number: Decimal | None


def reconcile_text(
    raw_text: str | None,
    prior_displayed_text: str,
    *,
    number_format: NumberFormat,
    number_mask: NumberMask,
    focus_state: FocusState,
    suppression: DistractionFree,
    allow_negative: bool,
    pending_decimal_insertion: int | None = None,
    hide_negligible_decimal_digits: bool = False,
) -> ConformanceResult:
    """Run one conformance pass.

    Args:
        raw_text: Field text after the edit, or a rendering to commit
        prior_displayed_text: Text displayed before the edit
        number_format: Formatter of the input
        number_mask: Mask strategy of the input
        focus_state: Focus state during the pass
        suppression: Distraction-free flags in effect
        allow_negative: Whether negative numbers may be displayed
        pending_decimal_insertion: Offset where a decimal key was typed
        hide_negligible_decimal_digits: Drop trailing zero fraction digits
            (the focus pass of distraction-free mode)

    Returns:
        ConformanceResult with the text to display and its number
    """
    if not raw_text:
        return ConformanceResult("", None)

    fmt = number_format
    focused = focus_state is FocusState.FOCUSED

    if pending_decimal_insertion is not None:
        raw_text = fmt.normalize_decimal_symbol(raw_text, pending_decimal_insertion)

    conformed = number_mask.conform_to_mask(raw_text, prior_displayed_text)
    if isinstance(conformed, ConformedNumber):
        text = _render_conformed(
            conformed,
            prior_displayed_text,
            fmt,
            focused=focused,
            hide_grouping_symbol=suppression.hide_grouping_symbol,
            hide_negligible_decimal_digits=hide_negligible_decimal_digits,
        )
    else:
        text = conformed

    if not allow_negative:
        text = text.replace(fmt.negative_prefix, fmt.prefix, 1)
    if focused and suppression.hide_currency_symbol:
        text = fmt.strip_currency_symbol(text.replace(fmt.negative_prefix, fmt.minus_symbol, 1))

    return ConformanceResult(text, fmt.parse(text))


def _render_conformed(
    conformed: ConformedNumber,
    prior_displayed_text: str,
    fmt: NumberFormat,
    *,
    focused: bool,
    hide_grouping_symbol: bool,
    hide_negligible_decimal_digits: bool,
) -> str:
    number = conformed.number_value
    if number.copy_abs() > MAX_SAFE_INTEGER:
        logger.debug("Ignored %s beyond the safe-integer envelope", number)
        return prior_displayed_text

    maximum_fraction_digits = fmt.maximum_fraction_digits
    minimum_fraction_digits = maximum_fraction_digits if focused else fmt.minimum_fraction_digits
    if hide_negligible_decimal_digits:
        minimum_fraction_digits = len(conformed.fraction_digits.rstrip("0"))
    else:
        minimum_fraction_digits = min(minimum_fraction_digits, len(conformed.fraction_digits))

    return fmt.format(
        number,
        use_grouping=not (focused and hide_grouping_symbol),
        minimum_fraction_digits=minimum_fraction_digits,
        maximum_fraction_digits=maximum_fraction_digits,
    )
