"""Caret placement after the controller rewrites the field text.

Rewriting the text inserts and removes grouping symbols, moves the decimal
symbol and changes the length, so the caret offset before the edit is
meaningless afterwards. The caret instead keeps its distance from the right
end of the text, with corrections for the symbols the rewrite touched.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from numfield.enums import InputType

if TYPE_CHECKING:
    from numfield.formatting import NumberFormat
    from numfield.options import DistractionFree

__all__ = ["caret_after_edit", "caret_after_focus"]


def _clamp_offset(offset: int, text: str) -> int:
    return max(0, min(offset, len(text)))


def caret_after_edit(
    raw_text: str,
    caret_offset: int,
    new_text: str,
    *,
    number_format: NumberFormat,
    suppression: DistractionFree,
    auto_decimal_digits: bool,
    input_type: InputType = InputType.INSERT_TEXT,
) -> int:
    """Compute the caret offset after an edit was conformed.

    Rules, first match wins:

    1. A grouping symbol was inserted right at the caret: the caret stays
       left of it, next to the digit just typed.
    2. The text was reformatted by more than one character with the caret
       at or before the decimal symbol: the caret lands after the decimal
       symbol. A digit typed into full fraction digits replaced the next
       digit instead of shifting the caret.
    3. Otherwise the caret keeps its distance from the right end, never
       inside the prefix or the suffix.

    A paste skips rules 1 and 2, leaving the caret after the pasted text.

    Args:
        raw_text: Field text after the edit, before conforming
        caret_offset: Caret offset in raw_text
        new_text: Conformed text now displayed
        number_format: Formatter of the input
        suppression: Distraction-free flags in effect
        auto_decimal_digits: Whether the auto decimal digits mask is active
        input_type: Kind of edit

    Returns:
        Caret offset in new_text, within [0, len(new_text)]
    """
    fmt = number_format
    distance_from_right = len(raw_text) - caret_offset

    if input_type is not InputType.INSERT_FROM_PASTE:
        grouping = fmt.grouping_symbol
        if (
            grouping
            and new_text.startswith(grouping, caret_offset)
            and new_text.count(grouping) == raw_text.count(grouping) + 1
        ):
            return _clamp_offset(len(new_text) - distance_from_right - 1, new_text)

        decimal_symbol = fmt.decimal_symbol
        if decimal_symbol and decimal_symbol in raw_text:
            decimal_position = raw_text.index(decimal_symbol) + 1
            if abs(len(new_text) - len(raw_text)) > 1 and caret_offset <= decimal_position:
                if decimal_symbol in new_text:
                    return new_text.index(decimal_symbol) + 1
            elif (
                not auto_decimal_digits
                and caret_offset > decimal_position
                and len(fmt.only_digits(raw_text[decimal_position:])) - 1
                == fmt.maximum_fraction_digits
            ):
                distance_from_right -= 1

    if suppression.hide_currency_symbol:
        caret = len(new_text) - distance_from_right
    else:
        caret = max(
            len(new_text) - max(distance_from_right, len(fmt.suffix)),
            len(fmt.prefix),
        )
    return _clamp_offset(caret, new_text)


def caret_after_focus(
    text_before: str,
    selection_start: int,
    text_after: str,
    *,
    number_format: NumberFormat,
    suppression: DistractionFree,
) -> int:
    """Map the caret offset at focus time onto the distraction-free text.

    With visible currency symbols a caret inside the prefix or the suffix
    moves to the nearest digit. Otherwise the caret moves left by the
    prefix and by each grouping symbol before it that focus removed.

    Args:
        text_before: Text displayed when focus arrived
        selection_start: Caret offset in text_before
        text_after: Text displayed after the focus pass
        number_format: Formatter of the input
        suppression: Distraction-free flags in effect

    Returns:
        Caret offset in text_after, within [0, len(text_after)]
    """
    fmt = number_format
    if not suppression.hide_currency_symbol:
        if selection_start > len(text_before) - len(fmt.suffix):
            return _clamp_offset(len(text_after) - len(fmt.suffix), text_after)
        if selection_start < len(fmt.prefix):
            return _clamp_offset(len(fmt.prefix), text_after)

    caret = selection_start
    if suppression.hide_currency_symbol:
        caret -= len(fmt.prefix)
    if suppression.hide_grouping_symbol and fmt.grouping_symbol:
        caret -= text_before[:selection_start].count(fmt.grouping_symbol)
    return _clamp_offset(caret, text_after)
