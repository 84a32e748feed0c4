"""Enumerations for numfield type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FocusState(StrEnum):
    """Focus state of the text field bound to a number input.

    StrEnum provides automatic string conversion: str(FocusState.FOCUSED) == "focused"
    """

    UNFOCUSED = "unfocused"
    """Field does not have focus: full formatting, no caret handling."""

    FOCUSED = "focused"
    """Field has focus: distraction-free suppression and caret reconciliation."""


class InputMode(StrEnum):
    """Virtual keyboard hint published through the ``inputmode`` attribute."""

    NUMERIC = "numeric"
    """Digits only (auto decimal digits mode never needs a separator key)."""

    DECIMAL = "decimal"
    """Digits plus the locale decimal separator."""


class InputType(StrEnum):
    """Kind of edit that produced an input event.

    Values follow the DOM ``InputEvent.inputType`` names.
    """

    INSERT_TEXT = "insertText"
    """Single keystroke insertion (or replacement of a selection)."""

    INSERT_FROM_PASTE = "insertFromPaste"
    """Multi-character insertion from the clipboard."""

    DELETE_CONTENT_BACKWARD = "deleteContentBackward"
    """Backspace."""

    DELETE_CONTENT_FORWARD = "deleteContentForward"
    """Delete key."""


class FieldEventType(StrEnum):
    """Events a text field dispatches to its listeners.

    Values follow the DOM event type names.
    """

    INPUT = "input"
    FOCUS = "focus"
    BLUR = "blur"
    KEYPRESS = "keypress"
    CHANGE = "change"


__all__ = [
    "FieldEventType",
    "FocusState",
    "InputMode",
    "InputType",
]
