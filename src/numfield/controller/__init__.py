"""Controller keeping a text field and its number in sync.

Public API:
    NumberInput - Binds a TextField to a number
    NumberInputCallbacks - on_input/on_change observers
    FocusStateMachine - Focus state plus the pending decimal marker
    reconcile_text - One conformance pass (raw text to text and number)
    caret_after_edit, caret_after_focus - Caret placement after rewrites

Python 3.13+.
"""

from .caret import caret_after_edit, caret_after_focus
from .conformance import ConformanceResult, reconcile_text
from .focus import FocusState, FocusStateMachine
from .number_input import NumberInput, NumberInputCallbacks

__all__ = [
    "ConformanceResult",
    "FocusState",
    "FocusStateMachine",
    "NumberInput",
    "NumberInputCallbacks",
    "caret_after_edit",
    "caret_after_focus",
    "reconcile_text",
]
