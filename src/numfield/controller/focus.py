"""Focus state of a number input.

FocusStateMachine replaces loose "has focus" and "decimal typed at" flags
with one object owning both:

    UNFOCUSED --focus()--> FOCUSED --blur()--> UNFOCUSED

A decimal-symbol keypress while focused records a pending insertion offset.
The next conformance pass consumes it exactly once.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging

from numfield.enums import FocusState

__all__ = ["FocusState", "FocusStateMachine"]

logger = logging.getLogger(__name__)


class FocusStateMachine:
    """Explicit focus state plus the one-shot pending decimal marker.

    Example:
        >>> machine = FocusStateMachine()
        >>> machine.focus()
        True
        >>> machine.mark_decimal_insertion(3)
        >>> machine.consume_decimal_insertion(), machine.consume_decimal_insertion()
        (3, None)
    """

    __slots__ = ("_pending_decimal_insertion", "_state")

    def __init__(self) -> None:
        self._state = FocusState.UNFOCUSED
        self._pending_decimal_insertion: int | None = None

    def __repr__(self) -> str:
        return (
            f"FocusStateMachine(state={self._state!r}, "
            f"pending_decimal_insertion={self._pending_decimal_insertion!r})"
        )

    @property
    def state(self) -> FocusState:
        return self._state

    @property
    def is_focused(self) -> bool:
        return self._state is FocusState.FOCUSED

    @property
    def pending_decimal_insertion(self) -> int | None:
        """Offset of a decimal symbol typed since the last conformance pass."""
        return self._pending_decimal_insertion

    def focus(self) -> bool:
        """Enter FOCUSED.

        Returns:
            True if the state changed
        """
        return self._transition(FocusState.FOCUSED)

    def blur(self) -> bool:
        """Enter UNFOCUSED and drop any pending decimal insertion.

        Returns:
            True if the state changed
        """
        self._pending_decimal_insertion = None
        return self._transition(FocusState.UNFOCUSED)

    def mark_decimal_insertion(self, offset: int) -> None:
        """Record that a decimal symbol was typed at offset (ignored when unfocused)."""
        if self.is_focused:
            self._pending_decimal_insertion = offset

    def consume_decimal_insertion(self) -> int | None:
        """Return the pending decimal insertion offset and clear it."""
        offset, self._pending_decimal_insertion = self._pending_decimal_insertion, None
        return offset

    def _transition(self, target: FocusState) -> bool:
        if self._state is target:
            return False
        logger.debug("Focus transition %s -> %s", self._state, target)
        self._state = target
        return True
