"""NumberInput: keeps a text field and its number in sync.

The controller owns the text of one TextField. Every field event runs a
conformance pass (see conformance.reconcile_text), writes the resulting text
into the field, re-parses the number from it, and notifies observers:

- on_input fires after every pass, once the field shows the new text.
- on_change fires when a committed value (blur, set_value, set_options)
  changes the number, when a commit is explicit, or when the host reports
  a change event.

Architecture:
    TextField events -> NumberInput -> reconcile_text -> TextField.value
                                    -> caret_after_edit / caret_after_focus
    Configuration is rebuilt as a whole by set_options(); a failing
    configuration leaves the previous one in effect.

Python 3.13+. Uses Babel (through NumberFormat) for CLDR data.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from numfield.constants import DECIMAL_SYMBOLS
from numfield.enums import FieldEventType, FocusState, InputType
from numfield.field import FieldEvent, ImmediateScheduler
from numfield.formatting import NumberFormat, NumberMask, create_number_mask
from numfield.options import DistractionFree, NumberInputOptions
from numfield.value_range import ValueRange
from numfield.value_types import (
    NumberInputValue,
    NumericValue,
    ValueCallback,
    from_scaled_integer,
    to_decimal,
    to_scaled_integer,
)

from .caret import caret_after_edit, caret_after_focus
from .conformance import reconcile_text
from .focus import FocusStateMachine

if TYPE_CHECKING:
    from numfield.field import Scheduler, TextField

__all__ = ["NumberInput", "NumberInputCallbacks"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NumberInputCallbacks:
    """Observers of a NumberInput; either may be omitted.

    Attributes:
        on_input: Called with the current value after every conformance pass
        on_change: Called with the current value when it is committed
    """

    on_input: ValueCallback | None = None
    on_change: ValueCallback | None = None


@dataclass(frozen=True, slots=True)
class _Configuration:
    """Everything derived from NumberInputOptions, replaced as one unit."""

    options: NumberInputOptions
    suppression: DistractionFree
    value_range: ValueRange
    number_format: NumberFormat
    number_mask: NumberMask


class NumberInput:
    """Number or currency entry bound to a text field.

    Example:
        >>> field = MemoryTextField()
        >>> number_input = NumberInput(field, {"locale": "en-US", "currency": "USD"})
        >>> field.type_text("1234")
        >>> number_input.get_value()
        NumberInputValue(number=Decimal('1234'), formatted='$1,234')
    """

    __slots__ = (
        "_callbacks",
        "_config",
        "_field",
        "_focus",
        "_formatted_value",
        "_number_value",
        "_scheduler",
    )

    def __init__(
        self,
        field: TextField,
        options: NumberInputOptions | Mapping[str, Any] | None = None,
        callbacks: NumberInputCallbacks | None = None,
        *,
        scheduler: Scheduler | None = None,
    ) -> None:
        """Bind to field and format the text it already holds.

        Args:
            field: Text field to control
            options: NumberInputOptions, or a mapping with snake_case or
                camelCase keys (None: all defaults)
            callbacks: on_input/on_change observers
            scheduler: Defers the focus pass by one event-loop tick
                (default: runs it immediately)

        Raises:
            ConfigurationError: If options are invalid
        """
        self._field = field
        self._callbacks = callbacks or NumberInputCallbacks()
        self._scheduler: Scheduler = scheduler or ImmediateScheduler()
        self._focus = FocusStateMachine()
        self._number_value: Decimal | None = None
        self._formatted_value = ""
        self._config = self._configure(options)
        self._add_event_listeners()

        initial = self._config.number_format.parse(field.value)
        if initial is None:
            field.value = ""
        else:
            # Text in the field is a decimal rendering, even in integer mode
            self._apply_fixed_fraction_format(initial)

    def __repr__(self) -> str:
        return (
            f"NumberInput(formatted={self._formatted_value!r}, "
            f"number={self._number_value!r}, focus={self._focus.state!r})"
        )

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    @property
    def field(self) -> TextField:
        return self._field

    @property
    def options(self) -> NumberInputOptions:
        return self._config.options

    @property
    def number_format(self) -> NumberFormat:
        return self._config.number_format

    @property
    def focus_state(self) -> FocusState:
        return self._focus.state

    @property
    def number_value(self) -> Decimal | None:
        """Canonical decimal value, never scaled by integer mode."""
        return self._number_value

    def get_value(self) -> NumberInputValue:
        """Return the current number and the text displaying it.

        In integer mode the number is scaled by 10**maximum_fraction_digits
        of the format (e.g. 10.50 with two fraction digits is 1050).
        """
        number: Decimal | int | None = self._number_value
        if number is not None and self._config.options.value_as_integer:
            number = to_scaled_integer(number, self._config.number_format.maximum_fraction_digits)
        return NumberInputValue(number=number, formatted=self._formatted_value)

    def set_value(self, value: NumericValue | None) -> None:
        """Commit a value from outside the field.

        The value is clamped into the value range and formatted. Setting the
        current value again does nothing; any other value notifies on_change,
        even when clamping leaves the number unchanged.

        Args:
            value: New number (scaled in integer mode), or None to clear

        Raises:
            TypeError: If value is not a number
            ValueError: If value is NaN or infinite
        """
        number = None if value is None else to_decimal(value)
        if number is not None and self._config.options.value_as_integer:
            number = from_scaled_integer(number, self._config.number_format.maximum_fraction_digits)
        if number != self._number_value:
            self._apply_fixed_fraction_format(number, forced_change=True)

    def set_options(self, options: NumberInputOptions | Mapping[str, Any] | None) -> None:
        """Replace the configuration and re-render the current value.

        Always notifies on_change.

        Raises:
            ConfigurationError: If options are invalid (configuration unchanged)
        """
        self._config = self._configure(options)
        self._apply_fixed_fraction_format(self._number_value, forced_change=True)

    # -------------------------------------------------------------------------
    # Field events
    # -------------------------------------------------------------------------

    def on_input(self, input_type: InputType = InputType.INSERT_TEXT) -> None:
        """Conform the text the user just edited and restore the caret."""
        raw_text = self._field.value
        caret_offset = self._field.selection_start
        self._format(raw_text)
        if self._focus.is_focused:
            config = self._config
            self._field.set_selection_range(
                caret_after_edit(
                    raw_text,
                    caret_offset,
                    self._formatted_value,
                    number_format=config.number_format,
                    suppression=config.suppression,
                    auto_decimal_digits=config.options.auto_decimal_digits,
                    input_type=input_type,
                )
            )

    def on_focus(self) -> None:
        """Enter focused state and schedule the distraction-free pass."""
        self._focus.focus()
        self._scheduler.call_soon(self._apply_focus_formatting)

    def on_blur(self) -> None:
        """Leave focused state and commit the current value."""
        self._focus.blur()
        if self._number_value is not None:
            self._apply_fixed_fraction_format(self._number_value)

    def on_keypress(self, key: str | None) -> None:
        """Remember where a decimal symbol key was pressed."""
        if key in DECIMAL_SYMBOLS:
            self._focus.mark_decimal_insertion(self._field.selection_start)

    def on_change(self) -> None:
        """Relay a change reported by the host field."""
        self._notify_change()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _configure(
        self, options: NumberInputOptions | Mapping[str, Any] | None
    ) -> _Configuration:
        if not isinstance(options, NumberInputOptions):
            options = NumberInputOptions.from_mapping(options)
        number_format = NumberFormat(options)
        config = _Configuration(
            options=options,
            suppression=options.suppression,
            value_range=options.effective_value_range,
            number_format=number_format,
            number_mask=create_number_mask(
                number_format, auto_decimal_digits=options.auto_decimal_digits
            ),
        )
        self._field.set_attribute("inputmode", str(options.input_mode))
        logger.debug("Configured %r", number_format)
        return config

    def _add_event_listeners(self) -> None:
        field = self._field
        field.add_event_listener(FieldEventType.INPUT, self._handle_event)
        field.add_event_listener(FieldEventType.FOCUS, self._handle_event)
        field.add_event_listener(FieldEventType.BLUR, self._handle_event)
        field.add_event_listener(FieldEventType.KEYPRESS, self._handle_event)
        field.add_event_listener(FieldEventType.CHANGE, self._handle_event)

    def _handle_event(self, event: FieldEvent) -> None:
        match event.type:
            case FieldEventType.INPUT:
                self.on_input(event.input_type)
            case FieldEventType.FOCUS:
                self.on_focus()
            case FieldEventType.BLUR:
                self.on_blur()
            case FieldEventType.KEYPRESS:
                self.on_keypress(event.key)
            case FieldEventType.CHANGE:
                self.on_change()

    def _apply_focus_formatting(self) -> None:
        # Focus may have been lost before this deferred step ran
        if not self._focus.is_focused:
            return
        field = self._field
        config = self._config
        text_before = field.value
        selection_start, selection_end = field.selection_start, field.selection_end

        if config.suppression.any and text_before:
            self._format(
                text_before,
                hide_negligible_decimal_digits=config.suppression.hide_negligible_decimal_digits,
            )
        if selection_start != selection_end:
            field.set_selection_range(0, len(field.value))
        else:
            field.set_selection_range(
                caret_after_focus(
                    text_before,
                    selection_start,
                    self._formatted_value,
                    number_format=config.number_format,
                    suppression=config.suppression,
                )
            )

    def _apply_fixed_fraction_format(
        self, number: Decimal | None, *, forced_change: bool = False
    ) -> None:
        config = self._config
        text = (
            None
            if number is None
            else config.number_format.format(config.value_range.clamp(number))
        )
        self._format(text)
        if number != self._number_value or forced_change:
            self._notify_change()

    def _format(self, text: str | None, *, hide_negligible_decimal_digits: bool = False) -> None:
        config = self._config
        result = reconcile_text(
            text,
            self._formatted_value,
            number_format=config.number_format,
            number_mask=config.number_mask,
            focus_state=self._focus.state,
            suppression=config.suppression,
            allow_negative=config.options.allow_negative,
            pending_decimal_insertion=self._focus.consume_decimal_insertion(),
            hide_negligible_decimal_digits=hide_negligible_decimal_digits,
        )
        self._field.value = result.displayed_text
        self._number_value = result.number
        self._formatted_value = self._field.value
        logger.debug("Displayed %r for %s", self._formatted_value, self._number_value)
        self._notify_input()

    def _notify_input(self) -> None:
        if self._callbacks.on_input is not None:
            self._callbacks.on_input(self.get_value())

    def _notify_change(self) -> None:
        if self._callbacks.on_change is not None:
            self._callbacks.on_change(self.get_value())
