"""Host text field and event-loop abstractions.

A NumberInput never talks to a concrete widget. It drives any object
satisfying the TextField protocol and defers its post-focus step through a
Scheduler, so the same controller serves GUI toolkits, terminal UIs, and
tests.

Provides:
    - TextField: Protocol for the widget bound to a NumberInput
    - FieldEvent: Event delivered to field listeners
    - MemoryTextField: Headless TextField with editing helpers
    - Scheduler: Protocol for deferring a callback by one event-loop tick
    - ImmediateScheduler, DeferredScheduler: Scheduler implementations

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Protocol, TypeAlias

from numfield.enums import FieldEventType, InputType

__all__ = [
    "DeferredScheduler",
    "FieldEvent",
    "FieldListener",
    "ImmediateScheduler",
    "InputType",
    "MemoryTextField",
    "Scheduler",
    "TextField",
]


@dataclass(frozen=True, slots=True)
class FieldEvent:
    """Event dispatched by a text field.

    Attributes:
        type: Event type (input, focus, blur, keypress, change)
        key: Character of a keypress event, None otherwise
        input_type: Kind of edit behind an input event
    """

    type: FieldEventType
    key: str | None = None
    input_type: InputType = InputType.INSERT_TEXT


FieldListener: TypeAlias = Callable[[FieldEvent], None]


class TextField(Protocol):
    """Widget whose text a NumberInput owns.

    Offsets are character offsets into ``value``. Implementations clamp
    selection offsets into [0, len(value)].
    """

    @property
    def value(self) -> str: ...

    @value.setter
    def value(self, value: str) -> None: ...

    @property
    def selection_start(self) -> int: ...

    @property
    def selection_end(self) -> int: ...

    def set_selection_range(self, start: int, end: int | None = None) -> None: ...

    def set_attribute(self, name: str, value: str) -> None: ...

    def add_event_listener(self, event_type: FieldEventType, listener: FieldListener) -> None:
        ...  # pragma: no cover  # Protocol stub - not executable


class MemoryTextField:
    """In-memory TextField.

    Mirrors the event order of a browser text input:

    - Typing dispatches ``keypress`` before the text changes, then ``input``.
    - Assigning ``value`` programmatically dispatches nothing and moves the
      caret to the end.
    - Losing focus dispatches ``change`` (when the text differs from the
      text at focus time) and then ``blur``.

    Example:
        >>> field = MemoryTextField()
        >>> field.type_text("12")
        >>> field.value, field.selection_start
        ('12', 2)
    """

    __slots__ = (
        "_attributes",
        "_focused",
        "_listeners",
        "_selection_end",
        "_selection_start",
        "_value",
        "_value_at_focus",
    )

    def __init__(self, value: str = "") -> None:
        self._value = value
        self._selection_start = self._selection_end = len(value)
        self._attributes: dict[str, str] = {}
        self._listeners: dict[FieldEventType, list[FieldListener]] = {}
        self._focused = False
        self._value_at_focus = value

    def __repr__(self) -> str:
        return (
            f"MemoryTextField(value={self._value!r}, "
            f"selection=({self._selection_start}, {self._selection_end}))"
        )

    @property
    def value(self) -> str:
        """Current text."""
        return self._value

    @value.setter
    def value(self, value: str | None) -> None:
        self._value = value or ""
        self._selection_start = self._selection_end = len(self._value)

    @property
    def selection_start(self) -> int:
        """Offset of the selection start (the caret when nothing is selected)."""
        return self._selection_start

    @property
    def selection_end(self) -> int:
        """Offset of the selection end."""
        return self._selection_end

    @property
    def has_focus(self) -> bool:
        """Whether the field currently has focus."""
        return self._focused

    @property
    def attributes(self) -> MappingProxyType[str, str]:
        """Read-only view of the attributes set on the field."""
        return MappingProxyType(self._attributes)

    def set_selection_range(self, start: int, end: int | None = None) -> None:
        """Select [start, end), clamped to the text; end defaults to start."""
        length = len(self._value)
        start = max(0, min(start, length))
        end = start if end is None else max(start, min(end, length))
        self._selection_start, self._selection_end = start, end

    def set_attribute(self, name: str, value: str) -> None:
        self._attributes[name] = value

    def get_attribute(self, name: str) -> str | None:
        return self._attributes.get(name)

    def add_event_listener(self, event_type: FieldEventType, listener: FieldListener) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def dispatch(self, event: FieldEvent) -> None:
        """Deliver event to listeners in registration order."""
        for listener in tuple(self._listeners.get(event.type, ())):
            listener(event)

    # -------------------------------------------------------------------------
    # User interaction
    # -------------------------------------------------------------------------

    def focus(self) -> None:
        """Give the field focus (no-op when already focused)."""
        if self._focused:
            return
        self._focused = True
        self._value_at_focus = self._value
        self.dispatch(FieldEvent(FieldEventType.FOCUS))

    def blur(self) -> None:
        """Take focus away (no-op when not focused)."""
        if not self._focused:
            return
        self._focused = False
        if self._value != self._value_at_focus:
            self.dispatch(FieldEvent(FieldEventType.CHANGE))
        self.dispatch(FieldEvent(FieldEventType.BLUR))

    def select(self, start: int, end: int) -> None:
        """Select a range, as a user dragging over the text would."""
        self.set_selection_range(start, end)

    def select_all(self) -> None:
        self.set_selection_range(0, len(self._value))

    def move_caret(self, offset: int) -> None:
        """Collapse the selection to offset."""
        self.set_selection_range(offset)

    def type_text(self, text: str) -> None:
        """Type text one character at a time at the caret."""
        for char in text:
            self.dispatch(FieldEvent(FieldEventType.KEYPRESS, key=char))
            self._replace_selection(char)
            self.dispatch(FieldEvent(FieldEventType.INPUT, input_type=InputType.INSERT_TEXT))

    def paste(self, text: str) -> None:
        """Insert text in a single edit, replacing the selection."""
        self._replace_selection(text)
        self.dispatch(FieldEvent(FieldEventType.INPUT, input_type=InputType.INSERT_FROM_PASTE))

    def delete_backward(self) -> None:
        """Backspace: delete the selection or the character before the caret."""
        start, end = self._selection_start, self._selection_end
        if start == end:
            if start == 0:
                return
            start -= 1
        self._delete(start, end)
        self.dispatch(
            FieldEvent(FieldEventType.INPUT, input_type=InputType.DELETE_CONTENT_BACKWARD)
        )

    def delete_forward(self) -> None:
        """Delete key: delete the selection or the character after the caret."""
        start, end = self._selection_start, self._selection_end
        if start == end:
            if end == len(self._value):
                return
            end += 1
        self._delete(start, end)
        self.dispatch(
            FieldEvent(FieldEventType.INPUT, input_type=InputType.DELETE_CONTENT_FORWARD)
        )

    def _replace_selection(self, text: str) -> None:
        start, end = self._selection_start, self._selection_end
        self._value = f"{self._value[:start]}{text}{self._value[end:]}"
        self._selection_start = self._selection_end = start + len(text)

    def _delete(self, start: int, end: int) -> None:
        self._value = f"{self._value[:start]}{self._value[end:]}"
        self._selection_start = self._selection_end = start


class Scheduler(Protocol):
    """Defers a callback until the host's current event has been handled."""

    def call_soon(self, callback: Callable[[], None]) -> None: ...


class ImmediateScheduler:
    """Runs callbacks synchronously, for hosts without an event loop."""

    __slots__ = ()

    def call_soon(self, callback: Callable[[], None]) -> None:
        callback()


class DeferredScheduler:
    """Queues callbacks until the host runs the next event-loop tick.

    Example:
        >>> scheduler = DeferredScheduler()
        >>> scheduler.call_soon(lambda: print("tick"))
        >>> scheduler.run_pending()
        tick
        1
    """

    __slots__ = ("_queue",)

    def __init__(self) -> None:
        self._queue: deque[Callable[[], None]] = deque()

    @property
    def pending(self) -> int:
        """Number of queued callbacks."""
        return len(self._queue)

    def call_soon(self, callback: Callable[[], None]) -> None:
        self._queue.append(callback)

    def run_pending(self) -> int:
        """Run queued callbacks (including ones queued meanwhile).

        Returns:
            Number of callbacks run
        """
        count = 0
        while self._queue:
            self._queue.popleft()()
            count += 1
        return count
