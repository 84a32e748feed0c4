"""Tests for MemoryTextField and the schedulers."""

from __future__ import annotations

from numfield.enums import FieldEventType, InputType
from numfield.field import (
    DeferredScheduler,
    FieldEvent,
    ImmediateScheduler,
    MemoryTextField,
)


def record(field: MemoryTextField) -> list[FieldEvent]:
    events: list[FieldEvent] = []
    for event_type in FieldEventType:
        field.add_event_listener(event_type, events.append)
    return events


class TestMemoryTextFieldValue:
    """Programmatic text and selection."""

    def test_initial_caret_at_end(self) -> None:
        field = MemoryTextField("123")
        assert (field.selection_start, field.selection_end) == (3, 3)

    def test_assignment_dispatches_nothing(self) -> None:
        field = MemoryTextField()
        events = record(field)
        field.value = "42"
        assert events == []
        assert field.selection_start == 2

    def test_none_clears(self) -> None:
        field = MemoryTextField("42")
        field.value = None  # type: ignore[assignment]
        assert field.value == ""

    def test_selection_clamped(self) -> None:
        field = MemoryTextField("123")
        field.set_selection_range(-4, 10)
        assert (field.selection_start, field.selection_end) == (0, 3)
        field.set_selection_range(2, 1)
        assert (field.selection_start, field.selection_end) == (2, 2)

    def test_attributes(self) -> None:
        field = MemoryTextField()
        field.set_attribute("inputmode", "decimal")
        assert field.get_attribute("inputmode") == "decimal"
        assert field.get_attribute("missing") is None
        assert dict(field.attributes) == {"inputmode": "decimal"}


class TestMemoryTextFieldEditing:
    """User edits dispatch events like a browser input."""

    def test_type_text_event_order(self) -> None:
        field = MemoryTextField()
        events = record(field)
        field.type_text("1")
        assert events == [
            FieldEvent(FieldEventType.KEYPRESS, key="1"),
            FieldEvent(FieldEventType.INPUT, input_type=InputType.INSERT_TEXT),
        ]
        assert field.value == "1"

    def test_type_replaces_selection(self) -> None:
        field = MemoryTextField("12345")
        field.select(1, 4)
        field.type_text("x")
        assert field.value == "1x5"
        assert field.selection_start == 2

    def test_paste_is_single_input(self) -> None:
        field = MemoryTextField()
        events = record(field)
        field.paste("123")
        assert events == [
            FieldEvent(FieldEventType.INPUT, input_type=InputType.INSERT_FROM_PASTE)
        ]

    def test_delete_backward(self) -> None:
        field = MemoryTextField("123")
        field.move_caret(2)
        field.delete_backward()
        assert field.value == "13"
        assert field.selection_start == 1

    def test_delete_backward_at_start_is_noop(self) -> None:
        field = MemoryTextField("123")
        events = record(field)
        field.move_caret(0)
        field.delete_backward()
        assert field.value == "123"
        assert events == []

    def test_delete_forward(self) -> None:
        field = MemoryTextField("123")
        field.move_caret(0)
        field.delete_forward()
        assert field.value == "23"
        assert field.selection_start == 0

    def test_delete_selection(self) -> None:
        field = MemoryTextField("12345")
        field.select_all()
        field.delete_forward()
        assert field.value == ""


class TestMemoryTextFieldFocus:
    """Focus and blur events."""

    def test_focus_dispatches_once(self) -> None:
        field = MemoryTextField()
        events = record(field)
        field.focus()
        field.focus()
        assert events == [FieldEvent(FieldEventType.FOCUS)]
        assert field.has_focus

    def test_blur_without_edit(self) -> None:
        field = MemoryTextField("1")
        field.focus()
        events = record(field)
        field.blur()
        assert events == [FieldEvent(FieldEventType.BLUR)]

    def test_blur_after_edit_dispatches_change_first(self) -> None:
        field = MemoryTextField()
        field.focus()
        field.type_text("1")
        events = record(field)
        field.blur()
        assert [event.type for event in events] == [FieldEventType.CHANGE, FieldEventType.BLUR]

    def test_blur_when_unfocused_is_noop(self) -> None:
        field = MemoryTextField()
        events = record(field)
        field.blur()
        assert events == []


class TestSchedulers:
    """Deferral of the focus pass."""

    def test_immediate(self) -> None:
        calls: list[int] = []
        ImmediateScheduler().call_soon(lambda: calls.append(1))
        assert calls == [1]

    def test_deferred_runs_on_demand(self) -> None:
        calls: list[int] = []
        scheduler = DeferredScheduler()
        scheduler.call_soon(lambda: calls.append(1))
        assert calls == []
        assert scheduler.pending == 1
        assert scheduler.run_pending() == 1
        assert calls == [1]
        assert scheduler.pending == 0

    def test_deferred_runs_callbacks_queued_meanwhile(self) -> None:
        calls: list[str] = []
        scheduler = DeferredScheduler()

        def outer() -> None:
            calls.append("outer")
            scheduler.call_soon(lambda: calls.append("inner"))

        scheduler.call_soon(outer)
        assert scheduler.run_pending() == 2
        assert calls == ["outer", "inner"]
