from dataclasses import dataclass

import pytest

from slamcore.events.event import Event, EventCategory, EventDispatcher, EventType


@dataclass
class _KeyEvent(Event):
    key: int

    event_type = EventType.KEY_PRESS
    categories = EventCategory.INPUT | EventCategory.KEYBOARD

    def __str__(self) -> str:
        return f"KeyPress: {self.key}"


class _CloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    categories = EventCategory.WINDOW

    def __str__(self) -> str:
        return "WindowClose"


def test_category_all_combines_every_flag():
    assert EventCategory(0x1F) == EventCategory.ALL
    for flag in (
        EventCategory.WINDOW,
        EventCategory.INPUT,
        EventCategory.KEYBOARD,
        EventCategory.MOUSE,
        EventCategory.SCENE_VIEWPORT,
    ):
        assert flag in EventCategory.ALL


def test_event_type_none_is_zero():
    assert EventType(0) is EventType.NONE


def test_is_in_category():
    event = _KeyEvent(4)
    assert Event.is_in_category(event, EventCategory.KEYBOARD)
    assert Event.is_in_category(event, EventCategory.INPUT)
    assert not Event.is_in_category(event, EventCategory.MOUSE)
    assert not Event.is_in_category(event, EventCategory.NONE)
    assert Event.is_in_category(event, EventCategory.ALL)


def test_is_in_category_accepts_int():
    assert Event.is_in_category(_CloseEvent(), 0x01)
    assert not Event.is_in_category(_CloseEvent(), 0x02)


def test_base_event_is_abstract():
    with pytest.raises(TypeError):
        Event()


def test_new_event_not_handled():
    event = _CloseEvent()
    assert EventDispatcher(event).dispatch(_KeyEvent, lambda e: True) is False
    assert event.handled is False


def test_dispatch_matching_type_calls_callback():
    event = _KeyEvent(7)
    seen = []

    def callback(e):
        seen.append(e)
        return True

    assert EventDispatcher(event).dispatch(_KeyEvent, callback) is True
    assert seen == [event]
    assert event.handled is True


def test_dispatch_other_type_skips_callback():
    event = _CloseEvent()
    seen = []

    def callback(e):
        seen.append(e)
        return True

    assert EventDispatcher(event).dispatch(_KeyEvent, callback) is False
    assert seen == []
    assert event.handled is False


def test_dispatch_handled_flag_is_sticky():
    event = _KeyEvent(1)
    dispatcher = EventDispatcher(event)
    assert dispatcher.dispatch(_KeyEvent, lambda e: False)
    assert event.handled is False
    assert dispatcher.dispatch(_KeyEvent, lambda e: True)
    assert event.handled is True
    assert dispatcher.dispatch(_KeyEvent, lambda e: False)
    assert event.handled is True