"""Base event type, event categories and the dispatcher."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, IntFlag, auto
from typing import Callable, ClassVar, TypeVar


class EventType(Enum):
    """Every concrete kind of event."""

    NONE = 0
    WINDOW_CLOSE = auto()
    WINDOW_RESIZE = auto()
    WINDOW_MINIMIZE = auto()
    WINDOW_MAXIMIZE = auto()
    WINDOW_RESTORE = auto()
    WINDOW_GET_FOCUS = auto()
    WINDOW_LOST_FOCUS = auto()
    WINDOW_DROP = auto()
    KEY_PRESS = auto()
    KEY_RELEASE = auto()
    KEY_TYPE = auto()
    MOUSE_BUTTON_PRESS = auto()
    MOUSE_BUTTON_RELEASE = auto()
    MOUSE_MOVE = auto()
    MOUSE_SCROLL = auto()
    SCENE_VIEWPORT_RESIZE = auto()
    SCENE_VIEWPORT_GET_FOCUS = auto()
    SCENE_VIEWPORT_LOST_FOCUS = auto()
    SCENE_VIEWPORT_HOVER = auto()


class EventCategory(IntFlag):
    """Bit flags grouping events."""

    NONE = 0x00
    WINDOW = 0x01
    INPUT = 0x02
    KEYBOARD = 0x04
    MOUSE = 0x08
    SCENE_VIEWPORT = 0x10
    ALL = WINDOW | INPUT | KEYBOARD | MOUSE | SCENE_VIEWPORT


class Event(ABC):
    """An event; subclasses set ``event_type`` and ``categories``."""

    event_type: ClassVar[EventType] = EventType.NONE
    categories: ClassVar[EventCategory] = EventCategory.NONE
    handled: bool = False

    def is_in_category(self, category: EventCategory | int) -> bool:
        """Return whether the event belongs to any of the given categories."""
        return bool(int(category) & int(self.categories))

    @abstractmethod
    def __str__(self) -> str:
        """Describe the event."""


E = TypeVar("E", bound=Event)

EventCallback = Callable[[Event], None]


class EventDispatcher:
    """Routes one event to the callback registered for its type."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], callback: Callable[[E], bool]) -> bool:
        """Call ``callback`` if the event is of ``event_class``'s type.

        The callback's result is or-ed into the event's handled flag.
        Returns whether the callback was called.
        """
        if self.event.event_type != event_class.event_type:
            return False
        self.event.handled = self.event.handled or bool(callback(self.event))  # type: ignore[arg-type]
        return True