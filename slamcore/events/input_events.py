"""Keyboard and mouse input events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from slamcore.events.event import Event, EventCategory, EventType

_KEYBOARD = EventCategory.INPUT | EventCategory.KEYBOARD
_MOUSE = EventCategory.INPUT | EventCategory.MOUSE


def _format_float(value: float) -> str:
    """Shortest round-trip text of a float, without a trailing ``.0``."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


@dataclass
class KeyPressEvent(Event):
    """A key went down, possibly as a repeat of a held key."""

    key: int
    is_repeat: bool = False

    event_type: ClassVar[EventType] = EventType.KEY_PRESS
    categories: ClassVar[EventCategory] = _KEYBOARD

    def __str__(self) -> str:
        suffix = ", repeat" if self.is_repeat else ""
        return f"KeyPress: {int(self.key)}{suffix}"


@dataclass
class KeyReleaseEvent(Event):
    """A key went up."""

    key: int

    event_type: ClassVar[EventType] = EventType.KEY_RELEASE
    categories: ClassVar[EventCategory] = _KEYBOARD

    def __str__(self) -> str:
        return f"KeyRelease: {int(self.key)}"


@dataclass
class KeyTypeEvent(Event):
    """A character was typed."""

    key: int

    event_type: ClassVar[EventType] = EventType.KEY_TYPE
    categories: ClassVar[EventCategory] = _KEYBOARD

    def __str__(self) -> str:
        return f"KeyType: {int(self.key)}"


@dataclass
class MouseButtonPressEvent(Event):
    """A mouse button went down."""

    button: int

    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_PRESS
    categories: ClassVar[EventCategory] = _MOUSE

    def __str__(self) -> str:
        return f"MouseButtonPress: {int(self.button)}"


@dataclass
class MouseButtonReleaseEvent(Event):
    """A mouse button went up."""

    button: int

    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_RELEASE
    categories: ClassVar[EventCategory] = _MOUSE

    def __str__(self) -> str:
        return f"MouseButtonRelease: {int(self.button)}"


@dataclass
class MouseMoveEvent(Event):
    """The cursor moved to a new position."""

    x: int
    y: int

    event_type: ClassVar[EventType] = EventType.MOUSE_MOVE
    categories: ClassVar[EventCategory] = _MOUSE

    @property
    def position(self) -> tuple[int, int]:
        """The cursor position as ``(x, y)``."""
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"MouseMove: {self.x}, {self.y}"


@dataclass
class MouseScrollEvent(Event):
    """The mouse wheel scrolled."""

    offset_x: float
    offset_y: float

    event_type: ClassVar[EventType] = EventType.MOUSE_SCROLL
    categories: ClassVar[EventCategory] = _MOUSE

    def __str__(self) -> str:
        return f"MouseScroll: {_format_float(self.offset_x)}, {_format_float(self.offset_y)}"