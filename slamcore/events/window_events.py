"""Window and scene viewport events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from slamcore.events.event import Event, EventCategory, EventType

_WINDOW = EventCategory.WINDOW
_VIEWPORT = EventCategory.SCENE_VIEWPORT


@dataclass
class WindowCloseEvent(Event):
    """The window was asked to close."""

    event_type: ClassVar[EventType] = EventType.WINDOW_CLOSE
    categories: ClassVar[EventCategory] = _WINDOW

    def __str__(self) -> str:
        return "WindowClose"


@dataclass
class WindowResizeEvent(Event):
    """The window changed size."""

    width: int
    height: int

    event_type: ClassVar[EventType] = EventType.WINDOW_RESIZE
    categories: ClassVar[EventCategory] = _WINDOW

    def __str__(self) -> str:
        return f"WindowResize: {self.width}, {self.height}"


@dataclass
class WindowMinimizeEvent(Event):
    """The window was minimized."""

    event_type: ClassVar[EventType] = EventType.WINDOW_MINIMIZE
    categories: ClassVar[EventCategory] = _WINDOW

    def __str__(self) -> str:
        return "WindowMinimize"


@dataclass
class WindowMaximizeEvent(Event):
    """The window was maximized."""

    event_type: ClassVar[EventType] = EventType.WINDOW_MAXIMIZE
    categories: ClassVar[EventCategory] = _WINDOW

    def __str__(self) -> str:
        return "WindowMaximize"


@dataclass
class WindowRestoreEvent(Event):
    """The window was restored."""

    event_type: ClassVar[EventType] = EventType.WINDOW_RESTORE
    categories: ClassVar[EventCategory] = _WINDOW

    def __str__(self) -> str:
        return "WindowRestore"


@dataclass
class WindowGetFocusEvent(Event):
    """The window gained focus."""

    event_type: ClassVar[EventType] = EventType.WINDOW_GET_FOCUS
    categories: ClassVar[EventCategory] = _WINDOW

    def __str__(self) -> str:
        return "WindowGetFocus"


@dataclass
class WindowLossFocusEvent(Event):
    """The window lost focus."""

    event_type: ClassVar[EventType] = EventType.WINDOW_LOST_FOCUS
    categories: ClassVar[EventCategory] = _WINDOW

    def __str__(self) -> str:
        return "WindowLossFocus"


@dataclass
class WindowDropEvent(Event):
    """A file was dropped onto the window."""

    path: str

    event_type: ClassVar[EventType] = EventType.WINDOW_DROP
    categories: ClassVar[EventCategory] = _WINDOW

    def __str__(self) -> str:
        return f"WindowDrop: {self.path}"


@dataclass
class SceneViewportResizeEvent(Event):
    """The scene viewport changed size."""

    width: int
    height: int

    event_type: ClassVar[EventType] = EventType.SCENE_VIEWPORT_RESIZE
    categories: ClassVar[EventCategory] = _VIEWPORT

    def __str__(self) -> str:
        return f"SceneViewportResize: {self.width}, {self.height}"


@dataclass
class SceneViewportGetFocusEvent(Event):
    """The scene viewport gained focus."""

    event_type: ClassVar[EventType] = EventType.SCENE_VIEWPORT_GET_FOCUS
    categories: ClassVar[EventCategory] = _VIEWPORT

    def __str__(self) -> str:
        return "SceneViewportFocus"


@dataclass
class SceneViewportLostFocusEvent(Event):
    """The scene viewport lost focus."""

    event_type: ClassVar[EventType] = EventType.SCENE_VIEWPORT_LOST_FOCUS
    categories: ClassVar[EventCategory] = _VIEWPORT

    def __str__(self) -> str:
        return "SceneViewportLostFocus"


@dataclass
class SceneViewportHoverEvent(Event):
    """The cursor is hovering over the scene viewport."""

    event_type: ClassVar[EventType] = EventType.SCENE_VIEWPORT_HOVER
    categories: ClassVar[EventCategory] = _VIEWPORT

    def __str__(self) -> str:
        return "SceneViewportHover"