"""Resource life cycle: states, kinds and the abstract base."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Callable

DESTROY_DELAY_FRAMES = 60


class ResourceState(IntEnum):
    """Stage a resource is in."""

    IMPORTING = 0
    BUILDING = 1
    LOADING = 2
    UPLOADING = 3
    READY = 4
    DESTROYING = 5
    DESTROYED = 6


class ResourcesType(IntEnum):
    """Kinds of resource."""

    MESH = 0
    BONE = 1
    ANIMATION = 2
    TEXTURE = 3
    SHADER = 4
    MATERIAL = 5


class Resource(ABC):
    """A resource advanced one step per :meth:`update` call."""

    def __init__(self) -> None:
        self.state = ResourceState.IMPORTING
        self.destroy_delay = 0

    def update(self) -> None:
        """Run the handler of the current state."""
        if self.state == ResourceState.DESTROYED:
            return
        handlers: dict[ResourceState, Callable[[], None]] = {
            ResourceState.IMPORTING: self.on_import,
            ResourceState.BUILDING: self.on_build,
            ResourceState.LOADING: self.on_load,
            ResourceState.UPLOADING: self.on_upload,
            ResourceState.READY: self.on_ready,
            ResourceState.DESTROYING: self.on_destroy,
        }
        try:
            handler = handlers[self.state]
        except KeyError:
            raise ValueError(f"Unknown resource state: {self.state!r}") from None
        handler()

    def is_ready(self) -> bool:
        """Whether the resource is usable."""
        return self.state == ResourceState.READY

    def _count_down_cpu_data(self) -> None:
        """Release CPU data once, after the resource has been ready a while."""
        if self.destroy_delay <= DESTROY_DELAY_FRAMES:
            due = self.destroy_delay == DESTROY_DELAY_FRAMES
            self.destroy_delay += 1
            if due:
                self.destroy_cpu_data()

    @abstractmethod
    def on_import(self) -> None:
        """Import the asset file in its original format."""

    @abstractmethod
    def on_build(self) -> None:
        """Compile to the internal format."""

    @abstractmethod
    def on_load(self) -> None:
        """Read the serialized internal format."""

    @abstractmethod
    def on_upload(self) -> None:
        """Create the GPU-side handle."""

    @abstractmethod
    def on_ready(self) -> None:
        """Release CPU data after a delay."""

    @abstractmethod
    def on_destroy(self) -> None:
        """Release both CPU and GPU data."""

    @abstractmethod
    def destroy_cpu_data(self) -> None:
        """Release CPU-side data."""