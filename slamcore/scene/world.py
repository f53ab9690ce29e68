"""Entity-component world and the entity handle."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

from slamcore.scene.camera import CameraComponent
from slamcore.scene.components import TagComponent
from slamcore.scene.transform import TransformComponent

logger = logging.getLogger(__name__)


class ECSWorld:
    """Holds entities and their components, keyed by component type."""

    def __init__(self) -> None:
        self._components: dict[int, dict[type, Any]] = {}
        self._names: set[str] = set()
        self._next_handle = 0

    def create_entity(self, name: str = "Empty Entity") -> "Entity":
        """Create an entity with a unique tag name and a default transform.

        A taken name gets a numbered suffix: ``"name (1)"``, ``"name (2)"``...
        """
        new_name = name
        index = 1
        while new_name in self._names:
            new_name = f"{name} ({index})"
            index += 1
        self._names.add(new_name)

        handle = self._next_handle
        self._next_handle += 1
        self._components[handle] = {}

        entity = Entity(self, handle)
        entity.add_component(TagComponent(new_name))
        entity.add_component(TransformComponent())
        return entity

    def view(self, *component_types: type) -> Iterator["Entity"]:
        """Yield every entity holding all of ``component_types``."""
        for handle, components in list(self._components.items()):
            if all(kind in components for kind in component_types):
                yield Entity(self, handle)

    def main_camera_entity(self) -> "Entity":
        """The entity whose camera is the main one, or an invalid entity."""
        for entity in self.view(CameraComponent):
            if entity.get_components(CameraComponent).is_main_camera:
                return entity
        return Entity(self)

    def main_camera_component(self) -> CameraComponent:
        """The main camera's camera component."""
        return self._main_camera().get_components(CameraComponent)

    def main_camera_transform(self) -> TransformComponent:
        """The main camera's transform component."""
        return self._main_camera().get_components(TransformComponent)

    def _main_camera(self) -> "Entity":
        entity = self.main_camera_entity()
        if not entity.is_valid():
            raise LookupError("There is no main camera")
        return entity


class Entity:
    """Handle to an entity in an :class:`ECSWorld`; ``handle`` is None when null."""

    __slots__ = ("world", "handle")

    def __init__(self, world: ECSWorld, handle: Optional[int] = None) -> None:
        self.world = world
        self.handle = handle

    def _store(self) -> dict[type, Any]:
        if not self.is_valid():
            raise ValueError("Entity is not valid")
        return self.world._components[self.handle]

    def is_valid(self) -> bool:
        """Whether the handle refers to a live entity."""
        return self.handle is not None and self.handle in self.world._components

    def reset(self) -> None:
        """Make this handle null without touching the entity."""
        self.handle = None

    def destroy(self) -> None:
        """Destroy the entity and all its components."""
        if not self.is_valid():
            return
        tag = self.world._components[self.handle].get(TagComponent)
        logger.debug('Destroy Entity: "%s"', tag.name if tag else "")
        del self.world._components[self.handle]
        self.handle = None

    def add_component(self, component: Any) -> Any:
        """Attach ``component``; the entity must not already hold its type."""
        store = self._store()
        kind = type(component)
        if kind in store:
            raise ValueError(f"Entity already holds component {kind.__name__}!")
        store[kind] = component
        return component

    def replace_component(self, component: Any) -> Any:
        """Replace the held component of the same type."""
        store = self._store()
        kind = type(component)
        if kind not in store:
            raise KeyError(f"Entity does not hold component {kind.__name__}!")
        store[kind] = component
        return component

    def add_or_replace_component(self, component: Any) -> Any:
        """Attach ``component``, replacing one of the same type if present."""
        self._store()[type(component)] = component
        return component

    def get_components(self, *component_types: type) -> Any:
        """Held components: one value for one type, otherwise a tuple."""
        store = self._store()
        missing = [kind.__name__ for kind in component_types if kind not in store]
        if missing:
            noun = "component" if len(component_types) == 1 else "components"
            raise KeyError(f"Entity does not hold {noun}: {', '.join(missing)}")
        found = tuple(store[kind] for kind in component_types)
        return found[0] if len(found) == 1 else found

    def try_get_components(self, *component_types: type) -> Any:
        """Like :meth:`get_components` but with None for missing components."""
        store = self._store()
        found = tuple(store.get(kind) for kind in component_types)
        return found[0] if len(found) == 1 else found

    def has_all_components_of(self, *component_types: type) -> bool:
        """Whether every given type is held."""
        store = self._store()
        return all(kind in store for kind in component_types)

    def has_any_components_of(self, *component_types: type) -> bool:
        """Whether at least one given type is held."""
        store = self._store()
        return any(kind in store for kind in component_types)

    def has_any_component(self) -> bool:
        """Whether the entity holds any component at all."""
        return bool(self._store())

    def remove_component(self, component_type: type) -> int:
        """Remove a component if held; returns how many were removed."""
        return 1 if self._store().pop(component_type, None) is not None else 0

    def erase_component(self, component_type: type) -> None:
        """Remove a component that must be held."""
        store = self._store()
        if component_type not in store:
            raise KeyError(f"Entity does not hold component {component_type.__name__}!")
        del store[component_type]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Entity):
            return self.world is other.world and self.handle == other.handle
        if isinstance(other, int) and not isinstance(other, bool):
            return self.handle == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.handle)

    def __repr__(self) -> str:
        return f"Entity({self.handle!r})"