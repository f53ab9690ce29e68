"""Named registry of resources, grouped by kind."""

from __future__ import annotations

import logging

from slamcore.resources.material import MaterialResource
from slamcore.resources.resource import Resource, ResourcesType

logger = logging.getLogger(__name__)

# Kinds held by the manager, in the order they are updated.
_MANAGED_KINDS = (
    ResourcesType.MATERIAL,
    ResourcesType.MESH,
    ResourcesType.SHADER,
    ResourcesType.TEXTURE,
)


class ResourceManager:
    """Holds resources by kind and name and advances them every frame."""

    def __init__(self) -> None:
        self._resources: dict[ResourcesType, dict[str, Resource]] = {
            kind: {} for kind in _MANAGED_KINDS
        }

    def _table(self, kind: ResourcesType) -> dict[str, Resource]:
        try:
            return self._resources[ResourcesType(kind)]
        except (KeyError, ValueError):
            raise ValueError(f"Unknown resource type: {kind!r}") from None

    def update(self) -> None:
        """Update every resource: materials, meshes, shaders, then textures,
        each kind in name order."""
        for kind in _MANAGED_KINDS:
            table = self._resources[kind]
            for name in sorted(table):
                table[name].update()

    def add_resource(self, kind: ResourcesType, name: str, resource: Resource) -> bool:
        """Register ``resource`` under ``name``.

        An existing resource of the same name is kept and a warning is
        logged; returns whether the resource was added.
        """
        if not isinstance(resource, Resource):
            raise TypeError(f"Expected a Resource, got {type(resource).__name__}")
        table = self._table(kind)
        if name in table:
            logger.warning('Resource "%s" already exists!', name)
            return False
        table[name] = resource
        return True

    def get_resource(self, kind: ResourcesType, name: str) -> Resource | None:
        """Return the resource of ``kind`` named ``name``, or None."""
        return self._table(kind).get(name)

    def add_material_resource(self, name: str, resource: MaterialResource) -> bool:
        """Register a material."""
        if not isinstance(resource, MaterialResource):
            raise TypeError(f"Expected a MaterialResource, got {type(resource).__name__}")
        return self.add_resource(ResourcesType.MATERIAL, name, resource)

    def get_material_resource(self, name: str) -> MaterialResource | None:
        """Return the material named ``name``, or None."""
        resource = self.get_resource(ResourcesType.MATERIAL, name)
        return resource if isinstance(resource, MaterialResource) else None