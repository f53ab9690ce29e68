"""Small data components attached to entities."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional

from slamcore import shared

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]


@dataclass
class TagComponent:
    """Display name of an entity."""

    name: str = ""

    def reset(self) -> None:
        """Restore the default name."""
        self.name = "Default Name"


@dataclass
class CornerstoneComponent:
    """Marks an entity that may not be deleted."""

    info: str = ""


@dataclass
class RenderingComponent:
    """Names of the resources used to draw an entity."""

    mesh_resource_name: Optional[str] = None
    material_resource_name: Optional[str] = None
    base_shader_resource_name: Optional[str] = "BaseShader"
    id_shader_resource_name: Optional[str] = "IDShader"


class LightType(IntEnum):
    """Kinds of light, with the values shaders expect."""

    DIRECTIONAL = shared.LIGHT_TYPE_DIRECTIONAL
    POINT = shared.LIGHT_TYPE_POINT
    SPOT = shared.LIGHT_TYPE_SPOT


@dataclass
class LightComponent:
    """A light source; cone angles are in radians."""

    type: LightType = LightType.POINT
    color: Vec3 = (1.0, 1.0, 1.0)
    intensity: float = 1024.0
    range: float = 1024.0
    outer: float = math.radians(45.0)
    inner: float = math.radians(30.0)


@dataclass
class LightUniformBuffer:
    """One light as laid out in a std140 uniform block."""

    type: int = 0
    intensity: float = 0.0
    range: float = 0.0
    scale: float = 0.0
    offset: float = 0.0
    color: Vec4 = (0.0, 0.0, 0.0, 0.0)
    position: Vec4 = (0.0, 0.0, 0.0, 0.0)
    direction: Vec4 = (0.0, 0.0, 0.0, 0.0)

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<I7f12f")
    SIZE: ClassVar[int] = LAYOUT.size

    def pack(self) -> bytes:
        """Bytes of the block, padding included."""
        return self.LAYOUT.pack(
            int(self.type),
            self.intensity,
            self.range,
            self.scale,
            self.offset,
            0.0,
            0.0,
            0.0,
            *self.color,
            *self.position,
            *self.direction,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "LightUniformBuffer":
        """Read a block produced by :meth:`pack`."""
        values = cls.LAYOUT.unpack(bytes(data))
        return cls(
            type=values[0],
            intensity=values[1],
            range=values[2],
            scale=values[3],
            offset=values[4],
            color=tuple(values[8:12]),
            position=tuple(values[12:16]),
            direction=tuple(values[16:20]),
        )