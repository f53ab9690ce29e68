"""Position, rotation and scale of an entity."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

Vec3 = tuple[float, float, float]


def _as_vec3(values) -> Vec3:
    x, y, z = (float(v) for v in values)
    return (x, y, z)


def _quaternion_from_euler(angles: Vec3) -> tuple[float, float, float, float]:
    """Quaternion ``(w, x, y, z)`` for Euler angles (pitch, yaw, roll) in radians."""
    cx, cy, cz = (math.cos(a * 0.5) for a in angles)
    sx, sy, sz = (math.sin(a * 0.5) for a in angles)
    w = cx * cy * cz + sx * sy * sz
    x = sx * cy * cz - cx * sy * sz
    y = cx * sy * cz + sx * cy * sz
    z = cx * cy * sz - sx * sy * cz
    return w, x, y, z


def _rotation_from_quaternion(w: float, x: float, y: float, z: float) -> np.ndarray:
    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    wx, wy, wz = w * x, w * y, w * z
    matrix = np.identity(4)
    matrix[:3, :3] = [
        [1.0 - 2.0 * (yy + zz), 2.0 * (xy - wz), 2.0 * (xz + wy)],
        [2.0 * (xy + wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - wx)],
        [2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (xx + yy)],
    ]
    return matrix


@dataclass
class TransformComponent:
    """Placement of an entity; ``rotation`` is Euler angles in radians.

    Matrices act on column vectors: ``matrix @ (x, y, z, 1)``.
    """

    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        self.position = _as_vec3(self.position)
        self.rotation = _as_vec3(self.rotation)
        self.scale = _as_vec3(self.scale)

    def reset(self) -> None:
        """Return to the origin, unrotated, at unit scale."""
        self.position = (0.0, 0.0, 0.0)
        self.rotation = (0.0, 0.0, 0.0)
        self.scale = (1.0, 1.0, 1.0)

    @property
    def rotation_degrees(self) -> Vec3:
        """The rotation expressed in degrees."""
        return _as_vec3(math.degrees(a) for a in self.rotation)

    @rotation_degrees.setter
    def rotation_degrees(self, degrees) -> None:
        self.rotation = _as_vec3(math.radians(float(d)) for d in degrees)

    def translation_matrix(self) -> np.ndarray:
        """4x4 matrix moving points by ``position``."""
        matrix = np.identity(4)
        matrix[:3, 3] = self.position
        return matrix

    def rotation_matrix(self) -> np.ndarray:
        """4x4 matrix of the rotation."""
        return _rotation_from_quaternion(*_quaternion_from_euler(self.rotation))

    def scale_matrix(self) -> np.ndarray:
        """4x4 matrix scaling by ``scale``."""
        return np.diag([*self.scale, 1.0])

    def transform_matrix(self) -> np.ndarray:
        """Translation times rotation times scale."""
        return self.translation_matrix() @ self.rotation_matrix() @ self.scale_matrix()