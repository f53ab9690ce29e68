"""Camera component: projection settings, controller data and cached matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

import numpy as np

from slamcore.scene.transform import TransformComponent


class ProjectionType(IntEnum):
    """How the camera projects the scene."""

    PERSPECTIVE = 0
    ORTHOGRAPHIC = 1

    @property
    def display_name(self) -> str:
        """Capitalised name, e.g. ``"Perspective"``."""
        return self.name.capitalize()


class CameraControllerMode(IntEnum):
    """Which controller currently drives the camera."""

    NONE = 0
    FPS = 1
    EDITOR = 2


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


def _look_at(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    matrix = np.identity(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -np.dot(s, eye)
    matrix[1, 3] = -np.dot(u, eye)
    matrix[2, 3] = np.dot(f, eye)
    return matrix


def _perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    tan_half = math.tan(fovy / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[3, 2] = -1.0
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    return matrix


def _ortho(left: float, right: float, bottom: float, top: float,
           near: float, far: float) -> np.ndarray:
    matrix = np.identity(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (far - near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(far + near) / (far - near)
    return matrix


@dataclass(eq=False)
class CameraComponent:
    """Camera settings; matrices are recomputed lazily when ``is_dirty`` is set."""

    WORLD_UP: ClassVar[tuple[float, float, float]] = (0.0, 1.0, 0.0)

    is_main_camera: bool = False
    projection_type: ProjectionType = ProjectionType.PERSPECTIVE
    controller_mode: CameraControllerMode = CameraControllerMode.NONE

    aspect: float = 1920.0 / 1080.0
    fov: float = math.radians(45.0)
    fov_multiplier: float = 1.0
    near_plane: float = 0.01
    far_plane: float = 10000.0

    ortho_size: float = 10.0
    ortho_near_clip: float = -10.0
    ortho_far_clip: float = 10.0

    rotate_speed: float = math.radians(0.04)
    max_move_speed: float = 0.01
    max_speed_to_acceleration: float = 0.004
    acceleration: float = 0.0
    move_speed: float = 0.0
    move_speed_key_shift_multiplier: float = 4.0
    move_speed_mouse_scroll_multiplier: float = 1.0
    last_move_dir: tuple[float, float, float] = (0.0, 0.0, 0.0)

    is_dirty: bool = True
    front_dir: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))
    up_dir: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    right_dir: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0]))
    view_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))
    projection_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))
    view_projection_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))

    def reset(self) -> None:
        """Restore projection and controller settings and mark the cache dirty."""
        self.projection_type = ProjectionType.PERSPECTIVE
        self.controller_mode = CameraControllerMode.NONE
        self.fov = math.radians(45.0)
        self.near_plane = 0.01
        self.far_plane = 10000.0
        self.ortho_size = 10.0
        self.ortho_near_clip = -10.0
        self.ortho_far_clip = 10.0
        self.rotate_speed = math.radians(0.04)
        self.max_move_speed = 0.015
        self.max_speed_to_acceleration = 0.004
        self.move_speed_key_shift_multiplier = 4.0
        self.move_speed_mouse_scroll_multiplier = 1.0
        self.is_dirty = True

    def is_using(self) -> bool:
        """Whether a controller is driving the camera."""
        return self.controller_mode != CameraControllerMode.NONE

    def recalculate(self, transform: TransformComponent) -> None:
        """Recompute directions and matrices from ``transform`` if dirty."""
        if not self.is_dirty:
            return

        pitch, yaw, _ = transform.rotation
        position = np.array(transform.position, dtype=float)
        front = np.array([
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        ])
        self.front_dir = _normalize(front)
        self.right_dir = _normalize(np.cross(self.front_dir, np.array(self.WORLD_UP)))
        self.up_dir = _normalize(np.cross(self.right_dir, self.front_dir))

        self.view_matrix = _look_at(position, position + self.front_dir, self.up_dir)
        if self.projection_type == ProjectionType.PERSPECTIVE:
            self.projection_matrix = _perspective(
                self.fov * self.fov_multiplier, self.aspect, self.near_plane, self.far_plane
            )
        else:
            half_width = self.ortho_size * self.aspect * 0.5
            half_height = self.ortho_size * 0.5
            self.projection_matrix = _ortho(
                -half_width, half_width, -half_height, half_height,
                self.ortho_near_clip, self.ortho_far_clip,
            )

        self.view_projection_matrix = self.projection_matrix @ self.view_matrix
        self.is_dirty = False

    def view(self, transform: TransformComponent) -> np.ndarray:
        """The view matrix."""
        self.recalculate(transform)
        return self.view_matrix

    def projection(self, transform: TransformComponent) -> np.ndarray:
        """The projection matrix."""
        self.recalculate(transform)
        return self.projection_matrix

    def view_projection(self, transform: TransformComponent) -> np.ndarray:
        """Projection times view."""
        self.recalculate(transform)
        return self.view_projection_matrix

    def front(self, transform: TransformComponent) -> np.ndarray:
        """Unit vector the camera looks along."""
        self.recalculate(transform)
        return self.front_dir

    def up(self, transform: TransformComponent) -> np.ndarray:
        """Unit up vector of the camera."""
        self.recalculate(transform)
        return self.up_dir