import math

import numpy as np
import pytest

from slamcore.scene.transform import TransformComponent


def test_defaults_and_reset():
    transform = TransformComponent((1, 2, 3), (0.1, 0.2, 0.3), (4, 5, 6))
    transform.reset()
    assert transform == TransformComponent()
    assert transform.scale == (1.0, 1.0, 1.0)


def test_rotation_degrees_round_trip():
    transform = TransformComponent()
    transform.rotation_degrees = (90, 45, 30)
    assert transform.rotation == pytest.approx(
        (math.radians(90), math.radians(45), math.radians(30))
    )
    assert transform.rotation_degrees == pytest.approx((90.0, 45.0, 30.0))


def test_translation_moves_origin_to_position():
    transform = TransformComponent(position=(3.0, -2.0, 7.5))
    moved = transform.translation_matrix() @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(moved, [3.0, -2.0, 7.5, 1.0])


def test_scale_matrix_diagonal():
    transform = TransformComponent(scale=(2.0, 3.0, 4.0))
    assert np.allclose(np.diag(transform.scale_matrix()), [2.0, 3.0, 4.0, 1.0])


def test_zero_rotation_is_identity():
    assert np.allclose(TransformComponent().rotation_matrix(), np.identity(4))


def test_rotation_is_orthonormal():
    rotation = TransformComponent(rotation=(0.3, -1.1, 2.0)).rotation_matrix()[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.identity(3))
    assert np.linalg.det(rotation) == pytest.approx(1.0)


def test_yaw_quarter_turn_sends_x_to_negative_z():
    rotation = TransformComponent(rotation=(0.0, math.pi / 2, 0.0)).rotation_matrix()
    assert np.allclose(rotation @ np.array([1.0, 0.0, 0.0, 1.0]), [0.0, 0.0, -1.0, 1.0])


def test_transform_is_translate_rotate_scale():
    transform = TransformComponent((1.0, 2.0, 3.0), (0.5, 0.25, -0.75), (2.0, 1.0, 0.5))
    expected = (
        transform.translation_matrix()
        @ transform.rotation_matrix()
        @ transform.scale_matrix()
    )
    assert np.allclose(transform.transform_matrix(), expected)
    point = transform.transform_matrix() @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(point[:3], transform.position)