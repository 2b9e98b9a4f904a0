import math

import numpy as np
import pytest

from meshstage.transform import Transform, to_radians


def test_to_radians_half_turn_is_pi():
    assert to_radians(180.0) == pytest.approx(math.pi)


def test_to_radians_zero_and_full_turn():
    assert to_radians(0.0) == 0.0
    assert to_radians(360.0) == pytest.approx(2 * math.pi)


def test_default_transform_is_identity():
    assert np.allclose(Transform().matrix(), np.eye(4))


def test_translation_is_last_column():
    transform = Transform(position=(1.5, -2.0, 7.0))
    matrix = transform.matrix()
    assert np.allclose(matrix[:3, 3], [1.5, -2.0, 7.0])
    assert np.allclose(matrix[:3, :3], np.eye(3))


def test_scale_only_is_diagonal():
    transform = Transform(scale=(2.0, 3.0, 0.5))
    assert np.allclose(transform.matrix(), np.diag([2.0, 3.0, 0.5, 1.0]))


def test_quarter_turn_about_z_maps_x_to_y():
    transform = Transform(rotation=(0.0, 0.0, to_radians(90.0)))
    mapped = transform.matrix() @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(mapped, [0.0, 1.0, 0.0, 1.0])


@pytest.mark.parametrize(
    "rotation",
    [(0.3, 0.0, 0.0), (0.0, 1.2, 0.0), (0.4, -0.7, 2.5), (3.0, 1.0, -1.0)],
)
def test_rotation_part_is_orthonormal(rotation):
    rot = Transform(rotation=rotation).matrix()[:3, :3]
    assert np.allclose(rot @ rot.T, np.eye(3))
    assert np.linalg.det(rot) == pytest.approx(1.0)


def test_determinant_equals_scale_product():
    transform = Transform(rotation=(0.5, 0.25, -1.0), scale=(2.0, 3.0, 4.0))
    det = np.linalg.det(transform.matrix()[:3, :3])
    assert det == pytest.approx(2.0 * 3.0 * 4.0)


def test_bottom_row_is_homogeneous():
    transform = Transform(position=(1, 2, 3), rotation=(0.1, 0.2, 0.3), scale=(2, 2, 2))
    assert np.allclose(transform.matrix()[3], [0.0, 0.0, 0.0, 1.0])


def test_origin_maps_to_position():
    transform = Transform(position=(4.0, 5.0, 6.0), rotation=(1.0, 2.0, 3.0), scale=(3, 3, 3))
    assert np.allclose(transform.matrix() @ np.array([0, 0, 0, 1.0]), [4.0, 5.0, 6.0, 1.0])


def test_assigned_fields_are_used():
    transform = Transform()
    transform.position = np.array([9.0, 8.0, 7.0])
    assert np.allclose(transform.matrix()[:3, 3], [9.0, 8.0, 7.0])