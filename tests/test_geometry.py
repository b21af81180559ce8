import math

import pytest

from wireframe.geometry import Vec3, rotate_x, rotate_y, rotate_z

ROTATIONS = [rotate_x, rotate_y, rotate_z]


def _length(v):
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def test_scaled_multiplies_every_coordinate():
    v = Vec3(2.0, 4.0, 6.0, 0x123456)
    result = v.scaled(0.5)
    assert (result.x, result.y, result.z) == (1.0, 2.0, 3.0)
    assert result.color == 0x123456


def test_scaled_leaves_original_untouched():
    v = Vec3(1.0, 2.0, 3.0)
    v.scaled(10)
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)


@pytest.mark.parametrize("rotate", ROTATIONS)
def test_zero_rotation_is_identity(rotate):
    v = Vec3(3.0, -4.0, 5.0, 7)
    result = rotate(v, 0)
    assert (result.x, result.y, result.z, result.color) == (3.0, -4.0, 5.0, 7)


@pytest.mark.parametrize("rotate", ROTATIONS)
@pytest.mark.parametrize("angle", [15, 45, 90, 133, -60])
def test_rotation_preserves_length(rotate, angle):
    v = Vec3(1.5, -2.0, 3.25)
    assert _length(rotate(v, angle)) == pytest.approx(_length(v))


@pytest.mark.parametrize("rotate", ROTATIONS)
def test_rotation_then_inverse_returns_original(rotate):
    v = Vec3(1.0, 2.0, 3.0)
    back = rotate(rotate(v, 37), -37)
    assert (back.x, back.y, back.z) == pytest.approx((1.0, 2.0, 3.0))


@pytest.mark.parametrize("rotate", ROTATIONS)
def test_full_turn_returns_original(rotate):
    v = Vec3(-2.0, 0.5, 4.0)
    back = rotate(v, 360)
    assert (back.x, back.y, back.z) == pytest.approx((-2.0, 0.5, 4.0))


def test_rotate_x_keeps_x_coordinate():
    v = Vec3(9.0, 1.0, 2.0)
    assert rotate_x(v, 70).x == 9.0


def test_rotate_y_keeps_y_coordinate():
    v = Vec3(1.0, 9.0, 2.0)
    assert rotate_y(v, 70).y == 9.0


def test_rotate_z_keeps_z_coordinate():
    v = Vec3(1.0, 2.0, 9.0)
    assert rotate_z(v, 70).z == 9.0


def test_rotate_z_quarter_turn_moves_x_axis_to_y_axis():
    result = rotate_z(Vec3(1.0, 0.0, 0.0), 90)
    assert (result.x, result.y, result.z) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)