"""Tests for the closed-form rotation and perspective divide."""

import math

import pytest

from ascii_cube_renderer.math_utils import Vec3
from ascii_cube_renderer.projection import (
    CAMERA_DISTANCE, project, rotate, rotation_terms, to_screen)
from ascii_cube_renderer.transform import Transform


def approx(a, b, tol=1e-9):
    """Assert two 3D points are approximately equal."""
    for i in range(3):
        assert abs(a[i] - b[i]) < tol, f"axis {i}: {a[i]} != {b[i]}"


def transform_at(ax=0.0, ay=0.0, az=0.0):
    t = Transform()
    t.rotate_x, t.rotate_y, t.rotate_z = ax, ay, az
    return t


class TestIdentity:

    def test_zero_angles_only_add_camera_distance(self):
        assert project((1.0, 2.0, 3.0), Transform()) == Vec3(1, 2, 3 + CAMERA_DISTANCE)

    def test_custom_camera_distance(self):
        assert project(Vec3(0, 0, -5), Transform(), camera_distance=30.0).z == 25.0


class TestSingleAxis:

    def test_quarter_turn_about_x(self):
        # (0, 1, 0) -> (0, 0, -1) under this convention
        r = rotate(0.0, 1.0, 0.0, rotation_terms(transform_at(ax=math.pi / 2)))
        approx(r, (0.0, 0.0, -1.0))

    def test_quarter_turn_about_y(self):
        r = rotate(1.0, 0.0, 0.0, rotation_terms(transform_at(ay=math.pi / 2)))
        approx(r, (0.0, 0.0, 1.0))

    def test_quarter_turn_about_z(self):
        r = rotate(1.0, 0.0, 0.0, rotation_terms(transform_at(az=math.pi / 2)))
        approx(r, (0.0, -1.0, 0.0))

    def test_full_turn_returns_to_start(self):
        r = rotate(3.0, -2.0, 5.0, rotation_terms(transform_at(2 * math.pi, 2 * math.pi, 2 * math.pi)))
        approx(r, (3.0, -2.0, 5.0))


class TestCombined:

    @pytest.mark.parametrize("angles", [
        (0.3, 0.0, 0.0), (0.0, 1.1, 0.0), (0.7, -0.4, 2.5), (5.0, 5.0, 1.0),
    ])
    def test_rotation_preserves_length(self, angles):
        p = (4.0, -7.0, 2.5)
        r = rotate(*p, rotation_terms(transform_at(*angles)))
        assert math.hypot(*r) == pytest.approx(math.hypot(*p), rel=1e-12)

    def test_repeated_calls_are_bit_identical(self):
        t = transform_at(0.85, 1.3, 0.21)
        first = project((19.6, -3.4, -20.0), t)
        for _ in range(5):
            assert project((19.6, -3.4, -20.0), t) == first

    def test_project_matches_rotate_plus_offset(self):
        t = transform_at(0.5, 0.25, 0.125)
        rx, ry, rz = rotate(1.5, 2.5, -3.5, rotation_terms(t))
        assert project((1.5, 2.5, -3.5), t) == Vec3(rx, ry, rz + CAMERA_DISTANCE)

    def test_project_does_not_mutate_transform(self):
        t = transform_at(0.1, 0.2, 0.3)
        project((1, 1, 1), t)
        assert t.angles() == (0.1, 0.2, 0.3)


class TestToScreen:

    def test_known_point(self):
        # 40 / 80 == 0.5 exactly, so no truncation surprises
        assert to_screen(4.0, -6.0, 80.0, 160, 44, 40.0) == (84, 19, 0.0125)

    def test_offset_shifts_horizontally_only(self):
        sx, sy, _ = to_screen(4.0, -6.0, 80.0, 160, 44, 40.0, offset=-40)
        assert (sx, sy) == (44, 19)

    def test_horizontal_stretch_is_double_vertical(self):
        sx, sy, _ = to_screen(8.0, 8.0, 80.0, 0, 0, 40.0)
        assert sx == 2 * sy == 8

    def test_truncates_toward_zero(self):
        # width/2 + offset + 0 == -0.5 -> int() gives 0, not -1
        sx, _, _ = to_screen(0.0, 0.0, 50.0, 2, 2, 40.0, offset=-1.5)
        assert sx == 0

    def test_nearer_points_have_larger_inverse_depth(self):
        _, _, near = to_screen(0, 0, 80.0, 10, 10, 40.0)
        _, _, far = to_screen(0, 0, 120.0, 10, 10, 40.0)
        assert near > far > 0
