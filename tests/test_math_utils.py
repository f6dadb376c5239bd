"""Tests for the Vec3 value type."""

import pytest

from ascii_cube_renderer.math_utils import Vec3


class TestVec3:

    def test_components_are_floats(self):
        v = Vec3(1, 2, 3)
        assert all(isinstance(c, float) for c in v)

    def test_unpacks_in_axis_order(self):
        x, y, z = Vec3(1, -2, 3.5)
        assert (x, y, z) == (1.0, -2.0, 3.5)

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            Vec3(0, 0, 0).x = 1.0

    def test_equality_and_hash(self):
        assert Vec3(1, 2, 3) == Vec3(1.0, 2.0, 3.0)
        assert Vec3(1, 2, 3) != Vec3(1, 2, 4)
        assert len({Vec3(1, 2, 3), Vec3(1, 2, 3)}) == 1

    def test_not_equal_to_plain_tuple(self):
        assert Vec3(1, 2, 3) != (1.0, 2.0, 3.0)
