#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/projection.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Rotation + perspective projection.

The X -> Y -> Z rotation is written out as a single expression with the
sine/cosine cross terms already multiplied through, rather than as three
matrix products. Term order is fixed: changing it changes the floating point
rounding and therefore which cells the points land in.
"""

import math

from .math_utils import Vec3
from .transform import Transform

CAMERA_DISTANCE = 100.0


def rotation_terms(transform: Transform):
    """Return (sin_x, cos_x, sin_y, cos_y, sin_z, cos_z) for the transform."""
    return (math.sin(transform.rotate_x), math.cos(transform.rotate_x),
            math.sin(transform.rotate_y), math.cos(transform.rotate_y),
            math.sin(transform.rotate_z), math.cos(transform.rotate_z))


def rotate(x: float, y: float, z: float, terms):
    """Rotate a point by precomputed rotation terms. No camera offset."""
    sx, cx, sy, cy, sz, cz = terms

    new_x = (y * sx * sy * cz
             - z * cx * sy * cz
             + y * cx * sz
             + z * sx * sz
             + x * cy * cz)

    new_y = (y * cx * cz
             + z * sx * cz
             - y * sx * sy * sz
             + z * cx * sy * sz
             - x * cy * sz)

    new_z = (z * cx * cy
             - y * sx * cy
             + x * sy)

    return new_x, new_y, new_z


def project(point, transform: Transform,
            camera_distance: float = CAMERA_DISTANCE) -> Vec3:
    """
    Rotate a 3D point by the transform and push it into camera space.

    The caller must keep camera_distance well above the largest solid
    extent so the resulting z never reaches zero.
    """
    x, y, z = point
    rx, ry, rz = rotate(x, y, z, rotation_terms(transform))
    return Vec3(rx, ry, rz + camera_distance)


def to_screen(x: float, y: float, z: float, width: int, height: int,
              perspective: float, offset: float = 0.0):
    """
    Perspective-divide a camera-space point into integer cell coordinates.

    Returns (screen_x, screen_y, inv_z). The 2.0 on the horizontal axis
    compensates for terminal cells being roughly twice as tall as wide.
    """
    inv_z = 1.0 / z
    screen_x = int(width / 2.0 + offset + perspective * inv_z * x * 2.0)
    screen_y = int(height / 2.0 + perspective * inv_z * y)
    return screen_x, screen_y, inv_z
