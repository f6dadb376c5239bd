#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/solid.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from dataclasses import dataclass

FACE_NAMES = ('front', 'right', 'left', 'back', 'bottom', 'top')


def sweep(size: float, step: float):
    """
    Yield -size, -size + step, ... while the value stays below size.

    Values come from repeated addition, not index * step; the accumulated
    rounding decides which cells the samples land in.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    v = -size
    while v < size:
        yield v
        v += step


@dataclass(frozen=True)
class Cube:
    """
    Parametric cube drawn as a cloud of surface points.

    size is the half-extent, position a horizontal screen offset in cells,
    chars one character per face in FACE_NAMES order.
    """
    size: float
    position: float
    chars: str

    def __post_init__(self):
        if len(self.chars) != len(FACE_NAMES):
            raise ValueError(
                f"cube needs {len(FACE_NAMES)} face characters, got {self.chars!r}")
        if not (math.isfinite(self.size) and math.isfinite(self.position)):
            raise ValueError(
                f"cube size and position must be finite, got {self.size}, {self.position}")
        if self.size <= 0:
            raise ValueError(f"cube size must be positive, got {self.size}")

    @property
    def extent(self) -> float:
        """Largest distance of any surface point from the cube's centre axis."""
        return self.size * 3 ** 0.5

    def face_points(self, x: float, y: float):
        """The six face points for one (x, y) sample, in FACE_NAMES order."""
        s = self.size
        return (
            (x, y, -s),   # front
            (s, y, x),    # right
            (-s, y, -x),  # left
            (-x, y, s),   # back
            (x, -s, -y),  # bottom
            (x, s, y),    # top
        )

    def sample_points(self, step: float):
        """Yield ((x, y, z), char) for every surface sample, restartable per call."""
        chars = self.chars
        for x in sweep(self.size, step):
            for y in sweep(self.size, step):
                for i, point in enumerate(self.face_points(x, y)):
                    yield point, chars[i]


def parse_cube_spec(text: str) -> Cube:
    """
    Parse 'SIZE:OFFSET:CHARS' into a Cube, e.g. '20:-40:@$~#;+'.

    CHARS is taken verbatim after the second colon so it may itself contain
    ':'. Raises ValueError on malformed input.
    """
    parts = str(text).split(':', 2)
    if len(parts) != 3:
        raise ValueError(f"expected SIZE:OFFSET:CHARS, got {text!r}")
    size, offset, chars = parts
    return Cube(size=float(size), position=float(offset), chars=chars)
