#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
import shutil
from dataclasses import dataclass, field, replace
from typing import Tuple


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""
    width: int = 160
    height: int = 44
    camera_distance: float = 100.0
    perspective: float = 40.0
    step_size: float = 0.6
    frame_interval: float = 0.016
    background: str = ' '
    # Per-frame rotation increments for the X, Y and Z axes (radians)
    rotation_delta: Tuple[float, float, float] = field(
        default=(0.05, 0.05, 0.01))

    def __post_init__(self):
        self.validate()

    def validate(self):
        for name in ('camera_distance', 'perspective', 'step_size',
                     'frame_interval'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"display must be at least 1x1, got {self.width}x{self.height}")
        if self.step_size <= 0:
            raise ValueError(f"step_size must be positive, got {self.step_size}")
        if self.frame_interval < 0:
            raise ValueError(
                f"frame_interval cannot be negative, got {self.frame_interval}")
        if len(self.background) != 1:
            raise ValueError(
                f"background must be a single character, got {self.background!r}")
        if len(self.rotation_delta) != 3:
            raise ValueError("rotation_delta needs one value per axis")
        if not all(math.isfinite(d) for d in self.rotation_delta):
            raise ValueError(
                f"rotation_delta must be finite, got {self.rotation_delta}")

    def check_scene(self, scene):
        """
        Refuse scenes whose solids could reach the camera plane.

        Projection divides by camera-space z, so the camera must sit further
        away than any rotated surface point can swing towards it.
        """
        extent = scene.max_extent()
        if self.camera_distance <= extent:
            raise ValueError(
                f"camera_distance {self.camera_distance} must exceed the "
                f"largest solid extent {extent:.2f}")

    def fit_terminal(self) -> 'RenderConfig':
        """
        Return a copy shrunk to the current terminal size.

        The last row is kept free so the terminal does not scroll when the
        final line is written.
        """
        cols, rows = shutil.get_terminal_size((self.width, self.height + 1))
        return replace(self,
                       width=max(1, min(self.width, cols)),
                       height=max(1, min(self.height, rows - 1)))
