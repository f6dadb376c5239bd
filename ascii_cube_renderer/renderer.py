#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .config import RenderConfig
from .projection import rotate, rotation_terms, to_screen
from .scene import Scene
from .screen import ScreenBuffer
from .transform import Transform


class Renderer:
    """
    Point-cloud rasterizer.

    render(buffer, scene, transform) draws every solid into the buffer. It
    neither clears nor presents the buffer; the frame loop owns those steps.
    """

    def __init__(self, config: RenderConfig):
        self.config = config

    def draw_point(self, buffer: ScreenBuffer, x: float, y: float, z: float,
                   char: str, offset: float = 0.0) -> bool:
        """Plot one camera-space point. Off-screen points are dropped."""
        cfg = self.config
        sx, sy, inv_z = to_screen(x, y, z, buffer.w, buffer.h,
                                  cfg.perspective, offset)
        return buffer.plot(sx, sy, char, inv_z)

    def render_solid(self, buffer: ScreenBuffer, solid, transform: Transform):
        """
        Sample, rotate, project and plot every surface point of one solid.

        Returns the number of cells written (a cell may be counted more
        than once if a nearer point later overwrites it).
        """
        terms = rotation_terms(transform)
        cam_z = self.config.camera_distance
        offset = solid.position
        written = 0

        for (px, py, pz), char in solid.sample_points(self.config.step_size):
            rx, ry, rz = rotate(px, py, pz, terms)
            if self.draw_point(buffer, rx, ry, rz + cam_z, char, offset):
                written += 1
        return written

    def render(self, buffer: ScreenBuffer, scene: Scene, transform: Transform):
        """Rasterize all solids in scene order. Returns total cells written."""
        return sum(self.render_solid(buffer, solid, transform)
                   for solid in scene)
