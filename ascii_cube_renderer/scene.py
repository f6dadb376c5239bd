#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .solid import Cube


class Scene:
    """
    Ordered container of solids.

    Solids are rasterized in insertion order. Order only matters for ties:
    the depth test decides which point owns a cell.
    """

    def __init__(self, solids=None):
        self.solids = list(solids) if solids else []

    @classmethod
    def default(cls) -> 'Scene':
        """Three cubes of decreasing size laid out left to right."""
        return cls([
            Cube(size=20, position=-40, chars='@$~#;+'),
            Cube(size=10, position=10, chars='O=*%&X'),
            Cube(size=5, position=40, chars=':.,|-+'),
        ])

    def add(self, solid):
        """Append a solid; it is drawn after everything already present."""
        self.solids.append(solid)

    def clear(self):
        """Remove all solids from the scene."""
        self.solids.clear()

    def max_extent(self) -> float:
        return max((s.extent for s in self.solids), default=0.0)

    def __iter__(self):
        return iter(self.solids)

    def __len__(self):
        return len(self.solids)
