#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/transform.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class Transform:
    """
    Rotation state shared by every solid in a frame.

    Stores one angle per axis (radians, unbounded) plus the fixed per-frame
    increments applied by advance(). The frame loop is the only writer.
    """
    __slots__ = ('rotate_x', 'rotate_y', 'rotate_z',
                 'delta_x', 'delta_y', 'delta_z')

    def __init__(self, delta_x: float = 0.05, delta_y: float = 0.05,
                 delta_z: float = 0.01):
        self.rotate_x = 0.0
        self.rotate_y = 0.0
        self.rotate_z = 0.0
        self.delta_x = delta_x
        self.delta_y = delta_y
        self.delta_z = delta_z

    @classmethod
    def from_deltas(cls, deltas) -> 'Transform':
        dx, dy, dz = deltas
        return cls(float(dx), float(dy), float(dz))

    def advance(self):
        """Step every angle forward by one frame's worth of rotation."""
        self.rotate_x += self.delta_x
        self.rotate_y += self.delta_y
        self.rotate_z += self.delta_z

    def angles(self):
        return (self.rotate_x, self.rotate_y, self.rotate_z)

    def __repr__(self):
        return (f"Transform(x={self.rotate_x:.3f}, y={self.rotate_y:.3f}, "
                f"z={self.rotate_z:.3f})")
