#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/screen.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

CURSOR_HOME = "\x1b[H"


class ScreenBuffer:
    """
    Character grid with a per-cell inverse-depth buffer.

    Cells are stored row-major in two flat lists. Depth 0.0 means nothing
    has been drawn; every real inverse depth is positive, so a plain
    greater-than test lets nearer points win.
    """
    __slots__ = ['w', 'h', 'background', 'chars', 'depth']

    def __init__(self, w: int, h: int, background: str = ' '):
        self.w, self.h = w, h
        self.background = background
        self.chars = [background] * (w * h)
        self.depth = [0.0] * (w * h)

    def clear(self):
        n = self.w * self.h
        self.chars[:] = [self.background] * n
        self.depth[:] = [0.0] * n

    def plot(self, screen_x: int, screen_y: int, char: str,
             inv_depth: float) -> bool:
        # Only the linear index is bounds-checked; a point just past the
        # right edge wraps onto the next row instead of being dropped.
        idx = screen_x + screen_y * self.w
        if idx < 0 or idx >= len(self.chars):
            return False
        if inv_depth > self.depth[idx]:
            self.depth[idx] = inv_depth
            self.chars[idx] = char
            return True
        return False

    def cell(self, x: int, y: int):
        """Return (char, inv_depth) stored at column x, row y."""
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            raise IndexError(f"cell ({x}, {y}) outside {self.w}x{self.h} buffer")
        idx = x + y * self.w
        return self.chars[idx], self.depth[idx]

    def rows(self):
        """Yield each row of the grid as a string, top to bottom."""
        w = self.w
        chars = self.chars
        for start in range(0, w * self.h, w):
            yield ''.join(chars[start:start + w])

    def render_text(self) -> str:
        return '\n'.join(self.rows())

    def flush(self, out):
        """Write cursor-home followed by the whole grid to a text stream."""
        out.write(CURSOR_HOME)
        out.write(self.render_text())
