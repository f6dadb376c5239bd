#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3
from .config import RenderConfig
from .transform import Transform
from .projection import project, rotate, rotation_terms, to_screen
from .screen import ScreenBuffer
from .solid import Cube, parse_cube_spec, sweep
from .scene import Scene
from .renderer import Renderer
from .terminal import AnsiTerminal, CursesDisplay
from .demo import DemoApp
