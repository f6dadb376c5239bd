#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/__main__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import sys

from .cli import main

sys.exit(main())
