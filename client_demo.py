#!/usr/bin/env python3
#
# PROJECT: ascii-cube-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import sys

from ascii_cube_renderer.cli import main


if __name__ == "__main__":
    sys.exit(main())
