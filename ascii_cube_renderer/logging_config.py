#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""Logging setup for the renderer entry points.

The frame is drawn on the same terminal stderr usually points at, so the
default level is WARNING and a log file is the way to watch INFO/DEBUG
output while the animation runs:

    setup_logging(level=logging.DEBUG, log_file="render.log")
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Log rotation defaults
MAX_BYTES = 1024 * 1024  # 1 MB
BACKUP_COUNT = 2


def setup_logging(level: int = logging.WARNING,
                  log_file: Optional[str] = None,
                  fmt: str = DEFAULT_FORMAT) -> None:
    """Configure the root logger. With a log file, stderr is left alone."""
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers = [RotatingFileHandler(log_file, maxBytes=MAX_BYTES,
                                        backupCount=BACKUP_COUNT)]
    else:
        handlers = [logging.StreamHandler(sys.stderr)]
    logging.basicConfig(level=level, format=fmt, handlers=handlers)

    if log_file:
        logging.getLogger(__name__).info("logging to %s", log_file)
