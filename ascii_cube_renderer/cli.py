#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import curses
import logging
import sys

from .config import RenderConfig
from .demo import DemoApp
from .logging_config import setup_logging
from .scene import Scene
from .solid import parse_cube_spec
from .terminal import AnsiTerminal, CursesDisplay

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def _cube_arg(text):
    try:
        return parse_cube_spec(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    epilog = """\
examples:
  %(prog)s                                       Three spinning cubes
  %(prog)s --fit                                 Shrink the grid to the terminal
  %(prog)s --cube 15:0:ABCDEF                    One cube, centred
  %(prog)s --cube 12:-30:@$~#;+ --cube 12:30:OXOXOX   Two cubes side by side
  %(prog)s --curses                              Draw through curses ('q' quits)
  %(prog)s --frames 300 --log-file render.log --log-level DEBUG
"""
    parser = argparse.ArgumentParser(
        description="Rotating ASCII cube renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    defaults = RenderConfig()
    parser.add_argument("--width", type=int, default=defaults.width,
                        help=f"Grid width in cells (default: {defaults.width})")
    parser.add_argument("--height", type=int, default=defaults.height,
                        help=f"Grid height in cells (default: {defaults.height})")
    parser.add_argument("--fit", action="store_true",
                        help="Shrink the grid to fit the current terminal")
    parser.add_argument("--camera-distance", type=float,
                        default=defaults.camera_distance,
                        help=f"Camera distance along Z (default: {defaults.camera_distance})")
    parser.add_argument("--perspective", type=float, default=defaults.perspective,
                        help=f"Perspective / focal constant (default: {defaults.perspective})")
    parser.add_argument("--step", type=float, default=defaults.step_size,
                        help=f"Surface sample stride (default: {defaults.step_size})")
    parser.add_argument("--interval", type=float, default=defaults.frame_interval,
                        help=f"Sleep between frames in seconds (default: {defaults.frame_interval})")
    parser.add_argument("--frames", type=int, default=None,
                        help="Stop after this many frames (default: run until interrupted)")
    parser.add_argument("--background", default=defaults.background,
                        help="Background character (default: space)")
    parser.add_argument("--cube", type=_cube_arg, action="append", metavar="SIZE:OFFSET:CHARS",
                        help="Add a cube; repeatable. Replaces the default three cubes")
    parser.add_argument("--curses", action="store_true",
                        help="Draw through curses instead of raw ANSI output")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS,
                        help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", default=None,
                        help="Write log records to this file instead of stderr")
    return parser


def config_from_args(args) -> RenderConfig:
    config = RenderConfig(
        width=args.width,
        height=args.height,
        camera_distance=args.camera_distance,
        perspective=args.perspective,
        step_size=args.step,
        frame_interval=args.interval,
        background=args.background,
    )
    if args.fit:
        config = config.fit_terminal()
    return config


def _run_curses(stdscr, config, scene, frames):
    app = DemoApp(CursesDisplay(stdscr), config, scene)
    app.install_signal_handlers()
    return app.run(max_frames=frames)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    scene = Scene(args.cube) if args.cube else Scene.default()
    try:
        config = config_from_args(args)
        config.check_scene(scene)
    except ValueError as e:
        parser.error(str(e))
    logger.info("config: %r, %d solids", config, len(scene))

    if args.curses:
        curses.wrapper(_run_curses, config, scene, args.frames)
        return 0

    with AnsiTerminal(sys.stdout) as terminal:
        app = DemoApp(terminal, config, scene)
        app.install_signal_handlers()
        app.run(max_frames=args.frames)
    return 0
