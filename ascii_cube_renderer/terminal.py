#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/terminal.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Display sinks for the frame loop.

Both classes expose present(buffer) and poll_quit(). AnsiTerminal streams
raw escape sequences to a text stream; CursesDisplay draws rows through a
curses window and reads a quit key.
"""

import curses
import sys

from .screen import ScreenBuffer

CLEAR_SCREEN = "\x1b[2J"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


class AnsiTerminal:
    """
    Context manager that owns the terminal for the duration of a run.

    On enter the screen is cleared and the cursor hidden; on exit the
    cursor is shown again, whether the loop ended normally or by exception.
    """

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def __enter__(self) -> 'AnsiTerminal':
        self.stream.write(CLEAR_SCREEN + HIDE_CURSOR)
        self.stream.flush()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stream.write(SHOW_CURSOR + "\n")
        self.stream.flush()
        return False

    def present(self, buffer: ScreenBuffer):
        buffer.flush(self.stream)
        self.stream.flush()

    def poll_quit(self) -> bool:
        # No keyboard channel; interruption arrives as a signal.
        return False


class CursesDisplay:
    """Draws buffer rows into a curses window. Press 'q' to quit."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        curses.curs_set(0)
        stdscr.nodelay(True)

    def present(self, buffer: ScreenBuffer):
        th, tw = self.stdscr.getmaxyx()
        self.stdscr.erase()
        for y, row in enumerate(buffer.rows()):
            if y >= th:
                break
            try:
                self.stdscr.addstr(y, 0, row[:tw])
            except curses.error:
                # Writing the bottom-right cell moves the cursor off-screen
                # and reports an error even though the text was drawn.
                pass
        self.stdscr.refresh()

    def poll_quit(self) -> bool:
        try:
            key = self.stdscr.getch()
        except curses.error:
            return False
        return key in (ord('q'), ord('Q'))
