import pytest

from ascii_cube_renderer.config import RenderConfig
from ascii_cube_renderer.screen import ScreenBuffer


@pytest.fixture
def config():
    return RenderConfig()


@pytest.fixture
def buffer(config):
    return ScreenBuffer(config.width, config.height, config.background)


class RecordingDisplay:
    """Display stub that snapshots each presented frame."""

    def __init__(self, quit_after=None):
        self.frames = []
        self.quit_after = quit_after

    def present(self, buffer):
        self.frames.append(buffer.render_text())

    def poll_quit(self):
        return self.quit_after is not None and len(self.frames) >= self.quit_after


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def quitting_display():
    """Factory for a display that asks to quit once n frames are shown."""
    return lambda n: RecordingDisplay(quit_after=n)
