#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import signal
import time
from typing import Optional

from .config import RenderConfig
from .renderer import Renderer
from .scene import Scene
from .screen import ScreenBuffer
from .transform import Transform

logger = logging.getLogger(__name__)


class DemoApp:
    """
    Frame loop: clear -> render solids -> present -> advance -> sleep.

    The app owns the screen buffer and the transform; nothing else mutates
    them. stop() is the cancellation hook: the loop checks it before every
    frame and exits without drawing another one.
    """

    def __init__(self, display, config: Optional[RenderConfig] = None,
                 scene: Optional[Scene] = None, sleep=time.sleep,
                 clock=time.monotonic):
        self.display = display
        self.config = config if config is not None else RenderConfig()
        self.scene = scene if scene is not None else Scene.default()
        self.config.check_scene(self.scene)

        self.buffer = ScreenBuffer(self.config.width, self.config.height,
                                   self.config.background)
        self.transform = Transform.from_deltas(self.config.rotation_delta)
        self.renderer = Renderer(self.config)
        self.running = True
        self._sleep = sleep
        self._clock = clock

        # ── Frame counter ───────────────────────────────────────────────
        self.frames = 0
        self.fps = 0
        self._fps_frames = 0
        self._last_fps_time = clock()

    def stop(self, *_args):
        """Request the loop to exit before the next frame starts."""
        if self.running:
            logger.info("stop requested after %d frames", self.frames)
        self.running = False

    def install_signal_handlers(self):
        """Route SIGINT (and SIGTERM where available) to stop()."""
        signal.signal(signal.SIGINT, self.stop)
        if hasattr(signal, 'SIGTERM'):
            signal.signal(signal.SIGTERM, self.stop)

    def step(self):
        """Render and present exactly one frame, then advance the rotation."""
        start = self._clock()

        self.buffer.clear()
        written = self.renderer.render(self.buffer, self.scene, self.transform)
        self.display.present(self.buffer)
        self.transform.advance()

        self.frames += 1
        self._update_fps(start, written)

    def _update_fps(self, start: float, written: int):
        self._fps_frames += 1
        now = self._clock()
        if now - self._last_fps_time >= 1.0:
            self.fps = self._fps_frames
            self._fps_frames = 0
            self._last_fps_time = now
            logger.debug("fps=%d frame=%.1fms cells=%d %r", self.fps,
                         (now - start) * 1000, written, self.transform)

    def run(self, max_frames: Optional[int] = None):
        """
        Drive frames until stop() is called, the display asks to quit, or
        max_frames frames have been drawn.

        The sleep after each frame is fixed; slow frames are not made up.
        """
        logger.info("render loop started: %dx%d, %d solids",
                    self.config.width, self.config.height, len(self.scene))
        while self.running:
            if max_frames is not None and self.frames >= max_frames:
                break
            if self.display.poll_quit():
                self.stop()
                break
            self.step()
            self._sleep(self.config.frame_interval)
        logger.info("render loop finished after %d frames", self.frames)
        return self.frames
