#!/usr/bin/env python3
"""
gostty - Animation Loop
=======================
Copyright (c) 2026 gostty contributors

Drives the renderer at a fixed 35ms cadence. The frame shown on each tick
is derived from the wall-clock time elapsed since the loop started, not
from a tick counter, so a late or dropped tick never makes the animation
drift: the next tick simply shows the frame that belongs to the current
time.

The loop has two states, RUNNING and STOPPED. It stops when the configured
duration has elapsed or when stop() is called, e.g. from a signal handler.
"""

import time
import logging
from enum import Enum
from typing import Callable, Optional

from gostty_config import AnimatorConfig, FRAME_DELAY_MS
from gostty_terminal import Renderer

logger = logging.getLogger('gostty.loop')


class LoopState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


def frame_index_for(elapsed_ms: int, frame_count: int, interval_ms: int = FRAME_DELAY_MS) -> int:
    """
    Frame to show after ``elapsed_ms`` milliseconds of playback.

    Example:
        >>> frame_index_for(176, 4)
        1
    """
    return (elapsed_ms // interval_ms) % frame_count


class AnimationLoop:
    """
    Wall-clock synchronized render loop.

    Args:
        renderer: Renderer receiving one render_frame() call per tick
        frame_count: Number of frames in the animation
        config: Duration and frame interval settings
        clock: Monotonic clock in seconds (time.monotonic if None)
    """

    def __init__(self,
                 renderer: Renderer,
                 frame_count: int,
                 config: Optional[AnimatorConfig] = None,
                 clock: Optional[Callable[[], float]] = None):
        if frame_count <= 0:
            raise ValueError("Animation needs at least one frame")

        self.renderer = renderer
        self.frame_count = frame_count
        self.config = config or AnimatorConfig()
        self.config.validate()
        self.clock = clock or time.monotonic

        self.state = LoopState.RUNNING
        self.start_time: Optional[float] = None
        self.ticks = 0
        self._stop_requested = False

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    def stop(self):
        """Request the loop to stop at the next tick boundary."""
        self._stop_requested = True

    def elapsed_ms(self, now: Optional[float] = None) -> int:
        if self.start_time is None:
            return 0
        now = self.clock() if now is None else now
        return int((now - self.start_time) * 1000)

    def _should_stop(self, elapsed_ms: int) -> bool:
        if self._stop_requested:
            return True
        duration = self.config.duration_seconds
        return duration > 0 and elapsed_ms >= duration * 1000

    def tick(self) -> bool:
        """
        Run one loop iteration.

        Returns:
            False once the loop has stopped, True otherwise
        """
        if self.state is LoopState.STOPPED:
            return False

        if self.start_time is None:
            self.start_time = self.clock()

        elapsed = self.elapsed_ms()
        if self._should_stop(elapsed):
            self.state = LoopState.STOPPED
            logger.info(f"Animation stopped after {elapsed}ms and {self.ticks} ticks")
            return False

        self.renderer.update_size()

        frame_index = frame_index_for(elapsed, self.frame_count, self.config.frame_interval_ms)
        self.renderer.render_frame(frame_index)
        self.ticks += 1
        return True

    def _wait_for_next_tick(self):
        interval = self.config.frame_interval_seconds
        elapsed = self.clock() - self.start_time
        next_boundary = (int(elapsed / interval) + 1) * interval
        time.sleep(max(0.0, next_boundary - elapsed))

    def run(self):
        """Tick until the duration elapses or stop() is called."""
        self.start_time = self.clock()
        logger.info(f"Animation started: {self.frame_count} frames, "
                    f"duration={self.config.duration_seconds or 'unlimited'}")

        while self.tick():
            self._wait_for_next_tick()
