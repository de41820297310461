#!/usr/bin/env python3
"""
gostty - Terminal Renderer
==========================
Copyright (c) 2026 gostty contributors

Terminal Rendering System
=========================
Draws pre-rendered animation frames centered in the terminal. Each frame is
composed into a reusable buffer (clear screen, top margin, left-padded
lines) and written in a single call so the terminal never shows a
half-drawn frame.

Core Features
=============
- Centering against the fixed 77x41 image size
- Redraw suppression when neither the frame nor the padding changed
- Resize detection with full padding cache invalidation
- One write per drawn frame from a reused buffer
- Alternate screen session that restores the terminal exactly once

Module Interface
================
- query_terminal_size(): Current (columns, rows) with 80x24 fallback
- TerminalSession: Context manager owning the alternate screen
- Renderer: Frame compositor
  - update_size(): Pick up terminal resizes
  - render_frame(): Draw one frame if anything changed
  - get_stats(): Render statistics

Example Usage
=============
```python
from gostty_terminal import Renderer, TerminalSession

with TerminalSession() as session:
    renderer = Renderer(animation)
    renderer.update_size()
    renderer.render_frame(0)
```
"""

import io
import os
import sys
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Any, Optional, TextIO, Tuple

from gostty_cache import RenderCache
from gostty_config import (
    ANSI,
    IMAGE_WIDTH,
    IMAGE_HEIGHT,
    FALLBACK_TERMINAL_WIDTH,
    FALLBACK_TERMINAL_HEIGHT,
    TERMINAL_SETUP,
    TERMINAL_RESTORE,
)
from gostty_frames import Animation

logger = logging.getLogger('gostty.terminal')


@dataclass(frozen=True)
class TerminalGeometry:
    width: int
    height: int


def query_terminal_size(stream: Optional[TextIO] = None) -> TerminalGeometry:
    """
    Ask the OS for the size of the terminal behind ``stream``.

    Falls back to 80x24 when the stream is not a terminal or the OS
    reports a zero dimension.
    """
    stream = stream or sys.stdout
    try:
        columns, rows = os.get_terminal_size(stream.fileno())
    except (OSError, ValueError, AttributeError, io.UnsupportedOperation):
        return TerminalGeometry(FALLBACK_TERMINAL_WIDTH, FALLBACK_TERMINAL_HEIGHT)

    return TerminalGeometry(
        columns or FALLBACK_TERMINAL_WIDTH,
        rows or FALLBACK_TERMINAL_HEIGHT,
    )


# ============================================================================
# TERMINAL SESSION
# ============================================================================

class TerminalSession:
    """
    Alternate screen and hidden cursor for the duration of a ``with`` block.

    restore() may be reached from the normal exit path, the timer, or a
    signal handler; the restore sequence is written only the first time.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.active = False
        self._restored = False
        self._lock = threading.Lock()

    def start(self):
        self.stream.write(TERMINAL_SETUP)
        self.stream.flush()
        self.active = True
        logger.debug("Entered alternate screen")

    def restore(self) -> bool:
        """Show the cursor and leave the alternate screen, once."""
        with self._lock:
            if self._restored:
                return False
            self._restored = True

        self.stream.write(TERMINAL_RESTORE)
        self.stream.flush()
        self.active = False
        logger.debug("Terminal restored")
        return True

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False


# ============================================================================
# RENDERER
# ============================================================================

class Renderer:
    """
    Frame compositor for one terminal.

    Owns the terminal geometry, the padding cache and the render state
    (last frame index, last paddings, redraw flag). All of it is touched
    only from the render loop.
    """

    def __init__(self,
                 animation: Animation,
                 stream: Optional[TextIO] = None,
                 size_query: Optional[Callable[[], TerminalGeometry]] = None,
                 image_width: int = IMAGE_WIDTH,
                 image_height: int = IMAGE_HEIGHT):
        """
        Initialize renderer.

        Args:
            animation: Pre-rendered frames to draw
            stream: Output stream (stdout if None)
            size_query: Callable returning the current TerminalGeometry
            image_width: Columns of the fixed-size frames
            image_height: Lines of the fixed-size frames
        """
        self.animation = animation
        self.stream = stream or sys.stdout
        self._size_query = size_query or (lambda: query_terminal_size(self.stream))
        self.image_width = image_width
        self.image_height = image_height

        self.cache = RenderCache()
        self.geometry = self._size_query()

        # Render state
        self.needs_redraw = True
        self.last_frame_index = -1
        self.last_vertical_padding = 0
        self.last_horizontal_padding = 0

        # Reused for every frame
        self._buffer = io.StringIO()

        self.writes = 0
        self.skipped = 0
        self.resizes = 0

        logger.info(f"Renderer initialized for {self.geometry.width}x{self.geometry.height} terminal")

    def update_size(self) -> bool:
        """
        Refresh the terminal geometry.

        Returns:
            True if the size changed, which clears the padding cache and
            forces the next render_frame() to draw
        """
        geometry = self._size_query()
        if geometry == self.geometry:
            return False

        logger.debug(f"Terminal resized from {self.geometry.width}x{self.geometry.height} "
                     f"to {geometry.width}x{geometry.height}")
        self.geometry = geometry
        self.needs_redraw = True
        self.cache.clear()
        self.resizes += 1
        return True

    def padding(self) -> Tuple[int, int]:
        """Vertical and horizontal padding that center the image."""
        vertical = max(0, (self.geometry.height - self.image_height) // 2)
        horizontal = max(0, (self.geometry.width - self.image_width) // 2)
        return vertical, horizontal

    def render_frame(self, frame_index: int) -> bool:
        """
        Draw a frame unless the screen already shows it.

        Args:
            frame_index: Index into the animation

        Returns:
            True if the frame was written
        """
        vertical, horizontal = self.padding()

        if vertical != self.last_vertical_padding or horizontal != self.last_horizontal_padding:
            self.last_vertical_padding = vertical
            self.last_horizontal_padding = horizontal
            self.needs_redraw = True

        if not self.needs_redraw and frame_index == self.last_frame_index:
            self.skipped += 1
            return False

        padding_str = self.cache.padding(horizontal)

        buffer = self._buffer
        buffer.seek(0)
        buffer.truncate(0)

        buffer.write(ANSI.CLEAR_AND_HOME)
        if vertical > 0:
            buffer.write(self.cache.newlines(vertical))

        lines = self.animation.frame_lines(frame_index)
        last = len(lines) - 1
        for i, line in enumerate(lines):
            buffer.write(padding_str)
            buffer.write(line)
            if i < last:
                buffer.write("\n")

        self.stream.write(buffer.getvalue())
        self.stream.flush()
        self.writes += 1

        self.needs_redraw = False
        self.last_frame_index = frame_index
        return True

    def get_stats(self) -> Dict[str, Any]:
        """Get render statistics"""
        return {
            'writes': self.writes,
            'skipped': self.skipped,
            'resizes': self.resizes,
            'geometry': (self.geometry.width, self.geometry.height),
            'cache': self.cache.get_stats(),
        }
