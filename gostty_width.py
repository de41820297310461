#!/usr/bin/env python3
"""
gostty - Width Measurement Module
=================================
Copyright (c) 2026 gostty contributors

Visual width of frame lines in terminal columns. Markup tags and ANSI
escape sequences occupy no columns, so they are stripped before the text
is measured with wcwidth.

Module Interface
================
- strip_markup(): Remove ``<c>``/``</c>`` tags and escape sequences
- visible_width(): Columns a single line occupies on screen
- measure_frames(): Bounding box of a whole animation
"""

import re
import logging
from dataclasses import dataclass
from typing import Sequence

from wcwidth import wcswidth, wcwidth

from gostty_config import COLOR_START_TAG, COLOR_END_TAG

logger = logging.getLogger('gostty.width')

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


@dataclass(frozen=True)
class FrameDimensions:
    width: int
    height: int


def strip_markup(line: str) -> str:
    """Remove color tags and escape sequences, leaving printable text."""
    text = _ANSI_ESCAPE.sub('', line)
    return text.replace(COLOR_START_TAG, '').replace(COLOR_END_TAG, '')


def visible_width(line: str) -> int:
    """
    Get visual width of a frame line in terminal columns.

    Args:
        line: Raw or rendered frame line

    Returns:
        Width in columns (0 for empty lines)
    """
    text = strip_markup(line)
    if not text:
        return 0

    width = wcswidth(text)
    if width >= 0:
        return width

    # Control characters make wcswidth give up; count what is printable
    return sum(max(0, wcwidth(char)) for char in text)


def measure_frames(frames: Sequence[Sequence[str]]) -> FrameDimensions:
    """
    Measure the bounding box covering every frame.

    Args:
        frames: Frames as sequences of lines

    Returns:
        Widest line and tallest frame found
    """
    width = 0
    height = 0
    for lines in frames:
        height = max(height, len(lines))
        for line in lines:
            width = max(width, visible_width(line))

    logger.debug(f"Measured {len(frames)} frames at {width}x{height}")
    return FrameDimensions(width, height)
