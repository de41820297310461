#!/usr/bin/env python3
"""
gostty - Frame Preprocessing
============================
Copyright (c) 2026 gostty contributors

Loads the bundled animation and expands its color markup once at startup,
so the render loop only ever copies finished strings.

Markup Format
=============
Each frame line is plain text that may contain ``<c>text</c>`` spans. A
span is rendered as ``highlight color + text + reset``. A ``<c>`` with no
matching ``</c>`` is left in the line literally, along with everything
after it.

Module Interface
================
- load_animation_data(): Parse the JSON asset into raw frames
- expand_markup(): Expand the markup of a single line
- preprocess(): Expand every line of every frame
- Animation: Rendered frames plus lookup helpers
"""

import json
import logging
from typing import List, Sequence, Tuple

from gostty_config import (
    ANSI,
    COLOR_START_TAG,
    COLOR_END_TAG,
    DEFAULT_COLOR,
    IMAGE_WIDTH,
    IMAGE_HEIGHT,
)
from gostty_width import FrameDimensions, measure_frames

logger = logging.getLogger('gostty.frames')

RawFrame = List[str]
RenderedFrame = Tuple[str, ...]


class AnimationDataError(ValueError):
    """The animation asset could not be parsed into frames."""


def load_animation_data(text: str) -> List[RawFrame]:
    """
    Parse the animation asset.

    Args:
        text: JSON document holding a list of frames, each a list of lines

    Returns:
        Raw frames in playback order

    Raises:
        AnimationDataError: If the document is not valid JSON, has the wrong
            shape, or contains no frames
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise AnimationDataError(f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise AnimationDataError("expected a list of frames")
    if not data:
        raise AnimationDataError("animation contains no frames")

    for index, frame in enumerate(data):
        if not isinstance(frame, list):
            raise AnimationDataError(f"frame {index} is not a list of lines")
        for line in frame:
            if not isinstance(line, str):
                raise AnimationDataError(f"frame {index} contains a non-string line")

    logger.info(f"Loaded {len(data)} frames from animation data")
    return data


def expand_markup(line: str, color: str) -> str:
    """
    Replace ``<c>...</c>`` spans with colored text.

    Args:
        line: Raw frame line
        color: Resolved ANSI escape for highlighted spans

    Returns:
        Line ready to be written to the terminal
    """
    parts = []
    current = 0

    while True:
        start = line.find(COLOR_START_TAG, current)
        if start == -1:
            parts.append(line[current:])
            break

        parts.append(line[current:start])

        content_start = start + len(COLOR_START_TAG)
        end = line.find(COLOR_END_TAG, content_start)
        if end == -1:
            # Unterminated tag: the rest of the line stays literal
            parts.append(line[start:])
            break

        parts.append(color)
        parts.append(line[content_start:end])
        parts.append(ANSI.RESET)

        current = end + len(COLOR_END_TAG)

    return ''.join(parts)


def preprocess(raw_frames: Sequence[Sequence[str]], color: str) -> List[RenderedFrame]:
    """Expand markup in every line of every frame."""
    return [tuple(expand_markup(line, color) for line in lines) for lines in raw_frames]


class Animation:
    """
    Pre-rendered animation frames for one highlight color.

    Frames are expanded once on construction and never change afterwards;
    the renderer reads them by index for the lifetime of the process.
    """

    def __init__(self, raw_frames: Sequence[Sequence[str]], highlight_color: str = DEFAULT_COLOR):
        self.highlight_color = highlight_color
        self.frames = preprocess(raw_frames, highlight_color)
        self.dimensions = measure_frames(raw_frames)

        expected = FrameDimensions(IMAGE_WIDTH, IMAGE_HEIGHT)
        if self.frames and self.dimensions != expected:
            logger.warning(
                f"Animation measures {self.dimensions.width}x{self.dimensions.height}, "
                f"centering assumes {expected.width}x{expected.height}"
            )

        logger.info(f"Animation initialized with {self.frame_count} frames")

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    def frame_lines(self, index: int) -> RenderedFrame:
        """Lines of one frame, or an empty tuple for an out-of-range index."""
        if index < 0 or index >= len(self.frames):
            return ()
        return self.frames[index]

    def __len__(self) -> int:
        return len(self.frames)
