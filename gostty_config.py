#!/usr/bin/env python3
"""
gostty - Configuration Module
=============================
Copyright (c) 2026 gostty contributors

Centralized Configuration System
=================================
Constants and settings for the terminal animation player:
- Fixed image dimensions of the bundled animation
- Frame timing (35ms per frame)
- ANSI control sequences for screen handling
- The 16-entry named color table
- AnimatorConfig dataclass with validation

Color System
============
Named colors map to standard ANSI foreground codes: the eight standard
colors use codes 30-37, the eight bright variants use 90-97. Any color is
carried around as its resolved escape sequence, never as an index.
"""

from typing import Dict, Optional
from dataclasses import dataclass

# ============================================================================
# IMAGE DIMENSIONS
# ============================================================================

IMAGE_WIDTH = 77         # Columns in every frame
IMAGE_HEIGHT = 41        # Lines in every frame

# Used when the terminal cannot report its size
FALLBACK_TERMINAL_WIDTH = 80
FALLBACK_TERMINAL_HEIGHT = 24

# ============================================================================
# ANIMATION SETTINGS
# ============================================================================

MICROS_PER_FRAME = 35000
FRAME_DELAY_MS = MICROS_PER_FRAME // 1000   # Tick cadence in milliseconds
DEFAULT_DURATION = 0                          # Seconds, 0 runs forever

# ============================================================================
# MARKUP
# ============================================================================

COLOR_START_TAG = "<c>"
COLOR_END_TAG = "</c>"

# ============================================================================
# ANSI CONTROL SEQUENCES
# ============================================================================

class ANSI:
    ESCAPE_PREFIX = "\x1b["
    RESET = "\x1b[0m"
    CLEAR_AND_HOME = "\x1b[2J\x1b[H"
    ENTER_ALT_SCREEN = "\x1b[?1049h"
    LEAVE_ALT_SCREEN = "\x1b[?1049l"
    HIDE_CURSOR = "\x1b[?25l"
    SHOW_CURSOR = "\x1b[?25h"

    @staticmethod
    def foreground(code) -> str:
        """Format an SGR foreground sequence for a numeric code"""
        return f"\x1b[{code}m"


# Written once when the animation takes over the terminal
TERMINAL_SETUP = ANSI.ENTER_ALT_SCREEN + ANSI.HIDE_CURSOR

# Written once when the terminal is handed back
TERMINAL_RESTORE = ANSI.SHOW_CURSOR + ANSI.LEAVE_ALT_SCREEN

# ============================================================================
# NAMED COLORS
# ============================================================================

NAMED_COLORS: Dict[str, str] = {
    # Standard colors (30-37)
    'black': ANSI.foreground(30),
    'red': ANSI.foreground(31),
    'green': ANSI.foreground(32),
    'yellow': ANSI.foreground(33),
    'blue': ANSI.foreground(34),
    'magenta': ANSI.foreground(35),
    'cyan': ANSI.foreground(36),
    'white': ANSI.foreground(37),

    # Bright variants (90-97)
    'brightblack': ANSI.foreground(90),
    'brightred': ANSI.foreground(91),
    'brightgreen': ANSI.foreground(92),
    'brightyellow': ANSI.foreground(93),
    'brightblue': ANSI.foreground(94),
    'brightmagenta': ANSI.foreground(95),
    'brightcyan': ANSI.foreground(96),
    'brightwhite': ANSI.foreground(97),
}

DEFAULT_COLOR = NAMED_COLORS['blue']


# ============================================================================
# ANIMATOR CONFIGURATION
# ============================================================================

@dataclass
class AnimatorConfig:
    """
    Runtime configuration for one animation session.

    Attributes:
        highlight_color: Resolved ANSI escape used for marked-up spans
        duration_seconds: Stop after this many seconds (0 runs forever)
        frame_interval_ms: Milliseconds per frame and per loop tick
        image_width: Columns of the fixed-size animation frames
        image_height: Lines of the fixed-size animation frames
        log_file: Optional path receiving debug logs
    """

    highlight_color: str = DEFAULT_COLOR
    duration_seconds: int = DEFAULT_DURATION
    frame_interval_ms: int = FRAME_DELAY_MS

    image_width: int = IMAGE_WIDTH
    image_height: int = IMAGE_HEIGHT

    log_file: Optional[str] = None

    @property
    def frame_interval_seconds(self) -> float:
        return self.frame_interval_ms / 1000.0

    def validate(self) -> bool:
        """Validate animator configuration"""
        if self.duration_seconds < 0:
            raise ValueError("Duration must not be negative")
        if self.frame_interval_ms <= 0:
            raise ValueError("Frame interval must be positive")
        if self.image_width <= 0 or self.image_height <= 0:
            raise ValueError("Image dimensions must be positive")
        if not self.highlight_color:
            raise ValueError("Highlight color must not be empty")
        return True
