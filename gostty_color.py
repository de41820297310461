#!/usr/bin/env python3
"""
gostty - Color Resolution
=========================
Copyright (c) 2026 gostty contributors

Turns whatever the user typed after ``--color`` into an ANSI escape
sequence. Resolution is best-effort and never fails:

- A raw escape sequence (``\\x1b[...``) is passed through untouched
- A bare number ``N`` becomes ``\\x1b[Nm`` with no range check
- A named color is looked up case-insensitively
- Anything else falls back to blue

Example Usage
=============
```python
from gostty_color import resolve_color

resolve_color("BrightCyan")   # '\\x1b[96m'
resolve_color("208")          # '\\x1b[208m'
resolve_color("notacolor")    # '\\x1b[34m'
```
"""

import re
import logging
from typing import List

from gostty_config import ANSI, NAMED_COLORS, DEFAULT_COLOR

logger = logging.getLogger('gostty.color')

_NUMERIC_TOKEN = re.compile(r'[0-9]+')

USAGE_LINES = [
    "  gostty -c <color>        Use a color name from the list above",
    "  gostty -c <number>       Use an ANSI color code (30-37 or 90-97)",
    "  gostty --colors          Show this color help",
    "  gostty -t <seconds>      Run animation for specified duration",
]


def resolve_color(token: str) -> str:
    """
    Resolve a user color token to an ANSI escape sequence.

    Args:
        token: Color name, numeric ANSI code, or raw escape sequence

    Returns:
        Escape sequence to emit before highlighted text
    """
    if token.startswith(ANSI.ESCAPE_PREFIX):
        return token

    if _NUMERIC_TOKEN.fullmatch(token):
        return ANSI.foreground(token)

    color = NAMED_COLORS.get(token.lower())
    if color is not None:
        return color

    logger.debug(f"Unrecognized color {token!r}, using default blue")
    return DEFAULT_COLOR


def format_color_legend() -> str:
    """Build the text printed by --colors and --help"""
    lines: List[str] = ["", "Available colors:"]
    for name, code in NAMED_COLORS.items():
        lines.append(f"  {code}{name}{ANSI.RESET}")
    lines.append("")
    lines.append("Usage:")
    lines.extend(USAGE_LINES)
    return "\n".join(lines) + "\n"
