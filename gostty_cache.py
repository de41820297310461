#!/usr/bin/env python3
"""
gostty - Render Cache
=====================
Copyright (c) 2026 gostty contributors

Memoizes the padding strings used to center frames: runs of spaces for the
left margin and runs of newlines for the top margin. Both maps are keyed by
the count that produced them and are cleared together whenever the
terminal is resized, so widths from old geometries never accumulate.
"""

import logging
from typing import Dict, Union

logger = logging.getLogger('gostty.cache')


class RenderCache:
    """
    Padding string cache owned by a single Renderer.

    Attributes:
        stats: Dictionary containing hit/miss/clear counters
    """

    def __init__(self):
        self._padding: Dict[int, str] = {}
        self._newlines: Dict[int, str] = {}

        self.stats = {
            'cache_hits': 0,
            'cache_misses': 0,
            'clears': 0,
        }

    def padding(self, width: int) -> str:
        """Spaces for a left margin of ``width`` columns."""
        cached = self._padding.get(width)
        if cached is not None:
            self.stats['cache_hits'] += 1
            return cached

        self.stats['cache_misses'] += 1
        value = " " * width
        self._padding[width] = value
        return value

    def newlines(self, count: int) -> str:
        """Newlines for a top margin of ``count`` lines."""
        cached = self._newlines.get(count)
        if cached is not None:
            self.stats['cache_hits'] += 1
            return cached

        self.stats['cache_misses'] += 1
        value = "\n" * count
        self._newlines[count] = value
        return value

    def clear(self):
        """Drop every cached string."""
        self._padding.clear()
        self._newlines.clear()
        self.stats['clears'] += 1
        logger.debug("Render cache cleared")

    def get_stats(self) -> Dict[str, Union[int, float]]:
        """
        Get cache statistics.

        Returns:
            Counters plus cache_hit_rate and the current entry count
        """
        stats = dict(self.stats)
        total = stats['cache_hits'] + stats['cache_misses']
        stats['cache_hit_rate'] = stats['cache_hits'] / total if total else 0.0
        stats['cache_entries'] = len(self)
        return stats

    def __len__(self) -> int:
        return len(self._padding) + len(self._newlines)
