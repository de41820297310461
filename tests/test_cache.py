import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gostty_cache import RenderCache


def test_padding_and_newlines_are_memoized():
    cache = RenderCache()

    first = cache.padding(5)
    assert first == "     "
    assert cache.padding(5) is first
    assert cache.newlines(3) == "\n\n\n"

    stats = cache.get_stats()
    assert stats['cache_hits'] == 1
    assert stats['cache_misses'] == 2
    assert stats['cache_entries'] == 2


def test_zero_width_padding_is_empty():
    cache = RenderCache()
    assert cache.padding(0) == ""
    assert cache.newlines(0) == ""


def test_clear_empties_both_maps():
    cache = RenderCache()
    cache.padding(2)
    cache.newlines(2)
    assert len(cache) == 2

    cache.clear()

    assert len(cache) == 0
    assert cache.get_stats()['clears'] == 1
