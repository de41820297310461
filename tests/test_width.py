import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gostty_width import FrameDimensions, measure_frames, strip_markup, visible_width


def test_strip_markup_removes_tags_and_escapes():
    assert strip_markup("a<c>B</c>c") == "aBc"
    assert strip_markup("a\x1b[34mB\x1b[0mc") == "aBc"


def test_visible_width_ignores_markup():
    assert visible_width("") == 0
    assert visible_width("<c>~~~~</c>") == 4
    assert visible_width("| <c>g o</c> |") == 7


def test_visible_width_counts_wide_characters():
    assert visible_width("你好") == 4


def test_measure_frames_returns_bounding_box():
    frames = [["ab", "<c>abcd</c>"], ["a", "b", "c"]]
    assert measure_frames(frames) == FrameDimensions(4, 3)


def test_measure_frames_of_nothing_is_empty():
    assert measure_frames([]) == FrameDimensions(0, 0)
