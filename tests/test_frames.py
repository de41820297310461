import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gostty_asset import ANIMATION_JSON
from gostty_config import ANSI, IMAGE_HEIGHT, IMAGE_WIDTH
from gostty_frames import (
    Animation,
    AnimationDataError,
    expand_markup,
    load_animation_data,
    preprocess,
)
from gostty_width import FrameDimensions

X = "\x1b[91m"


def test_plain_line_is_unchanged():
    assert expand_markup("plain text", X) == "plain text"


def test_single_span_is_colored():
    assert expand_markup("a<c>B</c>c", X) == "a" + X + "B" + ANSI.RESET + "c"


def test_multiple_spans_and_empty_span():
    line = "<c>x</c>-<c></c>-<c>yz</c>"
    expected = X + "x" + ANSI.RESET + "-" + X + ANSI.RESET + "-" + X + "yz" + ANSI.RESET
    assert expand_markup(line, X) == expected


def test_unmatched_start_keeps_line_tail_literal():
    assert expand_markup("a<c>B", X) == "a<c>B"


def test_unmatched_start_after_valid_span():
    line = "<c>ok</c> then <c>broken"
    assert expand_markup(line, X) == X + "ok" + ANSI.RESET + " then <c>broken"


def test_stray_end_marker_is_literal():
    assert expand_markup("a</c>b", X) == "a</c>b"


def test_preprocess_expands_every_line():
    frames = preprocess([["<c>a</c>", "b"], ["c"]], X)
    assert frames == [(X + "a" + ANSI.RESET, "b"), ("c",)]


def test_load_animation_data_parses_frames():
    assert load_animation_data('[["a", "b"], ["c"]]') == [["a", "b"], ["c"]]


@pytest.mark.parametrize("text", [
    "not json",
    "{}",
    "[]",
    '["line"]',
    '[["ok"], [1, 2]]',
])
def test_load_animation_data_rejects_malformed_assets(text):
    with pytest.raises(AnimationDataError):
        load_animation_data(text)


def test_animation_frame_lookup():
    animation = Animation([["<c>a</c>"], ["b"]], X)

    assert animation.frame_count == 2
    assert len(animation) == 2
    assert animation.highlight_color == X
    assert animation.frame_lines(0) == (X + "a" + ANSI.RESET,)
    assert animation.frame_lines(1) == ("b",)
    assert animation.frame_lines(2) == ()
    assert animation.frame_lines(-1) == ()


def test_animation_warns_about_unexpected_dimensions(caplog):
    with caplog.at_level("WARNING", logger="gostty.frames"):
        Animation([["abc"]], X)
    assert "centering assumes" in caplog.text


def test_bundled_asset_matches_image_size():
    raw = load_animation_data(ANIMATION_JSON)
    animation = Animation(raw, X)

    assert animation.frame_count > 1
    assert animation.dimensions == FrameDimensions(IMAGE_WIDTH, IMAGE_HEIGHT)
    assert all(len(lines) == IMAGE_HEIGHT for lines in animation.frames)
    assert any(X in line for line in animation.frame_lines(0))
