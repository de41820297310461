import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gostty_color import format_color_legend, resolve_color
from gostty_config import ANSI, DEFAULT_COLOR, NAMED_COLORS


def test_named_colors_table_has_sixteen_entries():
    assert len(NAMED_COLORS) == 16
    assert NAMED_COLORS['red'] == "\x1b[31m"
    assert NAMED_COLORS['brightcyan'] == "\x1b[96m"


@pytest.mark.parametrize("name", sorted(NAMED_COLORS))
def test_named_color_lookup_ignores_case(name):
    expected = NAMED_COLORS[name]
    assert resolve_color(name) == expected
    assert resolve_color(name.upper()) == expected
    assert resolve_color(name.title()) == expected


@pytest.mark.parametrize("token", [
    "notacolor", "", "12ab", "-1", "bright cyan", " red",
    "31\n", "\u0663\u0661", "\uff13\uff11",
])
def test_unrecognized_tokens_fall_back_to_blue(token):
    assert resolve_color(token) == DEFAULT_COLOR == "\x1b[34m"


@pytest.mark.parametrize("token", ["31", "0", "208", "999"])
def test_numeric_tokens_are_formatted_without_range_check(token):
    assert resolve_color(token) == f"\x1b[{token}m"


def test_raw_escape_sequences_pass_through():
    raw = "\x1b[38;5;208m"
    assert resolve_color(raw) == raw


def test_color_legend_lists_every_color_in_its_own_color():
    legend = format_color_legend()
    assert "Available colors:" in legend
    assert "Usage:" in legend
    for name, code in NAMED_COLORS.items():
        assert f"  {code}{name}{ANSI.RESET}" in legend
    assert "gostty -t <seconds>" in legend
