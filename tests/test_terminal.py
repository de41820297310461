import io
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import gostty_terminal
from gostty_config import ANSI, TERMINAL_RESTORE, TERMINAL_SETUP
from gostty_frames import Animation
from gostty_terminal import Renderer, TerminalGeometry, TerminalSession, query_terminal_size


class CountingStream(io.StringIO):
    def __init__(self):
        super().__init__()
        self.write_calls = 0

    def write(self, s):
        self.write_calls += 1
        return super().write(s)


class SizeSource:
    def __init__(self, width, height):
        self.geometry = TerminalGeometry(width, height)

    def __call__(self):
        return self.geometry


def make_renderer(width=6, height=6, frames=None):
    animation = Animation(frames or [["ab", "cd"], ["ef", "gh"]])
    stream = CountingStream()
    size = SizeSource(width, height)
    renderer = Renderer(animation, stream=stream, size_query=size, image_width=2, image_height=2)
    return renderer, stream, size


def test_frame_is_centered_in_one_write():
    renderer, stream, _ = make_renderer(width=7, height=7)

    assert renderer.render_frame(0) is True

    assert stream.write_calls == 1
    assert stream.getvalue() == ANSI.CLEAR_AND_HOME + "\n\n" + "  ab\n  cd"


def test_repeated_frame_is_not_redrawn():
    renderer, stream, _ = make_renderer()

    renderer.render_frame(1)
    assert renderer.render_frame(1) is False

    assert renderer.writes == 1
    assert stream.write_calls == 1
    assert renderer.get_stats()['skipped'] == 1


def test_new_frame_is_drawn():
    renderer, stream, _ = make_renderer()

    renderer.render_frame(0)
    renderer.render_frame(1)

    assert renderer.writes == 2
    assert stream.getvalue().endswith("  ef\n  gh")


def test_resize_forces_redraw_and_clears_cache():
    renderer, stream, size = make_renderer(width=6, height=6)
    renderer.render_frame(0)
    assert len(renderer.cache) > 0

    size.geometry = TerminalGeometry(7, 7)
    assert renderer.update_size() is True
    assert len(renderer.cache) == 0
    assert renderer.needs_redraw is True

    assert renderer.render_frame(0) is True
    assert renderer.writes == 2


def test_resize_with_same_padding_still_redraws():
    renderer, _, size = make_renderer(width=6, height=6)
    renderer.render_frame(0)

    size.geometry = TerminalGeometry(7, 6)
    renderer.update_size()

    assert renderer.padding() == (2, 2)
    assert renderer.render_frame(0) is True


def test_unchanged_size_is_not_a_resize():
    renderer, _, _ = make_renderer()
    renderer.render_frame(0)

    assert renderer.update_size() is False
    assert renderer.render_frame(0) is False


def test_small_terminal_gets_no_padding():
    renderer, stream, _ = make_renderer(width=1, height=1)

    renderer.render_frame(0)

    assert renderer.padding() == (0, 0)
    assert stream.getvalue() == ANSI.CLEAR_AND_HOME + "ab\ncd"


def test_real_image_size_centering():
    frames = [["x" * 77] * 41]
    animation = Animation(frames)
    renderer = Renderer(animation, stream=io.StringIO(), size_query=SizeSource(120, 50))

    assert renderer.padding() == (4, 21)


def test_query_terminal_size_falls_back_without_a_terminal():
    assert query_terminal_size(io.StringIO()) == TerminalGeometry(80, 24)


def test_query_terminal_size_replaces_zero_dimensions(monkeypatch):
    class FakeStream:
        def fileno(self):
            return 1

    monkeypatch.setattr(gostty_terminal.os, "get_terminal_size",
                        lambda fd: os.terminal_size((0, 0)))
    assert query_terminal_size(FakeStream()) == TerminalGeometry(80, 24)

    monkeypatch.setattr(gostty_terminal.os, "get_terminal_size",
                        lambda fd: os.terminal_size((132, 43)))
    assert query_terminal_size(FakeStream()) == TerminalGeometry(132, 43)


def test_session_enters_and_restores_once():
    stream = io.StringIO()

    with TerminalSession(stream) as session:
        assert session.active is True
        assert session.restore() is True

    output = stream.getvalue()
    assert output.startswith(TERMINAL_SETUP)
    assert output.count(TERMINAL_RESTORE) == 1
    assert output.endswith(TERMINAL_RESTORE)


def test_session_restores_when_block_raises():
    stream = io.StringIO()

    with pytest.raises(RuntimeError):
        with TerminalSession(stream):
            raise RuntimeError("boom")

    assert stream.getvalue() == TERMINAL_SETUP + TERMINAL_RESTORE
