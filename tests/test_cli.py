import argparse
import io
import signal
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import gostty
from gostty_config import DEFAULT_COLOR, NAMED_COLORS, TERMINAL_RESTORE, TERMINAL_SETUP, AnimatorConfig
from gostty_loop import LoopState
from gostty_terminal import TerminalGeometry


class SteppingClock:
    def __init__(self, step):
        self.now = 0.0
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


def config_for(argv):
    return gostty.config_from_args(gostty.parse_args(argv))


def test_defaults():
    config = config_for([])
    assert config.highlight_color == DEFAULT_COLOR
    assert config.duration_seconds == 0
    assert config.log_file is None


def test_color_and_timer_options():
    config = config_for(["-c", "BrightRed", "--timer", "10"])
    assert config.highlight_color == NAMED_COLORS['brightred']
    assert config.duration_seconds == 10

    config = config_for(["--color", "208", "-t", "3"])
    assert config.highlight_color == "\x1b[208m"
    assert config.duration_seconds == 3


def test_unknown_flags_are_ignored():
    config = config_for(["--sparkles", "-x", "-c", "green"])
    assert config.highlight_color == NAMED_COLORS['green']


@pytest.mark.parametrize("argv", [["-c"], ["-t"], ["-c", "-t", "5"]])
def test_options_without_values_are_ignored(argv):
    config = config_for(argv)
    assert config.highlight_color == DEFAULT_COLOR


@pytest.mark.parametrize("value, expected", [
    (None, 0),
    ("7", 7),
    ("abc", 0),
    ("1.5", 0),
    ("-5", 0),
])
def test_parse_timer(value, expected):
    assert gostty.parse_timer(value) == expected


@pytest.mark.parametrize("flag", ["--colors", "-h", "--help"])
def test_help_flags_print_legend(flag, capsys):
    assert gostty.main([flag]) == 0

    out = capsys.readouterr().out
    assert "Available colors:" in out
    assert "Usage:" in out


def test_broken_asset_exits_with_error(monkeypatch, capsys):
    monkeypatch.setattr(gostty, "ANIMATION_JSON", "{not json")

    assert gostty.main([]) == 1

    captured = capsys.readouterr()
    assert "Failed to load animation data" in captured.err
    assert captured.out == ""


def test_run_animation_restores_terminal_once():
    stream = io.StringIO()
    config = AnimatorConfig(duration_seconds=1)

    loop = gostty.run_animation(
        config,
        [["<c>a</c>b"], ["cd"]],
        stream=stream,
        size_query=lambda: TerminalGeometry(80, 24),
        clock=SteppingClock(0.5),
        handle_signals=False,
    )

    output = stream.getvalue()
    assert loop.state is LoopState.STOPPED
    assert output.startswith(TERMINAL_SETUP)
    assert output.endswith(TERMINAL_RESTORE)
    assert output.count(TERMINAL_RESTORE) == 1
    assert DEFAULT_COLOR + "a" in output


def test_signal_handler_stops_loop():
    class StubLoop:
        stopped = False

        def stop(self):
            self.stopped = True

    loop = StubLoop()
    previous = gostty.install_signal_handlers(loop)
    try:
        signal.getsignal(signal.SIGTERM)(signal.SIGTERM, None)
        assert loop.stopped is True
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


@pytest.mark.parametrize("argv", [
    ["--colors=1"],
    ["-hx"],
    ["--help=yes"],
    ["--colors=1", "-c", "red", "-t", "4"],
])
def test_help_flag_variants_are_ignored(argv):
    args = gostty.parse_args(argv)
    assert args.show_colors is False

    config = gostty.config_from_args(args)
    if "-c" in argv:
        assert config.highlight_color == NAMED_COLORS['red']
        assert config.duration_seconds == 4


def test_help_flag_variant_plays_animation_instead_of_legend(monkeypatch, capsys):
    played = []
    monkeypatch.setattr(gostty, "run_animation", lambda config, frames: played.append(config))

    assert gostty.main(["--colors=1"]) == 0

    assert len(played) == 1
    assert "Available colors:" not in capsys.readouterr().out


def test_parser_errors_do_not_exit(monkeypatch):
    def reject(self, args=None, namespace=None):
        if args:
            self.error("bad arguments")
        return argparse.Namespace(color=None, timer=None, show_colors=False, log_file=None), []

    monkeypatch.setattr(gostty.LenientArgumentParser, "parse_known_args", reject)

    args = gostty.parse_args(["-c", "red"])
    assert args.color is None
    assert args.show_colors is False


def test_interrupt_during_playback_restores_terminal_once():
    stream = io.StringIO()

    class InterruptingClock(SteppingClock):
        def __call__(self):
            value = super().__call__()
            if self.now >= 0.1 and not fired:
                fired.append(True)
                signal.getsignal(signal.SIGINT)(signal.SIGINT, None)
            return value

    fired = []
    original = signal.getsignal(signal.SIGINT)

    loop = gostty.run_animation(
        AnimatorConfig(),
        [["a"], ["b"]],
        stream=stream,
        size_query=lambda: TerminalGeometry(80, 24),
        clock=InterruptingClock(0.01),
    )

    output = stream.getvalue()
    assert fired == [True]
    assert loop.state is LoopState.STOPPED
    assert output.count(TERMINAL_RESTORE) == 1
    assert output.endswith(TERMINAL_RESTORE)
    assert signal.getsignal(signal.SIGINT) is original
