#!/usr/bin/env python3
"""
gostty - Terminal Animation Player
==================================
Copyright (c) 2026 gostty contributors

Plays the bundled ASCII animation centered in the terminal until the timer
runs out or the user interrupts it.

Usage
=====
    gostty [-c COLOR] [-t SECONDS] [--colors] [--log-file PATH]

- ``-c/--color``: color name, ANSI code number, or raw escape sequence
- ``-t/--timer``: stop after this many seconds (0 runs forever)
- ``--colors``, ``-h``, ``--help``: print the color legend and exit
- ``--log-file``: write debug logs to PATH

Unknown flags are ignored, as are malformed values; the player always
starts with something sensible.
"""

import sys
import signal
import logging
import argparse
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

from gostty_asset import ANIMATION_JSON
from gostty_color import resolve_color, format_color_legend
from gostty_config import AnimatorConfig, DEFAULT_DURATION
from gostty_frames import Animation, AnimationDataError, load_animation_data
from gostty_loop import AnimationLoop
from gostty_terminal import Renderer, TerminalGeometry, TerminalSession

logger = logging.getLogger('gostty')

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


HELP_FLAGS = ('--colors', '-h', '--help')


class ArgumentParseError(Exception):
    """Raised instead of exiting when argparse rejects the command line."""


class LenientArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentParseError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = LenientArgumentParser(
        prog='gostty',
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument('-c', '--color', nargs='?', default=None)
    parser.add_argument('-t', '--timer', nargs='?', default=None)
    parser.add_argument(*HELP_FLAGS, dest='show_colors', action='store_true')
    parser.add_argument('--log-file', nargs='?', default=None)
    return parser


def parse_timer(value: Optional[str]) -> int:
    """Seconds from a --timer value; anything unparsable keeps the default."""
    if value is None:
        return DEFAULT_DURATION
    try:
        return max(0, int(value))
    except ValueError:
        return DEFAULT_DURATION


def split_help_variants(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Separate look-alikes of the help flags from the rest of the arguments.

    Only the exact spellings in HELP_FLAGS show the legend; forms such as
    ``--colors=1`` or ``-hx`` are unknown arguments like any other.
    """
    kept, dropped = [], []
    for arg in argv:
        if arg in HELP_FLAGS:
            kept.append(arg)
        elif arg.startswith(('--colors=', '--help=')) or (arg.startswith('-h') and not arg.startswith('--')):
            dropped.append(arg)
        else:
            kept.append(arg)
    return kept, dropped


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    if argv is None:
        argv = sys.argv[1:]
    argv, unknown = split_help_variants(argv)

    parser = build_parser()
    try:
        args, extra = parser.parse_known_args(argv)
    except ArgumentParseError as e:
        logger.debug(f"Ignoring unparsable arguments ({e}): {list(argv)}")
        args, extra = parser.parse_known_args([])

    unknown.extend(extra)
    if unknown:
        logger.debug(f"Ignoring unknown arguments: {unknown}")
    return args


def config_from_args(args: argparse.Namespace) -> AnimatorConfig:
    config = AnimatorConfig(duration_seconds=parse_timer(args.timer), log_file=args.log_file)
    if args.color is not None:
        config.highlight_color = resolve_color(args.color)
    return config


def setup_logging(log_file: Optional[str] = None):
    """
    Send logs to ``log_file``, or nowhere.

    The terminal belongs to the animation, so log records are never
    written to stdout or stderr.
    """
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format=LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT,
        )
    elif not logger.handlers:
        logger.addHandler(logging.NullHandler())


def install_signal_handlers(loop: AnimationLoop) -> dict:
    """
    Stop ``loop`` on SIGINT or SIGTERM.

    Returns:
        Previous handlers keyed by signal number
    """
    def handle(signum, frame):
        logger.info(f"Received signal {signum}, stopping")
        loop.stop()

    previous = {}
    for signum in (signal.SIGINT, signal.SIGTERM):
        previous[signum] = signal.signal(signum, handle)
    return previous


def run_animation(config: AnimatorConfig,
                  raw_frames: List[List[str]],
                  stream: Optional[TextIO] = None,
                  size_query: Optional[Callable[[], TerminalGeometry]] = None,
                  clock: Optional[Callable[[], float]] = None,
                  handle_signals: bool = True) -> AnimationLoop:
    """
    Play ``raw_frames`` inside an alternate screen session.

    Returns:
        The stopped loop
    """
    animation = Animation(raw_frames, config.highlight_color)

    with TerminalSession(stream) as session:
        renderer = Renderer(
            animation,
            stream=session.stream,
            size_query=size_query,
            image_width=config.image_width,
            image_height=config.image_height,
        )
        loop = AnimationLoop(renderer, animation.frame_count, config, clock=clock)

        previous = install_signal_handlers(loop) if handle_signals else {}
        try:
            loop.run()
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)

    logger.debug(f"Render stats: {renderer.get_stats()}")
    return loop


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    if args.show_colors:
        sys.stdout.write(format_color_legend())
        sys.stdout.flush()
        return 0

    config = config_from_args(args)
    setup_logging(config.log_file)

    try:
        raw_frames = load_animation_data(ANIMATION_JSON)
    except AnimationDataError as e:
        print(f"Failed to load animation data: {e}", file=sys.stderr)
        return 1

    run_animation(config, raw_frames)
    return 0


if __name__ == '__main__':
    sys.exit(main())
