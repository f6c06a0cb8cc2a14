"""CLI interface for sysline."""

from __future__ import annotations

import argparse
import logging
import math
import os
import sys
import threading
import time
from typing import Callable

from . import __version__
from .collector.state import ProbeState
from .config import ConfigError, SyslineConfig, load_config
from .encoder import EncodingError
from .exporter.base import BaseExporter
from .exporter.stream import StreamExporter
from .sampler import Sampler

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


class _HelpToStderr(argparse.Action):
    """``-h/--help`` that prints usage to stderr and exits with a usage error."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help(sys.stderr)
        parser.exit(EXIT_USAGE)


def _interval(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid interval: {value!r}") from None
    if not math.isfinite(seconds):
        raise argparse.ArgumentTypeError(f"interval must be finite: {value!r}")
    if seconds > threading.TIMEOUT_MAX:
        raise argparse.ArgumentTypeError(f"interval too large: {value!r}")
    return seconds


def _count(value: str) -> int:
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}") from None
    if count < 1:
        raise argparse.ArgumentTypeError(f"count must be at least 1: {value!r}")
    return count


def run_loop(
    sampler: Sampler,
    exporter: BaseExporter,
    interval: float,
    count: int | None = None,
    sleep: Callable[[float], None] | None = None,
) -> int:
    """Sleep, sample, export; repeat *count* times or forever.

    The sleep comes first so the first record already covers a full
    interval of CPU and network activity.  Intervals <= 0 sleep for zero
    seconds.  Returns the number of records exported.
    """
    sleep = sleep or time.sleep
    delay = max(interval, 0.0)
    emitted = 0
    while count is None or emitted < count:
        sleep(delay)
        exporter.export(sampler.sample())
        emitted += 1
    return emitted


def _make_sampler(cfg: SyslineConfig) -> Sampler:
    return Sampler(ProbeState(cfg.sampler))


def _cmd_snapshot(args: argparse.Namespace, cfg: SyslineConfig) -> None:
    """Emit a single snapshot line."""
    sampler = _make_sampler(cfg)
    exporter = StreamExporter(sys.stdout)
    try:
        exporter.export(sampler.sample())
    finally:
        exporter.shutdown()


def _cmd_loop(args: argparse.Namespace, cfg: SyslineConfig) -> None:
    """Emit snapshot lines until interrupted, stdout closes, or --count is reached."""
    interval = args.interval if args.interval is not None else cfg.sampler.interval_seconds
    sampler = _make_sampler(cfg)
    exporter = StreamExporter(sys.stdout)
    logger.info("Sampling every %.3fs (count=%s)", interval, args.count or "unlimited")
    try:
        run_loop(sampler, exporter, interval, count=args.count)
    finally:
        exporter.shutdown()


def _cmd_show(args: argparse.Namespace, cfg: SyslineConfig) -> None:
    """Render one sample as tables."""
    from .exporter.table import TableExporter

    sampler = _make_sampler(cfg)
    run_loop(sampler, TableExporter(sys.stdout), args.interval, count=1)


def _cmd_version(args: argparse.Namespace, cfg: SyslineConfig) -> None:
    print(f"sysline {__version__}")


def _add_help(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-h", "--help", action=_HelpToStderr, help="Show this help message and exit")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sysline",
        description="Sample host resource counters and print them as JSON lines",
        add_help=False,
    )
    _add_help(parser)
    parser.add_argument("--config", "-c", default=None, help="Path to an optional sysline.yaml settings file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug diagnostics to stderr")
    parser.set_defaults(func=_cmd_snapshot)
    sub = parser.add_subparsers(dest="command")

    # loop
    loop_p = sub.add_parser("loop", help="Emit a snapshot line every interval", add_help=False)
    _add_help(loop_p)
    loop_p.add_argument(
        "--interval", "-i", type=_interval, default=None,
        help="Seconds to wait before each sample (default: 1.0)",
    )
    loop_p.add_argument("--count", "-n", type=_count, default=None, help="Stop after this many records")
    loop_p.set_defaults(func=_cmd_loop)

    # show
    show_p = sub.add_parser("show", help="Print one sample as human-readable tables", add_help=False)
    _add_help(show_p)
    show_p.add_argument(
        "--interval", "-i", type=_interval, default=0.5,
        help="Seconds to measure CPU and network activity over (default: 0.5)",
    )
    show_p.set_defaults(func=_cmd_show)

    # version
    ver_p = sub.add_parser("version", help="Print version", add_help=False)
    _add_help(ver_p)
    ver_p.set_defaults(func=_cmd_version)

    return parser


def _silence_stdout() -> None:
    """Point stdout at /dev/null so the interpreter's final flush cannot fail again."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        pass


def main(argv: list[str] | None = None) -> None:
    """Entry point for the sysline CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
    except ConfigError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else cfg.logging.level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if sys.stdout is None:
        logger.error("Cannot write snapshot: stdout is closed")
        sys.exit(EXIT_FAILURE)

    try:
        args.func(args, cfg)
    except BrokenPipeError:
        _silence_stdout()
        sys.exit(EXIT_FAILURE)
    except EncodingError as exc:
        logger.error("%s", exc)
        sys.exit(EXIT_FAILURE)
    except OSError as exc:
        logger.error("Cannot write snapshot: %s", exc)
        sys.exit(EXIT_FAILURE)
    except KeyboardInterrupt:
        sys.exit(EXIT_INTERRUPTED)


if __name__ == "__main__":
    main()
