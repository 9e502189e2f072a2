"""Command-line entry point: ``python -m shelltyper``."""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shelltyper",
        description="monkeytype in the shell - a terminal typing-speed test",
    )
    length = parser.add_mutually_exclusive_group()
    length.add_argument("-w", "--words", type=int, metavar="N",
                        help="type a passage of N words")
    length.add_argument("-t", "--time", type=int, metavar="SECONDS", dest="seconds",
                        help="type for SECONDS seconds")
    parser.add_argument("--theme", help="colour theme (slate, ember, mint)")
    parser.add_argument("--config", type=Path, metavar="PATH",
                        help="settings file (JSON)")
    parser.add_argument("--log-file", type=Path, metavar="PATH",
                        help="write debug logs to PATH")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log at DEBUG level instead of INFO")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    for name in ("words", "seconds"):
        value = getattr(args, name)
        if value is not None and value <= 0:
            print(f"--{'time' if name == 'seconds' else name} must be positive", file=sys.stderr)
            return 2

    if args.log_file:
        logging.basicConfig(
            filename=str(args.log_file),
            level=logging.DEBUG if args.verbose else logging.INFO,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    settings = load_settings(args.config)
    mode = None
    if args.words is not None:
        mode = "words"
    elif args.seconds is not None:
        mode = "time"
    settings = settings.with_overrides(
        mode=mode, words=args.words, seconds=args.seconds, theme=args.theme,
    )

    from .app import ShellTyper
    ShellTyper(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
