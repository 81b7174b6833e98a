import sys
import os
import csv
import curses
import locale
import logging
import signal
import argparse

import config_paths
from log_setup import configure_logging

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator
from app_state import AppState

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)

PROG = "csvpager"
EXIT_FATAL = 1


def build_parser(cfg):
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="csvpager - scroll through large CSV files in the terminal",
    )
    parser.add_argument("path", nargs="?", help="Path to the CSV file")
    parser.add_argument("-file", "--file", dest="file", help="Path to the CSV file")
    parser.add_argument(
        "-comma",
        "--comma",
        dest="comma",
        default=cfg["DELIMITER"],
        help="Field delimiter in the CSV file (default: %(default)r)",
    )
    parser.add_argument("--encoding", default=cfg["ENCODING"])
    parser.add_argument(
        "--column-widths",
        dest="column_widths",
        choices=config_paths.COLUMN_WIDTH_CHOICES,
        default=cfg["COLUMN_WIDTHS"],
        help="One width per column, or the widest field for every column",
    )
    parser.add_argument("-v", "--version", action="version", version=__version__)
    return parser


def parse_args(argv, cfg):
    parser = build_parser(cfg)
    args = parser.parse_args(argv)
    if args.path and args.file and args.path != args.file:
        parser.error("give the CSV path once, either positionally or with -file")
    args.file = args.file or args.path
    if not args.file:
        parser.error("Please provide the path to the CSV file using -file flag.")
    if not args.comma or len(args.comma) != 1:
        parser.error("-comma must be a single character")
    return args


def _raise_exit(signum, _frame):
    # unwinds through curses.wrapper so the terminal is restored
    raise SystemExit(128 + signum)


def install_signal_handlers():
    for name in ("SIGTERM", "SIGHUP", "SIGQUIT"):
        sig = getattr(signal, name, None)
        if sig is not None:
            signal.signal(sig, _raise_exit)


def main(argv=None):
    cfg = config_paths.load_config()
    args = parse_args(sys.argv[1:] if argv is None else argv, cfg)

    log_path = config_paths.LOG_PATH if config_paths.ensure_config_dirs() else None
    configure_logging(cfg["LOG_LEVEL"], log_path)

    state = AppState(
        args.file,
        delimiter=args.comma,
        encoding=args.encoding,
        width_mode=args.column_widths,
    )

    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass
    install_signal_handlers()

    try:
        with open(args.file, "rb") as fh:

            def curses_main(stdscr):
                Orchestrator(stdscr, state, fh).run()

            curses.wrapper(curses_main)
    except (OSError, csv.Error) as exc:
        logger.error("fatal error on %s: %s", args.file, exc)
        print(f"{PROG}: {exc}", file=sys.stderr)
        return EXIT_FATAL
    return 0


if __name__ == "__main__":
    sys.exit(main())
