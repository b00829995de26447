# src/taintinfo/cli.py
# Command-line entry: `taintinfo current | list | taint=<flags>`.

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from typing import List, Optional

from .config import COLOR_MODES, Settings
from .decode import decode, list_flags, parse_flags
from .log import setup_logging
from .render import emit, listing_lines, make_console, report_lines, usage_lines
from .source import TaintSourceError, load_taint_status

log = logging.getLogger(__name__)

PROGRAM = "taintinfo"

EXIT_NORM = 0
EXIT_ERR_GENERIC = 1
EXIT_ERR_MEM_ALLOC = 2

CMD_CURRENT = "current"
CMD_LIST = "list"
CMD_FLAGS_PREFIX = "taint="


class UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    # Bad invocations print our usage text and exit 1, not argparse's exit 2
    def error(self, message):
        raise UsageError(message)


def program_name(argv0: Optional[str] = None) -> str:
    """Invoked name for messages; `python -m taintinfo` reports as PROGRAM."""
    name = os.path.basename(sys.argv[0] if argv0 is None else argv0)
    if not name or name in ("__main__.py", "-c"):
        return PROGRAM
    return name


def build_parser(program: str = PROGRAM) -> argparse.ArgumentParser:
    p = _ArgumentParser(prog=program, description="Kernel taint query utility")
    p.add_argument("command", nargs="?", help="current | list | taint=<flags>")
    p.add_argument("--color", choices=COLOR_MODES, default=None,
                   help="colorize output (default: auto, or $TAINTINFO_COLOR)")
    p.add_argument("--source", type=str, default=None, metavar="PATH",
                   help="read the taint word from PATH instead of the kernel")
    p.add_argument("-v", "--verbose", action="store_true", help="debug diagnostics")
    return p


def run_current(settings: Settings, out) -> int:
    try:
        status = load_taint_status(settings.tainted_path)
    except TaintSourceError as e:
        log.error("%s", e)
        return EXIT_ERR_GENERIC
    emit(out, report_lines(decode(status)))
    return EXIT_NORM


def run_list(out) -> int:
    emit(out, listing_lines(list_flags()))
    return EXIT_NORM


def run_query(letters: str, out) -> int:
    parsed = parse_flags(letters)
    for msg in parsed.warnings():
        log.warning("%s", msg)
    emit(out, report_lines(decode(parsed.value)))
    return EXIT_NORM


def dispatch(command: Optional[str], settings: Settings, out, program: str = PROGRAM) -> int:
    if command == CMD_CURRENT:
        return run_current(settings, out)
    if command == CMD_LIST:
        return run_list(out)
    if command is not None and command.startswith(CMD_FLAGS_PREFIX):
        return run_query(command[len(CMD_FLAGS_PREFIX):], out)
    emit(out, usage_lines(program))
    return EXIT_ERR_GENERIC


def main(argv: Optional[List[str]] = None) -> int:
    program = program_name()
    settings = Settings.from_env()
    try:
        args = build_parser(program).parse_args(argv)
    except UsageError:
        emit(make_console(settings.color), usage_lines(program))
        return EXIT_ERR_GENERIC

    if args.color:
        settings = replace(settings, color=args.color)
    if args.source is not None:
        settings = replace(settings, tainted_path=args.source)

    out = make_console(settings.color)
    err = make_console(settings.color, stderr=True)
    setup_logging(err, logging.DEBUG if args.verbose else logging.WARNING)

    try:
        return dispatch(args.command, settings, out, program)
    except MemoryError:
        log.critical("%s: Out of memory", program)
        return EXIT_ERR_MEM_ALLOC


if __name__ == "__main__":
    raise SystemExit(main())
