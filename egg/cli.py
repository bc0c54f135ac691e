"""Command line runner: `python -m egg program.egg` or `egg -e 'print(1)'`."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from egg import config
from egg.debug_utils.pprint import format_value
from egg.errors import EggError
from egg.interpreter import Interpreter

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="egg", description="Run Egg programs.")
    ap.add_argument("files", nargs="*",
                    help="program files to run, in order, before any -e code")
    ap.add_argument("-e", "--eval", dest="code", action="append", default=[],
                    help="program text to run after the files (may be repeated)")
    ap.add_argument("-q", "--quiet", action="store_true",
                    help="do not print the final value of each program")
    ap.add_argument("--log-level", default=None,
                    help="logging level (default: $EGG_LOG_LEVEL or WARNING)")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    level = (args.log_level or config.get_log_level()).upper()
    if not isinstance(logging.getLevelName(level), int):
        ap.error(f"unknown log level: {level}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        limit = config.get_recursion_limit()
    except ValueError as ex:
        ap.error(str(ex))
    if limit is not None:
        sys.setrecursionlimit(limit)

    if not args.files and not args.code:
        ap.print_usage(sys.stderr)
        return 2

    interp = Interpreter()
    jobs = [(str(config.resolve_program(f)), None) for f in args.files]
    jobs += [("<eval>", code) for code in args.code]
    for name, code in jobs:
        try:
            result = interp.run(code) if code is not None else interp.run_file(name)
            if not args.quiet:
                print(format_value(result))
        except OSError as ex:
            logger.error("Cannot read %s: %s", name, ex)
            return 1
        except EggError as ex:
            print(f"{type(ex).__name__.removeprefix('Egg')}: {ex}", file=sys.stderr)
            return 1
        except RecursionError:
            print(f"RecursionError: maximum recursion depth exceeded in {name}", file=sys.stderr)
            return 1
    return 0
