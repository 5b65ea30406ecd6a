"""Line-based read-eval-print loop and file runner."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from typing import Callable, Optional, TextIO

from qlisp import __version__
from qlisp.errors import QLispError
from qlisp.interpreter import Interpreter
from qlisp.types.error import Error

logger = logging.getLogger(__name__)

BANNER = f"qlisp {__version__} (Ctrl-D to exit)"
PROMPT = "> "


def run_line(itp: Interpreter, line: str, out: TextIO) -> bool:
    """Evaluate one line and print its result. Returns False on error."""
    try:
        result = itp.eval(line)
    except QLispError as e:
        print(e, file=out)
        return False
    print(result, file=out)
    return not isinstance(result, Error)


def repl(
    itp: Interpreter,
    read_line: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
) -> None:
    print(BANNER, file=out)
    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            print(file=out)
            return
        except KeyboardInterrupt:
            print(file=out)
            continue
        if not line.strip():
            continue
        run_line(itp, line, out)


def main(argv: Optional[list[str]] = None) -> int:
    parser = ArgumentParser(prog="qlisp", description="The qlisp programming language")
    parser.add_argument("files", nargs="*", help="source files to load before starting")
    parser.add_argument("-e", "--eval", dest="expr", default=None, help="evaluate one expression and exit")
    parser.add_argument("-i", "--interactive", action="store_true", help="start the REPL after loading files")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the standard library")
    parser.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        itp = Interpreter(prelude=None if args.no_prelude else 'auto')
        status = 0
        for path in args.files:
            try:
                result = itp.load(path)
            except QLispError as e:
                print(e, file=sys.stderr)
                return 1
            if isinstance(result, Error):
                print(result, file=sys.stderr)
                return 1
        if args.expr is not None:
            status = 0 if run_line(itp, args.expr, sys.stdout) else 1
        if args.interactive or (not args.files and args.expr is None):
            repl(itp)
        return status
    except RecursionError:
        logger.critical("maximum recursion depth exceeded, aborting")
        return 2
