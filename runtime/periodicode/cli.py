"""
PeriodiCode command line

    periodicode                      # interactive session on stdin
    periodicode -e '1/7'             # evaluate an expression
    periodicode script.periodicode   # run a file
    periodicode -r dozenal -e '10'   # start in another radix

Exit status: 0 on success, 1 on a recoverable error in a script or
expression, 2 on a fatal error.
"""

import argparse
import logging
import sys

import colorama

from .errors import PeriodiCodeError, PeriodiCodeFatal
from .interpreter import Interpreter
from .radix import DEFAULT_RADIX, MAX_RADIX, MIN_RADIX, radix_of_name
from .summary import ConsoleReporter, prompt

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FATAL = 2


def radix_argument(text: str) -> int:
    """argparse type for --radix: a radix name or an integer in [2, 25]"""
    radix = radix_of_name(text)
    if radix is None:
        try:
            radix = int(text, 10)
        except ValueError:
            raise argparse.ArgumentTypeError(f"unknown radix `{text}`") from None
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise argparse.ArgumentTypeError(
            f"radix must be between {MIN_RADIX} and {MAX_RADIX}, got {radix}"
        )
    return radix


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="periodicode",
        description="Exact rational calculator with radix control.",
    )
    parser.add_argument("scripts", nargs="*", help="Source files to run, in order.")
    parser.add_argument(
        "-e", "--eval", dest="expressions", action="append", default=[],
        metavar="EXPR", help="Evaluate EXPR (may be repeated).",
    )
    parser.add_argument(
        "-r", "--radix", type=radix_argument, default=DEFAULT_RADIX,
        help="Initial radix, by name (e.g. hex) or number (default: 10).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colours.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def run_batch(interpreter: Interpreter, expressions, scripts) -> int:
    try:
        for expression in expressions:
            interpreter.execute_lines(expression)
        for path in scripts:
            interpreter.execute_file(path)
    except PeriodiCodeError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return EXIT_ERROR
    except PeriodiCodeFatal as e:
        print(f"fatal: {e.message}", file=sys.stderr)
        return EXIT_FATAL
    return EXIT_OK


def run_repl(interpreter: Interpreter, color: bool) -> int:
    while True:
        try:
            line = input(prompt(interpreter.stack_trace, interpreter.radix_context, '', color=color))
        except (EOFError, KeyboardInterrupt):
            print()
            return EXIT_OK
        try:
            interpreter.execute_line(line)
        except PeriodiCodeError as e:
            print(f"error: {e.message}", file=sys.stderr)
        except PeriodiCodeFatal as e:
            print(f"fatal: {e.message}", file=sys.stderr)
            return EXIT_FATAL


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    color = not args.no_color
    if color:
        colorama.init()

    batch = bool(args.expressions or args.scripts)
    interpreter = Interpreter(
        radix_context=args.radix,
        reporter=ConsoleReporter(color=color, echo=batch),
    )
    if batch:
        return run_batch(interpreter, args.expressions, args.scripts)
    return run_repl(interpreter, color)


if __name__ == "__main__":
    sys.exit(main())
