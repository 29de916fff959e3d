"""Command-line calculator.

Usage:
    bignum "0.1 + 0.2" "12.5 * 0.04"    # evaluate each argument
    bignum                              # interactive REPL on stdin
    bignum --verbose ...                # debug logging on stderr
    bignum -- "-3 * 2"                  # "--" before a leading minus

In the REPL, ``ans`` stands for the previous result and ``quit`` or
``exit`` ends the session.

Exit codes:
    0 - All expressions evaluated
    1 - An expression was invalid (message on stderr)
"""

import argparse
import logging
import re
import sys
from typing import TextIO

import structlog

from bignum.calculator import Calculator
from bignum.errors import BigNumError

logger = structlog.get_logger()

_ANS = re.compile(r"\bans\b")
_QUIT = {"quit", "exit"}


def configure_logging(verbose: bool) -> None:
    """Route structlog output to stderr at DEBUG or WARNING level."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def run_expressions(expressions: list[str], out: TextIO, err: TextIO) -> int:
    """Evaluate each expression, stopping at the first error."""
    calculator = Calculator()
    for expression in expressions:
        try:
            result = calculator.evaluate(expression)
        except BigNumError as e:
            logger.warning("invalid_expression", expression=expression, error=str(e))
            print(f"Error: {e}", file=err)
            return 1
        print(result, file=out)
    return 0


def repl(stream: TextIO, out: TextIO, err: TextIO) -> int:
    """Read-eval-print loop. Errors are reported and the loop continues."""
    calculator = Calculator()
    interactive = stream.isatty()
    while True:
        if interactive:
            print("> ", end="", file=out, flush=True)
        line = stream.readline()
        if not line:
            break
        line = line.strip()
        if not line:
            continue
        if line.lower() in _QUIT:
            break

        expression = _ANS.sub(f"({calculator.value})", line)
        try:
            result = calculator.evaluate(expression)
        except BigNumError as e:
            logger.warning("invalid_expression", expression=line, error=str(e))
            print(f"Error: {e}", file=err)
            continue
        print(result, file=out)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Exact arbitrary-precision decimal calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate (starts a REPL when omitted)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every evaluation to stderr",
    )
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if args.expressions:
        return run_expressions(args.expressions, sys.stdout, sys.stderr)
    return repl(sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
