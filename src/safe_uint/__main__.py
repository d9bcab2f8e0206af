"""
Command line evaluator for the checked arithmetic operations.

Evaluate one operation on operands of the native uint width and print the
outcome.

Usage::

    python -m safe_uint pow 2 10
    python -m safe_uint --json safe_mul 340282366920938463463374607431768211455 2
    python -m safe_uint -v lerp 10 20 50

Exit status:
    0   The operation succeeded.
    1   The operation reported a failure (OVERFLOW, UNDERFLOW, DIVIDE_BY_ZERO).
    2   Usage error or an operand outside the range of the width.
"""

from __future__ import annotations

import argparse
import inspect
import logging
import sys
from typing import Callable

from pydantic import ValidationError

from safe_uint.arith import (
    Failure,
    Outcome,
    Success,
    abs_diff,
    arithmetic_sum,
    average,
    basis_points,
    checked_pow,
    clamp,
    is_even,
    is_odd,
    lerp,
    max_uint,
    min_uint,
    percentage,
    safe_add,
    safe_div,
    safe_mod,
    safe_mul,
    safe_sub,
)
from safe_uint.types import BaseUint, StrictBaseModel, Uint

logger = logging.getLogger("safe_uint.cli")

OPERATIONS: dict[str, Callable[..., Outcome | BaseUint | bool]] = {
    "safe_add": safe_add,
    "safe_sub": safe_sub,
    "safe_mul": safe_mul,
    "safe_div": safe_div,
    "safe_mod": safe_mod,
    "percentage": percentage,
    "basis_points": basis_points,
    "min": min_uint,
    "max": max_uint,
    "abs_diff": abs_diff,
    "average": average,
    "is_even": is_even,
    "is_odd": is_odd,
    "clamp": clamp,
    "lerp": lerp,
    "arithmetic_sum": arithmetic_sum,
    "pow": checked_pow,
}
"""Operations reachable from the command line, by name."""


class OperationCall(StrictBaseModel):
    """A validated request to evaluate one operation."""

    operation: str
    """The name of the operation, a key of `OPERATIONS`."""

    operands: tuple[Uint, ...]  # type: ignore[valid-type]
    """The operands, range-checked against the native width."""


class OperationReport(StrictBaseModel):
    """The outcome of one evaluated operation, as printed by `--json`."""

    operation: str
    operands: list[int]
    ok: bool
    value: bool | int | None = None
    error: str | None = None


def evaluate(call: OperationCall) -> OperationReport:
    """Run the requested operation and describe its outcome."""
    logger.debug("Evaluating %s%s", call.operation, tuple(int(o) for o in call.operands))
    result = OPERATIONS[call.operation](*call.operands)

    operands = [int(o) for o in call.operands]
    if isinstance(result, Failure):
        logger.debug("%s failed with %s", call.operation, result.error.name)
        return OperationReport(
            operation=call.operation, operands=operands, ok=False, error=result.error.name
        )

    if isinstance(result, Success):
        value: bool | int = int(result.value)
    elif isinstance(result, bool):
        value = result
    else:
        value = int(result)

    return OperationReport(operation=call.operation, operands=operands, ok=True, value=value)


def format_report(report: OperationReport) -> str:
    """Render a report for a terminal."""
    if not report.ok:
        return f"error: {report.error}"
    if isinstance(report.value, bool):
        return "true" if report.value else "false"
    return str(report.value)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        return f"{levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging for the library with optional colors."""
    level = logging.DEBUG if verbose else logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter("%(levelname)-8s %(name)s: %(message)s")
    else:
        formatter = ColoredFormatter()
    handler.setFormatter(formatter)

    # Repeated calls replace the handler instead of stacking them.
    package_logger = logging.getLogger("safe_uint")
    package_logger.handlers.clear()
    package_logger.setLevel(level)
    package_logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="safe-uint",
        description=f"Checked uint{Uint.BITS} arithmetic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the outcome as a JSON report",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    subparsers = parser.add_subparsers(dest="operation", required=True, metavar="operation")
    for name, operation in OPERATIONS.items():
        doc = inspect.getdoc(operation) or ""
        subparser = subparsers.add_parser(name, help=doc.splitlines()[0] if doc else None)
        for parameter in inspect.signature(operation).parameters:
            subparser.add_argument(parameter, type=int)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    parameters = inspect.signature(OPERATIONS[args.operation]).parameters
    try:
        call = OperationCall(
            operation=args.operation,
            operands=tuple(getattr(args, parameter) for parameter in parameters),
        )
    except ValidationError as e:
        logger.debug("Rejected operands: %s", e)
        print(
            f"invalid operand: each operand must be in [0, {int(Uint.max_value())}]",
            file=sys.stderr,
        )
        return 2

    report = evaluate(call)

    if args.json:
        print(report.model_dump_json(by_alias=True))
    elif report.ok:
        print(format_report(report))
    else:
        print(format_report(report), file=sys.stderr)

    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
