"""Generate one command per slice of a date range.

Example:
    $ python -m dateslice --dateFrom=+2009:10:01:09:00:00 \\
        --dateTo=-2009:10:01:14:00:00 --period=1 --unit=hour
    perl myCommand.pl --dateFrom=+2009:10:01:09:00:00 --dateTo=-2009:10:01:10:00:00
    perl myCommand.pl --dateFrom=+2009:10:01:10:00:00 --dateTo=-2009:10:01:11:00:00
    ...
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import NoReturn

from typing_extensions import override

from dateslice.errors import ParseError
from dateslice.expression import format_date
from dateslice.interval import Slice
from dateslice.resolver import Resolver

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "perl myCommand.pl"

_EPILOG = """\
Expressions: (+|-)<date>((+|-)<duration>)?
  <date>      NOW, or year[:month[:day[:hour[:minute[:second]]]]] where each
              component is an integer or its own name (current value)
  <duration>  e.g. 1year:2months:3days or 15minutes

Values starting with '-' must be attached with '=', e.g. --dateTo=-2010:10:02

Example:
  python -m dateslice --dateFrom=+2010:11:01 --dateTo=+2011:01:01 --period=1 --unit=day
"""


class _ArgumentParser(argparse.ArgumentParser):
    @override
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"ERROR: Invalid command line: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="dateslice",
        description="Print one command per slice of a date range.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--dateFrom",
        dest="date_from",
        metavar="EXPR",
        help="Beginning of the range, e.g. +2010:10:01 or +2010:10:01:21:55:00",
    )
    parser.add_argument(
        "--dateTo",
        dest="date_to",
        metavar="EXPR",
        help="End of the range, e.g. -2010:10:02",
    )
    parser.add_argument(
        "--period", metavar="N", help="Size of each slice, in --unit"
    )
    parser.add_argument(
        "--unit", metavar="UNIT", help="Unit of --period (year, month, ..., second)"
    )
    parser.add_argument(
        "--command",
        default=DEFAULT_COMMAND,
        help=f"Command prefix of each generated line (default: {DEFAULT_COMMAND!r})",
    )
    parser.add_argument(
        "--tz", metavar="ZONE", help="IANA timezone (default: $DATESLICE_TZ or local)"
    )
    parser.add_argument(
        "--describe",
        metavar="EXPR",
        action="append",
        help="Print the resolved date of EXPR instead of slicing (repeatable)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    return parser


def format_command(command: str, part: Slice) -> str:
    """Render the command line for one slice.

    The start is rendered as an included bound, the end as an excluded one.
    """
    return (
        f"{command} --dateFrom={format_date(part.start, True)}"
        f" --dateTo={format_date(part.end, False)}"
    )


def _fail(message: str) -> int:
    print(f"ERROR: {message}", file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        resolver = Resolver(tz=args.tz)
    except (ValueError, KeyError) as e:
        # zoneinfo raises ZoneInfoNotFoundError (a KeyError) or ValueError
        return _fail(f"Invalid timezone {args.tz!r}: {e}")

    if args.describe:
        for expr in args.describe:
            try:
                text = resolver.describe(expr)
            except ParseError as e:
                return _fail(str(e))
            if text is None:
                return _fail(f"Invalid date specification ({expr})")
            print(f"{expr} => {text}")
        return 0

    for name, value in (
        ("dateFrom", args.date_from),
        ("dateTo", args.date_to),
        ("period", args.period),
        ("unit", args.unit),
    ):
        if value is None:
            return _fail(f"Missing command line argument <{name}>!")

    try:
        period = int(args.period)
    except ValueError:
        return _fail(f"Invalid period {args.period!r}: expected an integer")

    try:
        parts = resolver.slice_range(args.date_from, args.date_to, period, args.unit)
        for part in parts:
            print(format_command(args.command, part))
    except ParseError as e:
        logger.debug("Slicing failed", exc_info=True)
        return _fail(str(e))

    return 0
