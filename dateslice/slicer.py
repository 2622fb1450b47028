"""Cut a date range into consecutive fixed-size slices.

Slice boundaries are computed by appending ``+<offset><unit>`` to the start
expression and resolving it, so calendar units (months, years) keep their
calendar meaning across the whole range instead of drifting.
"""

import logging
from collections.abc import Iterator
from datetime import datetime

from dateslice.errors import MalformedExpression, NonPositivePeriod
from dateslice.expression import ResolvedExpression, parse_date_and_duration
from dateslice.interval import Slice

logger = logging.getLogger(__name__)


def resolve_expression(text: str, now: datetime) -> ResolvedExpression:
    """Like :func:`parse_date_and_duration` but raise when nothing matches.

    Raises:
        MalformedExpression: If ``text`` does not have the expression shape.
    """
    resolved = parse_date_and_duration(text, now)
    if resolved is None:
        raise MalformedExpression(
            f"Invalid date specification: {text!r}\n"
            f"Expected (+|-)<date>((+|-)<duration>)?, e.g. '+2010:10:01' or "
            f"'-year:month:day+3hours'"
        )
    return resolved


def slice_range(
    from_expr: str, to_expr: str, period: int, unit: str, now: datetime
) -> Iterator[Slice]:
    """Return the slices of ``period`` ``unit`` covering the range.

    Slices start at ``from_expr`` and follow each other without gaps. A slice
    is emitted as long as its end is not after ``to_expr``; the first slice
    ending after it stops the sequence and is discarded.

    Args:
        from_expr: Start expression. It must not carry a duration suffix,
            since the slice offsets are appended to it.
        to_expr: End expression.
        period: Size of each slice, in ``unit``. Must be positive.
        unit: Duration unit, singular or plural (e.g., "hour", "days")
        now: Snapshot shared by every expression of the run

    Raises:
        NonPositivePeriod: If ``period`` is zero or negative.
        MalformedExpression: If an expression does not have the expression
            shape (including ``from_expr`` with a duration suffix).
        InvalidDateComponent, InvalidDurationComponent: On invalid parts.

    Example:
        >>> for s in slice_range("+2009:10:01:09", "-2009:10:01:14", 1, "hour", now):
        ...     print(format_date(s.start), format_date(s.end, False))
    """
    if period <= 0:
        raise NonPositivePeriod(f"period must be positive, got {period}")

    resolve_expression(from_expr, now)
    overall_end = resolve_expression(to_expr, now).moment

    def boundary(offset: int) -> datetime:
        return resolve_expression(f"{from_expr}+{offset}{unit}", now).moment

    # Fail on a bad unit or a suffixed start before iteration begins
    first = boundary(0)

    def generate() -> Iterator[Slice]:
        offset = 0
        start = first
        while True:
            end = boundary(offset + period)
            offset += period
            if end > overall_end:
                logger.debug(
                    "Slice end %s is after %s, stopping",
                    end.isoformat(),
                    overall_end.isoformat(),
                )
                return
            logger.debug("Emitting slice %s -> %s", start.isoformat(), end.isoformat())
            yield Slice(start=start, end=end)
            start = boundary(offset)

    return generate()
