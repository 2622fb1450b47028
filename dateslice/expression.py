"""Date/duration expressions.

An expression is a signed date optionally followed by a signed duration::

    (+|-)<date>((+|-)<duration>)?

The leading sign is the inclusion flag (``+`` included, ``-`` excluded).
The second sign selects whether the duration is added or subtracted.

Example:
    >>> from datetime import datetime
    >>> from zoneinfo import ZoneInfo
    >>> now = datetime(2022, 7, 7, 22, 41, 5, tzinfo=ZoneInfo("UTC"))
    >>> expr = parse_date_and_duration("-year:month:day:hour+3hours", now)
    >>> format_date(expr.moment, expr.inclusion)
    '-2022:07:08:01:00:00'
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime

from dateslice.dates import parse_date
from dateslice.duration import parse_duration

logger = logging.getLogger(__name__)

_EXPRESSION = re.compile(r"(\+|-)([^+-]+)((\+|-)([^+-]+))?")


@dataclass(frozen=True)
class ResolvedExpression:
    """A resolved point in time and whether it is an inclusive boundary."""

    moment: datetime
    inclusion: bool


def parse_date_and_duration(text: str, now: datetime) -> ResolvedExpression | None:
    """Resolve an expression against the ``now`` snapshot.

    Returns:
        The resolved expression, or None if ``text`` does not have the
        expression shape at all.

    Raises:
        InvalidDateComponent: If the date part is invalid.
        InvalidDurationComponent: If the duration part is invalid.
    """
    match = _EXPRESSION.fullmatch(text)
    if match is None:
        logger.debug("Expression %r does not match the date/duration grammar", text)
        return None

    inclusion, date, suffix, direction, duration = match.groups()

    if date.lower() == "now":
        moment = now
    else:
        moment = parse_date(date, now)

    if suffix is not None:
        sign = 1 if direction == "+" else -1
        moment = parse_duration(duration).shift(moment, sign)

    return ResolvedExpression(moment=moment, inclusion=inclusion == "+")


def format_date(moment: datetime, inclusion: bool = True) -> str:
    """Render a timestamp as a sign-prefixed ``YYYY:MM:DD:HH:MM:SS`` date.

    The output is itself a valid expression that resolves back to
    ``moment`` (to the second) in the same zone.
    """
    sign = "+" if inclusion else "-"
    return (
        f"{sign}{moment.year:04d}:{moment.month:02d}:{moment.day:02d}"
        f":{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def describe(text: str, now: datetime) -> str | None:
    """Human-readable rendering of an expression.

    Example: ``"Thursday 07 July 2022 - 22:00:00 (included)"``.
    Returns None if ``text`` does not have the expression shape.
    """
    resolved = parse_date_and_duration(text, now)
    if resolved is None:
        return None
    label = "(included)" if resolved.inclusion else "(excluded)"
    return f"{resolved.moment.strftime('%A %d %B %Y - %H:%M:%S')} {label}"
