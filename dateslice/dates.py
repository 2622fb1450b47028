"""Date notation.

A date is up to six colon-separated components in fixed order::

    year[:month[:day[:hour[:minute[:second]]]]]

Each component is either an integer or the name of its position (``year``,
``month``, ...), which means "the current value of that field". Omitted
trailing components default to the start of the period.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from dateutil import tz as dateutil_tz

from dateslice.errors import InvalidDateComponent
from dateslice.util import split_fields

logger = logging.getLogger(__name__)

_FIELD = re.compile(r"([a-z]+)|([0-9]+)", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class Component:
    """One positional date component."""

    name: str
    default: int | None
    current: Callable[[datetime], int]


COMPONENTS: tuple[Component, ...] = (
    Component("year", None, lambda now: now.year),
    Component("month", 1, lambda now: now.month),
    Component("day", 1, lambda now: now.day),
    Component("hour", 0, lambda now: now.hour),
    Component("minute", 0, lambda now: now.minute),
    Component("second", 0, lambda now: now.second),
)


def parse_date(text: str, now: datetime) -> datetime:
    """Parse date notation into a datetime in ``now``'s timezone.

    Args:
        text: Date notation, e.g. ``"2020:06:15"`` or ``"year:month:1"``
        now: Timezone-aware snapshot used for keyword components. Its zone
            is the local zone of the result.

    Raises:
        InvalidDateComponent: On a wrong keyword, a malformed or extra
            component, a missing year, or a date/time that does not exist.
    """
    if now.tzinfo is None:
        raise TypeError(f"now must be a timezone-aware datetime, got {now!r}")

    zone = now.tzinfo
    fields = split_fields(text)
    if len(fields) > len(COMPONENTS):
        raise InvalidDateComponent(
            f"Too many date components in {text!r}: got {len(fields)}, "
            f"at most {len(COMPONENTS)} (year:month:day:hour:minute:second)"
        )

    values = [component.default for component in COMPONENTS]
    for position, field in enumerate(fields):
        component = COMPONENTS[position]
        match = _FIELD.fullmatch(field)
        if match is None:
            raise InvalidDateComponent(
                f"Invalid {component.name} component {field!r} in {text!r}\n"
                f"Expected an integer or the word '{component.name}'"
            )

        keyword, digits = match.groups()
        if keyword is not None:
            if keyword.lower() != component.name:
                raise InvalidDateComponent(
                    f"Unexpected keyword {keyword!r} at {component.name} "
                    f"position in {text!r}"
                )
            values[position] = component.current(now)
        else:
            values[position] = int(digits)

    year, month, day, hour, minute, second = values
    if year is None:
        raise InvalidDateComponent(f"Missing year in date {text!r}")

    try:
        moment = datetime(year, month, day, hour, minute, second, tzinfo=zone)
        exists = dateutil_tz.datetime_exists(moment)
    except (ValueError, OverflowError) as e:
        raise InvalidDateComponent(f"Invalid date {text!r}: {e}") from e

    if not exists:
        raise InvalidDateComponent(
            f"Local time {moment.replace(tzinfo=None)} does not exist in {zone}"
        )

    logger.debug("Parsed date %r as %s", text, moment.isoformat())
    return moment
