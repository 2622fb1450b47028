"""Duration notation.

A duration is a colon-separated list of ``<integer><unit>`` tokens given in
strictly descending significance::

    2years:3months:1week:4days:5hours:6minutes:7seconds

Units may be singular or plural and are case-insensitive. Each unit may
appear at most once.
"""

import logging
import re
from dataclasses import dataclass, fields
from datetime import datetime, timedelta, timezone
from typing import Literal

from dateutil.relativedelta import relativedelta
from typing_extensions import override

from dateslice.errors import InvalidDurationComponent
from dateslice.util import UNIT_RANK, UNITS, split_fields

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"([0-9]+)\s*(\w+)")


@dataclass(frozen=True, kw_only=True)
class Duration:
    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if value < 0:
                raise ValueError(
                    f"Duration {field.name} must be >= 0, got {value}"
                )

    @override
    def __str__(self) -> str:
        """Canonical colon/plural notation, e.g. ``1years:2hours``."""
        parts = [
            f"{getattr(self, unit)}{unit}" for unit in UNITS if getattr(self, unit)
        ]
        return ":".join(parts) if parts else "0seconds"

    def shift(self, moment: datetime, sign: Literal[1, -1] = 1) -> datetime:
        """Move ``moment`` forward (sign=1) or backward (sign=-1).

        Years and months move the local calendar date; the day of month is
        clamped to the last day of the target month. The remaining units are
        fixed elapsed time, so the local clock reading may differ by the DST
        offset change.

        Raises:
            InvalidDurationComponent: If the result is outside the range of
                representable dates.
        """
        zone = moment.tzinfo
        try:
            calendar = relativedelta(
                years=sign * self.years, months=sign * self.months
            )
            elapsed = timedelta(
                weeks=self.weeks,
                days=self.days,
                hours=self.hours,
                minutes=self.minutes,
                seconds=self.seconds,
            )
            shifted = (moment + calendar).astimezone(timezone.utc) + sign * elapsed
            return shifted.astimezone(zone)
        except (ValueError, OverflowError) as e:
            direction = "+" if sign > 0 else "-"
            raise InvalidDurationComponent(
                f"{moment.isoformat()} {direction} {self} is out of range: {e}"
            ) from e


def normalize_unit(word: str) -> str:
    """Lower-case ``word`` and make it end in ``s``.

    One trailing ``s`` is removed before the plural ``s`` is restored, so
    ``"day"``, ``"days"`` and ``"dayss"`` all normalize to ``"days"`` while
    ``"daysss"`` gives ``"dayss"``.
    """
    unit = word.lower()
    if unit.endswith("s"):
        unit = unit[:-1]
    if not unit.endswith("s"):
        unit += "s"
    return unit


def parse_duration(text: str) -> Duration:
    """Parse duration notation into a :class:`Duration`.

    Raises:
        InvalidDurationComponent: If the text is empty, a token is malformed,
            a unit is unknown, or units are repeated or out of order.
    """
    tokens = split_fields(text)
    if not tokens:
        raise InvalidDurationComponent(f"Empty duration: {text!r}")

    values: dict[str, int] = {}
    last_rank = 0
    for token in tokens:
        match = _TOKEN.fullmatch(token.strip())
        if match is None:
            raise InvalidDurationComponent(
                f"Invalid duration token {token!r} in {text!r}\n"
                f"Expected <integer><unit>, e.g. '3days'"
            )

        unit = normalize_unit(match.group(2))
        rank = UNIT_RANK.get(unit)
        if rank is None:
            valid = ", ".join(UNITS)
            raise InvalidDurationComponent(
                f"Unknown duration unit {match.group(2)!r} in {text!r}. "
                f"Valid units: {valid}"
            )
        if rank <= last_rank:
            raise InvalidDurationComponent(
                f"Duration unit {unit!r} repeated or out of order in {text!r}\n"
                f"Hint: units must appear once each, from years down to seconds"
            )

        values[unit] = int(match.group(1))
        last_rank = rank

    duration = Duration(**values)
    logger.debug("Parsed duration %r as %s", text, duration)
    return duration
