"""Shared constants and zone helpers for dateslice.

Units are listed in descending order of significance; the position of a
unit in ``UNITS`` is its rank in duration notation.
"""

import os
from collections.abc import Callable
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from dateutil import tz as dateutil_tz

UNITS = ("years", "months", "weeks", "days", "hours", "minutes", "seconds")

# Rank of each unit: years=1 ... seconds=7
UNIT_RANK = {unit: rank for rank, unit in enumerate(UNITS, start=1)}

TZ_ENV = "DATESLICE_TZ"

Clock = Callable[[], datetime]


def local_zone(tz: str | None = None) -> tzinfo:
    """Return the zone used to read and build local calendar fields.

    Args:
        tz: IANA timezone name (e.g., "UTC", "Europe/Paris"). When omitted,
            the ``DATESLICE_TZ`` environment variable is used, then the
            system local zone.
    """
    name = tz or os.environ.get(TZ_ENV)
    if name:
        return ZoneInfo(name)
    return dateutil_tz.tzlocal()


def split_fields(text: str) -> list[str]:
    """Split on ``:`` dropping trailing empty fields.

    ``"2020:01:"`` gives ``["2020", "01"]`` and ``":::"`` gives ``[]``;
    empty fields in the middle are kept so callers can reject them.
    """
    fields = text.split(":")
    while fields and fields[-1] == "":
        fields.pop()
    return fields
