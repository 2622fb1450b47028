"""Expression resolution bound to a timezone and a clock."""

import logging
from collections.abc import Iterator
from datetime import datetime, tzinfo

from dateslice.expression import (
    ResolvedExpression,
    describe,
    parse_date_and_duration,
)
from dateslice.interval import Slice
from dateslice.slicer import resolve_expression, slice_range
from dateslice.util import Clock, local_zone

logger = logging.getLogger(__name__)


class Resolver:
    """Resolve expressions in a fixed local zone.

    Every public call reads the clock exactly once, so all ``year``/
    ``month``/... keywords and ``NOW`` in one call see the same instant.
    """

    def __init__(self, tz: str | None = None, clock: Clock | None = None):
        """
        Initialize a resolver.

        Args:
            tz: IANA timezone name (e.g., "UTC", "Europe/Paris"). Defaults to
                the ``DATESLICE_TZ`` environment variable, then the system
                local zone.
            clock: Zero-argument callable returning a timezone-aware
                datetime. Defaults to the wall clock, to the second.

        Example:
            >>> from datetime import datetime, timezone
            >>> fixed = datetime(2022, 7, 7, 22, 41, 5, tzinfo=timezone.utc)
            >>> resolver = Resolver(tz="UTC", clock=lambda: fixed)
            >>> resolver.resolve("+NOW-1day").moment.isoformat()
            '2022-07-06T22:41:05+00:00'
        """
        self.zone: tzinfo = local_zone(tz)
        self._clock: Clock | None = clock

    def now(self) -> datetime:
        """Take a snapshot of the current time in the configured zone."""
        if self._clock is None:
            return datetime.now(tz=self.zone).replace(microsecond=0)

        current = self._clock()
        if current.tzinfo is None:
            raise TypeError(
                f"Resolver clock must return a timezone-aware datetime.\n"
                f"Got naive datetime: {current!r}"
            )
        return current.astimezone(self.zone)

    def parse(self, text: str) -> ResolvedExpression | None:
        """Resolve ``text``, returning None if it is not an expression."""
        return parse_date_and_duration(text, self.now())

    def resolve(self, text: str) -> ResolvedExpression:
        """Resolve ``text``, raising MalformedExpression if it is not one."""
        return resolve_expression(text, self.now())

    def describe(self, text: str) -> str | None:
        """Human-readable rendering of ``text``, or None if it is not one."""
        return describe(text, self.now())

    def slice_range(
        self, from_expr: str, to_expr: str, period: int, unit: str
    ) -> Iterator[Slice]:
        """Slice the range between two expressions. See :func:`slice_range`."""
        now = self.now()
        logger.debug(
            "Slicing %s..%s by %d%s at %s",
            from_expr,
            to_expr,
            period,
            unit,
            now.isoformat(),
        )
        return slice_range(from_expr, to_expr, period, unit, now)
