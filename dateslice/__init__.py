from .dates import parse_date
from .duration import Duration, parse_duration
from .errors import (
    InvalidDateComponent,
    InvalidDurationComponent,
    MalformedExpression,
    NonPositivePeriod,
    ParseError,
)
from .expression import (
    ResolvedExpression,
    describe,
    format_date,
    parse_date_and_duration,
)
from .interval import Slice
from .resolver import Resolver
from .slicer import resolve_expression, slice_range

__all__ = [
    "Duration",
    "ResolvedExpression",
    "Slice",
    "Resolver",
    "parse_duration",
    "parse_date",
    "parse_date_and_duration",
    "resolve_expression",
    "slice_range",
    "format_date",
    "describe",
    "ParseError",
    "MalformedExpression",
    "InvalidDateComponent",
    "InvalidDurationComponent",
    "NonPositivePeriod",
]
