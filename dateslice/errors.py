"""Exceptions raised while parsing date/duration expressions."""


class ParseError(ValueError):
    """Base class for every error raised by dateslice."""


class MalformedExpression(ParseError):
    """The expression does not have the ``(+|-)date((+|-)duration)?`` shape."""


class InvalidDateComponent(ParseError):
    pass


class InvalidDurationComponent(ParseError):
    pass


class NonPositivePeriod(ParseError):
    pass
