"""timeish/errors.py — Exception hierarchy.

Every error raised by the package inherits from TimeishError.  The concrete
errors also subclass ValueError so callers catching ValueError keep working.
"""


class TimeishError(Exception):
    """Base exception for all Timeish errors."""


class InvalidRangeError(TimeishError, ValueError):
    """An hour or minute outside its allowed range.

    Raised when:
        - the constructor receives hour < 0 or minute outside [0, 59]
        - subtracting hours (directly or by borrowing for minutes) would
          take the hour below 0
    """


class ParseError(TimeishError, ValueError):
    """Text could not be split into an integer hour and minute."""


class InvalidSeparatorError(TimeishError, ValueError):
    """A separator that could not be split back out of the rendered text.

    Raised when the separator is empty or contains a digit, since digits
    collide with the zero-padded hour and minute fields.
    """
