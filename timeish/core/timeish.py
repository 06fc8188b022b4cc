"""timeish/core/timeish.py — Hour/minute time value with carrying arithmetic.

A Timeish holds an unbounded, non-negative hour and a minute in [0, 59]:

    Timeish(25, 30)          -> "25:30"   (hours are not wrapped at 24)
    Timeish(23, 59).add_minutes(2)  -> "24:01"
    Timeish(2, 0).sub_minutes(90)   -> "00:30"

Instances are mutable.  Arithmetic mutates in place and returns the same
instance so calls can be chained; clone() gives an independent copy.

The setters are an escape hatch: unlike the constructor they do not validate.
"""
import copy
import functools
import logging
from datetime import date, datetime, time, timedelta
from typing import Optional

from timeish.config import settings
from timeish.errors import InvalidRangeError, InvalidSeparatorError, ParseError
from timeish.models.schemas import TimeParts
from timeish.utils.time_utils import (
    MINUTES_PER_HOUR,
    format_hour_minute,
    hour_minute_to_minutes,
    minutes_to_hour_minute,
    print_format,
)

logger = logging.getLogger(__name__)

MIN_HOUR = 0
MIN_MINUTE = 0
MAX_MINUTE = 59


def _require_int(name: str, value) -> None:
    """Reject anything that is not a plain int (bool included)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


@functools.total_ordering
class Timeish:
    """A wall-clock style (hour, minute) value.

    Ordering and equality compare hour and minute only; the separator is a
    display setting and does not take part.
    """

    def __init__(self, hour: int, minute: int, separator: Optional[str] = None) -> None:
        _require_int("hour", hour)
        _require_int("minute", minute)
        self._validate(hour, minute)

        if separator is None:
            separator = settings.DEFAULT_SEPARATOR
        self._validate_separator(separator)
        self._separator = separator
        self._print_format = print_format(separator)
        self._hour = hour
        self._minute = minute

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def hour(self) -> int:
        """Hour, 0 or more."""
        return self._hour

    @property
    def minute(self) -> int:
        """Minute, 0 to 59."""
        return self._minute

    @property
    def separator(self) -> str:
        """Delimiter placed between hour and minute when rendering."""
        return self._separator

    def get_hour(self) -> int:
        """Return the hour."""
        return self._hour

    def get_minute(self) -> int:
        """Return the minute."""
        return self._minute

    def set_hour(self, hour: int) -> None:
        """Overwrite the hour. No range check is made."""
        self._hour = hour

    def set_minute(self, minute: int) -> None:
        """Overwrite the minute. No range check is made."""
        self._minute = minute

    # ------------------------------------------------------------------
    # Formatting & parsing
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Timeish(hour={self._hour}, minute={self._minute}, separator={self._separator!r})"

    def to_string(self) -> str:
        """Render as zero-padded hour and minute, e.g. '09:05' or '100:00'."""
        return self._print_format % (self._hour, self._minute)

    def format(self, separator: Optional[str] = None) -> str:
        """Render with *separator* for this call only; the stored separator is kept."""
        if separator is None:
            separator = self._separator
        return format_hour_minute(self._hour, self._minute, separator)

    @staticmethod
    def explode_any(separator: str, text: str) -> TimeParts:
        """Split *text* on *separator* into an integer hour and minute.

        Raises:
            ParseError: *separator* is empty, does not occur exactly once in
                *text*, or either side is not an integer.
        """
        if not separator:
            raise ParseError("separator must not be empty")

        parts = text.split(separator)
        if len(parts) != 2:
            raise ParseError(
                f"Expected exactly one {separator!r} in {text!r}, found {len(parts) - 1}"
            )

        try:
            hour, minute = (int(part) for part in parts)
        except ValueError as exc:
            raise ParseError(f"Hour and minute must be integers, got {text!r}") from exc

        return TimeParts(hour=hour, minute=minute)

    def explode(self) -> TimeParts:
        return self.explode_any(self._separator, self.to_string())

    @classmethod
    def parse(cls, text: str, separator: Optional[str] = None) -> "Timeish":
        """Build a validated Timeish from text such as '25:30'."""
        if separator is None:
            separator = settings.DEFAULT_SEPARATOR
        parts = cls.explode_any(separator, text)
        return cls(parts.hour, parts.minute, separator)

    def to_datetime(self) -> datetime:
        """Today's date at this hour and minute.

        Hours past 23 roll over into the following days.

        Raises:
            InvalidRangeError: the hour lands past the last date datetime
                can represent.
        """
        midnight = datetime.combine(date.today(), time())
        try:
            return midnight + timedelta(hours=self._hour, minutes=self._minute)
        except OverflowError as exc:
            raise InvalidRangeError(
                f"Hour {self._hour} is too large to convert to a datetime."
            ) from exc

    def datetime_format(self, pattern: str) -> str:
        """Format to_datetime() with a strftime *pattern*.

        Raises:
            InvalidRangeError: see to_datetime().
        """
        return self.to_datetime().strftime(pattern)

    def get_format(self) -> str:
        """Return the strftime pattern for zero-padded hour, separator, minute."""
        return "%H" + self._separator.replace("%", "%%") + "%M"

    # ------------------------------------------------------------------
    # Range introspection
    # ------------------------------------------------------------------

    def get_min_time(self) -> str:
        return self._print_format % (MIN_HOUR, MIN_MINUTE)

    def get_min_hour(self) -> int:
        return MIN_HOUR

    def get_min_minute(self) -> int:
        return MIN_MINUTE

    def get_max_minute(self) -> int:
        return MAX_MINUTE

    @staticmethod
    def is_below_min_hour(hour: int) -> bool:
        return hour < MIN_HOUR

    @staticmethod
    def is_below_min_minute(minute: int) -> bool:
        return minute < MIN_MINUTE

    @staticmethod
    def is_over_max_minute(minute: int) -> bool:
        return minute > MAX_MINUTE

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add_hour(self) -> "Timeish":
        return self.add_hours(1)

    def add_hours(self, hours: int) -> "Timeish":
        """Add *hours*. Hours are unbounded, so this never fails for hours >= 0."""
        _require_int("hours", hours)
        if hours < 0:
            return self.sub_hours(abs(hours))

        self._hour += hours
        return self

    def sub_hour(self) -> "Timeish":
        return self.sub_hours(1)

    def sub_hours(self, hours: int) -> "Timeish":
        """Subtract *hours*.

        Raises:
            InvalidRangeError: the hour would drop below MIN_HOUR.  The
                instance is left unchanged.
        """
        _require_int("hours", hours)
        if hours < 0:
            return self.add_hours(abs(hours))

        if self.is_below_min_hour(self._hour - hours):
            raise InvalidRangeError(f"Hour cannot be less than {MIN_HOUR}.")

        self._hour -= hours
        return self

    def add_minute(self) -> "Timeish":
        return self.add_minutes(1)

    def add_minutes(self, minutes: int) -> "Timeish":
        """Add *minutes*, carrying every full 60 into the hour."""
        _require_int("minutes", minutes)
        if minutes < 0:
            return self.sub_minutes(abs(minutes))

        self_minute = self._minute
        if not self.is_over_max_minute(self_minute + minutes):
            self._minute = self_minute + minutes
            return self

        # Whole hours in the delta first, then whatever the remainder overflows.
        carry_hours, remainder = divmod(minutes, MINUTES_PER_HOUR)
        self.add_hours(carry_hours)
        if self.is_over_max_minute(self_minute + remainder):
            over_hours, self_minute = minutes_to_hour_minute(self_minute + remainder)
            self.add_hours(over_hours)
            carry_hours += over_hours
        else:
            self_minute += remainder

        logger.debug("Minute carry: +%d min -> %d hour(s) carried", minutes, carry_hours)
        self._minute = self_minute
        return self

    def sub_minute(self) -> "Timeish":
        return self.sub_minutes(1)

    def sub_minutes(self, minutes: int) -> "Timeish":
        """Subtract *minutes*, borrowing hours when the minute would go negative.

        Raises:
            InvalidRangeError: not enough hours to borrow from.  The instance
                is left unchanged.
        """
        _require_int("minutes", minutes)
        if minutes < 0:
            return self.add_minutes(abs(minutes))

        remaining = self._minute - minutes
        if not self.is_below_min_minute(remaining):
            self._minute = remaining
            return self

        # divmod floors, so a negative total yields a negative hour count
        # and a minute already back in [0, 59].
        borrow, self_minute = minutes_to_hour_minute(remaining)
        borrow_hours = -borrow
        self.sub_hours(borrow_hours)

        logger.debug("Minute borrow: -%d min -> %d hour(s) borrowed", minutes, borrow_hours)
        self._minute = self_minute
        return self

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def _total_minutes(self) -> int:
        return hour_minute_to_minutes(self._hour, self._minute)

    def is_less_than(self, other: "Timeish") -> bool:
        return self._total_minutes() < other._total_minutes()

    def is_less_than_equal(self, other: "Timeish") -> bool:
        return self._total_minutes() <= other._total_minutes()

    def is_greater_than(self, other: "Timeish") -> bool:
        return self._total_minutes() > other._total_minutes()

    def is_greater_than_equal(self, other: "Timeish") -> bool:
        return self._total_minutes() >= other._total_minutes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timeish):
            return NotImplemented
        return self._total_minutes() == other._total_minutes()

    def __lt__(self, other: "Timeish") -> bool:
        if not isinstance(other, Timeish):
            return NotImplemented
        return self.is_less_than(other)

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------

    def clone(self) -> "Timeish":
        return copy.copy(self)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate(self, hour: int, minute: int) -> None:
        if self.is_below_min_hour(hour):
            raise InvalidRangeError(f"Hour must be at least {MIN_HOUR}, got {hour}.")
        if self.is_below_min_minute(minute) or self.is_over_max_minute(minute):
            raise InvalidRangeError(
                f"Minutes must be between {MIN_MINUTE} and {MAX_MINUTE}, got {minute}."
            )

    @staticmethod
    def _validate_separator(separator: str) -> None:
        if not isinstance(separator, str):
            raise TypeError(f"separator must be a str, got {type(separator).__name__}")
        if not separator:
            raise InvalidSeparatorError("Separator must not be empty.")
        if any(ch.isdigit() for ch in separator):
            raise InvalidSeparatorError(f"Separator must not contain digits, got {separator!r}.")
