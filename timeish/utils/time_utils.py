import logging
from typing import Tuple

logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = 60


def hour_minute_to_minutes(hour: int, minute: int) -> int:
    """Convert an (hour, minute) pair to total minutes. E.g. (8, 30) -> 510."""
    return hour * MINUTES_PER_HOUR + minute


def minutes_to_hour_minute(minutes: int) -> Tuple[int, int]:
    """Split total minutes into (hour, minute). Does not wrap at 24 h. E.g. 1530 -> (25, 30)."""
    return divmod(minutes, MINUTES_PER_HOUR)


def print_format(separator: str) -> str:
    """Return the printf-style pattern used to render hour and minute around *separator*."""
    # '%' inside the separator must not be read as a conversion
    return "%02d" + separator.replace("%", "%%") + "%02d"


def format_hour_minute(hour: int, minute: int, separator: str = ":") -> str:
    """Render (hour, minute) zero-padded to at least two digits each. E.g. (9, 5) -> '09:05'."""
    return print_format(separator) % (hour, minute)
