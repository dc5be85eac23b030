"""
Duration parsing utilities.

Supports duration strings made of one or more <number><unit> tokens:
- "30s" - 30 seconds
- "5m" - 5 minutes
- "2h" - 2 hours
- "3d" - 3 days
- "1w" - 1 week
- "250ms" - 250 milliseconds
- "500us" - 500 microseconds
- "1m30s" - compound, 90 seconds
"""

import re
from datetime import UTC, datetime, timedelta
from typing import Union

DurationLike = Union[str, int, float, timedelta]

_TOKEN_PATTERN = re.compile(r"(\d+(?:\.\d+)?)(ms|us|[smhdw])")

# Conversion to timedelta keyword arguments
_UNITS = {
    "w": "weeks",
    "d": "days",
    "h": "hours",
    "m": "minutes",
    "s": "seconds",
    "ms": "milliseconds",
    "us": "microseconds",
}


def parse_duration(duration: DurationLike) -> timedelta:
    """
    Parse duration to a timedelta.

    Args:
        duration: Duration as:
            - str: Duration string ("5s", "2m", "1h30m", "250ms")
            - int/float: Seconds
            - timedelta: Python timedelta

    Returns:
        timedelta, never negative

    Raises:
        TypeError: If duration has an unsupported type
        ValueError: If duration string format is invalid

    Examples:
        >>> parse_duration("30s")
        datetime.timedelta(seconds=30)
        >>> parse_duration("1m30s")
        datetime.timedelta(seconds=90)
        >>> parse_duration(60)
        datetime.timedelta(seconds=60)
    """
    if isinstance(duration, str):
        return parse_duration_string(duration)

    if isinstance(duration, bool):
        raise TypeError("Duration must not be a bool")

    if isinstance(duration, (int, float)):
        return clamp(timedelta(seconds=duration))

    if isinstance(duration, timedelta):
        return clamp(duration)

    raise TypeError(
        f"Duration must be str, int, float, or timedelta, got {type(duration).__name__}"
    )


def parse_duration_string(duration: str) -> timedelta:
    """
    Parse duration string to a timedelta.

    Args:
        duration: Duration string

    Returns:
        timedelta

    Raises:
        ValueError: If format is invalid

    Examples:
        >>> parse_duration_string("5m")
        datetime.timedelta(seconds=300)
        >>> parse_duration_string("1s500ms")
        datetime.timedelta(seconds=1, microseconds=500000)
    """
    text = duration.lower().replace(" ", "")
    tokens = _TOKEN_PATTERN.findall(text)

    if not tokens or "".join(value + unit for value, unit in tokens) != text:
        raise ValueError(
            f"Invalid duration format: '{duration}'. "
            f"Expected one or more <number><unit> tokens where unit is "
            f"w/d/h/m/s/ms/us (e.g., '30s', '5m', '1h30m', '250ms')"
        )

    total = timedelta()
    for value, unit in tokens:
        total += timedelta(**{_UNITS[unit]: float(value)})

    return total


def clamp(duration: timedelta) -> timedelta:
    """Clamp a negative timedelta to zero."""
    if duration < timedelta(0):
        return timedelta(0)
    return duration


def split_duration(duration: timedelta) -> tuple:
    """
    Split a duration into whole seconds and the microsecond remainder.

    Examples:
        >>> split_duration(timedelta(seconds=2, milliseconds=5))
        (2, 5000)
    """
    seconds = duration.days * 86400 + duration.seconds
    return seconds, duration.microseconds


def total_microseconds(duration: timedelta) -> int:
    """Total length of a duration in whole microseconds."""
    seconds, microseconds = split_duration(duration)
    return seconds * 1_000_000 + microseconds


def until(timestamp: Union[datetime, int, float]) -> timedelta:
    """
    Interval from now until the given timestamp.

    Integer or float values are read as Unix epoch seconds. Naive datetimes
    are compared with naive local time, aware ones with UTC now. The result
    is negative when the timestamp lies in the past.

    Raises:
        TypeError: If timestamp is neither a datetime nor a number
    """
    if isinstance(timestamp, bool):
        raise TypeError("Timestamp must not be a bool")

    if isinstance(timestamp, (int, float)):
        timestamp = datetime.fromtimestamp(timestamp, UTC)

    if not isinstance(timestamp, datetime):
        raise TypeError(
            f"Timestamp must be datetime, int, or float, got {type(timestamp).__name__}"
        )

    if timestamp.tzinfo is None:
        return timestamp - datetime.now()
    return timestamp - datetime.now(UTC)


def format_duration(duration: timedelta) -> str:
    """
    Format a duration as a compact human-readable string.

    Examples:
        >>> format_duration(timedelta(seconds=90, milliseconds=250))
        '1m 30s 250ms'
        >>> format_duration(timedelta(0))
        '0s'
    """
    remaining = total_microseconds(duration)
    if remaining <= 0:
        return "0s"

    parts = []
    for suffix, size in (
        ("h", 3_600_000_000),
        ("m", 60_000_000),
        ("s", 1_000_000),
        ("ms", 1_000),
        ("us", 1),
    ):
        amount, remaining = divmod(remaining, size)
        if amount:
            parts.append(f"{amount}{suffix}")

    return " ".join(parts)
