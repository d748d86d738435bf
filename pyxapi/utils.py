"""
Utility functions shared by the xAPI value types and the serializer.
"""

import re
from datetime import datetime, timedelta

# scheme ":" followed by at least one non-space character
_ABSOLUTE_IRI_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*:\S+")

_MICROSECONDS_PER_SECOND = 1_000_000
_MICROSECONDS_PER_MINUTE = 60 * _MICROSECONDS_PER_SECOND
_MICROSECONDS_PER_HOUR = 60 * _MICROSECONDS_PER_MINUTE
_MICROSECONDS_PER_DAY = 24 * _MICROSECONDS_PER_HOUR


def is_absolute_iri(value: object) -> bool:
    """Return True if value is a string holding an absolute IRI (scheme + body)."""
    return isinstance(value, str) and _ABSOLUTE_IRI_PATTERN.fullmatch(value) is not None


def lower_bool(value: bool) -> str:
    """Render a bool as the lowercase token used by xAPI ("true" / "false")."""
    return "true" if value else "false"


def _format_seconds(seconds: int, microseconds: int) -> str:
    if not microseconds:
        return f"{seconds}S"
    fraction = f"{microseconds:06d}".rstrip("0")
    return f"{seconds}.{fraction}S"


def format_duration(duration: timedelta) -> str:
    """Convert a timedelta to an ISO 8601 duration string.

    Uses days, hours, minutes and seconds designators only, omitting zero
    components, as XML Schema duration formatters do.

    Examples:
        timedelta(0) -> "PT0S"
        timedelta(days=1) -> "P1D"
        timedelta(hours=1, minutes=30) -> "PT1H30M"
        timedelta(seconds=1, milliseconds=500) -> "PT1.5S"

    Args:
        duration: The duration to format

    Returns:
        ISO 8601 duration string
    """
    total = (duration.days * 86_400 + duration.seconds) * _MICROSECONDS_PER_SECOND + duration.microseconds
    sign = "-" if total < 0 else ""
    total = abs(total)

    days, rest = divmod(total, _MICROSECONDS_PER_DAY)
    hours, rest = divmod(rest, _MICROSECONDS_PER_HOUR)
    minutes, rest = divmod(rest, _MICROSECONDS_PER_MINUTE)
    seconds, microseconds = divmod(rest, _MICROSECONDS_PER_SECOND)

    date_part = f"{days}D" if days else ""
    time_part = ""
    if hours:
        time_part += f"{hours}H"
    if minutes:
        time_part += f"{minutes}M"
    if seconds or microseconds:
        time_part += _format_seconds(seconds, microseconds)

    if not date_part and not time_part:
        return "PT0S"
    if time_part:
        return f"{sign}P{date_part}T{time_part}"
    return f"{sign}P{date_part}"


def format_timestamp(timestamp: datetime, utc_designator: bool = True) -> str:
    """Format an aware datetime as ISO 8601 with milliseconds and UTC offset.

    Args:
        timestamp: A timezone-aware datetime
        utc_designator: Emit "Z" instead of "+00:00" for a zero offset

    Returns:
        e.g. "2018-06-01T12:30:45.120-05:00" or "2018-06-01T17:30:45.120Z"
    """
    if timestamp.tzinfo is None or timestamp.utcoffset() is None:
        raise ValueError("timestamp must be timezone-aware")
    text = timestamp.isoformat(timespec="milliseconds")
    if utc_designator and timestamp.utcoffset() == timedelta(0):
        return text[: -len("+00:00")] + "Z"
    return text
