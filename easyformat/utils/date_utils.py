"""Point-in-time helpers for easyformat."""
from datetime import datetime, date, time, timezone
from typing import Union

PointInTime = Union[datetime, date, int, float]


def localize(dt: datetime, tzinfo) -> datetime:
    """Attach a zone to a naive datetime, interpreting it as wall-clock time there.

    Args:
        dt: Naive datetime
        tzinfo: zoneinfo or pytz zone

    Returns:
        Aware datetime
    """
    if hasattr(tzinfo, 'localize'):
        return tzinfo.localize(dt)
    return dt.replace(tzinfo=tzinfo)


def to_instant(value: PointInTime, tzinfo) -> datetime:
    """Normalize any supported point-in-time value to an aware datetime.

    Args:
        value: Aware datetime (instant), naive datetime or date (civil time in
            ``tzinfo``), or a POSIX timestamp in seconds
        tzinfo: Zone used for civil values

    Returns:
        Aware datetime denoting the same instant

    Raises:
        TypeError: If the value is not one of the supported types
    """
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            return localize(value.replace(tzinfo=None), tzinfo)
        return value
    if isinstance(value, date):
        return localize(datetime.combine(value, time.min), tzinfo)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    raise TypeError(f"Cannot format value of type {type(value).__name__}")


def parse_iso_datetime(text: str) -> datetime:
    """Parse an ISO 8601 string, accepting a trailing "Z" for UTC.

    A string without an offset yields a naive (civil) datetime.
    """
    return datetime.fromisoformat(text.strip().replace("Z", "+00:00"))
