"""GPS date/time reconstruction.

RMC carries a ``ddmmyy`` date and an ``hhmmss[.ss]`` time; GGA carries only
the time. Both are combined into one timezone-aware UTC ``datetime``. A
missing token is filled in from the current UTC clock.

Two-digit years are read as ``2000 + yy``. There is no century windowing,
so dates are valid through 2099.
"""

from collections.abc import Callable
from datetime import datetime, timezone

from gnss_decode.nmea.errors import MalformedSentenceError
from gnss_decode.nmea.fields import parse_int

__all__ = ["Clock", "reconstruct_datetime", "utc_now"]

Clock = Callable[[], datetime]

_CENTURY = 2000


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def _split_date(token: str) -> tuple[int, int, int]:
    """Split ``ddmmyy`` into ``(year, month, day)``."""
    day = parse_int(token[0:2], "utc_date")
    month = parse_int(token[2:4], "utc_date")
    year = parse_int(token[4:6], "utc_date") + _CENTURY
    return year, month, day


def _split_time(token: str) -> tuple[int, int, int]:
    """Split ``hhmmss[.ss]`` into ``(hour, minute, second)``; the fraction is dropped."""
    hour = parse_int(token[0:2], "utc_time")
    minute = parse_int(token[2:4], "utc_time")
    second = parse_int(token[4:6], "utc_time")
    return hour, minute, second


def reconstruct_datetime(
    date_token: str | None,
    time_token: str | None,
    clock: Clock = utc_now,
) -> datetime:
    """Combine NMEA date and time tokens into a UTC datetime.

    Args:
        date_token: ``ddmmyy`` (e.g. ``"160614"`` for 16 June 2014), or a
            falsy value to use today's UTC date.
        time_token: ``hhmmss[.ss]`` (e.g. ``"180826.9"``), or a falsy value
            to use the current UTC time of day.
        clock: Source of "now"; read at most once per call.

    Returns:
        Aware ``datetime`` in UTC with whole-second precision.

    Raises:
        UnparsableNumberError: If a date or time component is not numeric.
        MalformedSentenceError: If the components do not form a real
            instant (e.g. month 13).

    Example:
        >>> reconstruct_datetime("160614", "180826.9")
        datetime.datetime(2014, 6, 16, 18, 8, 26, tzinfo=datetime.timezone.utc)
    """
    now = clock() if not date_token or not time_token else None

    if date_token:
        year, month, day = _split_date(date_token)
    else:
        year, month, day = now.year, now.month, now.day

    if time_token:
        hour, minute, second = _split_time(time_token)
    else:
        hour, minute, second = now.hour, now.minute, now.second

    try:
        return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except ValueError as exc:
        raise MalformedSentenceError(
            f"Invalid date/time: date={date_token!r} time={time_token!r}"
        ) from exc
