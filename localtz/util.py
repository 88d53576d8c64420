"""Utility methods used by multiple components.

A broken-down time (the "time info") is a naive `datetime.datetime` whose
fields are always normalized. These methods convert between a time info in
UTC and the number of seconds since the Unix epoch.
"""

from __future__ import annotations

import calendar
import datetime

__all__ = [
    "utc_now_factory",
    "time_to_time_info",
    "time_info_to_time",
    "time_info_str",
]

_EPOCH = datetime.datetime(1970, 1, 1)


def utc_now_factory() -> int:
    """Factory method for the current UTC time to facilitate mocking."""
    return calendar.timegm(datetime.datetime.now(tz=datetime.UTC).utctimetuple())


def time_to_time_info(time: int) -> datetime.datetime:
    """Convert seconds since the epoch to a broken-down UTC time."""
    return _EPOCH + datetime.timedelta(seconds=time)


def time_info_to_time(time_info: datetime.datetime) -> int:
    """Convert a broken-down UTC time to seconds since the epoch.

    Any timezone attached to the value is ignored and the fields are
    interpreted as UTC.
    """
    return calendar.timegm(time_info.replace(tzinfo=None).timetuple())


def time_info_str(time_info: datetime.datetime) -> str:
    """Return a human-readable string version of a broken-down time."""
    return time_info.ctime()
