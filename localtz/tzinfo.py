"""A `datetime.tzinfo` implementation for a POSIX TZ string."""

from __future__ import annotations

import datetime

from .convert import LocalTimeConvert
from .posix_timezone import PosixTimezone
from .util import time_info_to_time

__all__ = ["PosixTzInfo"]

_ZERO = datetime.timedelta(0)


class PosixTzInfo(datetime.tzinfo):
    """An implementation of tzinfo based on a POSIX timezone.

    The timezone rules apply to all years since there is no historical
    information. Local times in the hour repeated when daylight saving time
    ends are resolved with `fold`, where `fold=1` is the standard time. Local
    times skipped when daylight saving time starts use the offset from before
    the change with `fold=0` and from after the change with `fold=1`.
    """

    def __init__(self, timezone: PosixTimezone) -> None:
        """Initialize PosixTzInfo."""
        self._timezone = timezone

    @classmethod
    def from_string(cls, value: str) -> PosixTzInfo:
        """Create a new instance from a POSIX TZ string."""
        return cls(PosixTimezone.parse(value))

    @property
    def timezone(self) -> PosixTimezone:
        """Return the timezone rules."""
        return self._timezone

    def utcoffset(self, dt: datetime.datetime | None) -> datetime.timedelta:
        """Return offset of local time from UTC, as a timedelta object."""
        if not dt:
            return _ZERO
        result = self._timezone.utc_offset
        if dst_offset := self.dst(dt):
            result += dst_offset
        return result

    def tzname(self, dt: datetime.datetime | None) -> str | None:
        """Return the time zone name for the datetime as a string."""
        if dt is None:
            return None
        if self.dst(dt) and self._timezone.dst_name:
            return self._timezone.dst_name
        return self._timezone.standard_name

    def dst(self, dt: datetime.datetime | None) -> datetime.timedelta | None:
        """Return the daylight saving time (DST) adjustment, if applicable."""
        if dt is None or not self._timezone.has_dst():
            return None
        if self._is_dst(dt.replace(tzinfo=None), dt.fold):
            return self._dst_adjustment
        return _ZERO

    def fromutc(self, dt: datetime.datetime) -> datetime.datetime:
        """Convert a UTC time with this tzinfo attached to local time."""
        if dt.tzinfo is not self:
            raise ValueError("fromutc: dt.tzinfo is not self")
        conv = LocalTimeConvert().with_config(self._timezone)
        conv.with_time(time_info_to_time(dt)).convert()
        assert conv.local_time_value is not None
        local = conv.local_time_value.time_info.replace(microsecond=dt.microsecond)
        if not self._timezone.has_dst():
            return local.replace(tzinfo=self)
        fold = int(self._is_dst(local, 0) != conv.is_dst())
        return local.replace(tzinfo=self, fold=fold)

    @property
    def _dst_adjustment(self) -> datetime.timedelta:
        return self._timezone.dst_utc_offset - self._timezone.utc_offset

    def _is_dst(self, local: datetime.datetime, fold: int) -> bool:
        """Return True if the naive local wall time is in daylight saving time."""
        start = self._timezone.dst_start.local_time_info(local.year)
        end = self._timezone.standard_start.local_time_info(local.year)
        if fold:
            # Second occurrence of the repeated hour is standard time
            end -= self._dst_adjustment
        else:
            # Skipped hour keeps the offset from before the change
            start += self._dst_adjustment
        if start <= end:
            return start <= local < end
        return not end <= local < start

    def __str__(self) -> str:
        """Return the string representation of the timezone."""
        return self._timezone.standard_name

    def __repr__(self) -> str:
        """Return the string representation of the timezone."""
        return f"PosixTzInfo({self._timezone})"
