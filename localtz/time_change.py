"""Library for the time change part of a POSIX TZ string.

A time change has the form `Mm.w.d[/time]`:
  - m: Month between 1 and 12
  - w: Between 1 and 5. Week 1 is the first week d occurs, and 5 means the
    last occurrence of d in the month (even if there are only four).
  - d: Between 0 (Sunday) and 6 (Saturday)
  - time: Local time of day the change goes into effect, in H[:MM[:SS]]
    format. Defaults to midnight and may be negative, e.g. `M3.2.0/-1`.

The julian day formats (`Jn` and `n`) are not supported and are treated the
same as a timezone without daylight saving time.
"""

from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass, field

from dateutil import relativedelta

from .exceptions import TimeChangeError
from .hms import HMS
from .util import time_info_to_time

__all__ = ["TimeChange"]

_LOGGER = logging.getLogger(__name__)

_TIME_CHANGE_RE_PATTERN = re.compile(
    r"M(?P<month>\d{1,2})\.(?P<week>\d)\.(?P<day_of_week>\d)(?:/(?P<time>.*))?"
)


@dataclass
class TimeChange:
    """A daylight saving or standard time transition rule such as `M3.2.0/2:00:00`.

    The rule does not reference a year and can be evaluated for any year.
    """

    month: int = 0
    """A month between 1 and 12, 1=January."""

    week: int = 0
    """A week number of the month (1 to 5), 5 is the last week."""

    day_of_week: int = 0
    """A day of the week between 0 (Sunday) and 6 (Saturday)."""

    hms: HMS = field(default_factory=HMS)
    """Local time of day when the rule goes into effect."""

    valid: bool = False
    """True when the rule was parsed successfully, otherwise there is no DST."""

    @classmethod
    def parse(cls, value: str) -> TimeChange:
        """Parse a time change string like `M3.2.0/2:00:00`.

        A value that does not have the month.week.day form returns a time
        change that is not valid.
        """
        if (match := _TIME_CHANGE_RE_PATTERN.fullmatch(value.strip())) is None:
            if value:
                _LOGGER.debug("Unable to parse time change %r, no DST", value)
            return cls()
        month = int(match.group("month"))
        week = int(match.group("week"))
        day_of_week = int(match.group("day_of_week"))
        if not (1 <= month <= 12 and 1 <= week <= 5 and 0 <= day_of_week <= 6):
            _LOGGER.debug("Time change %r out of range, no DST", value)
            return cls()
        hms = HMS.parse(time) if (time := match.group("time")) else HMS()
        if not hms.in_range():
            _LOGGER.debug("Time change %r time of day out of range, no DST", value)
            return cls()
        return cls(
            month=month, week=week, day_of_week=day_of_week, hms=hms, valid=True
        )

    def clear(self) -> None:
        """Reset the rule to an invalid rule at midnight."""
        self.month = 0
        self.week = 0
        self.day_of_week = 0
        self.hms.clear()
        self.valid = False

    def __str__(self) -> str:
        """Return the normalized rule string, e.g. `M3.2.0/2:00:00`."""
        if not self.valid:
            return ""
        return f"M{self.month}.{self.week}.{self.day_of_week}/{self.hms}"

    def local_time_info(self, year: int) -> datetime.datetime:
        """Return the local wall clock time when the change happens in the year."""
        if not self.valid:
            raise TimeChangeError(
                f"Unable to evaluate time change that is not valid: {self!r}"
            )
        weekday = relativedelta.weekdays[(self.day_of_week - 1) % 7]
        first = datetime.datetime(year, self.month, 1)
        if self.week == 5:
            date = first + relativedelta.relativedelta(day=31, weekday=weekday(-1))
        else:
            date = first + relativedelta.relativedelta(weekday=weekday(self.week))
        return self.hms.adjust_time_info(date)

    def calculate(self, year: int, tz_adjust: HMS) -> tuple[int, datetime.datetime]:
        """Calculate when the time change happens in the year.

        The `tz_adjust` is the POSIX offset for the time in effect right
        before the change (the time added to local time to get UTC). The
        result is the UTC time of the change in seconds since the epoch and
        as a broken-down UTC time. A change that falls outside the years
        supported by `datetime` raises `TimeChangeError`.
        """
        try:
            time_info = tz_adjust.adjust_time_info(self.local_time_info(year))
        except OverflowError as err:
            raise TimeChangeError(
                f"Time change {self} in {year} is out of range"
            ) from err
        return time_info_to_time(time_info), time_info
