"""A local time value with accessors for the calendar fields.

The month and weekday are 1-based, with Sunday as the first day of the
week, and the year is the full 4-digit year.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass

__all__ = ["LocalTimeValue"]

_DEFAULT_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LocalTimeValue:
    """Container for the broken-down local time of a conversion."""

    time_info: datetime.datetime
    """The broken-down local time."""

    @property
    def hour(self) -> int:
        """Hour of the day 0-23."""
        return self.time_info.hour

    @property
    def hour_format12(self) -> int:
        """Hour of the day 1-12, where midnight and noon are 12."""
        hour = self.time_info.hour
        if hour == 0:
            return 12
        if hour > 12:
            return hour - 12
        return hour

    @property
    def is_am(self) -> bool:
        """Return True for hours before noon."""
        return self.time_info.hour < 12

    @property
    def is_pm(self) -> bool:
        """Return True for noon and later."""
        return not self.is_am

    @property
    def minute(self) -> int:
        return self.time_info.minute

    @property
    def second(self) -> int:
        return self.time_info.second

    @property
    def day(self) -> int:
        """Day of the month 1-31."""
        return self.time_info.day

    @property
    def weekday(self) -> int:
        """Day of the week 1-7 where 1=Sunday, 2=Monday, ..."""
        return self.time_info.isoweekday() % 7 + 1

    @property
    def month(self) -> int:
        """Month 1-12 where 1=January."""
        return self.time_info.month

    @property
    def year(self) -> int:
        """The 4-digit year."""
        return self.time_info.year

    def format(self, fmt: str = _DEFAULT_FORMAT) -> str:
        """Return the local time formatted with strftime codes."""
        return self.time_info.strftime(fmt)

    def __str__(self) -> str:
        return self.format()
