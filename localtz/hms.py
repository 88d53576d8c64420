"""Library for hour, minute, second values.

An `HMS` is used both as a time of day (when a time change occurs) and as
the magnitude of an offset from UTC. The values are written as `H`, `H:MM`
or `H:MM:SS` and the hour may be negative, e.g. `-2:30` for the local time
of a change that happens the evening before, or `-9` for a timezone east
of UTC.
"""

from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass

__all__ = ["HMS", "MAX_HOURS"]

_LOGGER = logging.getLogger(__name__)

_HMS_RE_PATTERN = re.compile(
    r"(?P<sign>[+-]?)(?P<hour>\d+)(?::(?P<minute>\d+)(?::(?P<second>\d+))?)?"
)

# Largest hour POSIX allows for an offset or a time of day
MAX_HOURS = 167


@dataclass
class HMS:
    """A signed hour, minute and second.

    The hour carries the sign for the whole value: `-2:30:00` is stored as
    hour=-2, minute=30, second=0 and is 9000 seconds before zero.
    """

    hour: int = 0
    """Hour of the value, typically -23 to 23 (up to 167 for a time of day)."""

    minute: int = 0
    """Minute between 0 and 59."""

    second: int = 0
    """Second between 0 and 59."""

    @classmethod
    def parse(cls, value: str) -> HMS:
        """Parse a `H:MM:SS` string, where the minutes and seconds are optional.

        Parsing is best-effort: anything following the numeric prefix is
        ignored and a value with no numeric prefix is zero. Minutes or seconds
        of 60 or more overflow into the larger fields.
        """
        if (match := _HMS_RE_PATTERN.match(value.strip())) is None:
            _LOGGER.debug("Unable to parse time %r, using 0:00:00", value)
            return cls()
        total = (
            int(match.group("hour")) * 3600
            + int(match.group("minute") or 0) * 60
            + int(match.group("second") or 0)
        )
        if match.group("sign") == "-":
            total = -total
        return cls.from_seconds(total)

    @classmethod
    def from_seconds(cls, seconds: int) -> HMS:
        """Create a normalized value from a signed number of seconds."""
        magnitude = abs(seconds)
        hour = magnitude // 3600
        if seconds < 0:
            hour = -hour
        return cls(hour=hour, minute=(magnitude % 3600) // 60, second=magnitude % 60)

    def in_range(self) -> bool:
        """Return True if the hour is within the POSIX limit of 167 hours."""
        return abs(self.hour) <= MAX_HOURS

    def clear(self) -> None:
        """Set the hour, minute and second to 0."""
        self.hour = 0
        self.minute = 0
        self.second = 0

    def to_seconds(self) -> int:
        """Return the value as a signed number of seconds."""
        total = abs(self.hour) * 3600 + self.minute * 60 + self.second
        if self.hour < 0:
            return -total
        return total

    def to_timedelta(self) -> datetime.timedelta:
        """Return the value as a signed timedelta."""
        return datetime.timedelta(seconds=self.to_seconds())

    def adjust_time_info(
        self, time_info: datetime.datetime, subtract: bool = False
    ) -> datetime.datetime:
        """Return the broken-down time moved forward (or back) by this value."""
        if subtract:
            return time_info - self.to_timedelta()
        return time_info + self.to_timedelta()

    def __str__(self) -> str:
        """Return the value in the normalized form `H:MM:SS` (24-hour clock)."""
        return f"{self.hour}:{self.minute:02}:{self.second:02}"
