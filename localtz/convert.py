"""Library for converting a UTC time to local time using a POSIX timezone.

A `LocalTimeConvert` is built for a timezone and a UTC time, then `convert`
computes the local time and where the time falls relative to the daylight
saving time transitions of its year:

    conv = LocalTimeConvert().with_config(timezone).with_time(1615705200)
    conv.convert()
    conv.position  # Position.IN_DST
    conv.local_time_value.hour

The year is partitioned by the order of the two transitions. In the
southern hemisphere standard time starts before daylight saving time in the
calendar year, so a time before the standard time transition is in the
daylight saving period that started the previous year, and a time after the
daylight saving transition is in the period that ends the following year.
"""

from __future__ import annotations

import copy
import datetime
import enum
import logging
from dataclasses import dataclass, field
from typing import Self

from .hms import HMS
from .posix_timezone import PosixTimezone
from .time_value import LocalTimeValue
from .util import time_to_time_info, utc_now_factory

__all__ = [
    "LocalTimeConvert",
    "Position",
    "local_time",
]

_LOGGER = logging.getLogger(__name__)


class Position(enum.Enum):
    """Where a time falls relative to the transitions of its year."""

    BEFORE_DST = "before_dst"
    """Standard time, before daylight saving time starts."""

    IN_DST = "in_dst"
    """Daylight saving time."""

    AFTER_DST = "after_dst"
    """Standard time, after daylight saving time ends for the year."""

    NO_DST = "no_dst"
    """The timezone does not observe daylight saving time."""


@dataclass
class LocalTimeConvert:
    """Converts a UTC time to a local time for a timezone.

    The results are only populated after calling `convert` and are
    recomputed on every call.
    """

    config: PosixTimezone = field(default_factory=PosixTimezone)
    """The timezone used for the conversion."""

    time: int = 0
    """The UTC time to convert in seconds since the epoch."""

    position: Position = Position.NO_DST
    """The daylight saving time classification of the time."""

    local_time_value: LocalTimeValue | None = None
    """The local time."""

    dst_start: int | None = None
    """UTC time daylight saving time starts, None without DST."""

    dst_start_time_info: datetime.datetime | None = None
    """Broken-down UTC time daylight saving time starts."""

    standard_start: int | None = None
    """UTC time standard time starts, None without DST."""

    standard_start_time_info: datetime.datetime | None = None
    """Broken-down UTC time standard time starts."""

    def with_config(self, config: PosixTimezone) -> Self:
        """Set the timezone, keeping a copy of the configuration."""
        self.config = copy.deepcopy(config)
        return self

    def with_time(self, time: int) -> Self:
        """Set the UTC time to convert in seconds since the epoch."""
        self.time = time
        return self

    def with_current_time(self) -> Self:
        """Set the time to convert to the current UTC time."""
        self.time = utc_now_factory()
        return self

    def convert(self) -> None:
        """Compute the local time and daylight saving time position."""
        self.dst_start = None
        self.dst_start_time_info = None
        self.standard_start = None
        self.standard_start_time_info = None

        if not self.config.has_dst():
            self.position = Position.NO_DST
            self._update_local_time(self.config.standard_hms)
            return

        year = time_to_time_info(self.time).year
        self._calculate_dst_start(year)
        self._calculate_standard_start(year)
        assert self.dst_start is not None and self.standard_start is not None

        if self.dst_start <= self.standard_start:
            if self.time < self.dst_start:
                self.position = Position.BEFORE_DST
            elif self.time < self.standard_start:
                self.position = Position.IN_DST
            else:
                self.position = Position.AFTER_DST
        elif self.time < self.standard_start:
            # Daylight saving time started in the previous year
            if year > datetime.MINYEAR:
                self._calculate_dst_start(year - 1)
            self.position = Position.IN_DST
        elif self.time < self.dst_start:
            self.position = Position.BEFORE_DST
        else:
            # Daylight saving time ends in the next year
            if year < datetime.MAXYEAR:
                self._calculate_standard_start(year + 1)
            self.position = Position.IN_DST

        if self.position == Position.IN_DST:
            self._update_local_time(self.config.dst_hms)
        else:
            self._update_local_time(self.config.standard_hms)
        _LOGGER.debug(
            "Converted %s with %s: %s", self.time, self.config, self.position
        )

    def is_dst(self) -> bool:
        """Return True if the time is in daylight saving time."""
        return self.position == Position.IN_DST

    def is_standard_time(self) -> bool:
        """Return True if the time is in standard time."""
        return not self.is_dst()

    @property
    def zone_name(self) -> str:
        """Return the name of the timezone in effect, e.g. EST or EDT."""
        if self.is_dst() and self.config.dst_name:
            return self.config.dst_name
        return self.config.standard_name

    @property
    def utc_offset(self) -> datetime.timedelta:
        """Return the UTC offset in effect (not time added to local time)."""
        if self.is_dst():
            return self.config.dst_utc_offset
        return self.config.utc_offset

    def _calculate_dst_start(self, year: int) -> None:
        # Clock is still on standard time right before the change
        self.dst_start, self.dst_start_time_info = self.config.dst_start.calculate(
            year, self.config.standard_hms
        )

    def _calculate_standard_start(self, year: int) -> None:
        (
            self.standard_start,
            self.standard_start_time_info,
        ) = self.config.standard_start.calculate(year, self.config.dst_hms)

    def _update_local_time(self, tz_adjust: HMS) -> None:
        time_info = time_to_time_info(self.time)
        self.local_time_value = LocalTimeValue(
            tz_adjust.adjust_time_info(time_info, subtract=True)
        )


def local_time(
    timezone: str | PosixTimezone, time: int | None = None
) -> LocalTimeConvert:
    """Convert a UTC time, or the current time, to local time for a TZ string."""
    if isinstance(timezone, str):
        timezone = PosixTimezone.parse(timezone)
    conv = LocalTimeConvert().with_config(timezone)
    if time is None:
        conv.with_current_time()
    else:
        conv.with_time(time)
    conv.convert()
    return conv
