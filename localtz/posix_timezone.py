"""Library for parsing POSIX TZ strings.

TZ supports these two formats

No DST: std offset
  - std: Name of the timezone
  - offset: Time added to local time to get UTC
  Example: EST5

DST: std offset dst [offset],start[/time],end[/time]
  - dst: Name of the Daylight savings time timezone
  - offset: Defaults to 1 hour ahead of STD offset if not specified
  - start & end: Time period when DST is in effect in the Mm.w.d format,
    see `localtz.time_change`.
  Example: EST5EDT,M3.2.0/2:00:00,M11.1.0/2:00:00

The sign of the offset is backwards from the normal offset from UTC: EST5
is five hours behind UTC. Names may also be quoted in angle brackets when
they contain digits or signs, e.g. `<-03>3`.

A timezone with a DST name but no start and end rules does not observe
daylight saving time, rather than assuming the United States rules.
"""

from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass, field

from .exceptions import TimezoneParseError
from .hms import HMS
from .time_change import TimeChange

__all__ = ["PosixTimezone"]

_LOGGER = logging.getLogger(__name__)

_NAME = r"<[^>]*>|[^\d,+\-<:]+"
_OFFSET = r"[+-]?\d+(?::\d+){0,2}"
_ZONE_RE_PATTERN: re.Pattern[str] = re.compile(
    rf"(?P<std_name>{_NAME})(?P<std_offset>{_OFFSET})?"
    rf"(?:(?P<dst_name>{_NAME})(?P<dst_offset>{_OFFSET})?)?"
)
_DST_HOUR = HMS(hour=1)


def _parse_offset(value: str, kind: str, errors: list[str]) -> HMS:
    """Parse a UTC offset, recording values that can't be used."""
    hms = HMS.parse(value)
    if not hms.in_range():
        errors.append(f"{kind} time offset out of range")
        return HMS()
    if value.startswith("-") and hms.to_seconds() > 0:
        errors.append(f"{kind} time offset sign is lost")
    return hms


@dataclass
class PosixTimezone:
    """The parsed parts of a POSIX TZ string.

    The offsets keep the POSIX sign convention, so the standard offset for
    EST5EDT is `5:00:00` and the daylight saving offset is `4:00:00`.
    """

    standard_name: str = ""
    """Name of standard time, e.g. EST."""

    standard_hms: HMS = field(default_factory=HMS)
    """Time added to standard local time to get UTC."""

    dst_name: str = ""
    """Name of daylight saving time e.g. EDT, or empty when there is none."""

    dst_hms: HMS = field(default_factory=HMS)
    """Time added to daylight saving local time to get UTC."""

    dst_start: TimeChange = field(default_factory=TimeChange)
    """When daylight saving time starts, in local standard time."""

    standard_start: TimeChange = field(default_factory=TimeChange)
    """When standard time starts, in local daylight saving time."""

    @classmethod
    def parse(cls, value: str, strict: bool = False) -> PosixTimezone:
        """Parse a POSIX TZ string like `EST5EDT,M3.2.0/2:00:00,M11.1.0/2:00:00`.

        Parsing is best-effort and parts that can't be parsed are left empty.
        When `strict` is set, a `TimezoneParseError` is raised instead.
        """
        timezone = cls()
        errors: list[str] = []
        zone, *rules = value.strip().split(",")

        if (match := _ZONE_RE_PATTERN.match(zone)) is None:
            errors.append("missing standard time name")
        else:
            if match.end() != len(zone):
                errors.append(f"unexpected data {zone[match.end():]!r}")
            timezone.standard_name = match.group("std_name")
            if (std_offset := match.group("std_offset")) is not None:
                timezone.standard_hms = _parse_offset(std_offset, "standard", errors)
            else:
                errors.append("missing standard time offset")
            timezone.dst_name = match.group("dst_name") or ""

        if len(rules) == 2:
            timezone.dst_start = TimeChange.parse(rules[0])
            timezone.standard_start = TimeChange.parse(rules[1])
        elif rules:
            errors.append("should have both or neither start and end dates")
        if not (timezone.dst_start.valid and timezone.standard_start.valid):
            if rules:
                errors.append("invalid start or end date")
            timezone.dst_start.clear()
            timezone.standard_start.clear()

        if timezone.dst_name or timezone.has_dst():
            if match is not None and (dst_offset := match.group("dst_offset")):
                timezone.dst_hms = _parse_offset(dst_offset, "daylight saving", errors)
            else:
                seconds = timezone.standard_hms.to_seconds() - _DST_HOUR.to_seconds()
                if -3600 < seconds < 0:
                    # The hour carries the sign, so -0:30 can't be represented
                    errors.append("daylight saving time offset sign is lost")
                timezone.dst_hms = HMS.from_seconds(seconds)

        if errors:
            if strict:
                raise TimezoneParseError(
                    f"Unable to parse TZ string, {'; '.join(errors)}: {value}"
                )
            _LOGGER.debug("Parsed TZ string %r with errors: %s", value, errors)
        return timezone

    def clear(self) -> None:
        """Reset to an unnamed UTC timezone with no DST."""
        self.standard_name = ""
        self.standard_hms.clear()
        self.dst_name = ""
        self.dst_hms.clear()
        self.dst_start.clear()
        self.standard_start.clear()

    def has_dst(self) -> bool:
        """Return True if the timezone observes daylight saving time."""
        return self.dst_start.valid

    @property
    def utc_offset(self) -> datetime.timedelta:
        """UTC offset for standard time (not time added to local time)."""
        return -self.standard_hms.to_timedelta()

    @property
    def dst_utc_offset(self) -> datetime.timedelta:
        """UTC offset for daylight saving time (not time added to local time)."""
        return -self.dst_hms.to_timedelta()

    def __str__(self) -> str:
        """Return a TZ string that parses back to an equivalent timezone."""
        if not self.standard_name:
            return ""
        parts = [f"{self.standard_name}{self.standard_hms}"]
        if self.dst_name:
            parts.append(f"{self.dst_name}{self.dst_hms}")
        if self.has_dst():
            parts.append(f",{self.dst_start},{self.standard_start}")
        return "".join(parts)
