"""Configuration for local time conversion on a device.

The timezone is stored as a POSIX TZ string, for example in a device
settings file:

    {"timezone": "EST5EDT,M3.2.0/2:00:00,M11.1.0/2:00:00"}

Configuration values are parsed strictly so that a typo is reported when
the settings are loaded instead of silently disabling daylight saving time.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from .convert import LocalTimeConvert
from .posix_timezone import PosixTimezone
from .tzinfo import PosixTzInfo

__all__ = ["LocalTimeConfig"]


class LocalTimeConfig(BaseModel):
    """Settings for computing local time from the UTC clock."""

    model_config = ConfigDict(frozen=True)

    timezone: PosixTimezone
    """The local timezone rules."""

    @field_validator("timezone", mode="before")
    @classmethod
    def _parse_timezone(cls, value: Any) -> Any:
        """Parse a TZ string into a PosixTimezone."""
        if isinstance(value, str):
            return PosixTimezone.parse(value, strict=True)
        return value

    @field_serializer("timezone")
    def _serialize_timezone(self, value: PosixTimezone) -> str:
        """Serialize the timezone as a TZ string."""
        return str(value)

    def converter(self) -> LocalTimeConvert:
        """Return a converter for the configured timezone."""
        return LocalTimeConvert().with_config(self.timezone)

    def tzinfo(self) -> PosixTzInfo:
        """Return a tzinfo for the configured timezone."""
        return PosixTzInfo(self.timezone)
