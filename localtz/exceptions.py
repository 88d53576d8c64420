"""Exceptions for localtz library."""


class LocalTimeError(Exception):
    """Base exception for all localtz errors."""


class TimezoneParseError(LocalTimeError, ValueError):
    """Exception raised when strictly parsing a POSIX TZ string.

    Parsing is best-effort by default and degrades malformed parts to empty
    or zero values. This is only raised when the caller asks for strict
    parsing, for example when validating a configuration value.
    """


class TimeChangeError(LocalTimeError):
    """Exception raised when evaluating a time change that is not valid.

    Also raised when the change falls outside the years `datetime` supports.

    An invalid time change means the timezone does not observe daylight
    saving time. Callers are expected to check `PosixTimezone.has_dst` or
    `TimeChange.valid` before computing transition times.
    """
