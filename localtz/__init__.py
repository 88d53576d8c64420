"""
.. include:: ../README.md
"""

__all__ = [
    "config",
    "convert",
    "exceptions",
    "hms",
    "posix_timezone",
    "time_change",
    "time_value",
    "tzinfo",
    "util",
]
