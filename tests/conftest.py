"""Test fixtures."""

import pytest

from localtz.posix_timezone import PosixTimezone

EASTERN = "EST5EDT,M3.2.0/2:00:00,M11.1.0/2:00:00"
SYDNEY = "AEST-10AEDT,M10.1.0/2,M4.1.0/3"


@pytest.fixture
def eastern() -> PosixTimezone:
    """Fixture for the US Eastern timezone."""
    return PosixTimezone.parse(EASTERN)


@pytest.fixture
def sydney() -> PosixTimezone:
    """Fixture for a southern hemisphere timezone."""
    return PosixTimezone.parse(SYDNEY)


@pytest.fixture
def pacific() -> PosixTimezone:
    """Fixture for the US Pacific timezone."""
    return PosixTimezone.parse("PST8PDT,M3.2.0/2,M11.1.0/2")


@pytest.fixture
def warsaw() -> PosixTimezone:
    """Fixture for a timezone east of UTC changing on the last Sunday."""
    return PosixTimezone.parse("CET-1CEST,M3.5.0/2,M10.5.0/3")


@pytest.fixture
def auckland() -> PosixTimezone:
    """Fixture for a southern hemisphere timezone far east of UTC."""
    return PosixTimezone.parse("NZST-12NZDT,M9.5.0/2,M4.1.0/3")


@pytest.fixture
def tokyo() -> PosixTimezone:
    """Fixture for a timezone without daylight saving time."""
    return PosixTimezone.parse("JST-9")
