"""Tests for the tzinfo implementation."""

import datetime
import zoneinfo

import pytest

from localtz.posix_timezone import PosixTimezone
from localtz.tzinfo import PosixTzInfo


@pytest.mark.parametrize(
    "zone,dtstarts,expected_tzname,expected_offset",
    [
        (
            "eastern",
            [
                datetime.datetime(2021, 3, 14, 1, 59, 0),
                datetime.datetime(2021, 3, 14, 2, 30, 0),
                datetime.datetime(2021, 11, 7, 2, 0, 0),
                datetime.datetime(2021, 11, 7, 1, 30, 0, fold=1),
                datetime.datetime(2022, 1, 1, 0, 0, 0),
            ],
            "EST",
            datetime.timedelta(hours=-5),
        ),
        (
            "eastern",
            [
                datetime.datetime(2021, 3, 14, 2, 30, 0, fold=1),
                datetime.datetime(2021, 3, 14, 3, 0, 0),
                datetime.datetime(2021, 11, 7, 1, 30, 0),
                datetime.datetime(2021, 11, 7, 1, 59, 0),
                datetime.datetime(2022, 7, 1, 0, 0, 0),
            ],
            "EDT",
            datetime.timedelta(hours=-4),
        ),
        (
            "sydney",
            [
                datetime.datetime(2021, 1, 15, 12, 0, 0),
                datetime.datetime(2021, 10, 3, 2, 30, 0, fold=1),
                datetime.datetime(2021, 4, 4, 2, 30, 0),
                datetime.datetime(2021, 10, 3, 3, 0, 0),
                datetime.datetime(2021, 12, 31, 23, 0, 0),
            ],
            "AEDT",
            datetime.timedelta(hours=11),
        ),
        (
            "sydney",
            [
                datetime.datetime(2021, 4, 4, 2, 30, 0, fold=1),
                datetime.datetime(2021, 10, 3, 2, 30, 0),
                datetime.datetime(2021, 4, 4, 3, 0, 0),
                datetime.datetime(2021, 6, 1, 0, 0, 0),
                datetime.datetime(2021, 10, 3, 1, 59, 0),
            ],
            "AEST",
            datetime.timedelta(hours=10),
        ),
        (
            "tokyo",
            [
                datetime.datetime(2021, 1, 1, 0, 0, 0),
                datetime.datetime(2021, 7, 1, 0, 0, 0),
            ],
            "JST",
            datetime.timedelta(hours=9),
        ),
    ],
)
def test_tzinfo(
    request: pytest.FixtureRequest,
    zone: str,
    dtstarts: list[datetime.datetime],
    expected_tzname: str,
    expected_offset: datetime.timedelta,
) -> None:
    """Test PosixTzInfo implementation for known date/times."""
    tz_info = PosixTzInfo(request.getfixturevalue(zone))
    for dtstart in dtstarts:
        value = dtstart.replace(tzinfo=tz_info)
        assert tz_info.tzname(value) == expected_tzname, f"For {dtstart}"
        assert tz_info.utcoffset(value) == expected_offset, f"For {dtstart}"

    assert not tz_info.utcoffset(None)
    assert not tz_info.tzname(None)
    assert not tz_info.dst(None)


def test_no_dst(tokyo: PosixTimezone) -> None:
    """Test the DST adjustment for a timezone without DST."""
    tz_info = PosixTzInfo(tokyo)
    assert tz_info.dst(datetime.datetime(2021, 7, 1, tzinfo=tz_info)) is None


def test_dst_adjustment(eastern: PosixTimezone) -> None:
    """Test the DST adjustment is the difference from standard time."""
    tz_info = PosixTzInfo(eastern)
    assert tz_info.dst(
        datetime.datetime(2021, 7, 1, tzinfo=tz_info)
    ) == datetime.timedelta(hours=1)
    assert tz_info.dst(
        datetime.datetime(2021, 1, 1, tzinfo=tz_info)
    ) == datetime.timedelta(0)


def test_fromutc_fold(eastern: PosixTimezone) -> None:
    """Test converting UTC times in the repeated hour when DST ends."""
    tz_info = PosixTzInfo(eastern)

    first = datetime.datetime(2021, 11, 7, 5, 30, tzinfo=datetime.UTC).astimezone(
        tz_info
    )
    assert first.replace(tzinfo=None) == datetime.datetime(2021, 11, 7, 1, 30)
    assert first.fold == 0
    assert first.tzname() == "EDT"

    second = datetime.datetime(2021, 11, 7, 6, 30, tzinfo=datetime.UTC).astimezone(
        tz_info
    )
    assert second.replace(tzinfo=None) == datetime.datetime(2021, 11, 7, 1, 30)
    assert second.fold == 1
    assert second.tzname() == "EST"

    assert first.astimezone(datetime.UTC) == datetime.datetime(
        2021, 11, 7, 5, 30, tzinfo=datetime.UTC
    )
    assert second.astimezone(datetime.UTC) == datetime.datetime(
        2021, 11, 7, 6, 30, tzinfo=datetime.UTC
    )


def test_fromutc_invalid_tzinfo(eastern: PosixTimezone) -> None:
    """Test fromutc requires the tzinfo to be attached."""
    tz_info = PosixTzInfo(eastern)
    with pytest.raises(ValueError, match="is not self"):
        tz_info.fromutc(datetime.datetime(2021, 1, 1, tzinfo=datetime.UTC))


def test_str() -> None:
    """Test the string representations."""
    tz_info = PosixTzInfo.from_string("EST5EDT,M3.2.0/2,M11.1.0/2")
    assert str(tz_info) == "EST"
    assert (
        repr(tz_info)
        == "PosixTzInfo(EST5:00:00EDT4:00:00,M3.2.0/2:00:00,M11.1.0/2:00:00)"
    )
    assert tz_info.timezone.dst_name == "EDT"


@pytest.mark.parametrize(
    "key,zone",
    [
        ("America/New_York", "eastern"),
        ("Australia/Sydney", "sydney"),
    ],
)
def test_astimezone(request: pytest.FixtureRequest, key: str, zone: str) -> None:
    """Test converting to local time agrees with the system timezone database."""
    tz_info = PosixTzInfo(request.getfixturevalue(zone))
    expected_tz = zoneinfo.ZoneInfo(key)
    value = datetime.datetime(2022, 1, 1, tzinfo=datetime.UTC)
    while value.year < 2023:
        result = value.astimezone(tz_info)
        expected = value.astimezone(expected_tz)
        assert result.replace(tzinfo=None) == expected.replace(tzinfo=None), value
        assert result.fold == expected.fold, value
        assert result.utcoffset() == expected.utcoffset(), value
        assert result.tzname() == expected.tzname(), value
        assert result.astimezone(datetime.UTC) == value
        value += datetime.timedelta(minutes=30)


def test_astimezone_no_dst(tokyo: PosixTimezone) -> None:
    """Test converting to a timezone without DST."""
    tz_info = PosixTzInfo(tokyo)
    result = datetime.datetime(2021, 12, 31, 20, tzinfo=datetime.UTC).astimezone(
        tz_info
    )
    assert result.replace(tzinfo=None) == datetime.datetime(2022, 1, 1, 5)
    assert result.tzname() == "JST"
    assert result.fold == 0


@pytest.mark.parametrize(
    "key,zone,local",
    [
        ("America/New_York", "eastern", datetime.datetime(2021, 3, 14, 2, 30)),
        ("Australia/Sydney", "sydney", datetime.datetime(2021, 10, 3, 2, 30)),
        ("America/New_York", "eastern", datetime.datetime(2021, 11, 7, 1, 30)),
        ("Australia/Sydney", "sydney", datetime.datetime(2021, 4, 4, 2, 30)),
    ],
)
def test_fold_agrees_with_zoneinfo(
    request: pytest.FixtureRequest, key: str, zone: str, local: datetime.datetime
) -> None:
    """Test skipped and repeated wall times use the same offsets as zoneinfo."""
    tz_info = PosixTzInfo(request.getfixturevalue(zone))
    expected_tz = zoneinfo.ZoneInfo(key)
    for fold in (0, 1):
        value = local.replace(tzinfo=tz_info, fold=fold)
        expected = local.replace(tzinfo=expected_tz, fold=fold)
        assert value.utcoffset() == expected.utcoffset(), fold
        assert value.tzname() == expected.tzname(), fold
