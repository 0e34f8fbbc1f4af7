from datetime import datetime, timedelta, timezone

import pytest

from viewgrowth.core.names import Timeframe
from viewgrowth.runtime.cutoffs import EPOCH, resolve_cutoff, subtract_months

NOW = datetime(2024, 3, 31, 9, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "timeframe, expected",
    [
        ("1month", datetime(2024, 2, 29, 9, 30, tzinfo=timezone.utc)),
        ("3months", datetime(2023, 12, 31, 9, 30, tzinfo=timezone.utc)),
        ("6months", datetime(2023, 9, 30, 9, 30, tzinfo=timezone.utc)),
        ("1year", datetime(2023, 3, 31, 9, 30, tzinfo=timezone.utc)),
        ("all", EPOCH),
    ],
)
def test_timeframes(timeframe, expected):
    assert resolve_cutoff(timeframe, now=NOW) == expected
    assert resolve_cutoff(Timeframe(timeframe), now=NOW) == expected


def test_month_subtraction_crosses_year():
    ts = datetime(2024, 1, 15, tzinfo=timezone.utc)
    assert subtract_months(ts, 1) == datetime(2023, 12, 15, tzinfo=timezone.utc)
    leap = datetime(2024, 2, 29, tzinfo=timezone.utc)
    assert subtract_months(leap, 12) == datetime(2023, 2, 28, tzinfo=timezone.utc)


def test_explicit_instants_are_normalised():
    tz = timezone(timedelta(hours=2))
    assert resolve_cutoff(datetime(2024, 5, 1, 2, 0, tzinfo=tz)) == datetime(
        2024, 5, 1, tzinfo=timezone.utc
    )
    assert resolve_cutoff("2024-05-01T00:00:00Z") == datetime(2024, 5, 1, tzinfo=timezone.utc)
    assert resolve_cutoff(datetime(2024, 5, 1)).tzinfo == timezone.utc


def test_non_utc_now_is_converted():
    now = datetime(2024, 4, 1, 1, 0, tzinfo=timezone(timedelta(hours=3)))
    assert resolve_cutoff("1month", now=now) == datetime(2024, 2, 29, 22, 0, tzinfo=timezone.utc)


def test_unknown_timeframe_is_rejected():
    with pytest.raises(ValueError):
        resolve_cutoff("2weeks", now=NOW)
