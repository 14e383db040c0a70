from datetime import datetime, timedelta, timezone

import pytest
from elpris.analysis.series import STOCKHOLM, build_series
from elpris.errors import MalformedSeries
from elpris.models import RawPricePoint


def test_build_series_merges_and_sorts(midnight, make_points):
    """Unsorted points from both days end up in one chronological series."""
    today = make_points(midnight, [0.5, 0.4, 0.3])
    tomorrow = make_points(midnight + timedelta(hours=3), [0.2, 0.1])

    series = build_series(list(reversed(today)), tomorrow[::-1])

    assert [e.price for e in series] == [0.5, 0.4, 0.3, 0.2, 0.1]
    assert [e.source_day for e in series] == ["today"] * 3 + ["tomorrow"] * 2
    assert series[0].start == midnight
    assert series[0].start.tzinfo == STOCKHOLM


def test_build_series_converts_timezone():
    """UTC points are shown in Stockholm time."""
    raw = [RawPricePoint(datetime(2025, 6, 1, 22, 0, tzinfo=timezone.utc), 1.0)]

    series = build_series(raw, [])

    assert series[0].start.hour == 0
    assert series[0].start.day == 2
    assert series[0].instant == datetime(2025, 6, 1, 22, 0, tzinfo=timezone.utc)


def test_build_series_empty():
    """No data for either day is a valid empty series."""
    assert build_series([], []) == ()


def test_build_series_does_not_mutate_inputs(midnight, make_points):
    today = make_points(midnight, [0.3, 0.1, 0.2])[::-1]
    before = list(today)

    build_series(today, [])

    assert today == before


def test_build_series_only_tomorrow(midnight, make_points):
    series = build_series([], make_points(midnight, [0.1, 0.2]))
    assert [e.source_day for e in series] == ["tomorrow", "tomorrow"]


def test_build_series_rejects_duplicates(midnight, make_points):
    today = make_points(midnight, [0.1, 0.2])

    with pytest.raises(MalformedSeries, match="Duplicate"):
        build_series(today, today[1:])


def test_build_series_rejects_gaps(midnight, make_points):
    today = make_points(midnight, [0.1, 0.2])
    tomorrow = make_points(midnight + timedelta(hours=5), [0.3])

    with pytest.raises(MalformedSeries, match="not hourly") as exc_info:
        build_series(today, tomorrow)

    assert exc_info.value.start == midnight + timedelta(hours=5)


def test_build_series_dst_spring_forward(make_points):
    """The 23-hour day in March is still an hourly series."""
    start = datetime(2025, 3, 30, 0, 0, tzinfo=STOCKHOLM)

    series = build_series(make_points(start, [1.0] * 23), [])

    assert len(series) == 23
    assert [e.start.hour for e in series[:4]] == [0, 1, 3, 4]


def test_build_series_dst_fall_back(make_points):
    """The 25-hour day in October keeps both 02:00 hours in order."""
    start = datetime(2025, 10, 26, 0, 0, tzinfo=STOCKHOLM)
    prices = [float(i) for i in range(25)]

    series = build_series(make_points(start, prices)[::-1], [])

    assert [e.price for e in series] == prices
    assert [e.start.hour for e in series[:5]] == [0, 1, 2, 2, 3]
    assert series[2].start.fold == 0
    assert series[3].start.fold == 1
