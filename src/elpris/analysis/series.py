"""Merge two days of raw prices into one hourly series."""

import logging
from datetime import timedelta, tzinfo
from typing import Iterable
from zoneinfo import ZoneInfo

from ..errors import MalformedSeries
from ..models import SOURCE_TODAY, SOURCE_TOMORROW, PriceEntry, PriceSeries, RawPricePoint

logger = logging.getLogger(__name__)

STOCKHOLM = ZoneInfo("Europe/Stockholm")
ONE_HOUR = timedelta(hours=1)


def to_entries(
    raw: Iterable[RawPricePoint], source_day: str, tz: tzinfo = STOCKHOLM
) -> list[PriceEntry]:
    """Convert raw points to entries in the display timezone."""
    return [PriceEntry(start=p.start.astimezone(tz), price=p.price, source_day=source_day) for p in raw]


def check_hourly(series: PriceSeries) -> None:
    """Raise MalformedSeries unless entries are exactly one hour apart.

    Spacing is measured on UTC instants, so 23- and 25-hour DST days pass.
    """
    for prev, cur in zip(series, series[1:]):
        step = cur.instant - prev.instant
        if step == timedelta(0):
            raise MalformedSeries(f"Duplicate price for {cur.start.isoformat()}", cur.start)
        if step != ONE_HOUR:
            raise MalformedSeries(
                f"Prices are not hourly between {prev.start.isoformat()} and {cur.start.isoformat()}",
                cur.start,
            )


def build_series(
    raw_today: Iterable[RawPricePoint],
    raw_tomorrow: Iterable[RawPricePoint],
    tz: tzinfo = STOCKHOLM,
) -> PriceSeries:
    """Build a chronological price series from today's and tomorrow's points.

    Either day may be empty (tomorrow is usually published in the early
    afternoon). An empty series means no data is available.
    """
    entries = to_entries(raw_today, SOURCE_TODAY, tz) + to_entries(raw_tomorrow, SOURCE_TOMORROW, tz)
    series = tuple(sorted(entries, key=lambda e: e.instant))
    check_hourly(series)
    logger.debug(
        "Built series with %d entries (%d today, %d tomorrow)",
        len(series),
        sum(1 for e in series if e.source_day == SOURCE_TODAY),
        sum(1 for e in series if e.source_day == SOURCE_TOMORROW),
    )
    return series
