"""Fetch, normalize and analyze prices in one pass."""

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from .analysis.ordering import sort_for_display
from .analysis.series import build_series
from .analysis.statistics import compute_statistics
from .analysis.window import find_optimal_window
from .collectors.base import PriceSource
from .config import AnalysisConfig
from .errors import PriceAnalysisError
from .models import ChargingWindowResult, PriceSeries, PriceStatistics, PriceZone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceReport:
    """Everything the presentation layer needs for one run."""

    zone: PriceZone
    day: date
    series: PriceSeries
    entries: PriceSeries  # series in display order
    statistics: PriceStatistics | None  # None when there is no data
    window: ChargingWindowResult | None = None
    window_error: PriceAnalysisError | None = None

    @property
    def has_data(self) -> bool:
        return bool(self.series)


def fetch_series(source: PriceSource, day: date, zone: PriceZone) -> PriceSeries:
    """Fetch `day` and the following day and merge them into one series."""
    raw_today = source.fetch_prices(day, zone)
    raw_tomorrow = source.fetch_prices(day + timedelta(days=1), zone)
    return build_series(raw_today, raw_tomorrow)


def run_pipeline(
    source: PriceSource,
    day: date,
    zone: PriceZone,
    config: AnalysisConfig | None = None,
) -> PriceReport:
    """Run the full analysis for one zone and day.

    An empty series is reported as a report without statistics. A charging
    window that cannot be computed is reported in `window_error` so the
    rest of the report is still usable.

    Raises:
        PriceSourceError: if the source fails.
        MalformedSeries: if the merged prices are not hourly.
    """
    config = config or AnalysisConfig()
    series = fetch_series(source, day, zone)
    entries = sort_for_display(series, config.display_mode)

    if not series:
        logger.info("No prices for %s on %s", zone.value, day)
        return PriceReport(zone=zone, day=day, series=series, entries=entries, statistics=None)

    statistics = compute_statistics(series)

    window = None
    window_error = None
    if config.charging_hours is not None:
        try:
            window = find_optimal_window(series, config.charging_hours)
        except PriceAnalysisError as e:
            window_error = e

    return PriceReport(
        zone=zone,
        day=day,
        series=series,
        entries=entries,
        statistics=statistics,
        window=window,
        window_error=window_error,
    )
