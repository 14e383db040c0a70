"""Cheapest contiguous charging window search."""

from decimal import Decimal

from ..errors import InsufficientData, InvalidWindowLength
from ..models import ChargingWindowResult, PriceSeries
from .series import ONE_HOUR


def _exact(price: float) -> Decimal:
    # Shortest repr, so 0.1 is Decimal("0.1") rather than its binary expansion
    return Decimal(repr(price))


def find_optimal_window(series: PriceSeries, hours: int) -> ChargingWindowResult:
    """Find the run of `hours` consecutive entries with the lowest total price.

    Uses a sliding sum: the first window is summed once, then each step
    drops the entry leaving the window and adds the one entering it.
    Sums are kept as Decimal so that equal windows compare equal, and the
    earliest of several equally cheap windows is returned.

    The series must already be chronological and hourly (see build_series).

    Raises:
        InvalidWindowLength: if hours is zero or negative.
        InsufficientData: if the series has fewer than `hours` entries.
    """
    if hours <= 0:
        raise InvalidWindowLength(hours)
    if len(series) < hours:
        raise InsufficientData(hours, len(series))

    prices = [_exact(e.price) for e in series]

    window_sum = sum(prices[:hours], Decimal(0))
    best_sum = window_sum
    best_start = 0

    for start in range(1, len(prices) - hours + 1):
        window_sum += prices[start + hours - 1] - prices[start - 1]
        if window_sum < best_sum:
            best_sum = window_sum
            best_start = start

    entries = series[best_start:best_start + hours]
    return ChargingWindowResult(
        start_index=best_start,
        start=entries[0].start,
        end=(entries[-1].instant + ONE_HOUR).astimezone(entries[-1].start.tzinfo),
        hours=hours,
        total_cost=float(best_sum),
        average_cost=float(best_sum / hours),
        entries=entries,
    )
