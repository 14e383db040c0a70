"""Mean and extreme prices over a series."""

import math

from ..errors import EmptySeries
from ..models import PriceSeries, PriceStatistics


def compute_statistics(series: PriceSeries) -> PriceStatistics:
    """Compute mean, cheapest and most expensive hour.

    Ties on price resolve to the earliest hour, for both the cheapest
    and the most expensive entry.

    Raises:
        EmptySeries: if the series has no entries.
    """
    if not series:
        raise EmptySeries()

    mean = math.fsum(e.price for e in series) / len(series)
    cheapest = min(series, key=lambda e: (e.price, e.instant))
    most_expensive = min(series, key=lambda e: (-e.price, e.instant))

    return PriceStatistics(
        mean=mean,
        cheapest=cheapest,
        most_expensive=most_expensive,
        count=len(series),
    )
