"""Ordering of price series for display."""

from ..models import DisplayMode, PriceSeries


def sort_for_display(series: PriceSeries, mode: DisplayMode) -> PriceSeries:
    """Return a new tuple of the series entries in display order.

    PRICE_DESCENDING is a stable sort, so hours sharing a price stay in
    chronological order.
    """
    if mode == DisplayMode.CHRONOLOGICAL:
        return tuple(series)
    if mode == DisplayMode.PRICE_DESCENDING:
        return tuple(sorted(series, key=lambda e: e.price, reverse=True))
    raise ValueError(f"Unknown display mode: {mode}")
