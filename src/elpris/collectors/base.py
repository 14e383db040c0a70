"""Interface shared by all price sources."""

from datetime import date
from typing import Protocol

from ..models import PriceZone, RawPricePoint


class PriceSource(Protocol):
    """Anything that can supply one day of hourly prices for a zone."""

    def fetch_prices(self, day: date, zone: PriceZone) -> list[RawPricePoint]:
        """Return the prices for `day`, or an empty list if none are published."""
        ...
