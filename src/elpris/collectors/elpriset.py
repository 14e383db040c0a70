"""Elpriset Just Nu spot price collector.

Fetches day-ahead spot prices for Swedish price zones from the public
elprisetjustnu.se API.

Endpoint: https://www.elprisetjustnu.se/api/v1/prices/<YYYY>/<MM-DD>_<ZONE>.json
Each record holds time_start, time_end, SEK_per_kWh, EUR_per_kWh and EXR.
Days after the switch to a 15-minute market return four records per hour;
these are averaged back to hourly prices.
"""

import logging
from datetime import date, datetime
from typing import Any

import httpx

from ..errors import PriceSourceError
from ..models import PriceZone, RawPricePoint

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.elprisetjustnu.se/api/v1/prices"
DEFAULT_TIMEOUT = 30.0


def build_url(day: date, zone: PriceZone, base_url: str = DEFAULT_BASE_URL) -> str:
    """Build the API URL for one day and zone."""
    return f"{base_url.rstrip('/')}/{day.year}/{day.strftime('%m-%d')}_{zone.value}.json"


def parse_prices(payload: Any) -> list[RawPricePoint]:
    """Parse an API payload into hourly price points.

    Sub-hourly records are grouped by the hour they start in and averaged.

    Raises:
        PriceSourceError: if the payload is not a list of price records.
    """
    if not isinstance(payload, list):
        raise PriceSourceError(f"Expected a list of prices, got {type(payload).__name__}")

    # Group by hour start
    hours: dict[datetime, list[float]] = {}
    for record in payload:
        try:
            start = datetime.fromisoformat(record["time_start"])
            price = float(record["SEK_per_kWh"])
        except (KeyError, TypeError, ValueError) as e:
            raise PriceSourceError(f"Invalid price record {record!r}: {e}") from e

        if start.tzinfo is None:
            raise PriceSourceError(f"Price record has no UTC offset: {record['time_start']}")

        hour_start = start.replace(minute=0, second=0, microsecond=0)
        hours.setdefault(hour_start, []).append(price)

    return [
        RawPricePoint(start=hour_start, price=sum(prices) / len(prices))
        for hour_start, prices in hours.items()
    ]


class ElprisetClient:
    """Price source backed by the elprisetjustnu.se HTTP API."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url
        self.timeout = timeout

    def fetch_prices(self, day: date, zone: PriceZone) -> list[RawPricePoint]:
        """Fetch hourly prices for one day.

        Returns an empty list when the day has not been published yet
        (the API answers 404 until tomorrow's prices are out).
        """
        url = build_url(day, zone, self.base_url)
        logger.debug("Fetching %s", url)

        try:
            response = httpx.get(url, timeout=self.timeout)
        except httpx.HTTPError as e:
            raise PriceSourceError(f"Network error fetching prices for {zone.value} on {day}: {e}") from e

        if response.status_code == 404:
            logger.info("No prices published for %s on %s", zone.value, day)
            return []

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise PriceSourceError(
                f"HTTP error from price API: {e.response.status_code} for {zone.value} on {day}"
            ) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise PriceSourceError(f"Price API returned invalid JSON for {zone.value} on {day}") from e

        points = parse_prices(payload)
        logger.debug("Got %d hourly prices for %s on %s", len(points), zone.value, day)
        return points
