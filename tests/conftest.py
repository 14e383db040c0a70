from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from elpris.models import RawPricePoint

STOCKHOLM = ZoneInfo("Europe/Stockholm")


@pytest.fixture
def midnight():
    return datetime(2025, 3, 1, 0, 0, tzinfo=STOCKHOLM)


@pytest.fixture
def make_points():
    """Build consecutive hourly raw points starting at a given time."""

    def _make(start: datetime, prices: list[float]) -> list[RawPricePoint]:
        start_utc = start.astimezone(timezone.utc)
        return [RawPricePoint(start_utc + timedelta(hours=i), price) for i, price in enumerate(prices)]

    return _make


@pytest.fixture
def make_records():
    """Build an API payload for one day of hourly prices."""

    def _make(day: str, prices: list[float], offset: str = "+01:00", first_hour: int = 0) -> list[dict]:
        return [
            {
                "SEK_per_kWh": price,
                "EUR_per_kWh": round(price / 11.5, 5),
                "EXR": 11.5,
                "time_start": f"{day}T{hour:02d}:00:00{offset}",
                "time_end": f"{day}T{hour:02d}:59:59{offset}",
            }
            for hour, price in enumerate(prices, start=first_hour)
        ]

    return _make
