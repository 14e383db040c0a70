"""Data models for spot prices and derived results."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

SOURCE_TODAY = "today"
SOURCE_TOMORROW = "tomorrow"


class PriceZone(str, Enum):
    """Swedish electricity price zones."""

    SE1 = "SE1"  # Luleå
    SE2 = "SE2"  # Sundsvall
    SE3 = "SE3"  # Stockholm
    SE4 = "SE4"  # Malmö


class DisplayMode(str, Enum):
    """How a price listing is ordered for output."""

    CHRONOLOGICAL = "chronological"
    PRICE_DESCENDING = "price_descending"


@dataclass(frozen=True)
class RawPricePoint:
    """A single hourly price as delivered by a price source."""

    start: datetime  # timezone-aware, hour-aligned
    price: float  # SEK/kWh


@dataclass(frozen=True)
class PriceEntry:
    """An hourly price normalized to the display timezone."""

    start: datetime
    price: float
    source_day: str  # 'today' or 'tomorrow'

    @property
    def instant(self) -> datetime:
        """The start as a UTC instant, safe to compare across DST changes."""
        return self.start.astimezone(timezone.utc)


# Strictly increasing, one entry per hour. Never mutated once built.
PriceSeries = tuple[PriceEntry, ...]


@dataclass(frozen=True)
class PriceStatistics:
    """Summary statistics over a price series."""

    mean: float
    cheapest: PriceEntry
    most_expensive: PriceEntry
    count: int


@dataclass(frozen=True)
class ChargingWindowResult:
    """The cheapest run of consecutive hours found in a series."""

    start_index: int
    start: datetime
    end: datetime  # exclusive
    hours: int
    total_cost: float
    average_cost: float
    entries: PriceSeries
