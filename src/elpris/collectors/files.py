"""Local file price source.

Reads price files saved from the API, one per day and zone, named
<YYYY-MM-DD>_<ZONE>.json. Useful for offline runs and tests.
"""

import json
import logging
from datetime import date
from pathlib import Path

from ..errors import PriceSourceError
from ..models import PriceZone, RawPricePoint
from .elpriset import parse_prices

logger = logging.getLogger(__name__)


def price_file_name(day: date, zone: PriceZone) -> str:
    """File name used for one day of prices."""
    return f"{day.isoformat()}_{zone.value}.json"


class DirectoryPriceSource:
    """Price source reading API-formatted JSON files from a directory."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def fetch_prices(self, day: date, zone: PriceZone) -> list[RawPricePoint]:
        """Load prices for one day. A missing file means no data."""
        path = self.directory / price_file_name(day, zone)
        if not path.exists():
            logger.info("No price file at %s", path)
            return []

        try:
            with open(path, encoding="utf-8") as f:
                payload = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise PriceSourceError(f"Invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise PriceSourceError(f"Could not read {path}: {e}") from e

        return parse_prices(payload)
