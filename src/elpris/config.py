"""Configuration loading from YAML, environment and defaults."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .collectors.elpriset import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .models import DisplayMode, PriceZone

# Load environment variables from .env file
load_dotenv()

KNOWN_KEYS = {"zone", "display_mode", "charging_hours", "decimal_comma", "api_base_url", "timeout"}


@dataclass(frozen=True)
class AnalysisConfig:
    """Options for one pipeline run."""

    display_mode: DisplayMode = DisplayMode.CHRONOLOGICAL
    charging_hours: int | None = None
    decimal_comma: bool = True  # Swedish "0,123" rather than "0.123"

    def __post_init__(self):
        if self.charging_hours is not None and self.charging_hours <= 0:
            raise ValueError(f"charging_hours must be a positive integer, got {self.charging_hours}")


@dataclass(frozen=True)
class Settings:
    """Settings resolved from config file and environment."""

    zone: PriceZone | None = None
    api_base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)


def parse_zone(value: str) -> PriceZone:
    """Parse a zone name such as 'SE3' (case-insensitive)."""
    try:
        return PriceZone(str(value).strip().upper())
    except ValueError:
        valid = ", ".join(z.value for z in PriceZone)
        raise ValueError(f"Unknown price zone {value!r} (expected one of {valid})")


def parse_display_mode(value: str) -> DisplayMode:
    """Parse a display mode name such as 'price_descending'."""
    try:
        return DisplayMode(str(value).strip().lower().replace("-", "_"))
    except ValueError:
        valid = ", ".join(m.value for m in DisplayMode)
        raise ValueError(f"Unknown display mode {value!r} (expected one of {valid})")


def load_config(config_path: Path | None = None) -> Settings:
    """Load settings from an optional YAML file, falling back to environment.

    Environment variables: ELPRIS_CONFIG (config path), ELPRIS_ZONE and
    ELPRIS_API_URL. Values in the file take precedence over the environment.
    """
    if config_path is None and os.environ.get("ELPRIS_CONFIG"):
        config_path = Path(os.environ["ELPRIS_CONFIG"])

    data = {}
    if config_path is not None:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Top-level config in {config_path} must be a mapping")
        unknown = set(data) - KNOWN_KEYS
        if unknown:
            raise ValueError(f"Unknown config keys in {config_path}: {', '.join(sorted(unknown))}")

    zone_value = data.get("zone") or os.environ.get("ELPRIS_ZONE")
    display_mode = data.get("display_mode")

    try:
        timeout = float(data.get("timeout", DEFAULT_TIMEOUT))
    except TypeError:
        raise ValueError(f"timeout must be a number, got {data['timeout']!r}")
    try:
        charging_hours = int(data["charging_hours"]) if data.get("charging_hours") is not None else None
    except TypeError:
        raise ValueError(f"charging_hours must be an integer, got {data['charging_hours']!r}")

    return Settings(
        zone=parse_zone(zone_value) if zone_value else None,
        api_base_url=data.get("api_base_url") or os.environ.get("ELPRIS_API_URL") or DEFAULT_BASE_URL,
        timeout=timeout,
        analysis=AnalysisConfig(
            display_mode=parse_display_mode(display_mode) if display_mode else DisplayMode.CHRONOLOGICAL,
            charging_hours=charging_hours,
            decimal_comma=bool(data.get("decimal_comma", True)),
        ),
    )
