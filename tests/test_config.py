import pytest
from elpris.collectors.elpriset import DEFAULT_BASE_URL
from elpris.config import load_config, parse_display_mode, parse_zone
from elpris.models import DisplayMode, PriceZone


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ELPRIS_ZONE", "ELPRIS_API_URL", "ELPRIS_CONFIG"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_config()

    assert settings.zone is None
    assert settings.api_base_url == DEFAULT_BASE_URL
    assert settings.analysis.display_mode == DisplayMode.CHRONOLOGICAL
    assert settings.analysis.charging_hours is None
    assert settings.analysis.decimal_comma is True


def test_load_from_yaml(tmp_path):
    path = tmp_path / "elpris.yaml"
    path.write_text(
        "zone: se4\n"
        "display_mode: price-descending\n"
        "charging_hours: 4\n"
        "decimal_comma: false\n"
        "timeout: 5\n"
    )

    settings = load_config(path)

    assert settings.zone == PriceZone.SE4
    assert settings.timeout == 5.0
    assert settings.analysis.display_mode == DisplayMode.PRICE_DESCENDING
    assert settings.analysis.charging_hours == 4
    assert settings.analysis.decimal_comma is False


def test_environment(monkeypatch):
    monkeypatch.setenv("ELPRIS_ZONE", "SE2")
    monkeypatch.setenv("ELPRIS_API_URL", "http://localhost:8000/prices")

    settings = load_config()

    assert settings.zone == PriceZone.SE2
    assert settings.api_base_url == "http://localhost:8000/prices"


def test_file_overrides_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("ELPRIS_ZONE", "SE2")
    path = tmp_path / "elpris.yaml"
    path.write_text("zone: SE1\n")

    assert load_config(path).zone == PriceZone.SE1


def test_config_path_from_environment(monkeypatch, tmp_path):
    path = tmp_path / "elpris.yaml"
    path.write_text("charging_hours: 8\n")
    monkeypatch.setenv("ELPRIS_CONFIG", str(path))

    assert load_config().analysis.charging_hours == 8


def test_unknown_keys_rejected(tmp_path):
    path = tmp_path / "elpris.yaml"
    path.write_text("zone: SE3\ncolour: blue\n")

    with pytest.raises(ValueError, match="colour"):
        load_config(path)


def test_invalid_charging_hours(tmp_path):
    path = tmp_path / "elpris.yaml"
    path.write_text("charging_hours: 0\n")

    with pytest.raises(ValueError, match="positive"):
        load_config(path)


def test_parse_zone():
    assert parse_zone(" se3 ") == PriceZone.SE3
    with pytest.raises(ValueError, match="SE5"):
        parse_zone("SE5")


def test_parse_display_mode():
    assert parse_display_mode("CHRONOLOGICAL") == DisplayMode.CHRONOLOGICAL
    with pytest.raises(ValueError):
        parse_display_mode("random")


@pytest.mark.parametrize(
    "content, message",
    [
        ("zone: 3\n", "Unknown price zone"),
        ("display_mode: 1\n", "Unknown display mode"),
        ("charging_hours: [2]\n", "charging_hours"),
        ("timeout: [5]\n", "timeout"),
    ],
)
def test_non_string_values_rejected(tmp_path, content, message):
    path = tmp_path / "elpris.yaml"
    path.write_text(content)

    with pytest.raises(ValueError, match=message):
        load_config(path)
