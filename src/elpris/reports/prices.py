"""Format price reports for the terminal and for JSON output."""

from ..analysis.series import ONE_HOUR
from ..models import ChargingWindowResult, PriceEntry
from ..pipeline import PriceReport

UNIT = "SEK/kWh"


def format_price(value: float, decimal_comma: bool = True) -> str:
    """Format a price with three decimals, e.g. '0,123' or '0.123'."""
    text = f"{value:.3f}"
    return text.replace(".", ",") if decimal_comma else text


def format_hour(entry: PriceEntry) -> str:
    """Format an entry's hour span, e.g. '2025-03-01 13:00-14:00'.

    The end is the wall-clock time one real hour later, so DST days show
    '01:00-03:00' in March and '02:00-02:00' for the first repeated hour
    in October.
    """
    end = (entry.instant + ONE_HOUR).astimezone(entry.start.tzinfo)
    return f"{entry.start.strftime('%Y-%m-%d %H:00')}-{end.strftime('%H:00')}"


def in_window(entry: PriceEntry, window: ChargingWindowResult | None) -> bool:
    """Whether an entry is one of the window's hours."""
    if window is None:
        return False
    return any(entry.instant == e.instant for e in window.entries)


def format_window(window: ChargingWindowResult, decimal_comma: bool = True) -> str:
    """Format a charging window as a single line."""
    return (
        f"{window.start.strftime('%Y-%m-%d %H:%M')} - {window.end.strftime('%H:%M')} "
        f"(total {format_price(window.total_cost, decimal_comma)} {UNIT}, "
        f"average {format_price(window.average_cost, decimal_comma)} {UNIT})"
    )


def _entry_dict(entry: PriceEntry) -> dict:
    return {
        "start": entry.start.isoformat(),
        "price": entry.price,
        "source_day": entry.source_day,
    }


def report_to_dict(report: PriceReport) -> dict:
    """Convert a report to a JSON-serializable dict."""
    data = {
        "zone": report.zone.value,
        "date": report.day.isoformat(),
        "unit": UNIT,
        "count": len(report.series),
        "prices": [_entry_dict(e) for e in report.entries],
        "statistics": None,
        "charging_window": None,
    }

    if report.statistics:
        data["statistics"] = {
            "mean": round(report.statistics.mean, 5),
            "cheapest": _entry_dict(report.statistics.cheapest),
            "most_expensive": _entry_dict(report.statistics.most_expensive),
        }

    if report.window:
        data["charging_window"] = {
            "start": report.window.start.isoformat(),
            "end": report.window.end.isoformat(),
            "hours": report.window.hours,
            "total_cost": round(report.window.total_cost, 5),
            "average_cost": round(report.window.average_cost, 5),
        }
    elif report.window_error:
        data["charging_window"] = {"error": str(report.window_error)}

    return data


def format_report_text(report: PriceReport, decimal_comma: bool = True) -> str:
    """Format the statistics and charging window as human-readable text."""
    if not report.has_data:
        return f"No data available for {report.zone.value} on {report.day.isoformat()}"

    stats = report.statistics
    lines = [
        f"Electricity prices for zone {report.zone.value} ({len(report.series)} hours)",
        f"- Mean price: {format_price(stats.mean, decimal_comma)} {UNIT}",
        f"- Cheapest hour: {format_hour(stats.cheapest)} "
        f"({format_price(stats.cheapest.price, decimal_comma)} {UNIT})",
        f"- Most expensive hour: {format_hour(stats.most_expensive)} "
        f"({format_price(stats.most_expensive.price, decimal_comma)} {UNIT})",
    ]

    if report.window:
        lines.append(
            f"- Best {report.window.hours}h charging window: "
            f"{format_window(report.window, decimal_comma)}"
        )
    elif report.window_error:
        lines.append(f"- Charging window: {report.window_error}")

    return "\n".join(lines)
