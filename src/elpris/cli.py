"""Command-line interface for Swedish electricity spot prices."""

import json
import logging
from dataclasses import replace
from datetime import date, datetime
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .analysis.series import STOCKHOLM
from .collectors.elpriset import ElprisetClient
from .collectors.files import DirectoryPriceSource
from .config import load_config, parse_zone
from .errors import MalformedSeries, PriceSourceError
from .models import DisplayMode, PriceZone
from .pipeline import run_pipeline
from .reports.prices import UNIT, format_hour, format_price, format_report_text, in_window, report_to_dict

console = Console()

# Window lengths offered on the command line; the analysis accepts any positive length
CHARGING_CHOICES = {"2h": 2, "4h": 4, "8h": 8}

ZONE_NAMES = {
    PriceZone.SE1: "Luleå / Norra Sverige",
    PriceZone.SE2: "Sundsvall / Norra Mellansverige",
    PriceZone.SE3: "Stockholm / Södra Mellansverige",
    PriceZone.SE4: "Malmö / Södra Sverige",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to YAML config")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """Electricity spot prices - find the cheapest hours to charge."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    try:
        ctx.obj["settings"] = load_config(Path(config_path) if config_path else None)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise click.UsageError(f"Could not load config: {e}")


@cli.command()
@click.option("--zone", type=click.Choice([z.value for z in PriceZone], case_sensitive=False), help="Price zone")
@click.option("--date", "date_str", help="Date (YYYY-MM-DD), defaults to today")
@click.option("--sorted", "sort_by_price", is_flag=True, help="List hours from most to least expensive")
@click.option("--charging", type=click.Choice(list(CHARGING_CHOICES)), help="Find the cheapest charging window")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--plain", is_flag=True, help="Use '.' as decimal separator")
@click.option(
    "--data-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Read saved price files from a directory instead of the API",
)
@click.pass_context
def prices(ctx, zone, date_str, sort_by_price, charging, as_json, plain, data_dir):
    """Show prices for today and tomorrow with statistics."""
    settings = ctx.obj["settings"]

    price_zone = parse_zone(zone) if zone else settings.zone
    if price_zone is None:
        console.print("[red]Error: --zone is required (or set ELPRIS_ZONE)[/red]")
        ctx.exit(2)

    if date_str:
        try:
            day = date.fromisoformat(date_str)
        except ValueError:
            console.print(f"[red]Error: invalid date {date_str!r}, expected YYYY-MM-DD[/red]")
            ctx.exit(2)
    else:
        day = datetime.now(STOCKHOLM).date()

    analysis = settings.analysis
    if sort_by_price:
        analysis = replace(analysis, display_mode=DisplayMode.PRICE_DESCENDING)
    if charging:
        analysis = replace(analysis, charging_hours=CHARGING_CHOICES[charging])
    if plain:
        analysis = replace(analysis, decimal_comma=False)

    if data_dir:
        source = DirectoryPriceSource(Path(data_dir))
    else:
        source = ElprisetClient(base_url=settings.api_base_url, timeout=settings.timeout)

    try:
        report = run_pipeline(source, day, price_zone, analysis)
    except PriceSourceError as e:
        console.print(f"[red]Failed to fetch prices: {e}[/red]")
        ctx.exit(1)
    except MalformedSeries as e:
        console.print(f"[red]Price data is inconsistent: {e}[/red]")
        ctx.exit(1)

    if as_json:
        click.echo(json.dumps(report_to_dict(report), indent=2))
    elif not report.has_data:
        console.print(f"[yellow]{format_report_text(report)}[/yellow]")
    else:
        decimal_comma = analysis.decimal_comma

        title = "by price" if analysis.display_mode == DisplayMode.PRICE_DESCENDING else "by hour"
        table = Table(title=f"Spot prices {price_zone.value} ({title})")
        table.add_column("Hour", style="cyan")
        table.add_column(f"Price ({UNIT})", justify="right")
        table.add_column("Day", style="dim")

        for entry in report.entries:
            style = "green" if in_window(entry, report.window) else None
            table.add_row(format_hour(entry), format_price(entry.price, decimal_comma), entry.source_day, style=style)

        console.print(table)
        console.print(format_report_text(report, decimal_comma), soft_wrap=True)

    if report.window_error:
        ctx.exit(1)


@cli.command()
def zones():
    """List the Swedish price zones."""
    table = Table(title="Price zones")
    table.add_column("Zone", style="cyan")
    table.add_column("Region")

    for zone in PriceZone:
        table.add_row(zone.value, ZONE_NAMES[zone])

    console.print(table)


if __name__ == "__main__":
    cli()
