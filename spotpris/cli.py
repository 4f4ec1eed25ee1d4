"""Command-line entry point for spot price analysis.

Fetches day-ahead prices for the chosen date (plus the following day when
published), prints the hourly prices, summary statistics and the cheapest
charging windows.
"""

from datetime import date, datetime, timedelta
import re
import sys

from loguru import logger
import pandas as pd
import requests
import typer

from spotpris.config import DEFAULT_WINDOW_HOURS, DEFAULT_ZONE, MARKET_TIMEZONE, VALID_ZONES
from spotpris.data.elpriser import NoDataError
from spotpris.data.sources import ElprisetJustNuSource, PriceSource, build_series
from spotpris.report import ReportOptions, render_report

app = typer.Typer(help="Swedish day-ahead electricity price analysis.", add_completion=False)

DATE_ALIASES = {
    "today": 0,
    "idag": 0,
    "tomorrow": 1,
    "imorgon": 1,
}

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
CHARGING_PATTERN = re.compile(r"^(\d+)h?$", re.IGNORECASE)


def resolve_date(value: str | None, today: date) -> date:
    """Turn a --date value into a calendar date.

    Args:
        value: "YYYY-MM-DD", "today"/"tomorrow" (or "idag"/"imorgon"), or None
            for tomorrow.
        today: Current date in the market timezone.

    Raises:
        typer.BadParameter: If the value is not a valid date.
    """
    if value is None:
        return today + timedelta(days=1)

    token = value.strip().lower()
    if token in DATE_ALIASES:
        return today + timedelta(days=DATE_ALIASES[token])

    if not DATE_PATTERN.match(token):
        raise typer.BadParameter(f"Invalid date '{value}'. Use YYYY-MM-DD, today or tomorrow.")
    try:
        return datetime.strptime(token, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter(f"Invalid date '{value}'. Use YYYY-MM-DD, today or tomorrow.")


def parse_charging(value: str | None) -> tuple[int, ...]:
    """Turn a --charging value such as "4h" into the window lengths to report.

    Raises:
        typer.BadParameter: If the value is not a positive number of hours.
    """
    if value is None:
        return DEFAULT_WINDOW_HOURS

    match = CHARGING_PATTERN.match(value.strip())
    if not match or int(match.group(1)) < 1:
        raise typer.BadParameter(f"Invalid charging duration '{value}'. Use e.g. 2h, 4h or 8h.")
    return (int(match.group(1)),)


def parse_zone(value: str) -> str:
    zone = value.strip().upper()
    if zone not in VALID_ZONES:
        raise typer.BadParameter(f"Unknown zone '{value}'. Valid: {', '.join(VALID_ZONES)}")
    return zone


def current_date() -> date:
    return pd.Timestamp.now(tz=MARKET_TIMEZONE).date()


def get_source() -> PriceSource:
    return ElprisetJustNuSource()


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


@app.command()
def prices(
    date_value: str = typer.Option(
        None, "--date", help="Date to analyze: YYYY-MM-DD, today or tomorrow (default)."
    ),
    zone: str = typer.Option(DEFAULT_ZONE, "--zone", help="Bidding zone: SE1, SE2, SE3 or SE4."),
    sorted_listing: bool = typer.Option(
        False, "--sorted", help="List hourly prices from most to least expensive."
    ),
    charging: str = typer.Option(
        None, "--charging", help="Charging window length, e.g. 2h, 4h or 8h (default: all three)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
):
    """Show hourly prices, statistics and the cheapest charging windows."""
    _configure_logging(verbose)

    day = resolve_date(date_value, current_date())
    zone = parse_zone(zone)
    window_hours = parse_charging(charging)

    try:
        series = build_series(get_source(), day, zone)
    except NoDataError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except requests.RequestException as e:
        logger.error(f"Price download failed: {e}")
        typer.echo(f"Error: could not fetch prices for {day} in zone {zone}.", err=True)
        raise typer.Exit(code=1)

    options = ReportOptions(
        day=day, zone=zone, sorted_listing=sorted_listing, window_hours=window_hours
    )
    for line in render_report(series, options):
        typer.echo(line)


if __name__ == "__main__":
    app()
