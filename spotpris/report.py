"""Console report rendering.

Builds the complete list of output lines before anything is printed, so a
failure part-way through never leaves a partial report on screen.
"""

from dataclasses import dataclass
from datetime import date

from loguru import logger

from spotpris.analysis import (
    ChargingWindow,
    PriceSeries,
    PriceStatistics,
    compute_statistics,
    find_cheapest_window,
    to_display_unit,
)
from spotpris.config import (
    DECIMAL_SEPARATOR,
    DEFAULT_WINDOW_HOURS,
    DISPLAY_UNIT,
    TIME_FORMAT,
    TOTAL_UNIT,
)


@dataclass(frozen=True)
class ReportOptions:
    """What to show for one run."""

    day: date
    zone: str
    sorted_listing: bool = False
    window_hours: tuple[int, ...] = DEFAULT_WINDOW_HOURS
    decimal_separator: str = DECIMAL_SEPARATOR


def _price(value: float, options: ReportOptions) -> str:
    return to_display_unit(value, options.decimal_separator)


def hourly_lines(series: PriceSeries, options: ReportOptions) -> list[str]:
    return [
        f"{point.start_time.strftime(TIME_FORMAT)}: "
        f"{_price(point.price_per_unit, options)} {DISPLAY_UNIT}"
        for point in series
    ]


def statistics_lines(stats: PriceStatistics, options: ReportOptions) -> list[str]:
    cheapest, priciest = stats.cheapest, stats.priciest
    return [
        "Statistics",
        f"Date: {options.day}",
        f"Zone: {options.zone}",
        f"Mean price: {_price(stats.mean, options)} {DISPLAY_UNIT}",
        f"Cheapest hour: {cheapest.start_time.strftime(TIME_FORMAT)} - "
        f"{_price(cheapest.price_per_unit, options)} {DISPLAY_UNIT}",
        f"Priciest hour: {priciest.start_time.strftime(TIME_FORMAT)} - "
        f"{_price(priciest.price_per_unit, options)} {DISPLAY_UNIT}",
    ]


def window_line(window: ChargingWindow, options: ReportOptions) -> str:
    start = window.start_time.strftime(TIME_FORMAT)
    end = window.end_time.strftime(TIME_FORMAT)
    return (
        f"Cheapest price for {window.hours}h window: {start}–{end} "
        f"({_price(window.total, options)} {TOTAL_UNIT} total, "
        f"{_price(window.average, options)} {DISPLAY_UNIT} average)"
    )


def render_report(series: PriceSeries, options: ReportOptions) -> list[str]:
    """Render the hourly listing, statistics block and charging windows.

    Statistics and window search always run on `series` as given, which must
    be chronological. A series with gaps still gets its listing and statistics
    but no charging windows. `sorted_listing` only reorders the hourly listing.

    Args:
        series: Chronological price series.
        options: Date, zone and display choices for the run.

    Returns:
        Output lines, in print order.
    """
    listing = series.by_price_descending() if options.sorted_listing else series
    lines = hourly_lines(listing, options)
    lines.extend(statistics_lines(compute_statistics(series), options))

    if not series.is_contiguous():
        logger.warning("Hourly prices have gaps, skipping charging windows")
        return lines

    for hours in options.window_hours:
        window = find_cheapest_window(series, hours)
        if window is None:
            logger.warning(f"Only {len(series)} hourly prices, skipping {hours}h window")
            continue
        lines.append(window_line(window, options))

    return lines
