"""Price source abstraction and series construction.

Each concrete PriceSource knows how to fetch one day of hourly prices for one
zone. `build_series` holds the shared flow: fetch anchor day → fail if empty →
fetch following day → append if present (a failure there is not fatal).
"""

from abc import ABC, abstractmethod
from datetime import date, timedelta

from loguru import logger
import requests

from spotpris.analysis.series import PriceSeries
from spotpris.data.elpriser import NoDataError, fetch_price


class PriceSource(ABC):
    """Base class for all price sources."""

    @abstractmethod
    def fetch_prices(self, day: date, zone: str) -> PriceSeries:
        """Return the chronological hourly series for `day`, empty if unpublished."""


# =============================================================================
# elprisetjustnu.se Source
# =============================================================================


class ElprisetJustNuSource(PriceSource):
    """Data source for the elprisetjustnu.se REST API."""

    def fetch_prices(self, day: date, zone: str) -> PriceSeries:
        return PriceSeries.from_frame(fetch_price(day, zone))


# =============================================================================
# In-memory Source
# =============================================================================


class StaticPriceSource(PriceSource):
    """Serves pre-built series keyed by (date, zone), or by date for any zone."""

    def __init__(self, series_by_day: dict):
        self.series_by_day = series_by_day

    def fetch_prices(self, day: date, zone: str) -> PriceSeries:
        if (day, zone) in self.series_by_day:
            return self.series_by_day[(day, zone)]
        return self.series_by_day.get(day, PriceSeries())


def build_series(source: PriceSource, day: date, zone: str) -> PriceSeries:
    """Concatenate prices for `day` and the following day in chronological order.

    Args:
        source: Where to fetch prices from.
        day: Anchor date; its prices are required.
        zone: Bidding zone.

    Returns:
        Chronological series covering `day` and, when published, `day + 1`.
        A failed download of `day + 1` is logged and leaves it out.

    Raises:
        NoDataError: If no prices are available for the anchor date.
        requests.RequestException: If the anchor date cannot be downloaded.
    """
    series = source.fetch_prices(day, zone)
    if not series:
        raise NoDataError(f"No prices available for {day} in zone {zone}")
    logger.info(f"Fetched {len(series)} hourly prices for {day} ({zone})")

    next_day = day + timedelta(days=1)
    try:
        following = source.fetch_prices(next_day, zone)
    except (requests.RequestException, NoDataError) as e:
        logger.warning(f"Could not fetch prices for {next_day}, using {day} only: {e}")
        following = PriceSeries()

    if following:
        logger.info(f"Fetched {len(following)} hourly prices for {next_day} ({zone})")
        series = series.concat(following)
    else:
        logger.debug(f"No prices for {next_day} yet, using {day} only")

    return series
