"""elprisetjustnu.se API download functions.

Fetches Swedish day-ahead prices (SEK/kWh) for one day and one bidding zone.
The API publishes one JSON file per day and zone; a missing file (404) means
prices for that day are not published yet.

API functions:
- build_url(): Map date and zone to the day's JSON URL
- fetch_price(): Download one day as an hourly DataFrame
- NoDataError: Custom exception
"""

from datetime import date

from loguru import logger
import pandas as pd
import requests

from spotpris.config import MARKET_TIMEZONE
from spotpris.config.elpriser import ELPRISER_BASE_URL, PRICE_FIELD, REQUEST_TIMEOUT


class NoDataError(Exception):
    """Raised when no prices are available for the requested day and zone."""

    pass


def build_url(day: date, zone: str) -> str:
    """Return the JSON URL for `day` in `zone`, e.g. .../2025/10-20_SE3.json."""
    return f"{ELPRISER_BASE_URL}/{day:%Y}/{day:%m-%d}_{zone}.json"


def _empty_frame() -> pd.DataFrame:
    index = pd.DatetimeIndex([], tz=MARKET_TIMEZONE, name="time")
    return pd.DataFrame({"price": []}, index=index, dtype=float)


def fetch_price(day: date, zone: str) -> pd.DataFrame:
    """Fetch day-ahead prices from elprisetjustnu.se.

    Quarter-hour prices (published since October 2025) are averaged to
    hourly prices so every row covers exactly one hour.

    Args:
        day: Delivery date.
        zone: Bidding zone, e.g. "SE3".

    Returns:
        DataFrame with a DatetimeIndex named "time" in the market timezone
        and a "price" column (SEK/kWh), sorted chronologically. Empty when
        the day is not published.

    Raises:
        requests.HTTPError: For any error response other than 404.
        NoDataError: If an entry lacks its start time or SEK price.
    """
    url = build_url(day, zone)
    logger.debug(f"Fetching prices for {day} in {zone}: {url}")
    response = requests.get(url, timeout=REQUEST_TIMEOUT)

    if response.status_code == 404:
        logger.debug(f"No prices published for {day} in {zone}")
        return _empty_frame()
    response.raise_for_status()

    data = response.json()
    if not data:
        return _empty_frame()

    df = pd.DataFrame(data)
    missing = {"time_start", PRICE_FIELD} - set(df.columns)
    if missing or df[["time_start", PRICE_FIELD]].isna().any().any():
        raise NoDataError(f"Malformed price data for {day} in {zone}: {url}")

    df["time"] = pd.to_datetime(df["time_start"], utc=True)
    df = df.set_index("time")[[PRICE_FIELD]].rename(columns={PRICE_FIELD: "price"})
    df = df.sort_index()

    rows = len(df)
    df = df.resample("1h").mean().dropna(subset=["price"])
    if len(df) != rows:
        logger.debug(f"Aggregated {rows} intervals to {len(df)} hourly prices")

    df.index = df.index.tz_convert(MARKET_TIMEZONE)
    return df
