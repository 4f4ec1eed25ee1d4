"""Pytest configuration and shared fixtures."""

from datetime import date

import pandas as pd
import pytest

from spotpris.analysis.series import PricePoint, PriceSeries
from spotpris.config import MARKET_TIMEZONE


def series_from_prices(prices, start="2025-10-20 00:00") -> PriceSeries:
    """Hourly series with consecutive start times beginning at `start` (market time)."""
    times = pd.date_range(start=start, periods=len(prices), freq="h", tz=MARKET_TIMEZONE)
    return PriceSeries(PricePoint(ts, float(p)) for ts, p in zip(times, prices))


@pytest.fixture
def make_series():
    """Factory fixture building an hourly series from a list of prices."""
    return series_from_prices


@pytest.fixture
def anchor_day() -> date:
    return date(2025, 10, 20)


@pytest.fixture
def day_prices() -> list[float]:
    """24 hourly SEK/kWh prices with a cheap night and an expensive evening."""
    return [
        0.45, 0.40, 0.32, 0.30, 0.31, 0.38,
        0.62, 0.95, 1.10, 0.88, 0.70, 0.65,
        0.60, 0.58, 0.61, 0.72, 0.98, 1.45,
        1.60, 1.32, 0.99, 0.80, 0.66, 0.50,
    ]


@pytest.fixture
def api_payload():
    """Factory for elprisetjustnu.se JSON entries starting at `start` (local ISO)."""

    def _payload(prices, start="2025-10-20T00:00:00+02:00", minutes=60):
        start_ts = pd.Timestamp(start)
        step = pd.Timedelta(minutes=minutes)
        return [
            {
                "SEK_per_kWh": price,
                "EUR_per_kWh": round(price / 11, 5),
                "EXR": 11.0,
                "time_start": (start_ts + i * step).isoformat(),
                "time_end": (start_ts + (i + 1) * step).isoformat(),
            }
            for i, price in enumerate(prices)
        ]

    return _payload
