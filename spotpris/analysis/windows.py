"""Cheapest contiguous charging window search."""

from dataclasses import dataclass
import math

from loguru import logger
import pandas as pd

from spotpris.analysis.series import PriceSeries


@dataclass(frozen=True)
class ChargingWindow:
    """A block of `hours` consecutive points starting at `start_index`.

    `total` is the unrounded sum of the block's SEK/kWh prices. The window
    covers [start_time, end_time), where end_time is one hour after the start
    of the last included point.
    """

    start_index: int
    hours: int
    total: float
    start_time: pd.Timestamp
    end_time: pd.Timestamp

    @property
    def average(self) -> float:
        return self.total / self.hours


def find_cheapest_window(series: PriceSeries, hours: int) -> ChargingWindow | None:
    """Find the contiguous block of `hours` points with the lowest price sum.

    Every start index is scanned left to right and a block only replaces the
    current best when its sum is strictly smaller, so the earliest block wins
    ties. Each block is summed from scratch with `math.fsum`, which is exact
    up to one final rounding, so blocks holding the same prices in any order
    produce equal sums.

    Args:
        series: Chronological series with one point per hour and no gaps.
        hours: Window length in hours (>= 1).

    Returns:
        The cheapest ChargingWindow, or None if the series is shorter than
        `hours`.

    Raises:
        ValueError: If `hours` < 1 or the series is not hourly contiguous.
    """
    if hours < 1:
        raise ValueError(f"Window length must be at least 1 hour, got {hours}")

    if len(series) < hours:
        logger.debug(f"Series has {len(series)} points, too short for a {hours}h window")
        return None

    if not series.is_contiguous():
        raise ValueError("Window search requires a chronological series without gaps")

    prices = series.prices()
    best_index = 0
    best_sum = math.fsum(prices[0:hours])
    for i in range(1, len(prices) - hours + 1):
        window_sum = math.fsum(prices[i : i + hours])
        if window_sum < best_sum:
            best_sum = window_sum
            best_index = i

    return ChargingWindow(
        start_index=best_index,
        hours=hours,
        total=best_sum,
        start_time=series[best_index].start_time,
        end_time=series[best_index + hours - 1].end_time,
    )
