"""Price series analysis.

This module handles:
- The hourly price series model
- Mean / cheapest / priciest statistics
- Cheapest contiguous charging window search
- Display-unit conversion and rounding
"""

from spotpris.analysis.display import to_display_unit, to_display_value
from spotpris.analysis.series import PricePoint, PriceSeries
from spotpris.analysis.statistics import PriceStatistics, compute_statistics
from spotpris.analysis.windows import ChargingWindow, find_cheapest_window

__all__ = [
    "ChargingWindow",
    "PricePoint",
    "PriceSeries",
    "PriceStatistics",
    "compute_statistics",
    "find_cheapest_window",
    "to_display_unit",
    "to_display_value",
]
