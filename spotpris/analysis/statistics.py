"""Descriptive statistics over a price series."""

from dataclasses import dataclass
import statistics

from spotpris.analysis.series import PricePoint, PriceSeries


@dataclass(frozen=True)
class PriceStatistics:
    mean: float
    cheapest: PricePoint
    priciest: PricePoint


def compute_statistics(series: PriceSeries) -> PriceStatistics:
    """Calculate mean, cheapest and priciest point of a series.

    Cheapest and priciest are found with strict comparisons while scanning in
    series order, so ties resolve to the first occurrence. The mean is computed
    exactly and rounded once, which keeps it within [cheapest, priciest].

    Args:
        series: Non-empty price series.

    Returns:
        PriceStatistics for the series.

    Raises:
        ValueError: If the series is empty.
    """
    if not series:
        raise ValueError("Cannot compute statistics for an empty price series")

    cheapest = priciest = series[0]
    for point in series:
        if point.price_per_unit < cheapest.price_per_unit:
            cheapest = point
        if point.price_per_unit > priciest.price_per_unit:
            priciest = point

    mean = float(statistics.mean(series.prices()))
    return PriceStatistics(mean=mean, cheapest=cheapest, priciest=priciest)
