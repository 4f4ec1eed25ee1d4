"""Hourly price series model.

A PriceSeries is an immutable, ordered run of PricePoints. The order in which
it was built (chronological, from concatenating consecutive days) is the only
order window search may use; `by_price_descending()` returns a separate view
for presentation.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator

import pandas as pd

ONE_HOUR = pd.Timedelta(hours=1)


@dataclass(frozen=True)
class PricePoint:
    """Price for the one-hour interval starting at `start_time` (SEK/kWh)."""

    start_time: pd.Timestamp
    price_per_unit: float

    @property
    def end_time(self) -> pd.Timestamp:
        return self.start_time + ONE_HOUR


@dataclass(frozen=True)
class PriceSeries:
    """Ordered, immutable sequence of PricePoints."""

    points: tuple[PricePoint, ...] = ()

    def __init__(self, points: Iterable[PricePoint] = ()):
        object.__setattr__(self, "points", tuple(points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[PricePoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> PricePoint:
        return self.points[index]

    def concat(self, other: "PriceSeries") -> "PriceSeries":
        """Return a new series with `other` appended after this one."""
        return PriceSeries(self.points + other.points)

    def by_price_descending(self) -> "PriceSeries":
        """Return a display copy ordered by price, most expensive first.

        The sort is stable, so equal prices keep their chronological order.
        """
        return PriceSeries(sorted(self.points, key=lambda p: p.price_per_unit, reverse=True))

    def prices(self) -> list[float]:
        return [p.price_per_unit for p in self.points]

    def is_contiguous(self) -> bool:
        """True if every point starts exactly one hour after the previous one."""
        return all(
            later.start_time - earlier.start_time == ONE_HOUR
            for earlier, later in zip(self.points, self.points[1:])
        )

    @classmethod
    def from_frame(cls, df: pd.DataFrame, column: str = "price") -> "PriceSeries":
        """Build a series from a DataFrame indexed by start time.

        Rows are taken in index order; null prices are dropped.
        """
        values = df[column].dropna()
        return cls(
            PricePoint(start_time=ts, price_per_unit=float(price))
            for ts, price in values.items()
        )
