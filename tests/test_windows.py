"""Tests for the cheapest charging window search."""

import pytest

from spotpris.analysis.series import PriceSeries
from spotpris.analysis.windows import find_cheapest_window


class TestFindCheapestWindow:
    """Test find_cheapest_window."""

    def test_finds_cheapest_block(self, make_series):
        window = find_cheapest_window(make_series([5, 1, 1, 5]), 2)

        assert window.start_index == 1
        assert window.total == 2.0

    def test_earliest_window_wins_ties(self, make_series):
        window = find_cheapest_window(make_series([1, 1, 1, 1]), 2)
        assert window.start_index == 0

    def test_float_ties_keep_earliest_window(self, make_series):
        window = find_cheapest_window(make_series([0.1, 0.2, 0.1, 0.2]), 2)
        assert window.start_index == 0

    def test_reordered_equal_blocks_keep_earliest_window(self, make_series):
        # Naive summation gives 0.6000000000000001 for the first block, 0.6 for the second
        window = find_cheapest_window(make_series([0.1, 0.2, 0.3, 0.1]), 3)

        assert window.start_index == 0
        assert window.total == 0.6

    def test_later_window_wins_only_when_strictly_cheaper(self, make_series):
        window = find_cheapest_window(make_series([3, 1, 2, 0.5, 2.5]), 2)
        # sums: 4, 3, 2.5, 3
        assert window.start_index == 2
        assert window.total == pytest.approx(2.5)

    def test_window_times(self, make_series):
        series = make_series([2.0, 1.0, 3.0, 1.5])

        window = find_cheapest_window(series, 2)

        # sums: 3.0, 4.0, 4.5
        assert window.start_index == 0
        assert window.start_time.strftime("%H:%M") == "00:00"
        assert window.end_time.strftime("%H:%M") == "02:00"

    def test_window_spanning_midnight(self, make_series):
        series = make_series([0.9, 0.2, 0.1, 0.8], start="2025-10-20 22:00")

        window = find_cheapest_window(series, 2)

        assert window.start_index == 1
        assert window.start_time.strftime("%Y-%m-%d %H:%M") == "2025-10-20 23:00"
        assert window.end_time.strftime("%Y-%m-%d %H:%M") == "2025-10-21 01:00"

    def test_window_equal_to_series_length(self, make_series):
        window = find_cheapest_window(make_series([1.0, 2.0, 3.0]), 3)

        assert window.start_index == 0
        assert window.total == 6.0

    def test_single_hour_window_matches_cheapest_point(self, make_series, day_prices):
        series = make_series(day_prices)

        window = find_cheapest_window(series, 1)

        assert window.total == min(day_prices)
        assert window.start_index == day_prices.index(min(day_prices))

    def test_average(self, make_series):
        window = find_cheapest_window(make_series([5, 1, 3, 5]), 2)
        assert window.average == pytest.approx(2.0)

    def test_too_short_series_returns_none(self, make_series):
        assert find_cheapest_window(make_series([1.0, 2.0]), 3) is None

    def test_empty_series_returns_none(self):
        assert find_cheapest_window(PriceSeries(), 2) is None

    def test_zero_hours_raises(self, make_series):
        with pytest.raises(ValueError):
            find_cheapest_window(make_series([1.0, 2.0]), 0)

    def test_gap_raises(self, make_series):
        series = make_series([1.0, 2.0]).concat(make_series([3.0], start="2025-10-20 06:00"))
        with pytest.raises(ValueError):
            find_cheapest_window(series, 2)

    def test_sorted_view_rejected(self, make_series):
        with pytest.raises(ValueError):
            find_cheapest_window(make_series([0.1, 0.5, 0.3]).by_price_descending(), 2)

    def test_two_days(self, make_series, day_prices):
        today = make_series(day_prices, start="2025-10-20 00:00")
        tomorrow = make_series([p - 0.25 for p in day_prices], start="2025-10-21 00:00")

        window = find_cheapest_window(today.concat(tomorrow), 4)

        # Cheapest night block moves to the second day
        assert window.start_index == 24 + 2
        assert window.start_time.strftime("%H:%M") == "02:00"
        assert window.end_time.strftime("%H:%M") == "06:00"
