"""Tests for RSI computation."""

from decimal import Decimal

import pytest

from chartsignal.indicators.rsi import compute_rsi


def _d(*values: float | int | str) -> list[Decimal]:
    return [Decimal(str(v)) for v in values]


class TestComputeRsi:
    """Tests for simple-average RSI."""

    def test_warm_up_is_period_entries(self) -> None:
        """Index < period is undefined; index == period is the first value."""
        values = _d(*range(1, 21))
        result = compute_rsi(values, period=14)

        assert result[:14] == [None] * 14
        assert result[14] is not None

    def test_too_short_is_all_undefined(self) -> None:
        values = _d(*range(14))
        assert compute_rsi(values, period=14) == [None] * 14

    def test_strictly_increasing_is_exactly_100(self) -> None:
        """No losses anywhere, so every defined RSI is exactly 100."""
        values = _d(*range(100, 120))
        result = compute_rsi(values, period=14)

        for rsi in result[14:]:
            assert rsi == Decimal("100")

    def test_flat_series_is_exactly_100(self) -> None:
        values = [Decimal("50")] * 20
        result = compute_rsi(values, period=14)

        assert all(rsi == Decimal("100") for rsi in result[14:])

    def test_strictly_decreasing_is_zero(self) -> None:
        values = _d(*range(120, 100, -1))
        result = compute_rsi(values, period=14)

        assert all(rsi == Decimal("0") for rsi in result[14:])

    def test_known_values_period_2(self) -> None:
        """Changes [2, -1, 3] with period 2.

        i=2: gains 2, losses 1 -> RS = 2 -> RSI = 100 - 100/3 = 66.67
        i=3: gains 3, losses 1 -> RS = 3 -> RSI = 75
        """
        result = compute_rsi(_d(10, 12, 11, 14), period=2)

        assert result[:2] == [None, None]
        assert abs(result[2] - Decimal("66.6667")) < Decimal("0.0001")
        assert result[3] == Decimal("75")

    def test_old_losses_leave_the_window(self) -> None:
        """A loss older than the window no longer affects the value."""
        result = compute_rsi(_d(10, 9, 10, 11, 12), period=2)

        assert result[2] == Decimal("50")
        assert result[3] == Decimal("100")
        assert result[4] == Decimal("100")

    def test_values_stay_within_bounds(self) -> None:
        values = _d(10, 13, 9, 14, 8, 15, 7, 16, 12, 11, 13, 10, 9, 14, 15, 11, 8, 12, 13, 9)
        result = compute_rsi(values, period=5)

        for rsi in result[5:]:
            assert Decimal("0") <= rsi <= Decimal("100")

    def test_output_length_matches_input(self) -> None:
        assert len(compute_rsi(_d(*range(30)), period=14)) == 30

    def test_empty_input(self) -> None:
        assert compute_rsi([], period=14) == []

    def test_invalid_period_raises(self) -> None:
        with pytest.raises(ValueError):
            compute_rsi(_d(1, 2, 3), period=0)
