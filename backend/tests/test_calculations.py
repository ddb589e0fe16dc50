"""
Unit tests for indicator calculations.

Tests cover:
- Alignment: every output matches the input length, including empty input
- Known values: SMA, EMA seed/recursion, RSI rolling averages, population std
- MACD signal-line compaction and warm-up
- Invalid configuration: non-positive periods, mismatched series
"""

import numpy as np
import pytest

from app.services.data_ingestion import generate_mock_history
from app.services.indicators.calculations import (
    PriceSeries,
    bollinger_bands,
    calculate_all_indicators,
    ema,
    latest,
    macd,
    rsi,
    sma,
    to_optional_list,
)


def _mock_closes(lookback=260, seed=7) -> np.ndarray:
    history = generate_mock_history("TEST", lookback=lookback, seed=seed)
    return np.array([p.close for p in history])


class TestSMA:
    """Simple moving average."""

    def test_known_values(self):
        result = sma(np.array([10, 20, 30, 40, 50]), 3)

        assert np.isnan(result[:2]).all()
        assert result[2:].tolist() == [20.0, 30.0, 40.0]

    def test_period_one_is_identity(self):
        data = np.array([3.0, 1.0, 4.0, 1.0, 5.0])
        assert sma(data, 1).tolist() == data.tolist()

    def test_short_series_all_undefined(self):
        result = sma(np.array([1.0, 2.0]), 5)
        assert len(result) == 2
        assert np.isnan(result).all()

    @pytest.mark.parametrize("period", [0, -3])
    def test_rejects_non_positive_period(self, period):
        with pytest.raises(ValueError):
            sma(np.array([1.0, 2.0, 3.0]), period)

    def test_accepts_lists(self):
        assert sma([2, 4], 2)[1] == 3.0


class TestEMA:
    """Exponential moving average."""

    def test_seed_is_mean_of_first_period(self):
        closes = _mock_closes()
        result = ema(closes, 12)

        assert np.isnan(result[:11]).all()
        assert result[11] == np.mean(closes[:12])

    def test_recursion(self):
        # k = 0.5 for period 3; seed = mean(1, 2, 3) = 2
        result = ema(np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0]), 3)
        assert result[2:].tolist() == [2.0, 3.0, 4.0, 5.0]

    def test_short_series_all_undefined(self):
        result = ema(np.array([1.0, 2.0, 3.0]), 12)
        assert len(result) == 3
        assert np.isnan(result).all()

    def test_rejects_non_positive_period(self):
        with pytest.raises(ValueError):
            ema(np.array([1.0, 2.0]), 0)


class TestRSI:
    """Relative strength index (simple rolling averages)."""

    def test_known_values(self):
        # deltas [1, -1, 2]: i=2 -> gain .5 / loss .5; i=3 -> gain 1 / loss .5
        result = rsi(np.array([1.0, 2.0, 1.0, 3.0]), period=2)

        assert np.isnan(result[:2]).all()
        assert result[2] == pytest.approx(50.0)
        assert result[3] == pytest.approx(100 - 100 / 3)

    def test_all_increasing_is_100(self):
        result = rsi(np.arange(100.0, 130.0), 14)

        assert np.isnan(result[:14]).all()
        assert (result[14:] == 100.0).all()

    def test_all_decreasing_is_0(self):
        result = rsi(np.arange(130.0, 100.0, -1.0), 14)
        assert (result[14:] == 0.0).all()

    def test_not_wilder_smoothed(self):
        # Only the last `period` deltas count: an old loss drops out entirely
        closes = np.array([10.0, 5.0] + [5.0 + i for i in range(1, 16)])
        result = rsi(closes, 14)
        assert result[-1] == 100.0

    def test_bounds(self):
        result = rsi(_mock_closes(), 14)
        defined = result[~np.isnan(result)]

        assert len(defined) == len(result) - 14
        assert ((defined >= 0) & (defined <= 100)).all()

    def test_needs_more_than_period_points(self):
        assert np.isnan(rsi(np.arange(14.0), 14)).all()
        assert not np.isnan(rsi(np.arange(15.0), 14)[14])


class TestMACD:
    """MACD line, compacted signal line and histogram."""

    def test_histogram_identity(self):
        result = macd(_mock_closes())
        defined = ~np.isnan(result.histogram)

        assert defined.any()
        np.testing.assert_allclose(
            result.histogram[defined],
            result.macd[defined] - result.signal[defined],
            atol=1e-9,
        )

    def test_warmup_positions(self):
        result = macd(_mock_closes(60))

        # MACD line needs EMA26 (index 25); signal needs 9 MACD values more
        assert np.isnan(result.macd[:25]).all()
        assert not np.isnan(result.macd[25:]).any()
        assert np.isnan(result.signal[:33]).all()
        assert not np.isnan(result.signal[33:]).any()
        assert np.isnan(result.histogram[:33]).all()

    def test_signal_seeded_from_compacted_macd(self):
        result = macd(_mock_closes(60))
        assert result.signal[33] == np.mean(result.macd[25:34])

    def test_macd_is_ema_difference(self):
        closes = _mock_closes()
        result = macd(closes)
        np.testing.assert_array_equal(result.macd, ema(closes, 12) - ema(closes, 26))

    def test_too_short_for_signal(self):
        result = macd(_mock_closes(30))

        assert (~np.isnan(result.macd)).sum() == 5
        assert np.isnan(result.signal).all()
        assert np.isnan(result.histogram).all()


class TestBollingerBands:
    """Bollinger Bands with population standard deviation."""

    def test_population_std(self):
        # mean 2.5, population variance 1.25
        result = bollinger_bands(np.array([1.0, 2.0, 3.0, 4.0]), period=4, std_dev=1)

        assert np.isnan(result.upper[:3]).all()
        assert result.middle[3] == 2.5
        assert result.upper[3] == pytest.approx(2.5 + np.sqrt(1.25))
        assert result.lower[3] == pytest.approx(2.5 - np.sqrt(1.25))

    def test_ordering(self):
        result = bollinger_bands(_mock_closes(), 20, 2.0)
        defined = ~np.isnan(result.middle)

        assert (result.lower[defined] <= result.middle[defined]).all()
        assert (result.middle[defined] <= result.upper[defined]).all()

    def test_flat_series_collapses_bands(self):
        result = bollinger_bands(np.full(25, 42.0), 20, 2.0)
        assert result.upper[-1] == result.middle[-1] == result.lower[-1] == 42.0

    def test_middle_is_sma(self):
        closes = _mock_closes()
        np.testing.assert_array_equal(bollinger_bands(closes).middle, sma(closes, 20))

    def test_rejects_negative_multiplier(self):
        with pytest.raises(ValueError):
            bollinger_bands(np.arange(30.0), 20, -1)


class TestCalculateAllIndicators:
    """The fixed indicator set."""

    @pytest.mark.parametrize("length", [0, 1, 19, 30, 250])
    def test_alignment(self, length):
        closes = np.arange(length, dtype=float) + 100
        bundle = calculate_all_indicators(PriceSeries(closes=closes, volumes=np.ones(length)))

        series = [
            bundle.sma20,
            bundle.sma50,
            bundle.sma200,
            bundle.ema12,
            bundle.ema26,
            bundle.rsi,
            bundle.macd.macd,
            bundle.macd.signal,
            bundle.macd.histogram,
            bundle.bollinger_bands.upper,
            bundle.bollinger_bands.middle,
            bundle.bollinger_bands.lower,
            bundle.volume_sma,
        ]
        assert all(len(s) == length for s in series)
        assert len(bundle) == length

    def test_volume_sma_uses_volumes(self):
        volumes = np.arange(1.0, 26.0)
        bundle = calculate_all_indicators(PriceSeries(closes=np.ones(25), volumes=volumes))
        assert bundle.volume_sma[-1] == np.mean(volumes[-20:])

    def test_sma200_defined_only_with_history(self):
        bundle = calculate_all_indicators(
            PriceSeries(closes=np.arange(199.0), volumes=np.ones(199))
        )
        assert np.isnan(bundle.sma200).all()

    def test_deterministic(self):
        closes = _mock_closes()
        series = PriceSeries(closes=closes, volumes=np.ones(len(closes)))
        first = calculate_all_indicators(series)
        second = calculate_all_indicators(series)

        np.testing.assert_array_equal(first.rsi, second.rsi)
        np.testing.assert_array_equal(first.macd.signal, second.macd.signal)
        np.testing.assert_array_equal(first.bollinger_bands.upper, second.bollinger_bands.upper)

    def test_input_not_mutated(self):
        closes = _mock_closes()
        original = closes.copy()
        calculate_all_indicators(PriceSeries(closes=closes, volumes=np.ones(len(closes))))
        np.testing.assert_array_equal(closes, original)

    def test_mismatched_series_rejected(self):
        with pytest.raises(ValueError):
            PriceSeries(closes=np.ones(5), volumes=np.ones(4))


class TestUtilities:
    def test_latest(self):
        arr = np.array([1.0, 2.0, 3.0])
        assert latest(arr) == 3.0
        assert latest(arr, 2) == 2.0
        assert np.isnan(latest(np.array([])))
        assert np.isnan(latest(np.array([1.0]), 2))

    def test_to_optional_list(self):
        assert to_optional_list(np.array([np.nan, 1.5])) == [None, 1.5]
