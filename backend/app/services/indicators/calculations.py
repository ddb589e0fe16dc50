"""
Technical Indicator Calculations

Pure Python/NumPy implementations of technical indicators.
All math is deterministic: the same series always yields the same output.

Every function returns arrays the same length as its input. Positions before
an indicator's lookback window is satisfied hold np.nan.
"""

import numpy as np
from typing import Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class PriceSeries:
    """Price/volume arrays for calculations, index-aligned by trading day."""

    closes: np.ndarray
    volumes: np.ndarray

    def __post_init__(self):
        if len(self.closes) != len(self.volumes):
            raise ValueError(
                f"Series length mismatch: {len(self.closes)} closes vs "
                f"{len(self.volumes)} volumes"
            )

    def __len__(self) -> int:
        return len(self.closes)


@dataclass(frozen=True)
class MACDResult:
    """MACD line, signal line and histogram."""

    macd: np.ndarray
    signal: np.ndarray
    histogram: np.ndarray


@dataclass(frozen=True)
class BollingerResult:
    """Upper, middle (SMA) and lower bands."""

    upper: np.ndarray
    middle: np.ndarray
    lower: np.ndarray


@dataclass(frozen=True)
class IndicatorBundle:
    """The fixed indicator set computed for every history."""

    sma20: np.ndarray
    sma50: np.ndarray
    sma200: np.ndarray
    ema12: np.ndarray
    ema26: np.ndarray
    rsi: np.ndarray
    macd: MACDResult
    bollinger_bands: BollingerResult
    volume_sma: np.ndarray

    def __len__(self) -> int:
        return len(self.sma20)


def _check_period(period: int) -> None:
    if period <= 0:
        raise ValueError(f"Period must be positive, got {period}")


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(data: np.ndarray, period: int) -> np.ndarray:
    """Simple Moving Average."""
    _check_period(period)
    data = np.asarray(data, dtype=float)

    result = np.full(len(data), np.nan)
    for i in range(period - 1, len(data)):
        result[i] = np.mean(data[i - period + 1 : i + 1])
    return result


def ema(data: np.ndarray, period: int) -> np.ndarray:
    """
    Exponential Moving Average.

    Seeded with the mean of the first `period` values, emitted at index
    period - 1.
    """
    _check_period(period)
    data = np.asarray(data, dtype=float)

    result = np.full(len(data), np.nan)
    if len(data) < period:
        return result

    multiplier = 2 / (period + 1)

    # Start with SMA
    result[period - 1] = np.mean(data[:period])

    for i in range(period, len(data)):
        result[i] = (data[i] - result[i - 1]) * multiplier + result[i - 1]

    return result


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def rsi(closes: np.ndarray, period: int = 14) -> np.ndarray:
    """
    Relative Strength Index.

    Uses a simple rolling mean of the last `period` gains and losses, not
    Wilder's smoothing, so values differ from most charting platforms.
    """
    _check_period(period)
    closes = np.asarray(closes, dtype=float)

    result = np.full(len(closes), np.nan)
    if len(closes) <= period:
        return result

    deltas = np.diff(closes)
    gains = np.where(deltas > 0, deltas, 0.0)
    losses = np.where(deltas < 0, -deltas, 0.0)

    for i in range(period, len(closes)):
        avg_gain = np.mean(gains[i - period : i])
        avg_loss = np.mean(losses[i - period : i])

        if avg_loss == 0:
            result[i] = 100.0
        else:
            rs = avg_gain / avg_loss
            result[i] = 100 - (100 / (1 + rs))

    return result


def macd(
    closes: np.ndarray,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> MACDResult:
    """
    MACD (Moving Average Convergence Divergence).

    The signal line is the EMA of the MACD line with its undefined entries
    dropped, written back in order onto the positions where the MACD line is
    defined. Its warm-up therefore ends signal_period - 1 days after the MACD
    line's own warm-up.
    """
    closes = np.asarray(closes, dtype=float)
    fast_ema = ema(closes, fast_period)
    slow_ema = ema(closes, slow_period)

    # NaN propagates wherever either EMA is still warming up
    macd_line = fast_ema - slow_ema

    defined = np.flatnonzero(~np.isnan(macd_line))
    signal_ema = ema(macd_line[defined], signal_period)

    signal_line = np.full(len(closes), np.nan)
    signal_line[defined[: len(signal_ema)]] = signal_ema

    histogram = macd_line - signal_line

    return MACDResult(macd=macd_line, signal=signal_line, histogram=histogram)


# =============================================================================
# VOLATILITY INDICATORS
# =============================================================================


def bollinger_bands(
    closes: np.ndarray, period: int = 20, std_dev: float = 2.0
) -> BollingerResult:
    """
    Bollinger Bands.

    Band width uses the population standard deviation of the trailing window.
    """
    if std_dev < 0:
        raise ValueError(f"Standard deviation multiplier must be >= 0, got {std_dev}")

    closes = np.asarray(closes, dtype=float)
    middle = sma(closes, period)

    std = np.full(len(closes), np.nan)
    for i in range(period - 1, len(closes)):
        window = closes[i - period + 1 : i + 1]
        std[i] = np.sqrt(np.mean((window - middle[i]) ** 2))

    upper = middle + (std_dev * std)
    lower = middle - (std_dev * std)

    return BollingerResult(upper=upper, middle=middle, lower=lower)


# =============================================================================
# INDICATOR SET
# =============================================================================


def calculate_all_indicators(series: PriceSeries) -> IndicatorBundle:
    """Calculate the full indicator set for a price/volume series."""
    closes = np.asarray(series.closes, dtype=float)
    volumes = np.asarray(series.volumes, dtype=float)

    return IndicatorBundle(
        sma20=sma(closes, 20),
        sma50=sma(closes, 50),
        sma200=sma(closes, 200),
        ema12=ema(closes, 12),
        ema26=ema(closes, 26),
        rsi=rsi(closes, 14),
        macd=macd(closes),
        bollinger_bands=bollinger_bands(closes, 20, 2.0),
        volume_sma=sma(volumes, 20),
    )


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def latest(arr: np.ndarray, offset: int = 1) -> float:
    """Value `offset` positions from the end, or NaN if the array is too short."""
    if len(arr) < offset:
        return np.nan
    return float(arr[-offset])


def to_optional_list(arr: np.ndarray) -> list[Optional[float]]:
    """Convert an indicator array to a list with None in place of NaN."""
    return [None if np.isnan(v) else float(v) for v in arr]
