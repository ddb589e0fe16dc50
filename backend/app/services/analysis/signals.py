"""
Signal Rules

Maps the latest indicator values to weighted directional signals and
aggregates them into a single verdict. Pure functions, no I/O.

NaN inputs never raise: they produce a neutral "Insufficient data" signal
with zero weight.
"""

import math

import numpy as np

from app.schemas.analysis import AnalysisSummary, IndicatorSignal, SignalDirection
from app.services.indicators.calculations import (
    BollingerResult,
    IndicatorBundle,
    MACDResult,
    PriceSeries,
    latest,
)

BULLISH = SignalDirection.BULLISH
BEARISH = SignalDirection.BEARISH
NEUTRAL = SignalDirection.NEUTRAL

# Aggregation thresholds
DIRECTION_THRESHOLD = 0.3
MAX_CONFIDENCE = 85
BASE_CONFIDENCE = 50


def _signal(indicator: str, signal: SignalDirection, reason: str, weight: float = 0) -> IndicatorSignal:
    return IndicatorSignal(indicator=indicator, signal=signal, weight=weight, reason=reason)


def _insufficient(indicator: str) -> IndicatorSignal:
    return _signal(indicator, NEUTRAL, "Insufficient data")


# =============================================================================
# PER-INDICATOR RULES
# =============================================================================


def analyze_rsi(rsi: np.ndarray) -> IndicatorSignal:
    """Overbought/oversold and momentum zones."""
    current = latest(rsi)

    if math.isnan(current):
        return _insufficient("RSI")

    if current > 70:
        return _signal("RSI", BEARISH, f"RSI at {current:.1f} - Overbought territory", 2)
    elif current < 30:
        return _signal("RSI", BULLISH, f"RSI at {current:.1f} - Oversold territory", 2)
    elif current > 60:
        return _signal("RSI", BULLISH, f"RSI at {current:.1f} - Strong momentum", 1)
    elif current < 40:
        return _signal("RSI", BEARISH, f"RSI at {current:.1f} - Weak momentum", 1)

    return _signal("RSI", NEUTRAL, f"RSI at {current:.1f} - Neutral zone")


def analyze_macd(result: MACDResult) -> IndicatorSignal:
    """Crossovers first, then histogram expansion."""
    current_macd = latest(result.macd)
    current_signal = latest(result.signal)
    current_hist = latest(result.histogram)
    # NaN when there is no previous bar; every comparison with it is False
    prev_hist = latest(result.histogram, 2)

    if math.isnan(current_macd) or math.isnan(current_signal):
        return _insufficient("MACD")

    if current_macd > current_signal and current_hist > 0 and prev_hist <= 0:
        return _signal("MACD", BULLISH, "MACD bullish crossover detected", 3)
    elif current_macd < current_signal and current_hist < 0 and prev_hist >= 0:
        return _signal("MACD", BEARISH, "MACD bearish crossover detected", 3)
    elif current_hist > 0 and current_hist > prev_hist:
        return _signal("MACD", BULLISH, "MACD histogram expanding bullishly", 1.5)
    elif current_hist < 0 and current_hist < prev_hist:
        return _signal("MACD", BEARISH, "MACD histogram expanding bearishly", 1.5)

    return _signal("MACD", NEUTRAL, "MACD showing no clear trend")


def analyze_moving_averages(
    prices: np.ndarray,
    sma20: np.ndarray,
    sma50: np.ndarray,
    sma200: np.ndarray,
) -> IndicatorSignal:
    """
    Golden/death cross when both long averages exist, otherwise a tally of
    where price sits relative to each defined SMA.
    """
    name = "Moving Averages"
    current_price = latest(prices)
    current_20 = latest(sma20)
    current_50 = latest(sma50)
    current_200 = latest(sma200)

    if math.isnan(current_price):
        return _insufficient(name)

    bullish_count = 0
    bearish_count = 0
    for average in (current_20, current_50, current_200):
        if math.isnan(average):
            continue
        # Price sitting exactly on an average counts against the trend
        if current_price > average:
            bullish_count += 1
        else:
            bearish_count += 1

    if not math.isnan(current_50) and not math.isnan(current_200):
        if current_50 > current_200:
            return _signal(name, BULLISH, "Golden Cross pattern - 50 SMA above 200 SMA", 2.5)
        elif current_50 < current_200:
            return _signal(name, BEARISH, "Death Cross pattern - 50 SMA below 200 SMA", 2.5)

    if bullish_count > bearish_count:
        return _signal(
            name, BULLISH, f"Price above {bullish_count} of 3 moving averages", bullish_count * 0.5
        )
    elif bearish_count > bullish_count:
        return _signal(
            name, BEARISH, f"Price below {bearish_count} of 3 moving averages", bearish_count * 0.5
        )

    return _signal(name, NEUTRAL, "Mixed signals from moving averages")


def analyze_bollinger_bands(prices: np.ndarray, bands: BollingerResult) -> IndicatorSignal:
    """Band breaks, then position within the band."""
    name = "Bollinger Bands"
    current_price = latest(prices)
    upper = latest(bands.upper)
    lower = latest(bands.lower)

    if math.isnan(upper) or math.isnan(lower) or math.isnan(current_price):
        return _insufficient(name)

    if current_price > upper:
        return _signal(name, BEARISH, "Price above upper band - potential reversal", 2)
    elif current_price < lower:
        return _signal(name, BULLISH, "Price below lower band - potential bounce", 2)

    band_range = upper - lower
    if band_range <= 0:
        # Flat window: price equals both bands
        return _signal(name, NEUTRAL, "Price within normal range")

    position = (current_price - lower) / band_range
    if position > 0.8:
        return _signal(name, BEARISH, "Price near upper band", 1)
    elif position < 0.2:
        return _signal(name, BULLISH, "Price near lower band", 1)

    return _signal(name, NEUTRAL, "Price within normal range")


def analyze_volume(volumes: np.ndarray, volume_sma: np.ndarray) -> IndicatorSignal:
    """Unusual volume. Low volume is never bearish on its own."""
    current_vol = latest(volumes)
    avg_vol = latest(volume_sma)

    if math.isnan(avg_vol) or math.isnan(current_vol) or avg_vol <= 0:
        return _insufficient("Volume")

    ratio = current_vol / avg_vol

    if ratio > 1.5:
        return _signal("Volume", BULLISH, f"Volume {ratio:.1f}x above average - high interest", 1.5)
    elif ratio < 0.5:
        return _signal("Volume", NEUTRAL, f"Volume {ratio:.1f}x below average - low interest")

    return _signal("Volume", NEUTRAL, "Normal volume levels")


# =============================================================================
# AGGREGATION
# =============================================================================


def score_signals(signals: list[IndicatorSignal]) -> tuple[SignalDirection, int]:
    """
    Weighted vote over all signals.

    Returns (direction, confidence) with confidence rounded half-up to an
    integer in [0, 100].
    """
    bullish_weight = sum(s.weight for s in signals if s.signal == BULLISH)
    bearish_weight = sum(s.weight for s in signals if s.signal == BEARISH)
    total_weight = sum(s.weight for s in signals)

    if total_weight == 0:
        return NEUTRAL, BASE_CONFIDENCE

    net_score = (bullish_weight - bearish_weight) / total_weight

    if net_score > DIRECTION_THRESHOLD:
        direction = BULLISH
        confidence = min(MAX_CONFIDENCE, BASE_CONFIDENCE + net_score * 50)
    elif net_score < -DIRECTION_THRESHOLD:
        direction = BEARISH
        confidence = min(MAX_CONFIDENCE, BASE_CONFIDENCE + abs(net_score) * 50)
    else:
        direction = NEUTRAL
        confidence = BASE_CONFIDENCE - abs(net_score) * 30

    confidence = int(math.floor(confidence + 0.5))
    return direction, max(0, min(100, confidence))


def build_summary(direction: SignalDirection, signals: list[IndicatorSignal]) -> str:
    """Summary sentence stating the direction and supporting/dissenting counts."""
    bullish = sum(1 for s in signals if s.signal == BULLISH)
    bearish = sum(1 for s in signals if s.signal == BEARISH)

    if direction == BULLISH:
        summary = f"Technical analysis suggests bullish momentum. {bullish} indicators are positive"
        if bearish > 0:
            summary += f", though {bearish} indicator(s) warrant caution"
        return summary + "."

    if direction == BEARISH:
        summary = f"Technical analysis suggests bearish pressure. {bearish} indicators are negative"
        if bullish > 0:
            summary += f", with {bullish} potentially supportive signal(s)"
        return summary + "."

    return (
        "Technical indicators are mixed with no clear directional bias. "
        "Consider waiting for stronger signals before taking positions. "
        f"({bullish} bullish, {bearish} bearish)"
    )


def check_alignment(series: PriceSeries, indicators: IndicatorBundle) -> None:
    """Raise ValueError unless every indicator array matches the series length."""
    expected = len(series)
    arrays = {
        "volumes": series.volumes,
        "sma20": indicators.sma20,
        "sma50": indicators.sma50,
        "sma200": indicators.sma200,
        "rsi": indicators.rsi,
        "macd": indicators.macd.macd,
        "macd_signal": indicators.macd.signal,
        "macd_histogram": indicators.macd.histogram,
        "bb_upper": indicators.bollinger_bands.upper,
        "bb_lower": indicators.bollinger_bands.lower,
        "volume_sma": indicators.volume_sma,
    }
    mismatched = {k: len(v) for k, v in arrays.items() if len(v) != expected}
    if mismatched:
        raise ValueError(f"Series length {expected} does not match indicators: {mismatched}")


def generate_analysis(series: PriceSeries, indicators: IndicatorBundle) -> AnalysisSummary:
    """Run every indicator rule and aggregate into an AnalysisSummary."""
    check_alignment(series, indicators)

    prices = np.asarray(series.closes, dtype=float)
    volumes = np.asarray(series.volumes, dtype=float)

    signals = [
        analyze_rsi(indicators.rsi),
        analyze_macd(indicators.macd),
        analyze_moving_averages(prices, indicators.sma20, indicators.sma50, indicators.sma200),
        analyze_bollinger_bands(prices, indicators.bollinger_bands),
        analyze_volume(volumes, indicators.volume_sma),
    ]

    direction, confidence = score_signals(signals)

    return AnalysisSummary(
        direction=direction,
        confidence=confidence,
        summary=build_summary(direction, signals),
        signals=signals,
    )
