"""
CONTRACT 2: Indicator Engine

Input: list[PricePoint]
Output: TechnicalIndicators

Every series is index-aligned to the input history. Positions where an
indicator is still inside its lookback window are null, never zero, so
charts can show "N/A" or skip the point.
"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, model_validator


# =============================================================================
# OUTPUT: Indicator Components
# =============================================================================


class MACDSeries(BaseModel):
    """MACD line, signal line and histogram."""

    macd: list[Optional[float]]
    signal: list[Optional[float]]
    histogram: list[Optional[float]]


class BollingerSeries(BaseModel):
    """Bollinger Bands (middle is the 20-day SMA)."""

    upper: list[Optional[float]]
    middle: list[Optional[float]]
    lower: list[Optional[float]]


class ChartPoint(BaseModel):
    """Single defined point of a chart overlay."""

    time: date
    value: float


# =============================================================================
# OUTPUT: TechnicalIndicators (Complete Response)
# =============================================================================


class TechnicalIndicators(BaseModel):
    """
    Full indicator set for a price history.
    Returned by: Indicator Service
    Consumed by: Signal Analyzer (as arrays), dashboard charts
    """

    sma20: list[Optional[float]]
    sma50: list[Optional[float]]
    sma200: list[Optional[float]]
    ema12: list[Optional[float]]
    ema26: list[Optional[float]]
    rsi: list[Optional[float]] = Field(..., description="RSI(14), 0-100")
    macd: MACDSeries
    bollinger_bands: BollingerSeries
    volume_sma: list[Optional[float]] = Field(..., description="20-day volume SMA")

    @model_validator(mode="after")
    def check_alignment(self) -> "TechnicalIndicators":
        lengths = {
            len(self.sma20),
            len(self.sma50),
            len(self.sma200),
            len(self.ema12),
            len(self.ema26),
            len(self.rsi),
            len(self.macd.macd),
            len(self.macd.signal),
            len(self.macd.histogram),
            len(self.bollinger_bands.upper),
            len(self.bollinger_bands.middle),
            len(self.bollinger_bands.lower),
            len(self.volume_sma),
        }
        if len(lengths) > 1:
            raise ValueError(f"Indicator series are not aligned: lengths {sorted(lengths)}")
        return self

    def __len__(self) -> int:
        return len(self.sma20)


def build_chart_series(
    dates: list[date], values: list[Optional[float]]
) -> list[ChartPoint]:
    """Convert an aligned series to chart points, skipping undefined values."""
    if len(dates) != len(values):
        raise ValueError(f"Length mismatch: {len(dates)} dates vs {len(values)} values")

    return [
        ChartPoint(time=d, value=round(v, 2))
        for d, v in zip(dates, values)
        if v is not None
    ]
