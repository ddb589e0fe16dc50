"""
CONTRACT 3: Signal Analyzer

Input: price history + TechnicalIndicators
Output: AnalysisSummary

Per-indicator directional signals with weights, aggregated into one verdict
with a 0-100 confidence score. Advisory only.
"""

from enum import Enum
from pydantic import BaseModel, Field, field_validator

from app.schemas.market import PricePoint
from app.schemas.indicators import TechnicalIndicators


# =============================================================================
# ENUMS
# =============================================================================


class SignalDirection(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


# =============================================================================
# OUTPUT: Signals
# =============================================================================


class IndicatorSignal(BaseModel):
    """One indicator's verdict."""

    indicator: str
    signal: SignalDirection
    weight: float = Field(..., ge=0, description="Conviction strength")
    reason: str

    class Config:
        frozen = True


class AnalysisSummary(BaseModel):
    """
    Aggregate verdict over all indicator signals.
    Returned by: Analysis Service
    Consumed by: dashboard advisory card
    """

    direction: SignalDirection
    confidence: int = Field(..., ge=0, le=100)
    summary: str
    signals: list[IndicatorSignal]

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "direction": "bullish",
                "confidence": 72,
                "summary": "Technical analysis suggests bullish momentum. 3 indicators are positive, though 1 indicator(s) warrant caution.",
                "signals": [
                    {
                        "indicator": "RSI",
                        "signal": "bearish",
                        "weight": 2,
                        "reason": "RSI at 74.2 - Overbought territory",
                    },
                    {
                        "indicator": "Moving Averages",
                        "signal": "bullish",
                        "weight": 2.5,
                        "reason": "Golden Cross pattern - 50 SMA above 200 SMA",
                    },
                ],
            }
        }


# =============================================================================
# PIPELINE: StockAnalysisRequest -> StockAnalysis
# =============================================================================


class StockAnalysisRequest(BaseModel):
    """
    History to analyze for one symbol.
    Sent by: dashboard backend after fetching from the market-data source
    Received by: Stock Analysis Service
    """

    symbol: str = Field(..., min_length=1)
    historical: list[PricePoint]

    @field_validator("symbol")
    @classmethod
    def normalize_symbol(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("Ticker symbol required")
        return v

    @field_validator("historical")
    @classmethod
    def check_ascending_dates(cls, v: list[PricePoint]) -> list[PricePoint]:
        for prev, cur in zip(v, v[1:]):
            if cur.date <= prev.date:
                raise ValueError(
                    f"Dates must be strictly ascending: {cur.date} follows {prev.date}"
                )
        return v


class StockAnalysis(BaseModel):
    """History, indicators and verdict, returned together to the dashboard."""

    symbol: str
    historical: list[PricePoint]
    indicators: TechnicalIndicators
    analysis: AnalysisSummary
