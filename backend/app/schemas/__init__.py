"""
StockPro Signals Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from app.schemas.market import PricePoint
from app.schemas.indicators import (
    TechnicalIndicators,
    MACDSeries,
    BollingerSeries,
    ChartPoint,
    build_chart_series,
)
from app.schemas.analysis import (
    SignalDirection,
    IndicatorSignal,
    AnalysisSummary,
    StockAnalysisRequest,
    StockAnalysis,
)

__all__ = [
    # Market
    "PricePoint",
    # Indicators
    "TechnicalIndicators",
    "MACDSeries",
    "BollingerSeries",
    "ChartPoint",
    "build_chart_series",
    # Analysis
    "SignalDirection",
    "IndicatorSignal",
    "AnalysisSummary",
    "StockAnalysisRequest",
    "StockAnalysis",
]
