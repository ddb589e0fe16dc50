"""
Indicator Engine Service

CONTRACT:
    Input:  list[PricePoint]
    Output: IndicatorBundle (serializable as TechnicalIndicators)

RESPONSIBILITIES:
    - Moving averages (SMA 20/50/200, EMA 12/26)
    - Momentum (RSI 14, MACD 12/26/9)
    - Volatility (Bollinger Bands 20, 2)
    - Volume (20-day volume SMA)

Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from app.services.indicators.interface import IndicatorServiceInterface
from app.services.indicators.service import IndicatorService, get_indicator_service

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "get_indicator_service",
]
