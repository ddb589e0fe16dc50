"""
Stock Analysis Service

CONTRACT:
    Input:  StockAnalysisRequest
    Output: StockAnalysis

Composes the Indicator Engine and Signal Analyzer. The history and both
outputs are returned to the caller unmodified.
"""

from app.services.stock_analysis.interface import StockAnalysisServiceInterface
from app.services.stock_analysis.service import (
    StockAnalysisService,
    get_stock_analysis_service,
)

__all__ = [
    "StockAnalysisServiceInterface",
    "StockAnalysisService",
    "get_stock_analysis_service",
]
