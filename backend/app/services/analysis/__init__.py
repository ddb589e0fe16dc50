"""
Signal Analyzer Service

CONTRACT:
    Input:  AnalysisInput (history + IndicatorBundle)
    Output: AnalysisSummary

RESPONSIBILITIES:
    - Per-indicator signals: RSI, MACD, moving averages, Bollinger Bands, volume
    - Weighted aggregation into direction + confidence
    - Summary sentence

Heuristic and advisory only. Deterministic for identical input.
"""

from app.services.analysis.interface import AnalysisInput, AnalysisServiceInterface
from app.services.analysis.service import AnalysisService, get_analysis_service

__all__ = [
    "AnalysisInput",
    "AnalysisServiceInterface",
    "AnalysisService",
    "get_analysis_service",
]
