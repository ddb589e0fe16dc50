"""
Analysis Service Interface

Defines the contract for the signal analyzer.
"""

from abc import abstractmethod
from dataclasses import dataclass

from app.services.base import BaseService
from app.schemas.analysis import AnalysisSummary
from app.schemas.market import PricePoint
from app.services.indicators.calculations import IndicatorBundle


@dataclass(frozen=True)
class AnalysisInput:
    """History plus the indicator bundle computed from it."""

    history: list[PricePoint]
    indicators: IndicatorBundle


class AnalysisServiceInterface(BaseService[AnalysisInput, AnalysisSummary]):
    """
    Analysis Service Contract.

    INPUT: AnalysisInput
        - history: the same PricePoints the indicators were computed from
        - indicators: IndicatorBundle index-aligned to history

    OUTPUT: AnalysisSummary
        - direction, confidence (0-100), summary text, per-indicator signals
    """

    @property
    def name(self) -> str:
        return "AnalysisService"

    @abstractmethod
    async def execute(self, input_data: AnalysisInput) -> AnalysisSummary:
        """Score the latest indicator values."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Analysis service is always healthy (pure computation)."""
        pass
