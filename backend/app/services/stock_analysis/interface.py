"""
Stock Analysis Service Interface

Defines the contract for the history -> indicators -> verdict pipeline.
"""

from abc import abstractmethod

from app.services.base import BaseService
from app.schemas.analysis import StockAnalysis, StockAnalysisRequest


class StockAnalysisServiceInterface(BaseService[StockAnalysisRequest, StockAnalysis]):
    """
    Stock Analysis Service Contract.

    INPUT: StockAnalysisRequest
        - symbol: ticker, upper-cased
        - historical: daily PricePoints, strictly ascending dates

    OUTPUT: StockAnalysis
        - historical: passed through unmodified
        - indicators: TechnicalIndicators aligned to historical
        - analysis: AnalysisSummary
    """

    @property
    def name(self) -> str:
        return "StockAnalysisService"

    @abstractmethod
    async def execute(self, input_data: StockAnalysisRequest) -> StockAnalysis:
        """Compute indicators and the verdict for one symbol."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Healthy when both underlying services are."""
        pass
