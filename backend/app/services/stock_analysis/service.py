"""
Stock Analysis Service Implementation

Runs the Indicator Engine then the Signal Analyzer over one symbol's history
and packages everything the dashboard renders.
"""

import logging
from typing import Optional

from app.core.config import settings
from app.schemas.analysis import StockAnalysis, StockAnalysisRequest
from app.services.base import ValidationError
from app.services.analysis import AnalysisInput, AnalysisService, get_analysis_service
from app.services.indicators import IndicatorService, get_indicator_service
from app.services.stock_analysis.interface import StockAnalysisServiceInterface

logger = logging.getLogger(__name__)


class StockAnalysisService(StockAnalysisServiceInterface):
    """Pipeline service: history -> indicators -> analysis."""

    def __init__(
        self,
        indicator_service: Optional[IndicatorService] = None,
        analysis_service: Optional[AnalysisService] = None,
        min_history_length: Optional[int] = None,
    ):
        self._indicators = indicator_service or get_indicator_service()
        self._analysis = analysis_service or get_analysis_service()
        self._min_history_length = (
            min_history_length if min_history_length is not None else settings.min_history_length
        )

    @property
    def name(self) -> str:
        return "StockAnalysisService"

    async def validate_input(self, input_data: StockAnalysisRequest) -> StockAnalysisRequest:
        if not input_data.historical:
            logger.warning(f"No historical data for {input_data.symbol}")
            raise ValidationError(
                self.name, "No historical data available", {"symbol": input_data.symbol}
            )
        if len(input_data.historical) < self._min_history_length:
            raise ValidationError(
                self.name,
                "Insufficient historical data",
                {
                    "symbol": input_data.symbol,
                    "length": len(input_data.historical),
                    "min_length": self._min_history_length,
                },
            )
        return input_data

    async def execute(self, input_data: StockAnalysisRequest) -> StockAnalysis:
        request = await self.validate_input(input_data)

        bundle = await self._indicators.execute(request.historical)
        summary = await self._analysis.execute(
            AnalysisInput(history=request.historical, indicators=bundle)
        )

        logger.info(
            f"{request.symbol}: {summary.direction.value} "
            f"({summary.confidence}% confidence, {len(request.historical)} days)"
        )

        return StockAnalysis(
            symbol=request.symbol,
            historical=request.historical,
            indicators=self._indicators.to_schema(bundle),
            analysis=summary,
        )

    async def health_check(self) -> bool:
        return await self._indicators.health_check() and await self._analysis.health_check()


# Singleton instance
_service_instance: Optional[StockAnalysisService] = None


def get_stock_analysis_service() -> StockAnalysisService:
    """Get or create stock analysis service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = StockAnalysisService()
    return _service_instance
