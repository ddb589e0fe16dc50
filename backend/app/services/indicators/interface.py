"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod

from app.services.base import BaseService
from app.schemas.market import PricePoint
from app.schemas.indicators import ChartPoint, TechnicalIndicators
from app.services.indicators.calculations import IndicatorBundle


class IndicatorServiceInterface(BaseService[list[PricePoint], IndicatorBundle]):
    """
    Indicator Engine Service Contract.

    INPUT: list[PricePoint]
        - Daily history, ascending by date

    OUTPUT: IndicatorBundle
        - NumPy arrays index-aligned to the input, NaN before each lookback
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(self, input_data: list[PricePoint]) -> IndicatorBundle:
        """Calculate the full indicator set for a history."""
        pass

    @abstractmethod
    def to_schema(self, bundle: IndicatorBundle) -> TechnicalIndicators:
        """Serialize a bundle for the dashboard (NaN -> null)."""
        pass

    @abstractmethod
    def chart_overlays(
        self, history: list[PricePoint], bundle: IndicatorBundle
    ) -> dict[str, list[ChartPoint]]:
        """Price-chart overlay series with undefined points omitted."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        pass
