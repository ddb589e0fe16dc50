"""
Indicator Engine Service Implementation

Converts a price history to NumPy arrays and calculates the indicator set.
"""

import logging
from typing import Optional

import numpy as np

from app.core.config import settings
from app.schemas.market import PricePoint
from app.schemas.indicators import (
    BollingerSeries,
    ChartPoint,
    MACDSeries,
    TechnicalIndicators,
    build_chart_series,
)
from app.services.base import ValidationError
from app.services.indicators.interface import IndicatorServiceInterface
from app.services.indicators.calculations import (
    IndicatorBundle,
    PriceSeries,
    calculate_all_indicators,
    to_optional_list,
)

logger = logging.getLogger(__name__)


def history_to_series(history: list[PricePoint]) -> PriceSeries:
    """Convert PricePoint list to numpy arrays."""
    closes = np.array([p.close for p in history], dtype=float)
    volumes = np.array([p.volume for p in history], dtype=float)
    return PriceSeries(closes=closes, volumes=volumes)


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    Calculates technical indicators for a daily history.
    All calculations are deterministic and reproducible.
    """

    def __init__(self, max_series_length: Optional[int] = None):
        self._max_series_length = max_series_length or settings.max_series_length

    @property
    def name(self) -> str:
        return "IndicatorService"

    async def validate_input(self, input_data: list[PricePoint]) -> list[PricePoint]:
        if len(input_data) > self._max_series_length:
            logger.warning(
                f"Rejected history of {len(input_data)} points "
                f"(limit {self._max_series_length})"
            )
            raise ValidationError(
                self.name,
                "Price history too long",
                {"length": len(input_data), "max_length": self._max_series_length},
            )
        return input_data

    async def execute(self, input_data: list[PricePoint]) -> IndicatorBundle:
        """Calculate the full indicator set for a history."""
        history = await self.validate_input(input_data)
        series = history_to_series(history)

        try:
            bundle = calculate_all_indicators(series)
        except ValueError as e:
            raise ValidationError(self.name, str(e)) from e

        logger.debug(f"Calculated indicators over {len(series)} points")
        return bundle

    def to_schema(self, bundle: IndicatorBundle) -> TechnicalIndicators:
        """Serialize a bundle for the dashboard (NaN -> null)."""
        return TechnicalIndicators(
            sma20=to_optional_list(bundle.sma20),
            sma50=to_optional_list(bundle.sma50),
            sma200=to_optional_list(bundle.sma200),
            ema12=to_optional_list(bundle.ema12),
            ema26=to_optional_list(bundle.ema26),
            rsi=to_optional_list(bundle.rsi),
            macd=MACDSeries(
                macd=to_optional_list(bundle.macd.macd),
                signal=to_optional_list(bundle.macd.signal),
                histogram=to_optional_list(bundle.macd.histogram),
            ),
            bollinger_bands=BollingerSeries(
                upper=to_optional_list(bundle.bollinger_bands.upper),
                middle=to_optional_list(bundle.bollinger_bands.middle),
                lower=to_optional_list(bundle.bollinger_bands.lower),
            ),
            volume_sma=to_optional_list(bundle.volume_sma),
        )

    def chart_overlays(
        self, history: list[PricePoint], bundle: IndicatorBundle
    ) -> dict[str, list[ChartPoint]]:
        """Price-chart overlay series with undefined points omitted."""
        dates = [p.date for p in history]
        overlays = {
            "sma20": bundle.sma20,
            "sma50": bundle.sma50,
            "sma200": bundle.sma200,
            "ema12": bundle.ema12,
            "ema26": bundle.ema26,
            "bb_upper": bundle.bollinger_bands.upper,
            "bb_middle": bundle.bollinger_bands.middle,
            "bb_lower": bundle.bollinger_bands.lower,
        }
        return {
            key: build_chart_series(dates, to_optional_list(values))
            for key, values in overlays.items()
        }

    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
