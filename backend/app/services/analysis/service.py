"""
Analysis Service Implementation

Turns indicator output into weighted signals and one advisory verdict.
"""

import logging
from typing import Optional

from app.schemas.analysis import AnalysisSummary
from app.services.base import ValidationError
from app.services.analysis.interface import AnalysisInput, AnalysisServiceInterface
from app.services.analysis.signals import generate_analysis
from app.services.indicators.service import history_to_series

logger = logging.getLogger(__name__)


class AnalysisService(AnalysisServiceInterface):
    """Signal analyzer over a history and its indicator bundle."""

    @property
    def name(self) -> str:
        return "AnalysisService"

    async def execute(self, input_data: AnalysisInput) -> AnalysisSummary:
        try:
            series = history_to_series(input_data.history)
            summary = generate_analysis(series, input_data.indicators)
        except ValueError as e:
            logger.warning(f"Rejected analysis input: {e}")
            raise ValidationError(self.name, str(e)) from e

        logger.debug(
            f"Analysis over {len(series)} points: "
            f"{summary.direction.value} ({summary.confidence}%)"
        )
        return summary

    async def health_check(self) -> bool:
        return True


# Singleton instance
_service_instance: Optional[AnalysisService] = None


def get_analysis_service() -> AnalysisService:
    """Get or create analysis service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AnalysisService()
    return _service_instance
