"""
CONTRACT 1: Price History

Input: ordered daily PricePoints supplied by the market-data source
Output: consumed by the Indicator Engine and Signal Analyzer

The history is produced once per request and never mutated afterwards.
"""

import datetime
from pydantic import BaseModel, Field


class PricePoint(BaseModel):
    """Single trading day of price and volume data."""

    date: datetime.date
    open: float = Field(..., ge=0)
    high: float = Field(..., ge=0)
    low: float = Field(..., ge=0)
    close: float = Field(..., ge=0)
    volume: float = Field(..., ge=0)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "date": "2024-02-02",
                "open": 185.04,
                "high": 187.23,
                "low": 179.25,
                "close": 185.85,
                "volume": 102518000,
            }
        }
