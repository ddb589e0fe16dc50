"""
Data Ingestion

Fetching from the live market-data provider lives outside this package;
only the mock history generator used for development and tests is here.
"""

from app.services.data_ingestion.mock_data import generate_mock_history

__all__ = ["generate_mock_history"]
