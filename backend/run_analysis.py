"""
Run the signal pipeline over mock history.
Run with: python run_analysis.py [SYMBOL ...]
"""

import asyncio
import os
import sys

# Set working directory and path
backend_dir = os.path.dirname(os.path.abspath(__file__))
os.chdir(backend_dir)
sys.path.insert(0, backend_dir)

# Load environment
from dotenv import load_dotenv
load_dotenv(os.path.join(backend_dir, ".env"))


async def run_analysis(symbols: list[str]):
    """Analyze mock history for each symbol and print the verdict."""
    from app.core.logging import setup_logging
    from app.schemas.analysis import StockAnalysisRequest
    from app.services.data_ingestion import generate_mock_history
    from app.services.stock_analysis import get_stock_analysis_service

    setup_logging()
    service = get_stock_analysis_service()

    print("\n" + "=" * 60)
    print("STOCKPRO SIGNALS - MOCK ANALYSIS")
    print("=" * 60)

    for symbol in symbols:
        history = generate_mock_history(symbol, lookback=300)
        result = await service.execute(
            StockAnalysisRequest(symbol=symbol, historical=history)
        )

        latest = result.historical[-1]
        print(f"\n{result.symbol} ({len(result.historical)} days, last close {latest.close:.2f})")
        print("-" * 40)
        print(f"  Direction:  {result.analysis.direction.value}")
        print(f"  Confidence: {result.analysis.confidence}%")
        print(f"  {result.analysis.summary}")
        for s in result.analysis.signals:
            print(f"  [{s.signal.value:>7}] {s.indicator}: {s.reason} (weight {s.weight})")

    print("\n" + "=" * 60 + "\n")


if __name__ == "__main__":
    asyncio.run(run_analysis(sys.argv[1:] or ["AAPL", "MSFT"]))
