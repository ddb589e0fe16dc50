"""
Mock Data Generator

Generates realistic mock daily price history for development and testing.
Seeded, so the same arguments always produce the same history.
"""

import random
from datetime import date, timedelta
from typing import Optional

from app.schemas.market import PricePoint


# Base prices for common symbols
SYMBOL_BASE_PRICES = {
    "AAPL": 185.0,
    "MSFT": 410.0,
    "GOOGL": 145.0,
    "AMZN": 170.0,
    "NVDA": 720.0,
    "TSLA": 190.0,
    "META": 470.0,
    "JPM": 175.0,
    "SPY": 500.0,
}


def get_base_price(symbol: str, rng: random.Random) -> float:
    """Get base price for a symbol."""
    return SYMBOL_BASE_PRICES.get(symbol, 50.0 + rng.random() * 450)


def trading_days(end_date: date, count: int) -> list[date]:
    """The `count` weekdays ending on or before end_date, ascending."""
    days = []
    current = end_date
    while len(days) < count:
        if current.weekday() < 5:
            days.append(current)
        current -= timedelta(days=1)
    return list(reversed(days))


def generate_mock_history(
    symbol: str,
    lookback: int = 252,
    end_date: Optional[date] = None,
    seed: Optional[int] = None,
) -> list[PricePoint]:
    """Generate a random-walk daily history of `lookback` weekdays."""
    if lookback < 0:
        raise ValueError(f"lookback must be >= 0, got {lookback}")
    if end_date is None:
        end_date = date.today()

    rng = random.Random(seed if seed is not None else symbol)
    price = get_base_price(symbol, rng)
    volatility = price * 0.02  # 2% daily volatility

    history = []
    for day in trading_days(end_date, lookback):
        # Random walk, floored so prices stay positive
        change = (rng.random() - 0.5) * volatility

        open_price = price
        close_price = max(0.01, open_price + change)
        high_price = max(open_price, close_price) + rng.random() * volatility * 0.5
        low_price = max(0.0, min(open_price, close_price) - rng.random() * volatility * 0.5)

        history.append(
            PricePoint(
                date=day,
                open=round(open_price, 2),
                high=round(high_price, 2),
                low=round(low_price, 2),
                close=round(close_price, 2),
                volume=rng.randint(1_000_000, 50_000_000),
            )
        )

        price = close_price

    return history
