import pytest
from datetime import date, timedelta

from app.schemas.market import PricePoint


def make_history(closes, volumes=None, start=date(2023, 1, 2)) -> list[PricePoint]:
    """Build a daily history from close prices (open/high/low derived)."""
    if volumes is None:
        volumes = [1_000_000] * len(closes)
    return [
        PricePoint(
            date=start + timedelta(days=i),
            open=c,
            high=c + 1,
            low=max(0.0, c - 1),
            close=c,
            volume=v,
        )
        for i, (c, v) in enumerate(zip(closes, volumes))
    ]


def pullback_closes() -> list[float]:
    """290 days rising 1/day from 100, then 10 days falling 10/day (ends at 289)."""
    rising = [100.0 + t for t in range(290)]
    falling = [389.0 - 10 * (t + 1) for t in range(10)]
    return rising + falling


def rally_closes() -> list[float]:
    """Mirror of pullback_closes: 290 days falling from 500, then a 10-day rally."""
    return [600.0 - c for c in pullback_closes()]


@pytest.fixture
def linear_history():
    """300 closes rising 100 -> 399 in unit steps, constant volume."""
    return make_history([100.0 + t for t in range(300)])


@pytest.fixture
def pullback_history():
    return make_history(pullback_closes())


@pytest.fixture
def rally_history():
    return make_history(rally_closes())
