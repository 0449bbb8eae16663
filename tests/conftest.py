"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Sequence

import pytest

from strategy_sim.data.models import PriceSeries

START = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def build_series(prices: Sequence[float], pair: Optional[str] = "ETH/USD",
                 step_seconds: int = 60) -> PriceSeries:
    """Series with one observation per ``step_seconds`` starting at START."""
    return PriceSeries.from_pairs(
        ((START + timedelta(seconds=i * step_seconds), price) for i, price in enumerate(prices)),
        pair=pair,
    )


@pytest.fixture
def make_series() -> Callable[..., PriceSeries]:
    """Factory building a PriceSeries from a list of prices."""
    return build_series


@pytest.fixture
def wave_series() -> PriceSeries:
    """60 points oscillating with growing amplitude, triggers every strategy."""
    prices = []
    for i in range(60):
        amplitude = 1 + i * 0.4
        offset = amplitude if (i // 3) % 2 == 0 else -amplitude
        prices.append(100.0 + offset + i * 0.1)
    return build_series(prices)


@pytest.fixture
def provider_payload() -> dict:
    """Sample historical price provider payload (deliberately unsorted)."""
    return {
        "prices": [
            {"price": 350100000000, "publish_time": 1704110460, "exponent": -8},
            {"price": 350000000000, "publish_time": 1704110400, "exponent": -8},
            {"price": 349850000000, "publish_time": 1704110520, "exponent": -8},
        ]
    }
