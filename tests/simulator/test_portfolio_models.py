"""Tests for simulation data models."""

from datetime import datetime, timezone

import pytest

from strategy_sim.signals.base import Action
from strategy_sim.simulator.models import (
    EquityPoint,
    PortfolioState,
    SimulationResult,
    Trade,
)

TS = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class TestPortfolioState:
    """Test the two-way holding state."""

    def test_initial_state(self):
        state = PortfolioState.initial()
        assert state.asset_units == 1000.0
        assert state.cash_value == 0.0
        assert state.is_invested and not state.is_in_cash

    def test_liquidate_and_acquire(self):
        cash = PortfolioState.initial(10.0).liquidate(50.0)
        assert cash == PortfolioState(asset_units=0.0, cash_value=500.0)

        units = cash.acquire(25.0)
        assert units == PortfolioState(asset_units=20.0, cash_value=0.0)

    def test_transitions_return_new_state(self):
        state = PortfolioState.initial()
        state.liquidate(10.0)
        assert state.asset_units == 1000.0

    def test_value_at(self):
        assert PortfolioState(asset_units=2.0).value_at(10.0) == 20.0
        assert PortfolioState(asset_units=0.0, cash_value=7.0).value_at(10.0) == 7.0

    @pytest.mark.parametrize("asset_units, cash_value, expected", [
        (1.0, 0.0, True),
        (0.0, 1.0, True),
        (1.0, 1.0, False),
        (0.0, 0.0, False),
    ])
    def test_holds_exactly_one(self, asset_units, cash_value, expected):
        assert PortfolioState(asset_units, cash_value).holds_exactly_one() is expected


class TestSerialization:
    """Test bundle serialization of results."""

    def test_trade_to_dict(self):
        trade = Trade(kind=Action.SELL, price=200.0, timestamp=TS)
        assert trade.to_dict() == {"type": "SELL", "price": 200.0, "date": "2024-01-01T12:00:00.000Z"}

    def test_result_to_dict(self):
        result = SimulationResult(
            strategy="momentum",
            pnl=3000.0,
            accuracy=0.0,
            trades=(),
            equity_curve=(EquityPoint(timestamp=TS, value=100000.0),),
            correct_count=0,
            total_evaluated=0,
            final_state=PortfolioState.initial(),
        )

        data = result.to_dict()

        assert data["pnl"] == 3000.0
        assert data["accuracy"] == 0.0
        assert data["trades"] == []
        assert data["equityCurve"] == [{"date": "2024-01-01T12:00:00.000Z", "value": 100000.0}]
        assert data["finalState"] == {"assetUnits": 1000.0, "cashValue": 0.0}
