"""
Simulation data models.

All models are frozen. PortfolioState transitions return a new state, so a
run threads one explicit state value through its step function instead of
mutating shared variables.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..signals.base import Action
from ..utils.time import to_iso


@dataclass(frozen=True)
class PortfolioState:
    """
    Two-way holding: either fully in the asset or fully in cash.

    Exactly one of ``asset_units`` and ``cash_value`` is non-zero.
    """
    asset_units: float
    cash_value: float = 0.0

    @classmethod
    def initial(cls, asset_units: float = 1000.0) -> "PortfolioState":
        """Starting state, fully invested in the asset."""
        return cls(asset_units=asset_units, cash_value=0.0)

    @property
    def is_invested(self) -> bool:
        return self.asset_units > 0

    @property
    def is_in_cash(self) -> bool:
        return self.cash_value > 0

    def holds_exactly_one(self) -> bool:
        """True when exactly one side of the portfolio is non-zero."""
        return (self.asset_units == 0) != (self.cash_value == 0)

    def liquidate(self, price: float) -> "PortfolioState":
        """Convert every asset unit into cash at ``price`` (BUY signal effect)."""
        return PortfolioState(
            asset_units=0.0,
            cash_value=self.cash_value + self.asset_units * price,
        )

    def acquire(self, price: float) -> "PortfolioState":
        """Convert all cash into asset units at ``price`` (SELL signal effect)."""
        return PortfolioState(
            asset_units=self.asset_units + self.cash_value / price,
            cash_value=0.0,
        )

    def value_at(self, price: float) -> float:
        """Portfolio value in cash terms at ``price``."""
        return self.asset_units * price + self.cash_value

    def to_dict(self) -> dict[str, float]:
        return {"assetUnits": self.asset_units, "cashValue": self.cash_value}


@dataclass(frozen=True)
class Trade:
    """Executed (non-HOLD) signal."""
    kind: Action
    price: float
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "price": self.price, "date": to_iso(self.timestamp)}


@dataclass(frozen=True)
class EquityPoint:
    """Portfolio valuation at one price observation."""
    timestamp: datetime
    value: float

    def to_dict(self) -> dict[str, Any]:
        return {"date": to_iso(self.timestamp), "value": self.value}


@dataclass(frozen=True)
class StepOutcome:
    """Result of applying one action to a portfolio state."""
    state: PortfolioState
    trade: Optional[Trade] = None
    correct: Optional[bool] = None      # None when nothing was executed

    @property
    def executed(self) -> bool:
        return self.trade is not None


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of simulating one strategy over one price series."""
    strategy: str
    pnl: float
    accuracy: float                     # Percentage in [0, 100]
    trades: tuple[Trade, ...]
    equity_curve: tuple[EquityPoint, ...]
    correct_count: int
    total_evaluated: int
    final_state: PortfolioState

    def to_dict(self) -> dict[str, Any]:
        """Serialize in the result bundle format."""
        return {
            "pnl": self.pnl,
            "accuracy": self.accuracy,
            "trades": [trade.to_dict() for trade in self.trades],
            "equityCurve": [point.to_dict() for point in self.equity_curve],
            "correctCount": self.correct_count,
            "totalEvaluated": self.total_evaluated,
            "finalState": self.final_state.to_dict(),
        }
