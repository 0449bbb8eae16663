"""
Portfolio simulation module.

Replays a price series against one strategy with an all-asset or all-cash
portfolio and produces a SimulationResult.
"""
from .models import EquityPoint, PortfolioState, SimulationResult, StepOutcome, Trade
from .portfolio import PortfolioSimulator

__all__ = [
    "EquityPoint",
    "PortfolioSimulator",
    "PortfolioState",
    "SimulationResult",
    "StepOutcome",
    "Trade",
]
