"""
Signal strategies.

Each strategy is a pure function of the price history observed so far and
answers BUY, SELL or HOLD. Strategies are looked up by name through the
registry.
"""
from .base import Action, SignalStrategy
from .composite import HeuristicScoreStrategy
from .mean_reversion import MeanReversionStrategy
from .momentum import MomentumStrategy
from .random_baseline import RandomSource, RandomStrategy
from .registry import available_strategies, create_strategy, register_strategy

__all__ = [
    "Action",
    "SignalStrategy",
    "MomentumStrategy",
    "MeanReversionStrategy",
    "HeuristicScoreStrategy",
    "RandomStrategy",
    "RandomSource",
    "available_strategies",
    "create_strategy",
    "register_strategy",
]
