"""Heuristic composite score strategy"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import CompositeParams
from ..metrics.statistics import dispersion_around, simple_moving_average
from .base import Action, SignalStrategy


class HeuristicScoreStrategy(SignalStrategy):
    """
    Composite score of short/long momentum penalised by volatility

    score = (short_ma / long_ma - 1) * momentum_weight
            - (volatility / current) * volatility_weight

    where volatility is the RMS distance of the last ``volatility_window``
    prices from the short moving average. Scores above ``score_threshold``
    are a BUY, below ``-score_threshold`` a SELL.
    """

    name = "composite"

    def __init__(self, params: Optional[CompositeParams] = None):
        self.params = params or CompositeParams()

    @property
    def min_history(self) -> int:
        p = self.params
        return max(p.short_window, p.long_window, p.volatility_window)

    def score(self, history: Sequence[float]) -> Optional[float]:
        """
        Composite score for the latest observation

        Returns:
            Score value or None if insufficient data
        """
        if len(history) < self.min_history:
            return None

        p = self.params
        short_ma = simple_moving_average(history, p.short_window)
        long_ma = simple_moving_average(history, p.long_window)
        if short_ma is None or long_ma is None or long_ma == 0:
            return None

        volatility = dispersion_around(history[-p.volatility_window:], short_ma)
        if volatility is None:
            return None

        current = history[-1]
        if current <= 0:
            return None

        momentum = short_ma / long_ma
        return (momentum - 1) * p.momentum_weight - (volatility / current) * p.volatility_weight

    def evaluate(self, history: Sequence[float]) -> Action:
        score = self.score(history)
        if score is None:
            return Action.HOLD

        if score > self.params.score_threshold:
            return Action.BUY
        if score < -self.params.score_threshold:
            return Action.SELL
        return Action.HOLD
