"""Moving-average band (trend-following) strategy"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import MomentumParams
from ..metrics.statistics import simple_moving_average
from .base import Action, SignalStrategy


class MomentumStrategy(SignalStrategy):
    """
    Trend-following signal around a simple moving average

    BUY when the current price is above ``ma * upper_band``, SELL when it is
    below ``ma * lower_band``, HOLD inside the band.
    """

    name = "momentum"

    def __init__(self, params: Optional[MomentumParams] = None):
        self.params = params or MomentumParams()

    @property
    def min_history(self) -> int:
        return self.params.window

    def evaluate(self, history: Sequence[float]) -> Action:
        ma = simple_moving_average(history, self.params.window)
        if ma is None:
            return Action.HOLD

        current = history[-1]
        if current > ma * self.params.upper_band:
            return Action.BUY
        if current < ma * self.params.lower_band:
            return Action.SELL
        return Action.HOLD
