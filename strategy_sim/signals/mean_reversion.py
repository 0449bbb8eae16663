"""Z-score mean reversion strategy"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import MeanReversionParams
from ..metrics.statistics import mean, population_stddev, zscore
from .base import Action, SignalStrategy


class MeanReversionStrategy(SignalStrategy):
    """
    Statistical mean reversion over the whole observed history

    The mean and population standard deviation are taken over every price
    seen so far, not a rolling window. A price far below the mean
    (z < -entry_z) is a BUY, far above (z > entry_z) a SELL.
    """

    name = "mean-reversion"

    def __init__(self, params: Optional[MeanReversionParams] = None):
        self.params = params or MeanReversionParams()

    @property
    def min_history(self) -> int:
        return self.params.min_history

    def evaluate(self, history: Sequence[float]) -> Action:
        if len(history) < self.params.min_history:
            return Action.HOLD

        center = mean(history)
        stddev = population_stddev(history)
        if center is None or stddev is None:
            return Action.HOLD

        z = zscore(history[-1], center, stddev)
        if z is None:
            # Flat history
            return Action.HOLD

        if z < -self.params.entry_z:
            return Action.BUY
        if z > self.params.entry_z:
            return Action.SELL
        return Action.HOLD
