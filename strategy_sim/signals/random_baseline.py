"""Random baseline strategy"""

import random
from collections.abc import Sequence
from typing import Optional, Protocol

from ..config.defaults import RandomParams
from .base import Action, SignalStrategy

# Index order matches floor(r * 3)
_CHOICES = (Action.BUY, Action.SELL, Action.HOLD)


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1)."""

    def random(self) -> float: ...


class RandomStrategy(SignalStrategy):
    """
    Uniformly random BUY/SELL/HOLD, ignoring history

    Serves as the baseline the other strategies are compared against. The
    random source is injected; by default each instance owns a private
    ``random.Random`` so reseeding it never touches the global generator.
    """

    name = "random"

    def __init__(self, params: Optional[RandomParams] = None,
                 source: Optional[RandomSource] = None):
        self.params = params or RandomParams()
        self.source = source if source is not None else random.Random(self.params.seed)

    def reseed(self, seed: Optional[int]) -> None:
        """Replace the source with a fresh generator seeded with ``seed``."""
        self.source = random.Random(seed)

    def evaluate(self, history: Sequence[float]) -> Action:
        index = int(self.source.random() * len(_CHOICES))
        # Guard against sources that return exactly 1.0
        return _CHOICES[min(index, len(_CHOICES) - 1)]
