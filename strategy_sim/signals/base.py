"""Base types shared by all signal strategies."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum


class Action(Enum):
    """Signal emitted by a strategy for one decision point."""
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


class SignalStrategy(ABC):
    """
    Base class for signal strategies.

    ``evaluate`` receives every price observed up to and including the
    current decision point; ``history[-1]`` is the current price. It must
    not raise: too little history or a degenerate formula yields HOLD.
    """

    name: str = "base"

    @property
    def min_history(self) -> int:
        """Observations needed before the strategy can emit BUY or SELL."""
        return 1

    @abstractmethod
    def evaluate(self, history: Sequence[float]) -> Action:
        """
        Decide on an action for the latest observation.

        Args:
            history: Prices up to and including the current one

        Returns:
            BUY, SELL or HOLD
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
