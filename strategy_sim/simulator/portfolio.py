"""
Single-strategy portfolio simulator.

Replays a price series one observation at a time. At every decision point
the strategy sees the prices up to and including that point and the next
price is used only to score the direction of the executed signal, so the
final observation is a valuation point and never a decision point.

Transition table (signal labels are price-direction calls, not order sides):

    BUY  with asset held -> sell all units for cash, correct if next > price
    SELL with cash held  -> buy units with all cash, correct if next < price
    anything else        -> no change, not counted
"""

from typing import Optional

from ..config.defaults import EQUITY_CURVE_PER_STEP, PortfolioParams
from ..data.models import PricePoint, PriceSeries
from ..data.validators import SeriesValidator
from ..errors import SimulationError
from ..logging.config import get_simulation_logger, log_trade
from ..signals.base import Action, SignalStrategy
from .models import EquityPoint, PortfolioState, SimulationResult, StepOutcome, Trade


def calculate_accuracy(correct_count: int, total_evaluated: int) -> float:
    """Percentage of correct signals; 0.0 when nothing was evaluated."""
    if total_evaluated == 0:
        return 0.0
    return 100.0 * correct_count / total_evaluated


class PortfolioSimulator:
    """Simulates following one strategy's signals with full allocation."""

    def __init__(self, params: Optional[PortfolioParams] = None,
                 validator: Optional[SeriesValidator] = None):
        self.params = params or PortfolioParams()
        self.validator = validator or SeriesValidator()

    @staticmethod
    def step(state: PortfolioState, action: Action, point: PricePoint,
             next_price: float) -> StepOutcome:
        """
        Apply one action to a portfolio state.

        Args:
            state: State before the decision point
            action: Strategy signal for this point
            point: Current observation (execution price and time)
            next_price: Following price, used to score the signal

        Returns:
            StepOutcome with the new state, the trade (if executed) and
            whether the signal's direction was right
        """
        price = point.price

        if action is Action.BUY and state.asset_units > 0:
            return StepOutcome(
                state=state.liquidate(price),
                trade=Trade(kind=Action.BUY, price=price, timestamp=point.timestamp),
                correct=next_price > price,
            )

        if action is Action.SELL and state.cash_value > 0:
            return StepOutcome(
                state=state.acquire(price),
                trade=Trade(kind=Action.SELL, price=price, timestamp=point.timestamp),
                correct=next_price < price,
            )

        return StepOutcome(state=state)

    def run(self, series: PriceSeries, strategy: SignalStrategy,
            name: Optional[str] = None) -> SimulationResult:
        """
        Simulate ``strategy`` over ``series``.

        Args:
            series: Price series to replay
            strategy: Strategy asked for a signal at every decision point
            name: Label for the result (defaults to ``strategy.name``)

        Returns:
            Immutable SimulationResult

        Raises:
            InsufficientDataError: Series shorter than two points
            InvalidPriceError: Non-finite or non-positive price
            TemporalDataError: Timestamps out of order
            SimulationError: Portfolio invariant broken during the run
        """
        name = name or strategy.name
        self.validator.validate(series)
        run_logger = get_simulation_logger(__name__).bind(pair=series.pair)

        prices = series.prices
        initial = PortfolioState.initial(self.params.initial_asset_units)
        state = initial
        trades: list[Trade] = []
        step_values: list[float] = []
        correct_count = 0
        total_evaluated = 0

        for index in range(len(prices) - 1):
            point = series[index]
            action = strategy.evaluate(prices[: index + 1])
            outcome = self.step(state, action, point, prices[index + 1])
            state = outcome.state

            if outcome.executed:
                if not state.holds_exactly_one():
                    raise SimulationError(
                        f"Portfolio invariant violated after {outcome.trade.kind.value} "
                        f"at index {index}: {state}",
                        strategy=name,
                        step_index=index,
                    )
                trades.append(outcome.trade)
                total_evaluated += 1
                if outcome.correct:
                    correct_count += 1
                log_trade(run_logger, name, outcome.trade.kind.value, point.price,
                          index, bool(outcome.correct))

            step_values.append(state.value_at(point.price))

        final_value = state.value_at(series.last_price)
        step_values.append(final_value)

        result = SimulationResult(
            strategy=name,
            pnl=final_value - initial.asset_units * series.first_price,
            accuracy=calculate_accuracy(correct_count, total_evaluated),
            trades=tuple(trades),
            equity_curve=self._equity_curve(series, state, step_values),
            correct_count=correct_count,
            total_evaluated=total_evaluated,
            final_state=state,
        )

        run_logger.info(
            "Strategy simulation complete",
            strategy=name,
            points=len(series),
            trades=len(result.trades),
            accuracy=result.accuracy,
            pnl=result.pnl,
        )

        return result

    def _equity_curve(self, series: PriceSeries, final_state: PortfolioState,
                      step_values: list[float]) -> tuple[EquityPoint, ...]:
        """
        Build the equity curve in the configured mode.

        ``final_state`` applies the end-of-run holdings to every historical
        price. ``per_step`` uses the holdings after each step.
        """
        if self.params.equity_curve == EQUITY_CURVE_PER_STEP:
            return tuple(
                EquityPoint(timestamp=point.timestamp, value=value)
                for point, value in zip(series, step_values)
            )

        return tuple(
            EquityPoint(timestamp=point.timestamp, value=final_state.value_at(point.price))
            for point in series
        )
