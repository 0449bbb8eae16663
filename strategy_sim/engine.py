"""
Main simulation engine coordinator.

Runs one independent portfolio simulation per configured strategy over a
shared, read-only price series and collects the results:

    PriceSeries → SignalStrategy → PortfolioSimulator → SimulationResult
"""

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Optional, Union

import structlog

from .config.defaults import DefaultConfig, get_default_config
from .data.models import PriceSeries
from .errors import (
    DataQualityError,
    SimulationError,
    SystemFailureError,
    UnknownStrategyError,
)
from .logging.config import log_strategy_failure
from .signals.random_baseline import RandomSource
from .signals.registry import available_strategies, create_strategy
from .simulator.models import SimulationResult
from .simulator.portfolio import PortfolioSimulator

logger = structlog.get_logger(__name__)

SourceFactory = Callable[[], RandomSource]


@dataclass(frozen=True)
class StrategyFailure:
    """A strategy whose simulation was aborted."""
    strategy: str
    error_type: str
    message: str
    recoverable: bool = False

    @classmethod
    def from_exception(cls, strategy: str, error: BaseException) -> "StrategyFailure":
        return cls(
            strategy=strategy,
            error_type=type(error).__name__,
            message=str(error),
            recoverable=getattr(error, "recoverable", False),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "errorType": self.error_type,
            "message": self.message,
            "recoverable": self.recoverable,
        }


@dataclass(frozen=True)
class AggregateResult:
    """Results of every strategy run over one price series."""
    series: PriceSeries
    results: dict[str, SimulationResult] = field(default_factory=dict)
    failures: dict[str, StrategyFailure] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        """True when at least one strategy produced a result."""
        return bool(self.results)

    def best_strategy(self) -> Optional[str]:
        """Name of the strategy with the highest PnL, None if nothing ran."""
        if not self.results:
            return None
        return max(self.results, key=lambda name: self.results[name].pnl)

    def to_dict(self) -> dict[str, Any]:
        """Serialize as the ``{prices, results, failures}`` bundle."""
        return {
            "pair": self.series.pair,
            "prices": self.series.to_dicts(),
            "results": {name: result.to_dict() for name, result in self.results.items()},
            "failures": {name: failure.to_dict() for name, failure in self.failures.items()},
        }


class ResultAggregator:
    """
    Drives one PortfolioSimulator run per strategy.

    Every run gets a freshly built strategy and its own portfolio state;
    the only shared input is the immutable series, so runs can execute on
    a thread pool without synchronization.
    """

    def __init__(
        self,
        config: Optional[DefaultConfig] = None,
        strategies: Optional[Sequence[str]] = None,
        source_factory: Optional[SourceFactory] = None,
    ) -> None:
        """
        Args:
            config: Configuration (defaults if None)
            strategies: Strategy names to run, in result order
                (``config.run.strategies`` if None)
            source_factory: Builds a random source for each run of a
                strategy that needs one; by default the strategy seeds its
                own generator from ``config.random.seed``

        Raises:
            UnknownStrategyError: If a requested name is not registered
        """
        self.config = config or get_default_config()
        self.strategies = tuple(strategies or self.config.run.strategies)
        self.source_factory = source_factory
        self.simulator = PortfolioSimulator(self.config.portfolio)

        registered = available_strategies()
        for name in self.strategies:
            if name not in registered:
                raise UnknownStrategyError(
                    f"Unknown strategy '{name}'",
                    strategy=name,
                    available=registered,
                )

    def run(self, series: PriceSeries, parallel: Optional[bool] = None) -> AggregateResult:
        """
        Simulate every configured strategy over ``series``.

        Args:
            series: Shared price series
            parallel: Run strategies on a thread pool (``config.run.parallel`` if None)

        Returns:
            AggregateResult with per-strategy results and failures
        """
        if parallel is None:
            parallel = self.config.run.parallel

        logger.info(
            "Starting strategy simulations",
            pair=series.pair,
            points=len(series),
            strategies=list(self.strategies),
            parallel=parallel,
        )

        if parallel:
            max_workers = self.config.run.max_workers or len(self.strategies)
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                futures = [executor.submit(self._run_isolated, series, name)
                           for name in self.strategies]
                outcomes = [future.result() for future in futures]
        else:
            outcomes = [self._run_isolated(series, name) for name in self.strategies]

        results: dict[str, SimulationResult] = {}
        failures: dict[str, StrategyFailure] = {}
        for name, outcome in zip(self.strategies, outcomes):
            if isinstance(outcome, StrategyFailure):
                failures[name] = outcome
            else:
                results[name] = outcome

        aggregate = AggregateResult(series=series, results=results, failures=failures)

        logger.info(
            "Strategy simulations finished",
            pair=series.pair,
            succeeded=list(results),
            failed=list(failures),
            best_strategy=aggregate.best_strategy(),
        )

        return aggregate

    def run_strategy(self, series: PriceSeries, name: str) -> SimulationResult:
        """
        Simulate a single strategy, letting errors propagate.

        Raises:
            DataQualityError: Invalid series
            SystemFailureError: Simulation or lookup failure
        """
        source = self.source_factory() if self.source_factory is not None else None
        strategy = create_strategy(name, self.config, source)
        return self.simulator.run(series, strategy, name=name)

    def _run_isolated(self, series: PriceSeries,
                      name: str) -> Union[SimulationResult, StrategyFailure]:
        """Run one strategy, converting any failure into a StrategyFailure."""
        try:
            return self.run_strategy(series, name)
        except (DataQualityError, SystemFailureError) as e:
            log_strategy_failure(logger, name, e)
            return StrategyFailure.from_exception(name, e)
        except Exception as e:
            error = SimulationError(
                f"Unexpected error simulating '{name}': {e}",
                strategy=name,
            )
            log_strategy_failure(logger, name, error)
            return StrategyFailure.from_exception(name, error)
