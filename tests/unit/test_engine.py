"""Unit tests for the result aggregator."""

import dataclasses

import pytest

from strategy_sim.config.defaults import RandomParams, RunParams, get_default_config
from strategy_sim.engine import AggregateResult, ResultAggregator, StrategyFailure
from strategy_sim.errors import InvalidPriceError, UnknownStrategyError
from strategy_sim.signals.base import Action, SignalStrategy
from strategy_sim.signals.registry import register_strategy, unregister_strategy


class ExplodingStrategy(SignalStrategy):
    name = "exploding"

    def evaluate(self, history):
        raise RuntimeError("model weights missing")


class RejectingStrategy(SignalStrategy):
    name = "rejecting"

    def evaluate(self, history):
        raise InvalidPriceError("bad tick", index=len(history) - 1)


@pytest.fixture
def extra_strategies():
    register_strategy("exploding", lambda config, source: ExplodingStrategy())
    register_strategy("rejecting", lambda config, source: RejectingStrategy())
    yield
    unregister_strategy("exploding")
    unregister_strategy("rejecting")


def seeded_config(seed=3):
    return dataclasses.replace(get_default_config(), random=RandomParams(seed=seed))


class TestResultAggregator:
    """Test suite for ResultAggregator."""

    def test_runs_every_default_strategy(self, wave_series) -> None:
        aggregate = ResultAggregator(seeded_config()).run(wave_series)

        assert list(aggregate.results) == ["momentum", "mean-reversion", "composite", "random"]
        assert aggregate.failures == {}
        assert aggregate.succeeded
        for name, result in aggregate.results.items():
            assert result.strategy == name

    def test_custom_strategy_selection(self, wave_series) -> None:
        aggregate = ResultAggregator(strategies=["composite", "momentum"]).run(wave_series)
        assert list(aggregate.results) == ["composite", "momentum"]

    def test_strategies_from_config(self, wave_series) -> None:
        config = dataclasses.replace(get_default_config(), run=RunParams(strategies=("momentum",)))
        aggregate = ResultAggregator(config).run(wave_series)
        assert list(aggregate.results) == ["momentum"]

    def test_unknown_strategy_rejected_up_front(self) -> None:
        with pytest.raises(UnknownStrategyError):
            ResultAggregator(strategies=["momentum", "astrology"])

    def test_failure_is_isolated(self, wave_series, extra_strategies) -> None:
        aggregator = ResultAggregator(
            seeded_config(), strategies=["momentum", "exploding", "mean-reversion", "rejecting", "random"])

        aggregate = aggregator.run(wave_series)

        assert list(aggregate.results) == ["momentum", "mean-reversion", "random"]
        assert set(aggregate.failures) == {"exploding", "rejecting"}

        exploding = aggregate.failures["exploding"]
        assert exploding.error_type == "SimulationError"
        assert "model weights missing" in exploding.message
        assert exploding.recoverable is False

        rejecting = aggregate.failures["rejecting"]
        assert rejecting.error_type == "InvalidPriceError"
        assert rejecting.recoverable is True

    def test_invalid_series_fails_every_strategy(self, make_series) -> None:
        aggregate = ResultAggregator().run(make_series([100.0]))

        assert aggregate.results == {}
        assert not aggregate.succeeded
        assert {f.error_type for f in aggregate.failures.values()} == {"InsufficientDataError"}

    def test_run_strategy_propagates_errors(self, make_series) -> None:
        with pytest.raises(InvalidPriceError):
            ResultAggregator().run_strategy(make_series([100.0, 0.0]), "momentum")

    def test_source_factory_feeds_random_strategy(self, make_series) -> None:
        class Source:
            def __init__(self):
                self.values = iter([0.1, 0.9, 0.5, 0.1])

            def random(self):
                return next(self.values)

        aggregator = ResultAggregator(strategies=["random"], source_factory=Source)
        series = make_series([100, 102, 99, 101, 103])

        first = aggregator.run(series).results["random"]
        second = aggregator.run(series).results["random"]

        assert [t.kind for t in first.trades] == [Action.BUY, Action.SELL, Action.BUY]
        assert first.trades == second.trades

    def test_seeded_random_is_reproducible(self, wave_series) -> None:
        first = ResultAggregator(seeded_config(9), strategies=["random"]).run(wave_series)
        second = ResultAggregator(seeded_config(9), strategies=["random"]).run(wave_series)

        assert first.results["random"] == second.results["random"]


class TestAggregateResult:
    """Test aggregate helpers."""

    def test_best_strategy_and_serialization(self, wave_series) -> None:
        aggregate = ResultAggregator(seeded_config()).run(wave_series)

        best = aggregate.best_strategy()
        assert aggregate.results[best].pnl == max(r.pnl for r in aggregate.results.values())

        data = aggregate.to_dict()
        assert data["pair"] == "ETH/USD"
        assert len(data["prices"]) == len(wave_series)
        assert set(data["results"]) == set(aggregate.results)
        assert data["failures"] == {}

    def test_empty_aggregate(self, make_series) -> None:
        aggregate = AggregateResult(series=make_series([1.0, 2.0]))
        assert aggregate.best_strategy() is None
        assert not aggregate.succeeded

    def test_failure_to_dict(self) -> None:
        failure = StrategyFailure.from_exception("x", InvalidPriceError("bad"))
        assert failure.to_dict() == {
            "errorType": "InvalidPriceError",
            "message": "bad",
            "recoverable": True,
        }
