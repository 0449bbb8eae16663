"""Tests for structured logging helpers and their use in the simulator."""

from unittest.mock import Mock, patch

from structlog.testing import capture_logs

from strategy_sim.errors import InvalidPriceError, SimulationError
from strategy_sim.logging.config import (
    configure_logging,
    get_simulation_logger,
    log_strategy_failure,
    log_trade,
)
from strategy_sim.signals.base import Action, SignalStrategy
from strategy_sim.simulator.portfolio import PortfolioSimulator


class Alternating(SignalStrategy):
    name = "alternating"

    def __init__(self):
        self.calls = 0

    def evaluate(self, history):
        self.calls += 1
        return Action.BUY if self.calls % 2 else Action.SELL


class TestLoggingHelpers:
    """Test standardized log events."""

    def test_log_trade_binds_fields(self):
        logger = Mock()

        log_trade(logger, "momentum", "BUY", 101.5, 21, True, context={"pair": "ETH/USD"})

        logger.bind.assert_called_once_with(
            strategy="momentum",
            trade_kind="BUY",
            price=101.5,
            step_index=21,
            correct=True,
        )
        bound = logger.bind.return_value
        bound.bind.assert_called_once_with(context={"pair": "ETH/USD"})
        bound.bind.return_value.debug.assert_called_once_with("Trade executed")

    def test_log_trade_without_context(self):
        logger = Mock()
        log_trade(logger, "random", "SELL", 99.0, 3, False)
        logger.bind.return_value.debug.assert_called_once_with("Trade executed")

    def test_log_strategy_failure(self):
        logger = Mock()

        log_strategy_failure(logger, "mean-reversion", InvalidPriceError("bad tick"))

        logger.error.assert_called_once_with(
            "Strategy simulation failed",
            strategy="mean-reversion",
            error_type="InvalidPriceError",
            error="bad tick",
            recoverable=True,
        )

    def test_log_strategy_failure_system_error(self):
        logger = Mock()
        log_strategy_failure(logger, "x", SimulationError("boom"))
        assert logger.error.call_args[1]["recoverable"] is False

    def test_simulation_logger_binds_subsystem(self):
        configure_logging(level="DEBUG", format_json=True)
        with capture_logs() as captured:
            get_simulation_logger(__name__).info("hello")

        assert captured[0]["subsystem"] == "simulator"
        assert captured[0]["log_level"] == "info"


class TestSimulatorLogging:
    """The simulator logs each trade and a run summary."""

    def test_trades_and_summary_logged(self, make_series):
        with patch("strategy_sim.simulator.portfolio.get_simulation_logger") as get_logger:
            result = PortfolioSimulator().run(make_series([100, 105, 103, 108]), Alternating())

        get_logger.return_value.bind.assert_called_once_with(pair="ETH/USD")
        run_logger = get_logger.return_value.bind.return_value

        trade_calls = [c for c in run_logger.bind.call_args_list if "trade_kind" in c[1]]
        assert [c[1]["trade_kind"] for c in trade_calls] == ["BUY", "SELL", "BUY"]
        assert [c[1]["correct"] for c in trade_calls] == [True, True, True]
        assert len(trade_calls) == len(result.trades)

        run_logger.info.assert_called_once()
        summary = run_logger.info.call_args
        assert summary[0][0] == "Strategy simulation complete"
        assert summary[1]["strategy"] == "alternating"
        assert summary[1]["trades"] == 3
