"""
Command line entry point.

Fetches (or replays) a price window, simulates every configured strategy
and writes the ``{prices, results, failures}`` bundle to disk.
"""

import argparse
import dataclasses
from collections.abc import Sequence
from typing import Any, Optional

import structlog

from .config.defaults import EQUITY_CURVE_MODES
from .config.loader import ConfigLoader
from .data.validators import SeriesValidator
from .engine import ResultAggregator
from .errors import DataQualityError, SystemFailureError
from .feeds.pyth import PythHistoryClient
from .logging.config import configure_logging
from .persistence.results_store import ResultsStore

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_ALL_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strategy-sim",
        description="Backtest momentum, mean-reversion, composite and random "
                    "signal strategies over a historical price window.",
    )
    parser.add_argument("--pair", default="ETH/USD", help="Trading pair label (default: ETH/USD)")
    parser.add_argument("--config-dir", help="Directory holding pairs.yaml")
    parser.add_argument("--input", help="Replay the prices of a saved result bundle instead of fetching")
    parser.add_argument("--output", help="Result bundle path (default from config)")
    parser.add_argument("--lookback-minutes", type=int, help="Price window length to fetch")
    parser.add_argument("--strategies", nargs="+", help="Strategy names to run, in order")
    parser.add_argument("--parallel", action="store_true", default=None,
                        help="Run strategies concurrently")
    parser.add_argument("--seed", type=int, help="Seed for the random baseline")
    parser.add_argument("--equity-curve", choices=EQUITY_CURVE_MODES,
                        help="Equity curve valuation mode")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    return parser


def build_run_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Translate CLI flags into the highest-precedence config tier."""
    overrides: dict[str, Any] = {}

    def put(section: str, key: str, value: Any) -> None:
        if value is not None:
            overrides.setdefault(section, {})[key] = value

    put("feed", "lookback_minutes", args.lookback_minutes)
    put("run", "strategies", args.strategies)
    put("run", "parallel", args.parallel)
    put("run", "output_path", args.output)
    put("random", "seed", args.seed)
    put("portfolio", "equity_curve", args.equity_curve)
    return overrides


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, format_json=args.json_logs)

    try:
        config = ConfigLoader.create(args.config_dir).load(args.pair, build_run_overrides(args))

        if args.input:
            series = ResultsStore(args.input).load_series()
            series = dataclasses.replace(series, pair=args.pair)
        else:
            series = PythHistoryClient(config.feed).fetch_series(pair=args.pair)

        SeriesValidator().validate(series)
        aggregator = ResultAggregator(config)
    except (DataQualityError, SystemFailureError) as e:
        logger.error(
            "Unable to start simulation",
            pair=args.pair,
            error_type=type(e).__name__,
            error=str(e),
        )
        return EXIT_INPUT_ERROR

    aggregate = aggregator.run(series)

    try:
        ResultsStore(config.run.output_path).write(aggregate.to_dict())
    except SystemFailureError as e:
        logger.error("Unable to save results", error=str(e))
        return EXIT_INPUT_ERROR

    for name, result in aggregate.results.items():
        logger.info(
            "Strategy summary",
            strategy=name,
            pnl=round(result.pnl, 2),
            accuracy=round(result.accuracy, 2),
            trades=len(result.trades),
        )

    return EXIT_OK if aggregate.succeeded else EXIT_ALL_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
