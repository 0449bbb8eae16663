"""
Centralized logging configuration for the strategy simulator.

All components log through structlog so that trade events, strategy
failures and run summaries share one structured format, rendered either
for the console or as JSON lines.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # structlog does the formatting, stdlib only routes the records
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s"
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_simulation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the simulator subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger carrying ``subsystem="simulator"``
    """
    return get_logger(name).bind(subsystem="simulator")


def log_trade(
    logger: FilteringBoundLogger,
    strategy: str,
    kind: str,
    price: float,
    step_index: int,
    correct: bool,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log an executed trade with standardized fields.

    Args:
        logger: Structlog logger instance
        strategy: Name of the strategy that produced the signal
        kind: Trade kind (BUY or SELL)
        price: Execution price
        step_index: Index of the decision point in the series
        correct: Whether the next price moved in the predicted direction
        context: Additional context data
    """
    bound_logger = logger.bind(
        strategy=strategy,
        trade_kind=kind,
        price=price,
        step_index=step_index,
        correct=correct,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Trade executed")


def log_strategy_failure(
    logger: FilteringBoundLogger,
    strategy: str,
    error: BaseException,
) -> None:
    """
    Log a strategy run that was aborted.

    Args:
        logger: Structlog logger instance
        strategy: Name of the failed strategy
        error: The exception that stopped the run
    """
    logger.error(
        "Strategy simulation failed",
        strategy=strategy,
        error_type=type(error).__name__,
        error=str(error),
        recoverable=getattr(error, "recoverable", False),
    )
