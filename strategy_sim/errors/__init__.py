"""
Error classification for price data processing and strategy simulation.

Data quality errors describe bad input and are recoverable by the caller
(fetch a different window, drop the bad record). System failures describe
conditions that stop a simulation or an I/O collaborator.
"""

from .data_quality import (
    DataQualityError,
    InsufficientDataError,
    InvalidPriceError,
    MalformedDataError,
    TemporalDataError,
)
from .system_failures import (
    ConfigurationError,
    PersistenceError,
    PriceFeedError,
    SimulationError,
    SystemFailureError,
    UnknownStrategyError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "InsufficientDataError",
    "InvalidPriceError",
    "MalformedDataError",
    "TemporalDataError",
    # System Failures
    "SystemFailureError",
    "SimulationError",
    "UnknownStrategyError",
    "ConfigurationError",
    "PriceFeedError",
    "PersistenceError",
]
