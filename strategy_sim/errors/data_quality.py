"""
Data quality error classifications for price series processing.

These exceptions categorize problems with the price history handed to the
simulator, before any strategy is evaluated.
"""

from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for data quality issues that the caller can recover from."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InsufficientDataError(DataQualityError):
    """Not enough price observations to run a simulation."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count


class InvalidPriceError(DataQualityError):
    """A price is NaN, infinite, zero or negative."""

    def __init__(self, message: str, index: Optional[int] = None,
                 price: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index
        self.price = price


class TemporalDataError(DataQualityError):
    """Timestamps are out of order."""

    def __init__(self, message: str, index: Optional[int] = None,
                 timestamp: Optional[Any] = None,
                 previous_timestamp: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index
        self.timestamp = timestamp
        self.previous_timestamp = previous_timestamp


class MalformedDataError(DataQualityError):
    """Data exists but is in an unexpected format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
