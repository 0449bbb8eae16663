"""
System failure error classifications.

These exceptions stop a single simulation run or an external collaborator
(price feed, result sink) and are not fixed by retrying with the same input.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class SimulationError(SystemFailureError):
    """A strategy simulation could not complete."""

    def __init__(self, message: str, strategy: Optional[str] = None,
                 step_index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.strategy = strategy
        self.step_index = step_index


class UnknownStrategyError(SystemFailureError):
    """No strategy is registered under the requested name."""

    def __init__(self, message: str, strategy: Optional[str] = None,
                 available: Optional[list[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.strategy = strategy
        self.available = available or []


class ConfigurationError(SystemFailureError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class PriceFeedError(SystemFailureError):
    """Price history could not be fetched from the provider."""

    def __init__(self, message: str, url: Optional[str] = None,
                 status_code: Optional[int] = None, retryable: bool = False,
                 attempt_count: int = 1, **kwargs):
        super().__init__(message, **kwargs)
        self.url = url
        self.status_code = status_code
        self.retryable = retryable
        self.attempt_count = attempt_count


class PersistenceError(SystemFailureError):
    """File system failure while writing or reading results."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.target = target
