"""
Price series validation.

Every simulation validates its input before replaying it so that strategies
and the portfolio arithmetic only ever see finite, positive, time-ordered
prices.
"""

import math

from ..errors import InsufficientDataError, InvalidPriceError, TemporalDataError
from .models import PriceSeries

MIN_SERIES_LENGTH = 2


class SeriesValidator:
    """Validates price series against quality rules."""

    def __init__(self, min_length: int = MIN_SERIES_LENGTH):
        self.min_length = min_length

    def validate(self, series: PriceSeries) -> None:
        """
        Validate a price series.

        Args:
            series: Series to validate

        Raises:
            InsufficientDataError: Fewer than ``min_length`` observations
            InvalidPriceError: A price is non-finite or not positive
            TemporalDataError: Timestamps decrease somewhere in the series
        """
        self._validate_length(series)
        self._validate_prices(series)
        self._validate_ordering(series)

    def _validate_length(self, series: PriceSeries) -> None:
        if len(series) < self.min_length:
            raise InsufficientDataError(
                f"Price series needs at least {self.min_length} points, got {len(series)}",
                required_count=self.min_length,
                available_count=len(series),
                context={"pair": series.pair},
            )

    def _validate_prices(self, series: PriceSeries) -> None:
        for index, point in enumerate(series):
            price = point.price
            if not isinstance(price, (int, float)) or isinstance(price, bool):
                raise InvalidPriceError(
                    f"Price at index {index} is not numeric: {price!r}",
                    index=index,
                    context={"pair": series.pair},
                )
            if not math.isfinite(price) or price <= 0:
                raise InvalidPriceError(
                    f"Price at index {index} must be finite and positive, got {price}",
                    index=index,
                    price=price,
                    context={"pair": series.pair},
                )

    def _validate_ordering(self, series: PriceSeries) -> None:
        for index in range(1, len(series)):
            previous = series[index - 1].timestamp
            current = series[index].timestamp
            if current < previous:
                raise TemporalDataError(
                    f"Timestamp at index {index} ({current.isoformat()}) precedes "
                    f"previous point ({previous.isoformat()})",
                    index=index,
                    timestamp=current,
                    previous_timestamp=previous,
                    context={"pair": series.pair},
                )


def validate_series(series: PriceSeries) -> None:
    """Validate ``series`` with the default rules."""
    SeriesValidator().validate(series)
