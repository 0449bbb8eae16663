"""Moving averages, dispersion and z-score calculations"""

import math
from collections.abc import Sequence
from typing import Optional


def mean(values: Sequence[float]) -> Optional[float]:
    """
    Arithmetic mean

    Returns:
        Mean value or None for an empty sequence
    """
    if not values:
        return None
    return sum(values) / len(values)


def simple_moving_average(values: Sequence[float], period: int) -> Optional[float]:
    """
    Simple moving average of the last ``period`` values

    Args:
        values: Values in chronological order
        period: Window length

    Returns:
        SMA value or None if insufficient data
    """
    if period <= 0 or len(values) < period:
        return None
    return sum(values[-period:]) / period


def dispersion_around(values: Sequence[float], center: float) -> Optional[float]:
    """
    Root-mean-square distance of ``values`` from ``center``

    sqrt(sum((v - center)^2) / n). With ``center`` equal to the mean of
    ``values`` this is the population standard deviation.
    """
    if not values:
        return None
    return math.sqrt(sum((v - center) ** 2 for v in values) / len(values))


def population_stddev(values: Sequence[float]) -> Optional[float]:
    """Population standard deviation (divides by n, not n - 1)"""
    center = mean(values)
    if center is None:
        return None
    return dispersion_around(values, center)


def zscore(value: float, center: float, stddev: float) -> Optional[float]:
    """
    Standardized deviation of ``value`` from ``center``

    Returns:
        (value - center) / stddev, or None when stddev is zero
    """
    if stddev == 0:
        return None
    return (value - center) / stddev
