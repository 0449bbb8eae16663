"""Statistics helpers used by the signal strategies"""

from .statistics import (
    dispersion_around,
    mean,
    population_stddev,
    simple_moving_average,
    zscore,
)

__all__ = [
    "dispersion_around",
    "mean",
    "population_stddev",
    "simple_moving_average",
    "zscore",
]
