"""
Price data module.

Immutable price series, series validation and translation of provider
payloads and saved result bundles into price series.
"""
from .models import PricePoint, PriceSeries
from .validators import SeriesValidator

__all__ = ["PricePoint", "PriceSeries", "SeriesValidator"]
