"""
Historical price providers.

Fetch a price window for a trading pair and hand it over as a PriceSeries.
"""
from .pyth import PythHistoryClient

__all__ = ["PythHistoryClient"]
