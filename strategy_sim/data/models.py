"""
Canonical price data models.

A price series is built once from the provider (or a saved bundle) and is
shared read-only by every strategy simulation.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Union

from ..utils.time import Timestamp, parse_timestamp, to_iso


@dataclass(frozen=True)
class PricePoint:
    """Single price observation with a UTC timestamp."""
    timestamp: datetime    # UTC market timestamp
    price: float           # Quote price, > 0 once validated

    def to_dict(self) -> dict[str, Any]:
        """Serialize as the ``{date, price}`` record used in result bundles."""
        return {"date": to_iso(self.timestamp), "price": self.price}


@dataclass(frozen=True)
class PriceSeries:
    """Time-ordered, immutable sequence of price observations."""

    points: tuple[PricePoint, ...]
    pair: Optional[str] = None

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Timestamp, float]],
                   pair: Optional[str] = None) -> "PriceSeries":
        """
        Build a series from ``(timestamp, price)`` pairs.

        Timestamps may be datetimes, unix seconds or ISO-8601 strings.
        No validation happens here; see ``SeriesValidator``.
        """
        points = tuple(
            PricePoint(timestamp=parse_timestamp(ts), price=float(price))
            for ts, price in pairs
        )
        return cls(points=points, pair=pair)

    @property
    def prices(self) -> tuple[float, ...]:
        """Prices in series order."""
        return tuple(point.price for point in self.points)

    @property
    def first_price(self) -> float:
        return self.points[0].price

    @property
    def last_price(self) -> float:
        return self.points[-1].price

    def to_dicts(self) -> list[dict[str, Any]]:
        """Serialize every point for persistence."""
        return [point.to_dict() for point in self.points]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[PricePoint]:
        return iter(self.points)

    def __getitem__(self, index: Union[int, slice]) -> Union[PricePoint, tuple[PricePoint, ...]]:
        return self.points[index]
