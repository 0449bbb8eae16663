"""
Parsers translating external price formats into price series.

Two sources are supported: the historical price provider payload and a
previously saved result bundle, so that a run can be replayed offline on
exactly the prices it was first computed on.
"""

from typing import Any, Optional

from ..errors import MalformedDataError
from ..utils.time import from_unix_seconds, parse_timestamp
from .models import PricePoint, PriceSeries


def parse_price_history_payload(payload: Any, pair: Optional[str] = None) -> PriceSeries:
    """
    Parse a historical price provider payload into a PriceSeries.

    Expected format:
    {
        "prices": [
            {"price": 345678901234, "publish_time": 1700000000, "exponent": -8},
            ...
        ]
    }

    Each record becomes ``(publish_time, price * 10**exponent)``; records are
    sorted by publish time since the provider does not guarantee ordering.

    Args:
        payload: Decoded JSON payload
        pair: Optional trading pair label carried by the series

    Returns:
        Unvalidated PriceSeries in ascending timestamp order

    Raises:
        MalformedDataError: If the payload or any record has the wrong shape
    """
    if not isinstance(payload, dict):
        raise MalformedDataError(
            "Price history payload must be an object",
            raw_data=str(payload)[:100],
            expected_format="{prices: [...]}",
        )

    if not payload.get("prices"):
        raise MalformedDataError(
            "No price series in provider payload",
            raw_data=str(payload)[:100],
            expected_format="{prices: [...]}",
        )

    records = payload["prices"]
    if not isinstance(records, list):
        raise MalformedDataError(
            "'prices' field must be a list",
            raw_data=str(records)[:100],
            expected_format="list of {price, publish_time, exponent}",
        )

    points = [_parse_price_record(record, index) for index, record in enumerate(records)]
    points.sort(key=lambda point: point.timestamp)

    return PriceSeries(points=tuple(points), pair=pair)


def _parse_price_record(record: Any, index: int) -> PricePoint:
    """Parse a single provider record."""
    if not isinstance(record, dict):
        raise MalformedDataError(
            f"Price record at index {index} must be an object",
            raw_data=str(record)[:100],
            expected_format="{price, publish_time, exponent}",
        )

    try:
        raw_price = float(record["price"])
        exponent = int(record.get("exponent", 0))
        publish_time = int(record["publish_time"])
        timestamp = from_unix_seconds(publish_time)
        price = raw_price * 10 ** exponent
    except (KeyError, TypeError, ValueError, OverflowError, OSError) as e:
        raise MalformedDataError(
            f"Invalid price record at index {index}: {e}",
            raw_data=str(record)[:100],
            expected_format="{price, publish_time, exponent}",
        )

    return PricePoint(timestamp=timestamp, price=price)


def parse_results_bundle(bundle: Any, pair: Optional[str] = None) -> PriceSeries:
    """
    Rebuild the price series stored in a saved result bundle.

    Expected format: ``{"prices": [{"date": "<ISO-8601>", "price": 1234.5}, ...]}``

    Raises:
        MalformedDataError: If the bundle has no usable price list
    """
    if not isinstance(bundle, dict) or not isinstance(bundle.get("prices"), list):
        raise MalformedDataError(
            "Result bundle must contain a 'prices' list",
            raw_data=str(bundle)[:100],
            expected_format="{prices: [{date, price}]}",
        )

    points = []
    for index, record in enumerate(bundle["prices"]):
        try:
            points.append(PricePoint(
                timestamp=parse_timestamp(record["date"]),
                price=float(record["price"]),
            ))
        except (KeyError, TypeError, ValueError, OverflowError, OSError) as e:
            raise MalformedDataError(
                f"Invalid bundle price at index {index}: {e}",
                raw_data=str(record)[:100],
                expected_format="{date, price}",
            )

    return PriceSeries(points=tuple(points), pair=pair or bundle.get("pair"))
