"""Pyth benchmarks historical price client."""

import json
import socket
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode, urlparse
from urllib.request import Request, urlopen

import structlog

from ..config.defaults import FeedParams
from ..data.models import PriceSeries
from ..data.parsers import parse_price_history_payload
from ..errors import ConfigurationError, MalformedDataError, PriceFeedError
from ..utils.time import to_unix_seconds

logger = structlog.get_logger(__name__)


class PythHistoryClient:
    """
    Fetches historical prices from the Pyth benchmarks shim.

    GET {base_url}/{feed_id}?resolution=..&start_time=..&end_time=..
    returns ``{"prices": [{"price", "publish_time", "exponent"}, ...]}``.
    Network errors and 5xx responses are retried; 4xx responses and
    malformed payloads are not.
    """

    def __init__(self, params: Optional[FeedParams] = None):
        self.params = params or FeedParams()

        parsed = urlparse(self.params.base_url)
        if not parsed.scheme or not parsed.netloc:
            raise ConfigurationError(f"Invalid feed URL: {self.params.base_url}")

    def build_url(self, start: datetime, end: datetime) -> str:
        """Build the request URL for a time window."""
        query = urlencode({
            "resolution": self.params.resolution,
            "start_time": to_unix_seconds(start),
            "end_time": to_unix_seconds(end),
        })
        return f"{self.params.base_url.rstrip('/')}/{self.params.feed_id}?{query}"

    def fetch_series(
        self,
        pair: Optional[str] = None,
        end: Optional[datetime] = None,
        lookback_minutes: Optional[int] = None,
    ) -> PriceSeries:
        """
        Fetch the price window ending at ``end`` as a PriceSeries.

        Args:
            pair: Label attached to the series
            end: Window end (now if None)
            lookback_minutes: Window length (``params.lookback_minutes`` if None)

        Returns:
            Unvalidated PriceSeries in ascending timestamp order

        Raises:
            PriceFeedError: Request failed after all retries, or permanently
            MalformedDataError: Response was not a usable price payload
        """
        end = end or datetime.now(timezone.utc)
        minutes = lookback_minutes or self.params.lookback_minutes
        start = end - timedelta(minutes=minutes)

        payload = self.fetch_payload_with_retry(start, end)
        series = parse_price_history_payload(payload, pair=pair)

        logger.info(
            "Fetched price history",
            pair=pair,
            feed_id=self.params.feed_id,
            points=len(series),
            start=start.isoformat(),
            end=end.isoformat(),
        )
        return series

    def fetch_payload_with_retry(self, start: datetime, end: datetime) -> dict[str, Any]:
        """Fetch a payload, retrying transient failures."""
        max_retries = self.params.max_retries
        retry_delay = self.params.retry_delay_seconds
        attempt = 0
        last_error: Optional[PriceFeedError] = None

        while attempt <= max_retries:
            try:
                return self.fetch_payload(start, end)
            except PriceFeedError as e:
                if not e.retryable:
                    e.attempt_count = attempt + 1
                    raise
                last_error = e

            attempt += 1

            if attempt <= max_retries:
                logger.warning(
                    f"Price fetch attempt {attempt} failed, retrying in {retry_delay}s",
                    feed_id=self.params.feed_id,
                    error=str(last_error),
                )
                time.sleep(retry_delay)

        raise PriceFeedError(
            f"Max retries exceeded: {last_error}",
            url=last_error.url if last_error else None,
            status_code=last_error.status_code if last_error else None,
            retryable=False,
            attempt_count=attempt,
        )

    def fetch_payload(self, start: datetime, end: datetime) -> dict[str, Any]:
        """
        Perform a single request.

        Raises:
            PriceFeedError: ``retryable`` is set for network errors and 5xx
            MalformedDataError: Body is not valid JSON
        """
        url = self.build_url(start, end)
        req = Request(url, headers={
            "Accept": "application/json",
            "User-Agent": "strategy-sim/1.0",
        })

        try:
            with urlopen(req, timeout=self.params.timeout_seconds) as response:
                body = response.read().decode("utf-8")

        except HTTPError as e:
            logger.warning(
                "Price feed HTTP error",
                url=url,
                error_code=e.code,
                error_reason=str(e.reason),
            )
            raise PriceFeedError(
                f"HTTP {e.code}: {e.reason}",
                url=url,
                status_code=e.code,
                retryable=e.code >= 500,
            )

        except (URLError, socket.timeout, OSError) as e:
            logger.warning("Price feed network error", url=url, error=str(e))
            raise PriceFeedError(f"Network error: {e}", url=url, retryable=True)

        try:
            return json.loads(body)  # type: ignore[no-any-return]
        except json.JSONDecodeError as e:
            raise MalformedDataError(
                f"Price feed returned invalid JSON: {e}",
                raw_data=body[:100],
                expected_format="application/json",
            )
