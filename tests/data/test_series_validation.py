"""Tests for price series models and validation."""

import math
from datetime import datetime, timezone

import pytest

from strategy_sim.data.models import PricePoint, PriceSeries
from strategy_sim.data.validators import SeriesValidator, validate_series
from strategy_sim.errors import (
    DataQualityError,
    InsufficientDataError,
    InvalidPriceError,
    TemporalDataError,
)


class TestPriceSeries:
    """Test PriceSeries construction and accessors."""

    def test_from_pairs_accepts_unix_seconds(self):
        series = PriceSeries.from_pairs([(1704110400, 100), (1704110460, 101.5)])

        assert len(series) == 2
        assert series[0].timestamp == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        assert series.prices == (100.0, 101.5)
        assert isinstance(series[0].price, float)

    def test_from_pairs_accepts_iso_strings(self):
        series = PriceSeries.from_pairs([
            ("2024-01-01T12:00:00.000Z", 100.0),
            ("2024-01-01T12:01:00+00:00", 101.0),
        ])

        assert series[1].timestamp == datetime(2024, 1, 1, 12, 1, tzinfo=timezone.utc)

    def test_first_and_last_price(self, make_series):
        series = make_series([100, 102, 99, 101, 103])

        assert series.first_price == 100.0
        assert series.last_price == 103.0

    def test_series_is_immutable(self, make_series):
        series = make_series([100, 101])

        with pytest.raises(AttributeError):
            series.points = ()
        with pytest.raises(AttributeError):
            series[0].price = 5.0

    def test_to_dicts_uses_bundle_format(self, make_series):
        series = make_series([100, 101])

        assert series.to_dicts()[0] == {"date": "2024-01-01T12:00:00.000Z", "price": 100.0}


class TestSeriesValidator:
    """Test series validation rules."""

    def test_valid_series_passes(self, make_series):
        validate_series(make_series([100, 102, 99]))

    @pytest.mark.parametrize("prices", [[], [100.0]])
    def test_too_short_series(self, make_series, prices):
        with pytest.raises(InsufficientDataError) as exc_info:
            SeriesValidator().validate(make_series(prices))

        assert exc_info.value.required_count == 2
        assert exc_info.value.available_count == len(prices)

    @pytest.mark.parametrize("bad_price", [0.0, -1.0, math.nan, math.inf, -math.inf])
    def test_invalid_prices(self, make_series, bad_price):
        with pytest.raises(InvalidPriceError) as exc_info:
            validate_series(make_series([100.0, bad_price, 101.0]))

        assert exc_info.value.index == 1
        assert isinstance(exc_info.value, DataQualityError)

    def test_decreasing_timestamps(self):
        series = PriceSeries(points=(
            PricePoint(datetime(2024, 1, 1, 12, 1, tzinfo=timezone.utc), 100.0),
            PricePoint(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc), 101.0),
        ))

        with pytest.raises(TemporalDataError) as exc_info:
            validate_series(series)

        assert exc_info.value.index == 1

    def test_equal_timestamps_allowed(self):
        ts = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        series = PriceSeries(points=(PricePoint(ts, 100.0), PricePoint(ts, 101.0)))

        validate_series(series)

    def test_custom_minimum_length(self, make_series):
        with pytest.raises(InsufficientDataError):
            SeriesValidator(min_length=5).validate(make_series([1, 2, 3]))
