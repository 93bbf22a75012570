"""
Tests for reading and market price model validation.
"""

import pytest
from pydantic import ValidationError

from src.models.energy import MeterReading
from src.models.price import MarketPriceBucket


class TestMeterReading:
    """Test validation of incoming meter readings."""

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_value_rejected(self, value):
        with pytest.raises(ValidationError):
            MeterReading(timestamp=1704067200000, value=value)

    @pytest.mark.parametrize("timestamp, value", [
        ("1704067200000", 1.0),
        (1704067200000, "1.0"),
        (1704067200000.0, 1.0),
    ])
    def test_no_type_coercion(self, timestamp, value):
        with pytest.raises(ValidationError):
            MeterReading(timestamp=timestamp, value=value)

    def test_integer_value_accepted(self):
        reading = MeterReading(timestamp=1704067200000, value=12)
        assert reading.value == 12.0


class TestMarketPriceBucket:
    """Test validation of upstream price buckets."""

    def test_non_finite_price_rejected(self):
        with pytest.raises(ValidationError):
            MarketPriceBucket(start_timestamp=0, end_timestamp=1, marketprice=float("nan"))

    def test_wire_names(self):
        bucket = MarketPriceBucket.model_validate(
            {"start_timestamp": 0, "end_timestamp": 10, "marketprice": 42.5}
        )
        assert (bucket.start, bucket.end, bucket.price) == (0, 10, 42.5)
        assert bucket.contains(0)
        assert not bucket.contains(10)
