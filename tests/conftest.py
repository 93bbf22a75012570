"""
Test configuration and fixtures for the Energy Cost API tests.
Contains shared fixtures and test utilities.
"""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from src.api.routes import get_price_source
from src.main import create_app
from src.models.energy import MeterReading
from src.models.price import MarketPriceBucket

# 2024-01-01T00:00:00Z
BASE_TIMESTAMP = 1704067200000
HOUR_MS = 3_600_000


class FakePriceSource:
    """In-memory price source recording the ranges it was asked for."""

    def __init__(self, buckets: List[MarketPriceBucket], error: Optional[Exception] = None):
        self.buckets = buckets
        self.error = error
        self.calls = []

    async def fetch_market_prices(self, start_ms: int, end_ms: int) -> List[MarketPriceBucket]:
        self.calls.append((start_ms, end_ms))
        if self.error is not None:
            raise self.error
        return self.buckets


def make_reading(hours: float, value: float) -> MeterReading:
    """Build a reading at the given number of hours after BASE_TIMESTAMP."""
    return MeterReading(timestamp=BASE_TIMESTAMP + int(hours * HOUR_MS), value=value)


@pytest.fixture
def sample_price_buckets() -> List[MarketPriceBucket]:
    """
    Create 24 hourly price buckets starting at BASE_TIMESTAMP.
    Hour n is priced at 100 + 10 * n EUR/MWh.
    """
    return [
        MarketPriceBucket(
            start=BASE_TIMESTAMP + hour * HOUR_MS,
            end=BASE_TIMESTAMP + (hour + 1) * HOUR_MS,
            price=100.0 + 10 * hour,
            unit="Eur/MWh",
        )
        for hour in range(24)
    ]


@pytest.fixture
def fake_price_source(sample_price_buckets) -> FakePriceSource:
    """
    Create a price source serving the sample buckets.
    """
    return FakePriceSource(sample_price_buckets)


@pytest.fixture
def test_app(fake_price_source):
    """
    Create a test instance of the FastAPI application backed by the fake price source.
    """
    app = create_app()
    app.dependency_overrides[get_price_source] = lambda: fake_price_source
    return app


@pytest.fixture
def test_client(test_app):
    """
    Create a test client for the FastAPI application.
    """
    return TestClient(test_app)
