"""
Data models package for the Energy Cost API.
Contains Pydantic models for readings, market prices and API responses.
"""

from .energy import EnergyCostRequest, EnergyCostResponse, ErrorResponse, HealthResponse, MeterReading
from .price import MarketDataResponse, MarketPriceBucket

__all__ = [
    "EnergyCostRequest",
    "EnergyCostResponse",
    "ErrorResponse",
    "HealthResponse",
    "MarketDataResponse",
    "MarketPriceBucket",
    "MeterReading",
]
