"""
Pydantic data models for market price data.
Mirrors the payload returned by the market data API.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MarketPriceBucket(BaseModel):
    """
    A single wholesale price interval from the market data API.

    Based on the upstream JSON format:
    {"start_timestamp": 1428591600000, "end_timestamp": 1428595200000,
     "marketprice": 42.09, "unit": "Eur/MWh"}
    """
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    start: int = Field(
        alias="start_timestamp",
        description="Interval start in milliseconds since epoch (inclusive)"
    )
    end: int = Field(
        alias="end_timestamp",
        description="Interval end in milliseconds since epoch (exclusive)"
    )
    price: float = Field(
        alias="marketprice",
        description="Wholesale price (EUR/MWh) - can be negative in some markets"
    )
    unit: Optional[str] = Field(default=None, description="Price unit as reported upstream")

    def contains(self, timestamp: int) -> bool:
        """Check whether timestamp falls in the half-open interval [start, end)."""
        return self.start <= timestamp < self.end


class MarketDataResponse(BaseModel):
    """Envelope returned by the market data API."""
    data: List[MarketPriceBucket]
