"""
Market price service - fetches time-bucketed wholesale prices.
Wraps the external market data API behind the PriceSource capability.
"""

from typing import Any, List, Protocol
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from src.config import settings
from src.exceptions import FetchError
from src.logging_config import get_logger
from src.models.price import MarketDataResponse, MarketPriceBucket

logger = get_logger(__name__)


class PriceSource(Protocol):
    """Anything that can provide market price buckets for a time range."""

    async def fetch_market_prices(self, start_ms: int, end_ms: int) -> List[MarketPriceBucket]:
        ...


class MarketPriceService:
    """Fetches market prices from the external market data API."""

    def __init__(self, base_url: str = None, timeout: float = None):
        self.base_url = base_url or settings.market_data_base_url
        self.timeout = timeout or settings.market_data_timeout

    async def fetch_market_prices(self, start_ms: int, end_ms: int) -> List[MarketPriceBucket]:
        """Fetch the price buckets covering [start_ms, end_ms]."""
        try:
            url = self.build_url(start_ms, end_ms)
            payload = await self._fetch_json(url)
            buckets = self._parse_market_data(payload)
        except FetchError as e:
            logger.error("Failed to fetch market prices", error=str(e), start=start_ms, end=end_ms)
            raise

        logger.info("Fetched market prices", start=start_ms, end=end_ms, count=len(buckets))
        return buckets

    def build_url(self, start_ms: int, end_ms: int) -> str:
        """Build the market data URL for a millisecond time range."""
        params = {
            'start': start_ms,
            'end': end_ms,
        }
        return f"{self.base_url}?{urlencode(params)}"

    async def _fetch_json(self, url: str) -> Any:
        """Download and decode the JSON payload."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            raise FetchError(f"HTTP error: {e}")
        except ValueError as e:
            raise FetchError(f"Invalid JSON response: {e}")
        except Exception as e:
            raise FetchError(f"Unexpected error: {e}")

    def _parse_market_data(self, payload: Any) -> List[MarketPriceBucket]:
        """Validate the API payload into ordered price buckets."""
        try:
            return MarketDataResponse.model_validate(payload).data
        except ValidationError as e:
            raise FetchError(f"Market data parsing failed: {e}")


# Global price service instance
price_service = MarketPriceService()
