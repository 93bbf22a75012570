"""
Services package for the Energy Cost API.
Contains the market price fetcher and the cost calculator.
"""

from .cost_calculator import calculate_energy_cost, find_price_bucket
from .price_service import MarketPriceService, PriceSource, price_service

__all__ = [
    "calculate_energy_cost",
    "find_price_bucket",
    "MarketPriceService",
    "PriceSource",
    "price_service",
]
