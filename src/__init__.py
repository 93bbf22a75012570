"""
Energy Cost API - meter reading cost calculation service

Prices the consumption between utility-meter readings with wholesale
electricity market prices fetched from the aWATTar market data API.

Main components:
- Market price service for fetching time-bucketed prices
- Cost calculator pairing consumption intervals with price buckets
- Domain exceptions for clear error handling
"""

__version__ = "1.0.0"
