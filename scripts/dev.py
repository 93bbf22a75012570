#!/usr/bin/env python3
"""
Development helper scripts for the Energy Cost API.
Provides utilities for manual checks against the live market data API.
"""

import asyncio
import json
import sys
from pathlib import Path

# Add src to Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import settings
from src.logging_config import setup_logging
from src.models.energy import EnergyCostRequest
from src.services.cost_calculator import calculate_energy_cost
from src.services.price_service import price_service


async def fetch_prices(start_ms: int, end_ms: int):
    """Fetch and display market prices for a millisecond time range."""
    print(f"Fetching market prices from {start_ms} to {end_ms}...")
    setup_logging()

    buckets = await price_service.fetch_market_prices(start_ms, end_ms)
    if not buckets:
        print("No market prices returned")
        return

    print(f"\nFound {len(buckets)} price buckets:")
    print("-" * 50)
    print(f"{'Start':<16} {'End':<16} {'Price':<16}")
    print("-" * 50)

    for bucket in buckets:
        print(f"{bucket.start:<16} {bucket.end:<16} {bucket.price:>8.2f} EUR/MWh")


async def calculate(readings_path: Path):
    """Calculate the energy cost for a JSON file of readings."""
    setup_logging()

    request = EnergyCostRequest.model_validate(json.loads(readings_path.read_text()))
    readings = request.readings
    if len(readings) < 2:
        print("At least two meter readings are required")
        return

    buckets = await price_service.fetch_market_prices(readings[0].timestamp, readings[-1].timestamp)
    total_cost = calculate_energy_cost(
        readings,
        buckets,
        require_price_coverage=settings.require_price_coverage,
    )
    print(f"Total cost for {len(readings)} readings: {total_cost:.4f} EUR")


def show_config():
    """Display current configuration settings."""
    print("Current Configuration:")
    print("-" * 40)
    print(f"API Host: {settings.api_host}")
    print(f"API Port: {settings.api_port}")
    print(f"Debug Mode: {settings.api_debug}")
    print(f"CORS Origins: {', '.join(settings.cors_allow_origins)}")
    print(f"Market Data URL: {settings.market_data_base_url}")
    print(f"Market Data Timeout: {settings.market_data_timeout}s")
    print(f"Require Price Coverage: {settings.require_price_coverage}")
    print(f"Log Level: {settings.log_level}")


def main():
    """Main script entry point with command selection."""
    if len(sys.argv) < 2:
        print("Energy Cost API Development Scripts")
        print("Usage: python scripts/dev.py <command>")
        print("\nAvailable commands:")
        print("  fetch-prices <start_ms> <end_ms>  - Fetch market prices for a time range")
        print("  calculate <readings.json>         - Calculate cost for a readings file")
        print("  show-config                       - Display current configuration")
        return

    command = sys.argv[1]

    if command == "fetch-prices" and len(sys.argv) == 4:
        asyncio.run(fetch_prices(int(sys.argv[2]), int(sys.argv[3])))
    elif command == "calculate" and len(sys.argv) == 3:
        asyncio.run(calculate(Path(sys.argv[2])))
    elif command == "show-config":
        show_config()
    else:
        print(f"Unknown command or missing arguments: {' '.join(sys.argv[1:])}")
        print("Run without arguments to see available commands")


if __name__ == "__main__":
    main()
