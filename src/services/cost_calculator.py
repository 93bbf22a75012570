"""
Energy cost calculation over meter readings and market price buckets.

Each pair of consecutive readings forms a consumption interval. The interval
is priced with the bucket containing its first reading's timestamp; market
prices are quoted in EUR/MWh while readings are in kWh.
"""

import math
from typing import List, Optional, Sequence

from src.exceptions import InvalidReadingsError, NoPriceDataError
from src.logging_config import get_logger
from src.models.energy import MeterReading
from src.models.price import MarketPriceBucket

logger = get_logger(__name__)

KWH_PER_MWH = 1000


def find_price_bucket(timestamp: int, buckets: Sequence[MarketPriceBucket]) -> Optional[MarketPriceBucket]:
    """
    Find the bucket whose [start, end) interval contains timestamp.

    Args:
        timestamp: Time in milliseconds since epoch
        buckets: Time-ordered, non-overlapping price buckets

    Returns:
        The first matching bucket, or None if no bucket covers the timestamp
    """
    for bucket in buckets:
        if bucket.contains(timestamp):
            return bucket
    return None


def calculate_energy_cost(
    readings: Sequence[MeterReading],
    buckets: Sequence[MarketPriceBucket],
    require_price_coverage: bool = False,
) -> float:
    """
    Calculate the total cost in euros of the consumption between readings.

    Args:
        readings: Chronologically ordered meter readings (at least two)
        buckets: Market price buckets covering the readings
        require_price_coverage: Raise instead of skipping intervals with no price

    Returns:
        Total cost in euros. Negative consumption reduces the total.

    Raises:
        InvalidReadingsError: If fewer than two readings are given or the total overflows
        NoPriceDataError: If require_price_coverage is set and an interval has no price
    """
    if len(readings) < 2:
        raise InvalidReadingsError("At least two meter readings are required")

    total_cost = 0.0
    unpriced: List[int] = []

    for reading_a, reading_b in zip(readings, readings[1:]):
        consumption = reading_b.value - reading_a.value

        bucket = find_price_bucket(reading_a.timestamp, buckets)
        if bucket is None:
            if require_price_coverage:
                raise NoPriceDataError(
                    f"No market price available for reading at {reading_a.timestamp}"
                )
            unpriced.append(reading_a.timestamp)
            continue

        price_per_kwh = bucket.price / KWH_PER_MWH
        total_cost += consumption * price_per_kwh

    if not math.isfinite(total_cost):
        raise InvalidReadingsError("Energy cost of the readings is not a finite number")

    if unpriced:
        logger.warning("Readings without market price priced at zero",
                       count=len(unpriced),
                       timestamps=unpriced)

    logger.debug("Calculated energy cost",
                 intervals=len(readings) - 1,
                 buckets=len(buckets),
                 total_cost=total_cost)
    return total_cost
