"""
FastAPI route handlers for the main API endpoints.
Implements the energy cost calculation and health check endpoints.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException

from src.config import settings
from src.exceptions import FetchError, InvalidReadingsError, NoPriceDataError
from src.logging_config import get_logger
from src.models.energy import EnergyCostRequest, EnergyCostResponse, ErrorResponse, HealthResponse
from src.services.cost_calculator import calculate_energy_cost
from src.services.price_service import PriceSource, price_service

logger = get_logger(__name__)

router = APIRouter()


def get_price_source() -> PriceSource:
    """Dependency providing the market price source for a request."""
    return price_service


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint for monitoring and load balancers.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        details={
            "service": "energy-cost-api",
            "market_data_url": settings.market_data_base_url,
            "require_price_coverage": settings.require_price_coverage,
        }
    )


@router.post(
    "/energy_cost",
    response_model=EnergyCostResponse,
    responses={
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_energy_cost(
    request: EnergyCostRequest,
    price_source: PriceSource = Depends(get_price_source),
):
    """
    Calculate the total cost of the consumption between meter readings.

    Market prices for the span between the first and last reading are fetched
    from the price source, then each consumption interval is priced with the
    bucket containing its start.

    Raises:
        HTTPException: 400 for fewer than two readings, 422 for readings without
            a market price (strict coverage only), 500 if prices cannot be fetched.
    """
    readings = request.readings

    try:
        if len(readings) < 2:
            raise InvalidReadingsError("At least two meter readings are required")

        start_timestamp = readings[0].timestamp
        end_timestamp = readings[-1].timestamp

        buckets = await price_source.fetch_market_prices(start_timestamp, end_timestamp)
        total_cost = calculate_energy_cost(
            readings,
            buckets,
            require_price_coverage=settings.require_price_coverage,
        )
        return EnergyCostResponse(total_cost=total_cost)

    except InvalidReadingsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FetchError as e:
        logger.error("Error fetching market prices", error=str(e), readings=len(readings))
        raise HTTPException(status_code=500, detail="Failed to fetch market prices")
    except NoPriceDataError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("Unexpected error", error=str(e), readings=len(readings))
        raise HTTPException(status_code=500, detail="Failed to calculate energy cost")
