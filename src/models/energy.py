"""
Pydantic data models for meter readings and API responses.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MeterReading(BaseModel):
    """A timestamped cumulative meter reading."""
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    timestamp: int = Field(description="Reading time in milliseconds since epoch")
    value: float = Field(description="Cumulative energy in kWh")


class EnergyCostRequest(BaseModel):
    """
    Request body for the energy cost endpoint.
    Readings are expected in chronological order.
    """
    readings: List[MeterReading] = Field(description="Ordered meter readings (at least two)")


class EnergyCostResponse(BaseModel):
    """Total cost of the consumption between the submitted readings."""
    total_cost: float = Field(description="Total cost in euros")


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""
    error: str


class HealthResponse(BaseModel):
    """
    Health check response model.
    """
    status: str = Field(description="Health status")
    timestamp: datetime = Field(description="Health check timestamp")
    details: Optional[dict] = Field(default=None, description="Additional health details")
