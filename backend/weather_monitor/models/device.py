"""
Device Models
=============
Pydantic models for device data validation and serialization.

This module defines all data structures used throughout the application:
- Request models: What the devices send to the backend
- Response models: What the backend returns
- Internal models: Temperature readings kept by the storage engine
"""

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# INTERNAL MODELS - What the storage engine keeps
# =============================================================================

class TemperatureReading(BaseModel):
    """
    A single temperature reading reported by a device.

    Readings are immutable once recorded. The timestamp is assigned by the
    server when the reading is written, never by the device.

    Fields:
        timestamp: Seconds since the epoch (server clock)
        temperature: Value as reported by the device, unit and range unchecked
    """
    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(..., description="Seconds since epoch, server-assigned")
    temperature: float = Field(..., description="Reported temperature")


# =============================================================================
# REQUEST MODELS - What devices send to backend
# =============================================================================

class SubmitTemperatureRequest(BaseModel):
    """
    Request body for submitting a temperature reading.

    Example Request:
        POST /temperature
        {
            "device_id": "station-01",
            "temperature": 21.5
        }
    """
    device_id: str = Field(
        ...,
        description="ID the device was enrolled with",
        examples=["station-01"]
    )
    temperature: float = Field(
        ...,
        strict=True,
        allow_inf_nan=False,
        description="Temperature reading, a finite JSON number",
        examples=[21.5, -3.0]
    )


# =============================================================================
# RESPONSE MODELS - What backend returns
# =============================================================================

class EnrollDeviceResponse(BaseModel):
    """Returned by POST /devices/{device_id}."""
    device_id: str = Field(..., description="The enrolled device ID")


class AggregatedTemperatureData(BaseModel):
    """
    Daily high/low/average for one device.

    Computed on demand from the readings that fall on one calendar day
    (server-local time). Never stored.
    """
    high: float = Field(..., description="Highest reading of the day")
    low: float = Field(..., description="Lowest reading of the day")
    average: float = Field(..., description="Mean of the day's readings")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(..., description="'healthy' when the server is up")
    device_count: int = Field(..., description="Number of enrolled devices")
