"""
Models Package
==============

This is where all our data models live.
Import from here instead of the individual files.

Example:
    from weather_monitor.models import TemperatureReading, AggregatedTemperatureData
"""

from .device import (
    # Stored data
    TemperatureReading,

    # What devices send us
    SubmitTemperatureRequest,

    # What we send back
    EnrollDeviceResponse,
    AggregatedTemperatureData,
    HealthResponse,
)

__all__ = [
    "TemperatureReading",
    "SubmitTemperatureRequest",
    "EnrollDeviceResponse",
    "AggregatedTemperatureData",
    "HealthResponse",
]
