"""
Temperature API Router
======================

Devices push readings here; anyone can ask for today's summary.

ALL ENDPOINTS:
-------------
POST   /temperature             - Submit one reading
GET    /temperature/aggregated  - Today's high/low/average per device

WHO CAN SUBMIT?
--------------
Any device that has been enrolled, even if it was disabled afterwards.
Disabling only flips the flag shown by GET /devices; it doesn't stop
submissions. Devices in the field rely on that, so leave it alone.
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Response

from weather_monitor.models import AggregatedTemperatureData, SubmitTemperatureRequest
from weather_monitor.routers.devices import get_storage
from weather_monitor.services import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/temperature", tags=["temperature"])


@router.post("")
def submit_temperature(
    request: SubmitTemperatureRequest,
    storage: Storage = Depends(get_storage),
):
    """
    Record a temperature reading.

    Send us:
    - device_id: The ID you enrolled with
    - temperature: The reading (any number, we don't check the range)

    The timestamp is set by the server. Bad JSON gets a 400,
    a device that was never enrolled gets a 403.
    """
    logger.info("call submit_temperature()")

    if not storage.has_device(request.device_id):
        raise HTTPException(status_code=403, detail="device not enrolled")

    storage.record_temperature(request.device_id, request.temperature)
    return Response(status_code=200)


@router.get("/aggregated", response_model=dict[str, AggregatedTemperatureData])
def get_aggregated_temperature(storage: Storage = Depends(get_storage)):
    """
    Today's high, low and average for each device.

    "Today" is the server's local calendar day. Devices with no readings
    today aren't in the result at all.
    """
    logger.info("call get_aggregated_temperature()")
    return storage.get_daily_aggregated_data(datetime.now())
