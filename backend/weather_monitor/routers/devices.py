"""
Devices API Router
==================

Endpoints for registering devices and switching them on and off.

ALL ENDPOINTS:
-------------
POST   /devices/{id}          - Enroll a device (enables it)
GET    /devices               - List devices and their enabled flag
POST   /device/enable/{id}    - Enable an enrolled device
POST   /device/disable/{id}   - Disable an enrolled device

Note the singular "/device/" on enable/disable. Devices already in the
field call these exact paths.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from weather_monitor.models import EnrollDeviceResponse
from weather_monitor.services import DeviceNotFoundError, Storage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["devices"])


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================

_storage = None  # Set when the app starts


def set_storage(storage: Storage):
    """Called on startup to hand the routers their storage."""
    global _storage
    _storage = storage


def get_storage() -> Storage:
    """Storage for use in endpoints (via Depends)."""
    if _storage is None:
        raise HTTPException(status_code=500, detail="Server not fully started yet")
    return _storage


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/devices/{device_id}", response_model=EnrollDeviceResponse)
def enroll_device(device_id: str, storage: Storage = Depends(get_storage)):
    """
    Enroll a device.

    Enrolling an existing device is fine; it just ends up enabled again.
    """
    logger.info("call enroll_device()")
    storage.enroll_device(device_id)
    return EnrollDeviceResponse(device_id=device_id)


@router.get("/devices", response_model=dict[str, bool])
def list_devices(storage: Storage = Depends(get_storage)):
    """Every device ever enrolled, mapped to true (enabled) or false (disabled)."""
    logger.info("call list_devices()")
    return dict(storage.list_devices())


@router.post("/device/enable/{device_id}")
def enable_device(device_id: str, storage: Storage = Depends(get_storage)):
    """Enable a device. 404 if it was never enrolled."""
    logger.info("call enable_device()")
    try:
        storage.enable_device(device_id)
    except DeviceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=200)


@router.post("/device/disable/{device_id}")
def disable_device(device_id: str, storage: Storage = Depends(get_storage)):
    """Disable a device. 404 if it was never enrolled."""
    logger.info("call disable_device()")
    try:
        storage.disable_device(device_id)
    except DeviceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=200)
