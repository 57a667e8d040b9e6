"""
Device Storage
==============

This is the BRAIN of the whole operation!

WHAT IT DOES:
------------
1. Keeps track of every enrolled device and whether it is enabled
2. Keeps every temperature reading each device has submitted
3. Works out the daily high/low/average per device on demand

EVERYTHING LIVES IN MEMORY:
--------------------------
Nothing is written to disk. Restart the server = start from scratch.
Devices are never deleted and readings are never removed.

THREAD SAFETY:
-------------
Requests run on a thread pool, so every operation goes through one
read/write lock that covers the whole store:
- enroll / enable / disable / record take the lock exclusively
- list / is-enrolled / aggregate share it

WHY AN INTERFACE?
----------------
Routers only talk to the `Storage` base class. A database-backed store
can replace `InMemoryStorage` without touching the API code.
"""

import logging
import time
from abc import ABC, abstractmethod
from datetime import datetime
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from weather_monitor.models import AggregatedTemperatureData, TemperatureReading
from weather_monitor.services.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class DeviceNotFoundError(LookupError):
    """Raised when enabling or disabling a device that was never enrolled."""

    def __init__(self, device_id: str):
        super().__init__(f"device {device_id} not found")
        self.device_id = device_id


class Storage(ABC):
    """
    Everything the API needs from a device store.

    enroll_device and enable_device share one flag: a device is "enrolled"
    (in the is_device_enrolled sense) exactly when it is enabled.
    """

    @abstractmethod
    def enroll_device(self, device_id: str) -> None:
        """Register a device, or re-enable it if it already exists."""

    @abstractmethod
    def list_devices(self) -> Mapping[str, bool]:
        """Every enrolled device ID mapped to its enabled flag."""

    @abstractmethod
    def enable_device(self, device_id: str) -> None:
        """Raises DeviceNotFoundError if the device was never enrolled."""

    @abstractmethod
    def disable_device(self, device_id: str) -> None:
        """Raises DeviceNotFoundError if the device was never enrolled."""

    @abstractmethod
    def is_device_enrolled(self, device_id: str) -> bool:
        """Current flag value; False for unknown and for disabled devices."""

    @abstractmethod
    def has_device(self, device_id: str) -> bool:
        """True if the device has an enrollment record, enabled or not."""

    @abstractmethod
    def record_temperature(self, device_id: str, temperature: float) -> None:
        """Append a reading stamped with the current server time."""

    @abstractmethod
    def get_daily_aggregated_data(self, date: datetime) -> dict[str, AggregatedTemperatureData]:
        """High/low/average per device for the calendar day of `date`."""


class InMemoryStorage(Storage):
    """
    Storage backed by two dicts and one read/write lock.

    Args:
        clock: Returns seconds since the epoch. Defaults to time.time.
            Tests pass a fake clock to put readings on chosen days.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time
        self._lock = ReadWriteLock()

        # device ID -> enabled flag
        self._devices: dict[str, bool] = {}

        # device ID -> readings in the order they arrived
        self._temperatures: dict[str, list[TemperatureReading]] = {}

    # =========================================================================
    # DEVICES
    # =========================================================================

    def enroll_device(self, device_id: str) -> None:
        with self._lock.write_locked():
            self._devices[device_id] = True
        logger.info(f"Device enrolled: {device_id}")

    def list_devices(self) -> Mapping[str, bool]:
        """
        Snapshot of all devices.

        Returns a read-only copy so callers never hold a reference to the
        live dict once the lock is released.
        """
        with self._lock.read_locked():
            return MappingProxyType(dict(self._devices))

    def enable_device(self, device_id: str) -> None:
        self._set_enabled(device_id, True)
        logger.info(f"Device enabled: {device_id}")

    def disable_device(self, device_id: str) -> None:
        self._set_enabled(device_id, False)
        logger.info(f"Device disabled: {device_id}")

    def _set_enabled(self, device_id: str, enabled: bool):
        with self._lock.write_locked():
            found = device_id in self._devices
            if found:
                self._devices[device_id] = enabled

        if not found:
            logger.info(f"Device {device_id} not found")
            raise DeviceNotFoundError(device_id)

    def is_device_enrolled(self, device_id: str) -> bool:
        with self._lock.read_locked():
            return self._devices.get(device_id, False)

    def has_device(self, device_id: str) -> bool:
        with self._lock.read_locked():
            return device_id in self._devices

    # =========================================================================
    # TEMPERATURE
    # =========================================================================

    def record_temperature(self, device_id: str, temperature: float) -> None:
        reading = TemperatureReading(
            timestamp=int(self._clock()),
            temperature=temperature,
        )
        with self._lock.write_locked():
            self._temperatures.setdefault(device_id, []).append(reading)
        logger.debug(f"Recorded {temperature} for {device_id} at {reading.timestamp}")

    def get_daily_aggregated_data(self, date: datetime) -> dict[str, AggregatedTemperatureData]:
        """
        Work out the daily high, low and average for every device.

        A reading counts if its timestamp, in server-local time, falls on
        the same (year, day-of-year) as `date`. Devices with no readings on
        that day are left out rather than reported as zero.

        Args:
            date: Any moment on the day to aggregate. Naive datetimes are
                taken as server-local; aware ones are converted to it.

        Returns:
            Dict of device ID -> AggregatedTemperatureData
        """
        if date.tzinfo is not None:
            date = date.astimezone()
        target_day = (date.year, date.timetuple().tm_yday)

        aggregated: dict[str, AggregatedTemperatureData] = {}

        with self._lock.read_locked():
            for device_id, readings in self._temperatures.items():
                total = high = low = 0.0
                count = 0

                for reading in readings:
                    local = time.localtime(reading.timestamp)
                    if (local.tm_year, local.tm_yday) != target_day:
                        continue

                    value = reading.temperature
                    if count == 0 or value > high:
                        high = value
                    if count == 0 or value < low:
                        low = value
                    total += value
                    count += 1

                if count > 0:
                    aggregated[device_id] = AggregatedTemperatureData(
                        high=high,
                        low=low,
                        average=total / count,
                    )

        return aggregated
