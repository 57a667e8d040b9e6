"""
Services Package
================

These are the "workers" that do the actual work.

- InMemoryStorage: Keeps devices and readings, computes daily aggregates
- ReadWriteLock: Guards the storage from concurrent requests
- SummaryReporter: Logs the daily aggregate on a timer
"""

from .rwlock import ReadWriteLock
from .storage import Storage, InMemoryStorage, DeviceNotFoundError
from .summary_reporter import SummaryReporter

__all__ = [
    "ReadWriteLock",
    "Storage",
    "InMemoryStorage",
    "DeviceNotFoundError",
    "SummaryReporter",
]
