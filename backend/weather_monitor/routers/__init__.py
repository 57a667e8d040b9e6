"""
Routers Package
===============

Routers are like the reception desk - they direct incoming requests
to the right place.
"""

from .devices import router as devices_router, set_storage, get_storage
from .temperature import router as temperature_router

__all__ = [
    "devices_router",
    "temperature_router",
    "set_storage",
    "get_storage",
]
