"""
Utility modules for the weather monitor backend.
"""

from weather_monitor.utils.logger import setup_logging

__all__ = [
    "setup_logging",
]
