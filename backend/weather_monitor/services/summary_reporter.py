"""
Daily Summary Reporter
======================

Every SUMMARY_INTERVAL seconds, writes today's per-device high/low/average
to the log. Handy for keeping an eye on a headless box without polling
the API.

It only reads from storage, so it never changes what the API returns.
Turned off when the interval is 0 (the default).
"""

import logging
from datetime import datetime
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from weather_monitor.services.storage import Storage

logger = logging.getLogger(__name__)


class SummaryReporter:
    """Periodically logs the daily aggregate for every device."""

    JOB_ID = "daily_summary"

    def __init__(self, storage: Storage, interval: int):
        """
        Args:
            storage: Where to read readings from
            interval: Seconds between reports. Must be positive to start.
        """
        self.storage = storage
        self.interval = interval
        self.scheduler: Optional[AsyncIOScheduler] = None

    def report(self, date: Optional[datetime] = None) -> int:
        """
        Log one line per device with readings today.

        Returns:
            Number of devices reported
        """
        date = date or datetime.now()
        aggregated = self.storage.get_daily_aggregated_data(date)

        if not aggregated:
            logger.info(f"Daily summary {date:%Y-%m-%d}: no readings yet")
            return 0

        logger.info(f"Daily summary {date:%Y-%m-%d}: {len(aggregated)} device(s)")
        for device_id, data in sorted(aggregated.items()):
            logger.info(
                f"  {device_id}: high={data.high:.2f} low={data.low:.2f} avg={data.average:.2f}"
            )
        return len(aggregated)

    def start(self):
        """Start the scheduler. Must be called from inside a running event loop."""
        if self.interval <= 0:
            logger.debug("Daily summary disabled (SUMMARY_INTERVAL=0)")
            return

        self.scheduler = AsyncIOScheduler()
        self.scheduler.add_job(
            self.report,
            trigger=IntervalTrigger(seconds=self.interval),
            id=self.JOB_ID,
            replace_existing=True,
        )
        self.scheduler.start()
        logger.info(f"Daily summary every {self.interval}s")

    def shutdown(self):
        if self.scheduler is not None:
            self.scheduler.shutdown(wait=False)
            self.scheduler = None
