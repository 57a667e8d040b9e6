"""
Logging Setup
=============

Leveled log lines with a date and time, for example:

    INFO: 2026/10/19 14:03:22 weather_monitor.services.storage Device enrolled: station-01

INFO and DEBUG go to stdout, ERROR and CRITICAL go to stderr, so a
process supervisor can split normal chatter from failures.
WARNING goes to stdout too.
"""

import logging
import sys

LOG_FORMAT = "%(levelname)s: %(asctime)s %(name)s %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


class _BelowLevel(logging.Filter):
    """Only pass records strictly below `level`."""

    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def setup_logging(level: str = "INFO"):
    """
    Configure the root logger.

    Safe to call more than once; handlers are replaced, not stacked.

    Args:
        level: Name of the minimum level to log ("DEBUG", "INFO", ...)
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    stdout_handler.addFilter(_BelowLevel(logging.ERROR))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(logging.ERROR)

    logging.basicConfig(
        level=level.upper(),
        handlers=[stdout_handler, stderr_handler],
        force=True,
    )
