"""
Tests for the daily summary reporter and log setup.
"""

import asyncio
import logging

import pytest

from weather_monitor.services import SummaryReporter
from weather_monitor.utils import setup_logging


class TestSummaryReporter:

    def test_report_logs_each_device(self, clocked_storage, noon_today, caplog):
        for value in [20, 23, 25]:
            clocked_storage.record_temperature("b-station", value)
        clocked_storage.record_temperature("a-station", 10)
        reporter = SummaryReporter(clocked_storage, interval=60)

        with caplog.at_level(logging.INFO, logger="weather_monitor.services.summary_reporter"):
            count = reporter.report(noon_today)

        assert count == 2
        messages = [
            r.getMessage() for r in caplog.records
            if r.name == "weather_monitor.services.summary_reporter"
        ]
        assert messages[0] == f"Daily summary {noon_today:%Y-%m-%d}: 2 device(s)"
        assert messages[1] == "  a-station: high=10.00 low=10.00 avg=10.00"
        assert messages[2] == "  b-station: high=25.00 low=20.00 avg=22.67"

    def test_report_with_no_readings(self, storage, noon_today, caplog):
        reporter = SummaryReporter(storage, interval=60)

        with caplog.at_level(logging.INFO, logger="weather_monitor.services.summary_reporter"):
            assert reporter.report(noon_today) == 0

        assert "no readings yet" in caplog.text

    def test_disabled_reporter_never_schedules(self, storage):
        reporter = SummaryReporter(storage, interval=0)

        reporter.start()

        assert reporter.scheduler is None
        reporter.shutdown()

    def test_start_and_shutdown(self, storage):
        reporter = SummaryReporter(storage, interval=3600)

        async def lifecycle():
            reporter.start()
            job = reporter.scheduler.get_job(SummaryReporter.JOB_ID)
            reporter.shutdown()
            return job

        job = asyncio.run(lifecycle())

        assert job is not None
        assert reporter.scheduler is None


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("restore_root_logger")
class TestSetupLogging:

    def test_info_goes_to_stdout_and_errors_to_stderr(self, capsys):
        setup_logging("INFO")
        log = logging.getLogger("weather_monitor.test")

        log.info("all good")
        log.debug("too chatty")
        log.error("went wrong")

        captured = capsys.readouterr()
        assert "INFO: " in captured.out
        assert "all good" in captured.out
        assert "too chatty" not in captured.out
        assert "went wrong" not in captured.out
        assert captured.err.startswith("ERROR: ")
        assert "went wrong" in captured.err

    def test_debug_level(self, capsys):
        setup_logging("debug")

        logging.getLogger("weather_monitor.test").debug("now visible")

        assert "DEBUG: " in capsys.readouterr().out
