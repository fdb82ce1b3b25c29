"""Tests for the hybrid console formatter and handler setup."""

import logging

from medoc_check.constants import LOG_COLORS
from medoc_check.logger.formatters import HybridConsoleFormatter
from medoc_check.logger.handlers import setup_root_logger
from medoc_check.logger.state import _LoggerState


def _record(level: int, msg: str = "Update failed") -> logging.LogRecord:
    return logging.LogRecord(
        name="medoc_check.core.classifier",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestHybridConsoleFormatter:
    """Test suite for HybridConsoleFormatter."""

    def test_info_is_message_only(self):
        """Test INFO records print as the bare message."""
        formatter = HybridConsoleFormatter("%(levelname)s - %(message)s")
        assert formatter.format(_record(logging.INFO, "done")) == "done"

    def test_warning_is_structured(self):
        """Test WARNING records keep level and message."""
        formatter = HybridConsoleFormatter("%(levelname)s - %(message)s")
        assert formatter.format(_record(logging.WARNING)) == (
            "WARNING - Update failed"
        )

    def test_color_does_not_leak_into_record(self):
        """Test the colored level name is restored after formatting."""
        formatter = HybridConsoleFormatter(
            "%(levelname)s - %(message)s", use_color=True
        )
        record = _record(logging.ERROR)

        output = formatter.format(record)

        assert output.startswith(LOG_COLORS["ERROR"])
        assert record.levelname == "ERROR"


class TestSetupRootLogger:
    """Tests for setup_root_logger file handling."""

    def test_unwritable_log_file_falls_back_to_console(self, tmp_path):
        """Test a log path that cannot be created leaves console logging."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        state = _LoggerState()
        root = logging.getLogger("medoc_check")
        saved_handlers = root.handlers[:]
        saved_propagate = root.propagate

        try:
            setup_root_logger(
                state, "WARNING", "INFO", blocker / "logs" / "x.log"
            )
            handlers = state.queue_listener.handlers
            assert len(handlers) == 1
            assert isinstance(handlers[0], logging.StreamHandler)
            assert state.root_initialized is True
        finally:
            state.queue_listener.stop()
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.propagate = saved_propagate
