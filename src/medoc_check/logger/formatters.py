"""Console formatter for medoc-check.

INFO lines (the outcome summary of ``medoc-check check``) are printed as
bare messages; warnings and errors keep timestamp, module and level.
Colors are only used when the console is a terminal, since scheduled
jobs usually redirect stderr to a file.
"""

import logging

from medoc_check.constants import LOG_COLORS


class HybridConsoleFormatter(logging.Formatter):
    """Message-only output for INFO, structured output for other levels.

    Example Output:
        INFO:     "✅ M.E.Doc update succeeded"
        WARNING:  "12:30:45 - medoc_check.core.classifier - WARNING - ..."
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        *,
        use_color: bool = False,
    ) -> None:
        """Initialize the formatter.

        Args:
            fmt: Format string for WARNING and above (and DEBUG)
            datefmt: Date format string for timestamps
            use_color: Wrap the level name in ANSI color codes

        """
        super().__init__(fmt, datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return record.getMessage()

        color = LOG_COLORS.get(record.levelname) if self.use_color else None
        if color is None:
            return super().format(record)

        # Shared record: restore the level name for the file handler
        original = record.levelname
        record.levelname = f"{color}{original}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original
