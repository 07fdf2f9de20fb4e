"""Console appender"""

import sys
from typing import Optional, TextIO

from patternlog.appenders.base_appender import BaseAppender
from patternlog.core.log_level import LogLevel
from patternlog.formatters.base_formatter import BaseFormatter


class ConsoleAppender(BaseAppender):
    """Write logs to the console, flushing after every event."""

    def __init__(
        self,
        level: LogLevel = LogLevel.DEBUG,
        formatter: Optional[BaseFormatter] = None,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize console appender.

        Args:
            level: Minimum level written
            formatter: Explicit formatter (default: inherit from logger)
            stream: Output stream (default: sys.stdout at write time)
        """
        super().__init__(level, formatter)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        stream = self.stream
        stream.write(text)
        stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()
