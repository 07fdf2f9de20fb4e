"""File appender"""

import sys
import time
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from patternlog.appenders.base_appender import BaseAppender
from patternlog.core.log_level import LogLevel
from patternlog.formatters.base_formatter import BaseFormatter


class FileAppender(BaseAppender):
    """
    Write logs to a file.

    ``reopen`` closes and reopens the file by name, which lets external
    rotation tools move the file away. With ``reopen_interval`` set, the
    appender does this on its own every that many seconds.

    A file that cannot be opened leaves the appender inert: writes are
    dropped until a later reopen succeeds.
    """

    def __init__(
        self,
        filepath: str,
        level: LogLevel = LogLevel.DEBUG,
        formatter: Optional[BaseFormatter] = None,
        mode: str = "a",
        encoding: str = "utf-8",
        reopen_interval: float = 0.0,
    ):
        """
        Initialize file appender.

        Args:
            filepath: Path to log file
            level: Minimum level written
            formatter: Explicit formatter (default: inherit from logger)
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
            reopen_interval: Seconds between automatic reopens (0 disables)
        """
        super().__init__(level, formatter)
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self.reopen_interval = reopen_interval
        self._file: Optional[TextIO] = None
        self._last_open = 0.0
        self.reopen()

    @property
    def is_valid(self) -> bool:
        return self._file is not None

    def reopen(self) -> bool:
        """
        Close the current file and open it again.

        Returns:
            True if the file is open afterwards
        """
        with self._lock:
            return self._reopen()

    def _reopen(self) -> bool:
        self._close()
        self._last_open = time.monotonic()
        try:
            self.filepath.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.filepath, self.mode, encoding=self.encoding)
        except OSError as e:
            print(f"FileAppender open error: {self.filepath}: {e}", file=sys.stderr)
            self._file = None
            return False
        return True

    def _write(self, text: str) -> None:
        if self.reopen_interval > 0 and time.monotonic() - self._last_open >= self.reopen_interval:
            self._reopen()
        if self._file is None:
            return
        try:
            self._file.write(text)
        except (OSError, ValueError):
            pass  # Inert sink; the event is dropped

    def flush(self) -> None:
        """Flush file buffer."""
        with self._lock:
            if self._file:
                try:
                    self._file.flush()
                except (OSError, ValueError):
                    pass

    def close(self) -> None:
        """Close file."""
        with self._lock:
            self._close()

    def _close(self) -> None:
        if self._file:
            try:
                self._file.close()
            except OSError:
                pass
            self._file = None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["file"] = str(self.filepath)
        return data
