"""
Base appender interface

An appender owns a level threshold and an optional formatter, and
writes every event that passes the threshold to its sink.
"""

import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from patternlog.core.log_event import LogEvent
from patternlog.core.log_level import LogLevel
from patternlog.formatters.base_formatter import BaseFormatter


class BaseAppender(ABC):
    """
    Abstract base class for log appenders.

    The formatter is either explicit (set through ``set_formatter``) or
    inherited from the owning logger. Only inherited formatters follow
    later changes to the logger's default.

    Thread Safety:
        Writes are serialised per appender, so one rendered event is never
        interleaved with another.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.DEBUG,
        formatter: Optional[BaseFormatter] = None,
    ):
        """
        Initialize appender.

        Args:
            level: Minimum level written by this appender
            formatter: Explicit formatter (default: inherit from logger)
        """
        self.level = level
        self._formatter: Optional[BaseFormatter] = None
        self._has_formatter = False
        self._lock = threading.Lock()
        if formatter is not None:
            self.set_formatter(formatter)

    @property
    def formatter(self) -> Optional[BaseFormatter]:
        return self._formatter

    @property
    def has_explicit_formatter(self) -> bool:
        return self._has_formatter

    def set_formatter(self, formatter: Optional[BaseFormatter]) -> None:
        """
        Set an explicit formatter.

        Passing None drops the explicit formatter; the appender then takes
        the owning logger's default the next time it is assigned.
        """
        self._formatter = formatter
        self._has_formatter = formatter is not None

    def inherit_formatter(self, formatter: BaseFormatter) -> None:
        """Assign the owning logger's default unless one was set explicitly."""
        if not self._has_formatter:
            self._formatter = formatter

    def log(self, event: LogEvent) -> None:
        """
        Render and write ``event`` if it passes the threshold.

        Args:
            event: Log event to write
        """
        if event.level < self.level:
            return

        formatter = self._formatter
        text = formatter.format(event) if formatter is not None else str(event) + "\n"
        with self._lock:
            self._write(text)

    @abstractmethod
    def _write(self, text: str) -> None:
        """
        Write rendered text to the sink.

        Called with the appender lock held.
        """
        pass

    def flush(self) -> None:
        """Flush the sink."""

    def close(self) -> None:
        """Release the sink."""

    def to_dict(self) -> Dict[str, Any]:
        """
        Describe this appender's configuration.

        Returns:
            Dictionary with type, level and explicit pattern if any
        """
        data: Dict[str, Any] = {
            "type": type(self).__name__,
            "level": self.level.name,
        }
        if self._has_formatter:
            data["formatter"] = getattr(self._formatter, "pattern", repr(self._formatter))
        return data
