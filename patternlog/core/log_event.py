"""
Log event data structure

One record per log call, shared read-only by every appender it reaches.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from patternlog import utils
from patternlog.core.log_level import LogLevel

if TYPE_CHECKING:
    from patternlog.core.logger import Logger


@dataclass(frozen=True)
class LogEvent:
    """
    Log event data structure.

    Every field is fixed at construction. Only the message buffer grows,
    and only until the event is handed to a logger.
    """

    level: LogLevel
    logger: Optional["Logger"] = field(default=None, repr=False, compare=False)
    file_name: str = ""
    line_number: int = 0
    elapsed_ms: int = field(default_factory=utils.get_elapsed_ms)
    thread_id: int = field(default_factory=utils.get_thread_id)
    fiber_id: int = field(default_factory=utils.get_fiber_id)
    timestamp: datetime = field(default_factory=datetime.now)
    thread_name: str = field(default_factory=utils.get_thread_name)
    _buffer: List[str] = field(default_factory=list, init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate log event after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")

    @classmethod
    def capture(
        cls,
        logger: Optional["Logger"],
        level: LogLevel,
        message: str = "",
        *args: Any,
        stacklevel: int = 1,
    ) -> "LogEvent":
        """
        Create an event whose source location is taken from the caller.

        Args:
            logger: Logger the event belongs to
            level: Event severity
            message: Initial message, %-interpolated with ``args`` if given
            stacklevel: 1 for the direct caller of capture, 2 for its caller...

        Returns:
            New LogEvent instance
        """
        try:
            frame = sys._getframe(stacklevel)
            file_name, line_number = frame.f_code.co_filename, frame.f_lineno
        except ValueError:
            file_name, line_number = "", 0

        event = cls(
            level=level,
            logger=logger,
            file_name=file_name,
            line_number=line_number,
        )
        if args:
            event.format(message, *args)
        elif message:
            event.write(message)
        return event

    @property
    def message(self) -> str:
        """Accumulated message text."""
        return "".join(self._buffer)

    @property
    def logger_name(self) -> str:
        return self.logger.name if self.logger is not None else ""

    def write(self, text: Any) -> "LogEvent":
        """Append ``text`` to the message buffer."""
        self._buffer.append(text if isinstance(text, str) else str(text))
        return self

    def format(self, fmt: str, *args: Any) -> "LogEvent":
        """
        Append a printf-style formatted message.

        A format/argument mismatch appends the raw format followed by the
        arguments rather than raising.
        """
        try:
            text = fmt % args
        except (TypeError, ValueError, KeyError):
            text = f"{fmt} {args!r}"
        return self.write(text)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log event to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "logger_name": self.logger_name,
            "message": self.message,
            "file_name": self.file_name,
            "line_number": self.line_number,
            "elapsed_ms": self.elapsed_ms,
            "thread_id": self.thread_id,
            "fiber_id": self.fiber_id,
            "timestamp": self.timestamp.isoformat(),
            "thread_name": self.thread_name,
        }

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S')}] "
            f"[{self.level.name}] "
            f"[{self.thread_name}] "
            f"{self.message}"
        )
