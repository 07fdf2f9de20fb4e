"""
Main Logger class

A named level gate that dispatches events to its appenders, or to the
root logger when it has none.
"""

from __future__ import annotations

import sys
import threading
import weakref
from typing import Any, Dict, List, Optional, Tuple, Union

from patternlog.core.log_event import LogEvent
from patternlog.core.log_level import LogLevel
from patternlog.formatters.base_formatter import BaseFormatter
from patternlog.formatters.pattern_formatter import DEFAULT_PATTERN, PatternFormatter

EventOrMessage = Union[LogEvent, str]


class Logger:
    """
    Named logger with synchronous appender dispatch.

    Thread Safety:
        Dispatch and every mutation of the appender list or default
        formatter share one lock, so a concurrent ``log`` sees either the
        state before a change or the state after it.
    """

    def __init__(
        self,
        name: str = "root",
        level: LogLevel = LogLevel.DEBUG,
        pattern: str = DEFAULT_PATTERN,
        root: Optional["Logger"] = None,
    ):
        """
        Initialize logger.

        Args:
            name: Logger name, rendered by %c
            level: Minimum level passed to appenders
            pattern: Default pattern for appenders without their own formatter
            root: Fallback logger used while this logger has no appenders
        """
        self._name = name
        self._level = level
        self._appenders: List[Any] = []
        self._lock = threading.RLock()
        self._root: Optional[Logger] = None
        self._dependents: "weakref.WeakSet[Logger]" = weakref.WeakSet()

        formatter = PatternFormatter(pattern)
        if formatter.has_error:
            print(
                f"Logger init name={name} pattern={pattern!r} invalid formatter, "
                f"using default",
                file=sys.stderr,
            )
            formatter = PatternFormatter(DEFAULT_PATTERN)
        self._formatter: BaseFormatter = formatter

        if root is not None:
            self.root = root

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> LogLevel:
        return self._level

    def set_level(self, level: LogLevel) -> None:
        """Set minimum log level."""
        self._level = level

    @property
    def formatter(self) -> BaseFormatter:
        return self._formatter

    @property
    def appenders(self) -> Tuple[Any, ...]:
        with self._lock:
            return tuple(self._appenders)

    @property
    def root(self) -> Optional["Logger"]:
        return self._root

    @root.setter
    def root(self, root: Optional["Logger"]) -> None:
        if root is self:
            raise ValueError("a logger cannot be its own root")
        if root is not None and root.root is not None:
            raise ValueError(f"root logger '{root.name}' must not have a root itself")
        if root is not None and len(self._dependents):
            raise ValueError(f"logger '{self._name}' is a root and cannot have a root itself")
        if self._root is not None:
            self._root._dependents.discard(self)
        if root is not None:
            root._dependents.add(self)
        self._root = root

    def add_appender(self, appender: Any) -> None:
        """
        Add an appender.

        An appender without an explicit formatter takes this logger's
        default formatter.
        """
        with self._lock:
            appender.inherit_formatter(self._formatter)
            self._appenders.append(appender)

    def del_appender(self, appender: Any) -> bool:
        """
        Remove an appender.

        Returns:
            True if the appender was attached to this logger
        """
        with self._lock:
            for i, owned in enumerate(self._appenders):
                if owned is appender:
                    del self._appenders[i]
                    return True
        return False

    def clear_appenders(self) -> None:
        """Remove all appenders."""
        with self._lock:
            self._appenders.clear()

    def set_formatter(self, formatter: Union[BaseFormatter, str]) -> bool:
        """
        Replace the default formatter.

        Appenders that never received an explicit formatter switch to the
        new one. A formatter with compile errors is rejected and the
        previous default stays in place.

        Args:
            formatter: Formatter instance or pattern string

        Returns:
            True if the formatter was installed
        """
        if isinstance(formatter, str):
            formatter = PatternFormatter(formatter)
        if not isinstance(formatter, BaseFormatter) or formatter.has_error:
            print(
                f"Logger set_formatter name={self._name} "
                f"value={getattr(formatter, 'pattern', formatter)!r} invalid formatter",
                file=sys.stderr,
            )
            return False

        with self._lock:
            self._formatter = formatter
            for appender in self._appenders:
                appender.inherit_formatter(formatter)
        return True

    def log(self, level: LogLevel, event: EventOrMessage, *args: Any, stacklevel: int = 1) -> None:
        """
        Log an event.

        Args:
            level: Severity checked against this logger's threshold
            event: LogEvent, or a message string (%-interpolated with args)
                   turned into an event located at the caller. A LogEvent
                   already carries its message, so args are ignored for it.
            stacklevel: Frames between the caller and this method
        """
        if level < self._level:
            return

        if not isinstance(event, LogEvent):
            event = LogEvent.capture(self, level, str(event), *args, stacklevel=stacklevel + 1)

        with self._lock:
            if self._appenders:
                for appender in self._appenders:
                    try:
                        appender.log(event)
                    except Exception as e:
                        print(f"Appender error: {e}", file=sys.stderr)
                return
            root = self._root

        if root is not None:
            root.log(level, event)

    def debug(self, event: EventOrMessage, *args: Any, stacklevel: int = 1) -> None:
        """Log debug event."""
        self.log(LogLevel.DEBUG, event, *args, stacklevel=stacklevel + 1)

    def info(self, event: EventOrMessage, *args: Any, stacklevel: int = 1) -> None:
        """Log info event."""
        self.log(LogLevel.INFO, event, *args, stacklevel=stacklevel + 1)

    def warn(self, event: EventOrMessage, *args: Any, stacklevel: int = 1) -> None:
        """Log warning event."""
        self.log(LogLevel.WARN, event, *args, stacklevel=stacklevel + 1)

    def error(self, event: EventOrMessage, *args: Any, stacklevel: int = 1) -> None:
        """Log error event."""
        self.log(LogLevel.ERROR, event, *args, stacklevel=stacklevel + 1)

    def fatal(self, event: EventOrMessage, *args: Any, stacklevel: int = 1) -> None:
        """Log fatal event."""
        self.log(LogLevel.FATAL, event, *args, stacklevel=stacklevel + 1)

    def flush(self) -> None:
        """Flush all appenders."""
        for appender in self.appenders:
            appender.flush()

    def to_dict(self) -> Dict[str, Any]:
        """
        Describe this logger's configuration.

        Returns:
            Dictionary with name, level, pattern and appenders
        """
        with self._lock:
            return {
                "name": self._name,
                "level": self._level.name,
                "formatter": getattr(self._formatter, "pattern", repr(self._formatter)),
                "appenders": [appender.to_dict() for appender in self._appenders],
            }

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, level={self._level.name})"
