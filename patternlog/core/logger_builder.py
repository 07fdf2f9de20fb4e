"""Logger builder pattern"""

import sys
from typing import Any, List, Optional

from patternlog.appenders.console_appender import ConsoleAppender
from patternlog.appenders.file_appender import FileAppender
from patternlog.core.log_level import LogLevel
from patternlog.core.logger import Logger
from patternlog.core.logger_registry import LoggerRegistry, get_registry
from patternlog.formatters.pattern_formatter import PatternFormatter


class LoggerBuilder:
    """
    Builder for configuring a registry logger.

    Example:
        logger = (LoggerBuilder()
            .with_name("app")
            .with_level(LogLevel.INFO)
            .with_pattern("%d%T[%p]%T%m%n")
            .with_console()
            .with_file("logs/app.log", level=LogLevel.ERROR)
            .build())
    """

    def __init__(self, registry: Optional[LoggerRegistry] = None):
        self._registry = registry
        self._name = "root"
        self._level: Optional[LogLevel] = None
        self._pattern: Optional[str] = None
        self._appenders: List[Any] = []

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._name = name
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum log level."""
        self._level = level
        return self

    def with_pattern(self, pattern: str) -> "LoggerBuilder":
        """Set the logger's default pattern."""
        self._pattern = pattern
        return self

    def with_console(
        self,
        level: LogLevel = LogLevel.DEBUG,
        pattern: Optional[str] = None,
        stream=None,
    ) -> "LoggerBuilder":
        """
        Add console output.

        Args:
            level: Minimum level for this appender
            pattern: Explicit pattern (default: the logger's)
            stream: Output stream (default: sys.stdout)
        """
        self._appenders.append(ConsoleAppender(level, self._make_formatter(pattern), stream))
        return self

    def with_file(
        self,
        filepath: str,
        level: LogLevel = LogLevel.DEBUG,
        pattern: Optional[str] = None,
        reopen_interval: float = 0.0,
    ) -> "LoggerBuilder":
        """
        Add file output.

        Args:
            filepath: Path to log file
            level: Minimum level for this appender
            pattern: Explicit pattern (default: the logger's)
            reopen_interval: Seconds between automatic reopens (0 disables)
        """
        self._appenders.append(
            FileAppender(
                filepath,
                level,
                self._make_formatter(pattern),
                reopen_interval=reopen_interval,
            )
        )
        return self

    def add_appender(self, appender) -> "LoggerBuilder":
        """
        Add a custom appender.

        Args:
            appender: Appender instance

        Returns:
            Self for method chaining
        """
        self._appenders.append(appender)
        return self

    @staticmethod
    def _make_formatter(pattern: Optional[str]) -> Optional[PatternFormatter]:
        if pattern is None:
            return None
        formatter = PatternFormatter(pattern)
        if formatter.has_error:
            print(
                f"LoggerBuilder appender pattern={pattern!r} invalid formatter, "
                f"using logger default",
                file=sys.stderr,
            )
            return None
        return formatter

    def build(self) -> Logger:
        """Configure and return the named logger from the registry."""
        registry = self._registry or get_registry()
        logger = registry.get_logger(self._name)

        if self._level is not None:
            logger.set_level(self._level)
        if self._pattern is not None:
            logger.set_formatter(self._pattern)
        for appender in self._appenders:
            logger.add_appender(appender)

        return logger
