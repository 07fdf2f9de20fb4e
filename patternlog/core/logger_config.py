"""
Logger configuration management
"""

from dataclasses import dataclass
from typing import Union

from patternlog.core.log_level import LogLevel
from patternlog.formatters.pattern_formatter import DEFAULT_PATTERN


@dataclass
class LoggerConfig:
    """
    Registry configuration.

    Describes the root logger and the defaults given to loggers created
    on first lookup. Level names are accepted in place of LogLevel values.
    """

    # Root logger
    root_level: Union[LogLevel, str] = LogLevel.DEBUG
    root_pattern: str = DEFAULT_PATTERN
    root_console: bool = True

    # Loggers created by name
    default_level: Union[LogLevel, str] = LogLevel.DEBUG
    default_pattern: str = DEFAULT_PATTERN

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.root_level = self._coerce_level(self.root_level, "root_level")
        self.default_level = self._coerce_level(self.default_level, "default_level")
        if not isinstance(self.root_pattern, str):
            raise TypeError("root_pattern must be a string")
        if not isinstance(self.default_pattern, str):
            raise TypeError("default_pattern must be a string")

    @staticmethod
    def _coerce_level(value, field_name: str) -> LogLevel:
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, str):
            level = LogLevel.from_string(value)
            if level == LogLevel.UNKNOWN and value.strip().upper() != "UNKNOWN":
                raise ValueError(f"{field_name}: invalid log level {value!r}")
            return level
        raise TypeError(f"{field_name} must be LogLevel or str")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            root_level=LogLevel.DEBUG,
            default_level=LogLevel.DEBUG,
            root_pattern="%d{%H:%M:%S}%T[%p]%T[%c]%T%f:%l%T%m%n",
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            root_level=LogLevel.WARN,
            default_level=LogLevel.INFO,
        )
