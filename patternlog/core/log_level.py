"""
Log level enumeration

Ordered severities with bidirectional name mapping.
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Comparison is by ordinal, so a gate passes an event when
    ``event.level >= threshold``.
    """

    UNKNOWN = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @staticmethod
    def to_string(level: "LogLevel") -> str:
        """Return the textual name of ``level``."""
        return LEVEL_NAMES.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value, UNKNOWN when the name is not recognised
        """
        return LEVEL_FROM_NAME.get(level_str.strip().upper(), cls.UNKNOWN)


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.UNKNOWN: "UNKNOWN",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}
