"""
Core module for logger system

This module contains the fundamental classes:
- LogLevel: Log level enumeration
- LogEvent: Log event data structure
- Logger: Main logger class
- LoggerRegistry: Named logger cache with a root fallback
- LoggerConfig: Configuration management
- LoggerBuilder: Builder pattern for logger construction
"""

from patternlog.core.log_level import LogLevel
from patternlog.core.log_event import LogEvent
from patternlog.core.logger import Logger
from patternlog.core.logger_config import LoggerConfig
from patternlog.core.logger_registry import (
    LoggerRegistry,
    get_logger,
    get_registry,
    get_root,
    set_registry,
)
from patternlog.core.logger_builder import LoggerBuilder

__all__ = [
    "LogLevel",
    "LogEvent",
    "Logger",
    "LoggerConfig",
    "LoggerRegistry",
    "LoggerBuilder",
    "get_logger",
    "get_registry",
    "get_root",
    "set_registry",
]
