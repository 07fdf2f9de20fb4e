"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Pattern Logger - A pattern-driven logging library with named loggers,
console/file appenders and root fallback
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

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
from patternlog.formatters import PatternFormatter, compile_pattern, DEFAULT_PATTERN
from patternlog.appenders import ConsoleAppender, FileAppender

# Import submodules (not all classes by default)
from patternlog import appenders
from patternlog import formatters

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
    "PatternFormatter",
    "compile_pattern",
    "DEFAULT_PATTERN",
    "ConsoleAppender",
    "FileAppender",
    "appenders",
    "formatters",
]
