"""Appenders module - Log output sinks"""

from patternlog.appenders.base_appender import BaseAppender
from patternlog.appenders.console_appender import ConsoleAppender
from patternlog.appenders.file_appender import FileAppender

__all__ = ["BaseAppender", "ConsoleAppender", "FileAppender"]
