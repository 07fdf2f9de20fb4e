"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from typing import TextIO

from patternlog.core.log_event import LogEvent


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEvent objects into formatted strings.
    """

    #: Set when the formatter was built from a broken definition.
    has_error: bool = False

    @abstractmethod
    def format(self, event: LogEvent) -> str:
        """
        Format a log event into a string.

        Args:
            event: The log event to format

        Returns:
            Formatted string representation of the log event
        """
        pass

    def format_to(self, stream: TextIO, event: LogEvent) -> TextIO:
        """Write the formatted event to ``stream`` and return the stream."""
        stream.write(self.format(event))
        return stream

    def __call__(self, event: LogEvent) -> str:
        """Allow formatters to be callable."""
        return self.format(event)
