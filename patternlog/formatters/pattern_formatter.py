"""
Pattern formatter

Renders events through a compiled pattern.
"""

import io
from typing import TextIO, Tuple

from patternlog.core.log_event import LogEvent
from patternlog.formatters.base_formatter import BaseFormatter
from patternlog.formatters.field_emitters import FieldEmitter
from patternlog.formatters.pattern_compiler import compile_pattern

DEFAULT_PATTERN = "%d{%Y-%m-%d %H:%M:%S}%T%t%T%N%T%F%T[%p]%T[%c]%T%f:%l%T%m%n"


class PatternFormatter(BaseFormatter):
    """
    Format log events with a printf-like pattern.

    Directives:
        %m message        %p level name     %r elapsed ms
        %c logger name    %t thread id      %N thread name
        %F fiber id       %d{fmt} time      %f source file
        %l source line    %T tab            %n newline

    The pattern is compiled once. Rendering never fails; compile errors
    show up as placeholder text and set ``has_error``.

    Example:
        formatter = PatternFormatter("%p|%m%n")
        formatter.format(event)  # "ERROR|disk full\\n"
    """

    def __init__(self, pattern: str = DEFAULT_PATTERN):
        if not isinstance(pattern, str):
            raise TypeError("pattern must be a string")
        self._pattern = pattern
        self._emitters, self._has_error = compile_pattern(pattern)

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def emitters(self) -> Tuple[FieldEmitter, ...]:
        return self._emitters

    @property
    def has_error(self) -> bool:
        return self._has_error

    def format(self, event: LogEvent) -> str:
        """
        Format log event using the compiled pattern.

        Args:
            event: Log event to format

        Returns:
            Formatted string
        """
        out = io.StringIO()
        self.format_to(out, event)
        return out.getvalue()

    def format_to(self, stream: TextIO, event: LogEvent) -> TextIO:
        for emitter in self._emitters:
            emitter.render(event, stream)
        return stream

    def __repr__(self) -> str:
        """String representation."""
        return f"PatternFormatter(pattern={self._pattern!r})"
