"""
Log formatters module

Pattern compilation and rendering.
"""

from patternlog.formatters.base_formatter import BaseFormatter
from patternlog.formatters.field_emitters import DIRECTIVES, FieldEmitter
from patternlog.formatters.pattern_compiler import PATTERN_ERROR, compile_pattern
from patternlog.formatters.pattern_formatter import DEFAULT_PATTERN, PatternFormatter

__all__ = [
    "BaseFormatter",
    "DIRECTIVES",
    "FieldEmitter",
    "PATTERN_ERROR",
    "compile_pattern",
    "DEFAULT_PATTERN",
    "PatternFormatter",
]
