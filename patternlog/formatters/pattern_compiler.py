"""
Pattern compiler

Turns a pattern such as ``%d{%Y-%m-%d}%T[%p]%T%m%n`` into an ordered
tuple of field emitters.

Grammar: literal text, ``%X`` or ``%X{arg}`` where X is a run of ASCII
letters. Unknown directives become ``<<error_format %X>>``; an unclosed
``{`` becomes ``<<pattern_error>>`` and ends compilation.
"""

import string
from functools import lru_cache
from typing import List, Tuple

from patternlog.formatters.field_emitters import (
    DIRECTIVES,
    ErrorEmitter,
    FieldEmitter,
    LiteralEmitter,
)

PATTERN_ERROR = "<<pattern_error>>"

_LETTERS = frozenset(string.ascii_letters)


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> Tuple[Tuple[FieldEmitter, ...], bool]:
    """
    Compile a pattern string.

    Args:
        pattern: Pattern to compile

    Returns:
        (emitters, had_error) where emitters is in rendering order
    """
    emitters: List[FieldEmitter] = []
    literal: List[str] = []
    had_error = False

    def flush_literal():
        if literal:
            emitters.append(LiteralEmitter("".join(literal)))
            literal.clear()

    i = 0
    size = len(pattern)
    while i < size:
        if pattern[i] != "%":
            literal.append(pattern[i])
            i += 1
            continue

        end = i + 1
        while end < size and pattern[end] in _LETTERS:
            end += 1
        key = pattern[i + 1:end]

        arg = ""
        if end < size and pattern[end] == "{":
            close = pattern.find("}", end + 1)
            if close < 0:
                flush_literal()
                emitters.append(ErrorEmitter(PATTERN_ERROR))
                had_error = True
                break
            arg = pattern[end + 1:close]
            end = close + 1

        flush_literal()
        emitter_cls = DIRECTIVES.get(key)
        if emitter_cls is None:
            emitters.append(ErrorEmitter(f"<<error_format %{key}>>"))
            had_error = True
        else:
            emitters.append(emitter_cls(arg))
        i = end

    flush_literal()
    return tuple(emitters), had_error
