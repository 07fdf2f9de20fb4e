"""
Field emitters

Each emitter renders one aspect of a LogEvent into an output stream.
The set of directive letters is fixed; see DIRECTIVES.
"""

from abc import ABC, abstractmethod
from typing import Dict, TextIO, Type

from patternlog.core.log_event import LogEvent

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class FieldEmitter(ABC):
    """
    Abstract base class for compiled pattern fields.

    Emitters are immutable once built and hold at most the sub-pattern
    argument captured from ``%X{...}``.
    """

    __slots__ = ("arg",)

    def __init__(self, arg: str = ""):
        self.arg = arg

    @abstractmethod
    def render(self, event: LogEvent, out: TextIO) -> None:
        """
        Write this field of ``event`` to ``out``.

        Args:
            event: The log event to render
            out: Writable text stream
        """
        pass

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.arg == other.arg

    def __hash__(self) -> int:
        return hash((type(self), self.arg))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.arg!r})"


class LiteralEmitter(FieldEmitter):
    """Literal text copied from the pattern."""

    __slots__ = ()

    def render(self, event, out):
        out.write(self.arg)


class ErrorEmitter(LiteralEmitter):
    """Placeholder written where the pattern could not be compiled."""

    __slots__ = ()


class MessageEmitter(FieldEmitter):
    __slots__ = ()

    def render(self, event, out):
        out.write(event.message)


class LevelEmitter(FieldEmitter):
    __slots__ = ()

    def render(self, event, out):
        out.write(event.level.name)


class ElapsedEmitter(FieldEmitter):
    __slots__ = ()

    def render(self, event, out):
        out.write(str(event.elapsed_ms))


class LoggerNameEmitter(FieldEmitter):
    __slots__ = ()

    def render(self, event, out):
        out.write(event.logger_name)


class ThreadIdEmitter(FieldEmitter):
    __slots__ = ()

    def render(self, event, out):
        out.write(str(event.thread_id))


class ThreadNameEmitter(FieldEmitter):
    __slots__ = ()

    def render(self, event, out):
        out.write(event.thread_name)


class FiberIdEmitter(FieldEmitter):
    __slots__ = ()

    def render(self, event, out):
        out.write(str(event.fiber_id))


class NewLineEmitter(FieldEmitter):
    __slots__ = ()

    def render(self, event, out):
        out.write("\n")


class TabEmitter(FieldEmitter):
    __slots__ = ()

    def render(self, event, out):
        out.write("\t")


class DateTimeEmitter(FieldEmitter):
    """Event timestamp through a strftime format, the ``{...}`` argument."""

    __slots__ = ()

    def __init__(self, arg: str = ""):
        super().__init__(arg or DEFAULT_DATE_FORMAT)

    def render(self, event, out):
        try:
            out.write(event.timestamp.strftime(self.arg))
        except ValueError:
            out.write(self.arg)


class FileNameEmitter(FieldEmitter):
    __slots__ = ()

    def render(self, event, out):
        out.write(event.file_name)


class LineEmitter(FieldEmitter):
    __slots__ = ()

    def render(self, event, out):
        out.write(str(event.line_number))


# Directive letter -> emitter class (case-sensitive)
DIRECTIVES: Dict[str, Type[FieldEmitter]] = {
    "m": MessageEmitter,
    "p": LevelEmitter,
    "r": ElapsedEmitter,
    "c": LoggerNameEmitter,
    "t": ThreadIdEmitter,
    "n": NewLineEmitter,
    "d": DateTimeEmitter,
    "f": FileNameEmitter,
    "l": LineEmitter,
    "T": TabEmitter,
    "F": FiberIdEmitter,
    "N": ThreadNameEmitter,
}
