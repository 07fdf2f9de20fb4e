"""Tests for levels, events and logger dispatch"""

import asyncio
import dataclasses
import io
import sys
import threading
from unittest.mock import patch

import pytest

from patternlog import LogEvent, LogLevel, Logger, PatternFormatter, ConsoleAppender
from patternlog.appenders import BaseAppender
from patternlog.formatters import DEFAULT_PATTERN
from patternlog import utils


class RecordingAppender(BaseAppender):
    """Appender that records every call and every written line."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls = []
        self.lines = []

    def log(self, event):
        self.calls.append(event)
        super().log(event)

    def _write(self, text):
        self.lines.append(text)


class BrokenAppender(BaseAppender):
    def _write(self, text):
        raise RuntimeError("sink exploded")


def make_event(level=LogLevel.INFO, message="hello", logger=None) -> LogEvent:
    return LogEvent(level=level, logger=logger).write(message)


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.UNKNOWN < LogLevel.DEBUG
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.FATAL
        assert int(LogLevel.UNKNOWN) == 0

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("info") == LogLevel.INFO
        assert LogLevel.from_string(" Fatal ") == LogLevel.FATAL
        assert LogLevel.from_string("verbose") == LogLevel.UNKNOWN

    def test_to_string(self):
        assert LogLevel.to_string(LogLevel.WARN) == "WARN"
        assert str(LogLevel.ERROR) == "ERROR"
        for level in LogLevel:
            assert LogLevel.from_string(LogLevel.to_string(level)) == level


class TestLogEvent:
    """Test log event structure."""

    def test_create_event(self):
        event = LogEvent(level=LogLevel.INFO)
        assert event.level == LogLevel.INFO
        assert event.message == ""
        assert event.logger_name == ""
        assert event.thread_id == threading.get_ident()
        assert event.thread_name == threading.current_thread().name
        assert event.fiber_id == 0

    def test_message_buffer(self):
        event = LogEvent(level=LogLevel.DEBUG)
        event.write("a").write(1).format(" %s=%d", "b", 2)
        assert event.message == "a1 b=2"

    def test_format_mismatch_does_not_raise(self):
        event = LogEvent(level=LogLevel.DEBUG).format("%d items", "x")
        assert event.message == "%d items ('x',)"

    def test_fields_are_frozen(self):
        event = LogEvent(level=LogLevel.DEBUG)
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.level = LogLevel.ERROR

    def test_level_type_checked(self):
        with pytest.raises(TypeError):
            LogEvent(level=3)

    def test_capture_source_location(self):
        logger = Logger("cap")
        line = sys._getframe().f_lineno + 1
        event = LogEvent.capture(logger, LogLevel.WARN, "value=%d", 5)
        assert event.file_name.endswith("test_logger.py")
        assert event.line_number == line
        assert event.message == "value=5"
        assert event.logger_name == "cap"

    def test_to_dict(self):
        data = make_event(LogLevel.ERROR, "Test", Logger("x")).to_dict()
        assert data["level"] == "ERROR"
        assert data["message"] == "Test"
        assert data["logger_name"] == "x"

    def test_fiber_id_inside_task(self):
        async def main():
            return utils.get_fiber_id()

        assert asyncio.run(main()) != 0
        assert utils.get_fiber_id() == 0


class TestLoggerDispatch:
    """Test level gates and appender dispatch."""

    def test_level_gate(self):
        logger = Logger("gate", level=LogLevel.WARN)
        appender = RecordingAppender()
        logger.add_appender(appender)

        logger.info(make_event())
        logger.debug(make_event(LogLevel.DEBUG))
        assert appender.calls == []

        logger.warn(make_event(LogLevel.WARN))
        logger.fatal(make_event(LogLevel.FATAL))
        assert len(appender.calls) == 2

    def test_appender_threshold_is_independent(self):
        logger = Logger("gate", pattern="%m%n")
        quiet = RecordingAppender(level=LogLevel.ERROR)
        loud = RecordingAppender()
        logger.add_appender(quiet)
        logger.add_appender(loud)

        logger.info(make_event(message="info"))
        logger.error(make_event(LogLevel.ERROR, "error"))

        assert quiet.lines == ["error\n"]
        assert loud.lines == ["info\n", "error\n"]

    def test_dispatch_order(self):
        logger = Logger("order", pattern="%m")
        seen = []

        class Tagged(BaseAppender):
            def __init__(self, tag):
                super().__init__()
                self.tag = tag

            def _write(self, text):
                seen.append(self.tag)

        for tag in ("a", "b", "c"):
            logger.add_appender(Tagged(tag))
        logger.info(make_event())
        assert seen == ["a", "b", "c"]

    def test_string_message(self):
        logger = Logger("str", pattern="%p %m %l%n")
        appender = RecordingAppender()
        logger.add_appender(appender)

        line = sys._getframe().f_lineno + 1
        logger.error("failed after %d tries", 3)

        event = appender.calls[0]
        assert event.level == LogLevel.ERROR
        assert event.logger is logger
        assert event.file_name.endswith("test_logger.py")
        assert appender.lines == [f"ERROR failed after 3 tries {line}\n"]

    def test_string_message_through_log(self):
        logger = Logger("str", pattern="%l")
        appender = RecordingAppender()
        logger.add_appender(appender)

        line = sys._getframe().f_lineno + 1
        logger.log(LogLevel.INFO, "direct")
        assert appender.lines == [str(line)]

    def test_args_ignored_for_event(self):
        logger = Logger("evt", pattern="%m")
        appender = RecordingAppender()
        logger.add_appender(appender)

        logger.info(make_event(message="ready %d"), 5)
        assert appender.lines == ["ready %d"]

    def test_appender_error_is_contained(self, capsys):
        logger = Logger("broken", pattern="%m")
        after = RecordingAppender()
        logger.add_appender(BrokenAppender())
        logger.add_appender(after)

        logger.info(make_event(message="still here"))

        assert after.lines == ["still here"]
        assert "Appender error: sink exploded" in capsys.readouterr().err

    def test_del_and_clear_appenders(self):
        logger = Logger("del")
        first, second = RecordingAppender(), RecordingAppender()
        logger.add_appender(first)
        logger.add_appender(second)

        assert logger.del_appender(first) is True
        assert logger.del_appender(first) is False
        assert logger.appenders == (second,)

        logger.clear_appenders()
        assert logger.appenders == ()

    def test_set_level(self):
        logger = Logger("lvl")
        appender = RecordingAppender()
        logger.add_appender(appender)
        logger.set_level(LogLevel.ERROR)

        logger.warn(make_event(LogLevel.WARN))
        assert logger.level == LogLevel.ERROR
        assert appender.calls == []


class TestRootFallback:
    """Test delegation to the root logger."""

    def setup_method(self):
        self.root = Logger("root", pattern="%c:%m%n")
        self.root_appender = RecordingAppender()
        self.root.add_appender(self.root_appender)

    def test_delegates_once_without_appenders(self):
        child = Logger("child", root=self.root)
        event = make_event(logger=child)

        with patch.object(self.root, "log", wraps=self.root.log) as spy:
            child.info(event)

        spy.assert_called_once_with(LogLevel.INFO, event)
        assert self.root_appender.lines == ["child:hello\n"]

    def test_never_consults_root_with_appenders(self):
        child = Logger("child", root=self.root)
        child.add_appender(RecordingAppender())

        with patch.object(self.root, "log", wraps=self.root.log) as spy:
            child.info(make_event(logger=child))

        spy.assert_not_called()
        assert self.root_appender.calls == []

    def test_child_gate_applies_before_fallback(self):
        child = Logger("child", level=LogLevel.ERROR, root=self.root)
        child.warn(make_event(LogLevel.WARN))
        assert self.root_appender.calls == []

    def test_root_gate_applies_after_fallback(self):
        self.root.set_level(LogLevel.ERROR)
        child = Logger("child", root=self.root)
        child.info(make_event())
        assert self.root_appender.calls == []

    def test_fallback_after_clear(self):
        child = Logger("child", root=self.root)
        child.add_appender(RecordingAppender())
        child.clear_appenders()

        child.info(make_event(logger=child))
        assert len(self.root_appender.calls) == 1

    def test_no_root_is_noop(self):
        Logger("orphan").info(make_event())

    def test_root_wiring_rules(self):
        logger = Logger("self")
        with pytest.raises(ValueError):
            logger.root = logger

        child = Logger("child", root=self.root)
        with pytest.raises(ValueError):
            Logger("grandchild", root=child)

    def test_logger_serving_as_root_cannot_get_root(self):
        top = Logger("top")
        top_appender = RecordingAppender()
        top.add_appender(top_appender)
        child = Logger("child", root=self.root)

        with pytest.raises(ValueError):
            self.root.root = top

        assert self.root.root is None
        child.info(make_event(logger=child))
        assert len(self.root_appender.calls) == 1
        assert top_appender.calls == []

    def test_detached_root_can_get_root(self):
        child = Logger("child", root=self.root)
        child.root = None
        other = Logger("other")

        self.root.root = other
        assert self.root.root is other


class TestFormatterInheritance:
    """Test default formatter propagation to appenders."""

    def test_add_appender_inherits_default(self):
        logger = Logger("inh", pattern="%m%n")
        appender = RecordingAppender()
        logger.add_appender(appender)

        assert appender.formatter is logger.formatter
        assert appender.has_explicit_formatter is False

    def test_set_formatter_propagates_to_inherited(self):
        logger = Logger("inh", pattern="%m%n")
        appender = RecordingAppender()
        logger.add_appender(appender)

        logger.info(make_event(message="one"))
        assert logger.set_formatter("[%p] %m%n") is True
        logger.info(make_event(message="two"))

        assert appender.lines == ["one\n", "[INFO] two\n"]

    def test_set_formatter_skips_explicit(self):
        logger = Logger("inh", pattern="%m%n")
        appender = RecordingAppender(formatter=PatternFormatter("<%m>"))
        logger.add_appender(appender)

        logger.set_formatter("[%p] %m%n")
        logger.info(make_event(message="x"))

        assert appender.has_explicit_formatter is True
        assert appender.lines == ["<x>"]

    def test_explicit_set_after_adding(self):
        logger = Logger("inh", pattern="%m%n")
        appender = RecordingAppender()
        logger.add_appender(appender)
        appender.set_formatter(PatternFormatter("%p"))

        logger.set_formatter("%m")
        logger.info(make_event())
        assert appender.lines == ["INFO"]

    def test_clearing_explicit_formatter(self):
        logger = Logger("inh", pattern="%m")
        appender = RecordingAppender(formatter=PatternFormatter("%p"))
        logger.add_appender(appender)

        appender.set_formatter(None)
        logger.set_formatter("%m!")
        logger.info(make_event(message="x"))
        assert appender.lines == ["x!"]

    def test_set_formatter_instance(self):
        logger = Logger("inh")
        formatter = PatternFormatter("%m")
        assert logger.set_formatter(formatter) is True
        assert logger.formatter is formatter

    def test_set_broken_pattern_rejected(self, capsys):
        logger = Logger("strict", pattern="%m%n")
        appender = RecordingAppender()
        logger.add_appender(appender)
        before = logger.formatter

        assert logger.set_formatter("%Q") is False

        assert logger.formatter is before
        assert appender.formatter is before
        err = capsys.readouterr().err
        assert "strict" in err
        assert "%Q" in err

    def test_set_broken_formatter_rejected(self):
        logger = Logger("strict")
        before = logger.formatter
        assert logger.set_formatter(PatternFormatter("%d{")) is False
        assert logger.formatter is before

    def test_set_non_formatter_rejected(self, capsys):
        logger = Logger("strict")
        before = logger.formatter

        assert logger.set_formatter(None) is False
        assert logger.set_formatter(object()) is False

        assert logger.formatter is before
        assert "invalid formatter" in capsys.readouterr().err

    def test_broken_constructor_pattern_uses_default(self, capsys):
        logger = Logger("fallback", pattern="%Q")
        assert logger.formatter.pattern == DEFAULT_PATTERN
        assert "invalid formatter" in capsys.readouterr().err

    def test_to_dict(self):
        logger = Logger("desc", level=LogLevel.INFO, pattern="%m")
        logger.add_appender(ConsoleAppender())
        logger.add_appender(ConsoleAppender(formatter=PatternFormatter("%p")))

        data = logger.to_dict()
        assert data["name"] == "desc"
        assert data["level"] == "INFO"
        assert data["formatter"] == "%m"
        assert data["appenders"] == [
            {"type": "ConsoleAppender", "level": "DEBUG"},
            {"type": "ConsoleAppender", "level": "DEBUG", "formatter": "%p"},
        ]


class TestConcurrency:
    """Test logging from many threads at once."""

    def test_lines_are_not_interleaved(self):
        stream = io.StringIO()
        logger = Logger("mt", pattern="%m%n")
        logger.add_appender(ConsoleAppender(stream=stream))

        def worker(idx):
            for i in range(200):
                logger.info(f"{idx:02d}-{i:03d}-" + "x" * 64)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        lines = stream.getvalue().splitlines()
        assert len(lines) == 8 * 200
        assert all(len(line) == 71 and line.endswith("x" * 64) for line in lines)

    def test_mutation_during_logging(self):
        logger = Logger("mut", pattern="%m%n")
        stop = threading.Event()
        errors = []

        def writer():
            try:
                while not stop.is_set():
                    logger.info("tick")
            except Exception as e:  # pragma: no cover
                errors.append(e)

        thread = threading.Thread(target=writer)
        thread.start()
        for _ in range(200):
            appender = RecordingAppender()
            logger.add_appender(appender)
            logger.set_formatter("%p %m%n")
            logger.del_appender(appender)
        stop.set()
        thread.join()

        assert errors == []
