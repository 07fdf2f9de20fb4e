"""
Logger registry

Hands out loggers by name. Loggers created here fall back to the
registry's root logger until they get appenders of their own.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional

from patternlog.appenders.console_appender import ConsoleAppender
from patternlog.core.logger import Logger
from patternlog.core.logger_config import LoggerConfig

ROOT_NAME = "root"


class LoggerRegistry:
    """
    Named logger cache.

    The root logger is built lazily on first use with a console appender,
    so anything that falls back to it is visible out of the box.

    Thread Safety:
        Lookups are lock-free once a logger exists; creation is guarded so
        concurrent first lookups of one name build a single logger.

    Example:
        registry = LoggerRegistry()
        db = registry.get_logger("db")
        db.info("connected to %s", host)
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig.default()
        self._loggers: Dict[str, Logger] = {}
        self._root: Optional[Logger] = None
        self._lock = threading.Lock()

    @property
    def config(self) -> LoggerConfig:
        return self._config

    def get_root(self) -> Logger:
        """Return the root logger, creating it on first call."""
        root = self._root
        if root is None:
            with self._lock:
                if self._root is None:
                    self._root = self._create_root()
                root = self._root
        return root

    def _create_root(self) -> Logger:
        root = Logger(ROOT_NAME, self._config.root_level, self._config.root_pattern)
        if self._config.root_console:
            root.add_appender(ConsoleAppender())
        return root

    def get_logger(self, name: str) -> Logger:
        """
        Return the logger called ``name``, creating it on first request.

        Args:
            name: Logger name; "root" returns the root logger

        Returns:
            Logger instance
        """
        if name == ROOT_NAME:
            return self.get_root()

        logger = self._loggers.get(name)
        if logger is None:
            root = self.get_root()
            with self._lock:
                logger = self._loggers.get(name)
                if logger is None:
                    logger = Logger(
                        name,
                        self._config.default_level,
                        self._config.default_pattern,
                        root=root,
                    )
                    self._loggers[name] = logger
        return logger

    def names(self) -> List[str]:
        """Names of all loggers created so far, root excluded."""
        with self._lock:
            return list(self._loggers)

    def __contains__(self, name: str) -> bool:
        if name == ROOT_NAME:
            return self._root is not None
        return name in self._loggers

    def to_dict(self) -> Dict[str, Any]:
        """Describe every logger in the registry, keyed by name."""
        loggers = {ROOT_NAME: self.get_root()}
        with self._lock:
            loggers.update(self._loggers)
        return {name: logger.to_dict() for name, logger in loggers.items()}


_default_registry: Optional[LoggerRegistry] = None
_default_lock = threading.Lock()


def get_registry() -> LoggerRegistry:
    """Return the process-wide registry, creating it on first call."""
    global _default_registry
    registry = _default_registry
    if registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = LoggerRegistry()
            registry = _default_registry
    return registry


def set_registry(registry: Optional[LoggerRegistry]) -> Optional[LoggerRegistry]:
    """
    Replace the process-wide registry.

    Passing None makes the next ``get_registry`` build a fresh one.

    Returns:
        The previous registry
    """
    global _default_registry
    with _default_lock:
        previous, _default_registry = _default_registry, registry
    return previous


def get_logger(name: str) -> Logger:
    """Shortcut for ``get_registry().get_logger(name)``."""
    return get_registry().get_logger(name)


def get_root() -> Logger:
    """Shortcut for ``get_registry().get_root()``."""
    return get_registry().get_root()
