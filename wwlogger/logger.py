"""Named loggers with level filtering, kept in a process-wide registry."""

from __future__ import annotations

import threading
from typing import Dict, Optional, Union

from wwlogger.backends import AsyncLogger, LoggerBase, LogType, SyncLogger
from wwlogger.formatter import DefaultFormatter, FormatterBase
from wwlogger.message import LogLevel
from wwlogger.sinks import SinkBase

FormatterSpec = Union[str, FormatterBase]


def _make_backend(log_type: LogType) -> LoggerBase:
    return AsyncLogger() if log_type is LogType.ASYNC else SyncLogger()


class Logger:
    """A named logger that filters by level and forwards to a back end.

    Records below ``level`` (``INFO`` by default) are dropped. A formatter
    set on the logger is also given to every sink added later, until
    :meth:`clear_formatter` is called.
    """

    def __init__(self, name: str, log_type: LogType = LogType.SYNC) -> None:
        self.name = name
        self.level = LogLevel.INFO
        self._backend = _make_backend(log_type)
        self._formatter: Optional[FormatterBase] = None

    @property
    def log_type(self) -> LogType:
        return self._backend.log_type

    def set_type(self, log_type: LogType) -> None:
        """Switch to a fresh back end of another type; its sinks start empty."""
        if log_type is self._backend.log_type:
            return
        old = self._backend
        self._backend = _make_backend(log_type)
        old.close()

    def add_sink(self, sink: SinkBase) -> None:
        if self._formatter is not None:
            sink.set_formatter(self._formatter)
        self._backend.add_sink(sink)

    def set_formatter(self, formatter: FormatterSpec) -> None:
        """Apply a pattern or formatter to current and future sinks."""
        resolved = DefaultFormatter(formatter) if isinstance(formatter, str) else formatter
        self._formatter = resolved
        self._backend.set_formatter(resolved)

    def clear_formatter(self) -> None:
        """Stop applying the formatter to sinks added from now on."""
        self._formatter = None

    def log(
        self,
        level: LogLevel,
        message: str,
        file: str = "",
        line: int = 0,
        function: str = "",
    ) -> None:
        if level == LogLevel.OFF or level < self.level:
            return
        self._backend.log(self.name, level, message, file, line, function)

    def trace(self, message: str, file: str = "", line: int = 0, function: str = "") -> None:
        self.log(LogLevel.TRACE, message, file, line, function)

    def debug(self, message: str, file: str = "", line: int = 0, function: str = "") -> None:
        self.log(LogLevel.DEBUG, message, file, line, function)

    def info(self, message: str, file: str = "", line: int = 0, function: str = "") -> None:
        self.log(LogLevel.INFO, message, file, line, function)

    def warn(self, message: str, file: str = "", line: int = 0, function: str = "") -> None:
        self.log(LogLevel.WARN, message, file, line, function)

    def error(self, message: str, file: str = "", line: int = 0, function: str = "") -> None:
        self.log(LogLevel.ERROR, message, file, line, function)

    def fatal(self, message: str, file: str = "", line: int = 0, function: str = "") -> None:
        self.log(LogLevel.FATAL, message, file, line, function)

    def flush(self) -> None:
        self._backend.flush()

    def close(self) -> None:
        """Drain pending output and flush; an async logger stops accepting records."""
        self._backend.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


_registry: Dict[str, Logger] = {}
_registry_lock = threading.Lock()


def get_logger(name: str = "default_logger", log_type: LogType = LogType.SYNC) -> Logger:
    """Return the logger registered under ``name``, creating it if needed.

    An existing logger is returned as is, whatever ``log_type`` asks for.
    """
    with _registry_lock:
        logger = _registry.get(name)
        if logger is None:
            logger = _registry[name] = Logger(name, log_type)
        return logger


def get_default_logger(name: str = "default_logger") -> Logger:
    return get_logger(name, LogType.SYNC)


def get_sync_logger(name: str = "sync_logger") -> Logger:
    return get_logger(name, LogType.SYNC)


def get_async_logger(name: str = "async_logger") -> Logger:
    return get_logger(name, LogType.ASYNC)