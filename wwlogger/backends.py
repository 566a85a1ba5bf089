"""Logger back ends that route records to their sinks, synchronously or not."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Union

from wwlogger.buffer import DEFAULT_CAPACITY, AsyncWorker
from wwlogger.formatter import DefaultFormatter, FormatterBase
from wwlogger.message import LogLevel, LogMessage
from wwlogger.sinks import DefaultFileSink, SinkBase

FormatterSpec = Union[str, FormatterBase]


class LogType(Enum):
    """How a back end delivers records to its sinks."""

    SYNC = "sync"
    ASYNC = "async"


class LoggerBase(ABC):
    """Holds a list of sinks and delivers log records to them."""

    log_type: LogType

    def __init__(self) -> None:
        self.sinks: List[SinkBase] = []
        self._lock = threading.Lock()

    @abstractmethod
    def log(
        self,
        name: str,
        level: LogLevel,
        message: str,
        file: str = "",
        line: int = 0,
        function: str = "",
    ) -> None:
        """Emit one record."""

    @abstractmethod
    def flush(self) -> None:
        """Flush every sink."""

    def _flush_sinks(self) -> None:
        with self._lock:
            for sink in self.sinks:
                sink.flush()

    def add_sink(self, sink: SinkBase) -> None:
        with self._lock:
            self.sinks.append(sink)

    def set_formatter(self, formatter: FormatterSpec) -> None:
        """Give every current sink the formatter (pattern or object)."""
        with self._lock:
            for sink in self.sinks:
                sink.set_formatter(formatter)

    def close(self) -> None:
        """Release resources; flushes the sinks."""
        self.flush()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class SyncLogger(LoggerBase):
    """Formats and writes each record on the calling thread."""

    log_type = LogType.SYNC

    def log(
        self,
        name: str,
        level: LogLevel,
        message: str,
        file: str = "",
        line: int = 0,
        function: str = "",
    ) -> None:
        msg = LogMessage(name, level, message, file, line, function)
        with self._lock:
            for sink in self.sinks:
                sink.log(msg)

    def flush(self) -> None:
        self._flush_sinks()


class AsyncLogger(LoggerBase):
    """Formats records on the calling thread and writes them from a worker.

    Only :class:`DefaultFileSink` sinks receive the data; the text is
    produced by the logger's own formatter.
    """

    log_type = LogType.ASYNC

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__()
        self.formatter: FormatterBase = DefaultFormatter()
        self._worker = AsyncWorker(self._deliver, capacity)

    def log(
        self,
        name: str,
        level: LogLevel,
        message: str,
        file: str = "",
        line: int = 0,
        function: str = "",
    ) -> None:
        msg = LogMessage(name, level, message, file, line, function)
        data = (self.formatter.format(msg) + "\n").encode("utf-8")
        self._worker.push(data)

    def flush(self) -> None:
        self._flush_sinks()

    def set_formatter(self, formatter: FormatterSpec) -> None:
        """Use the formatter for queued text and hand it to the sinks too."""
        self.formatter = DefaultFormatter(formatter) if isinstance(formatter, str) else formatter
        super().set_formatter(formatter)

    def close(self) -> None:
        """Drain the queue, stop the worker and flush the sinks."""
        self._worker.stop()
        self.flush()

    def _deliver(self, data: bytes) -> None:
        with self._lock:
            for sink in self.sinks:
                if isinstance(sink, DefaultFileSink):
                    sink.write(data)