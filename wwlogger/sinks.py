"""Output destinations for formatted log records."""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import BinaryIO, Callable, Optional, Union

from wwlogger.formatter import DefaultFormatter, FormatterBase
from wwlogger.message import LogLevel, LogMessage

FormatterSpec = Union[str, FormatterBase, None]
PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_MAX_SIZE = 1024 * 1024
DEFAULT_TIME_FORMAT = "%Y-%m-%d_%H-%M-%S"


def _make_formatter(formatter: FormatterSpec) -> FormatterBase:
    if formatter is None:
        return DefaultFormatter()
    if isinstance(formatter, str):
        return DefaultFormatter(formatter)
    return formatter


class SinkBase(ABC):
    """A destination for log records, with its own formatter.

    The formatter may be given as a pattern string, a formatter object, or
    left out for the default pattern.
    """

    def __init__(self, formatter: FormatterSpec = None) -> None:
        self.formatter: FormatterBase = _make_formatter(formatter)

    @abstractmethod
    def log(self, msg: LogMessage) -> None:
        """Write one record."""

    @abstractmethod
    def flush(self) -> None:
        """Flush buffered output."""

    def set_formatter(self, formatter: FormatterSpec) -> None:
        """Replace the formatter with a pattern string or formatter object."""
        self.formatter = _make_formatter(formatter)


class ConsoleSink(SinkBase):
    """Writes records to standard output; errors and fatals go to standard error."""

    def log(self, msg: LogMessage) -> None:
        stream = sys.stderr if msg.level in (LogLevel.ERROR, LogLevel.FATAL) else sys.stdout
        stream.write(self.formatter.format(msg) + "\n")
        stream.flush()

    def flush(self) -> None:
        sys.stdout.flush()
        sys.stderr.flush()


class FileSink(SinkBase):
    """Base for sinks that write to a file.

    ``name`` and ``suffix`` are the file name split at its last dot. The file
    is not opened here; subclasses decide when and how to open it.
    """

    def __init__(self, filename: PathLike, formatter: FormatterSpec = None) -> None:
        super().__init__(formatter)
        self.filename = os.fspath(filename)
        self.name, dot, ext = self.filename.rpartition(".")
        if dot:
            self.suffix = "." + ext
        else:
            self.name, self.suffix = self.filename, ""
        self._file: Optional[BinaryIO] = None

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def log(self, msg: LogMessage) -> None:
        if self._file is None:
            return
        self._file.write((self.formatter.format(msg) + "\n").encode("utf-8"))
        self._file.flush()

    def write(self, data: bytes) -> None:
        """Write already formatted data to the file as is."""
        if self._file is not None:
            self._file.write(data)

    def flush(self) -> None:
        if self._file is not None:
            self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _open(self, path: str, mode: str) -> None:
        try:
            self._file = open(path, mode)
        except OSError as exc:
            raise OSError(f"Failed to open log file: {path}") from exc

    def _open_file(self) -> None:
        self._open(self.filename, "ab")


class DefaultFileSink(FileSink):
    """Appends records to a single file, opened on construction."""

    def __init__(self, filename: PathLike, formatter: FormatterSpec = None) -> None:
        super().__init__(filename, formatter)
        self._open_file()


class RotateFileSink(FileSink):
    """Appends to a file and rotates it once it grows past ``max_size`` bytes.

    Rotated files are named ``<name>-1<suffix>`` (newest) up to
    ``<name>-<max_files><suffix>`` (oldest); older ones are removed.
    """

    def __init__(
        self,
        filename: PathLike,
        max_size: int = DEFAULT_MAX_SIZE,
        max_files: int = 1,
        formatter: FormatterSpec = None,
    ) -> None:
        super().__init__(filename, formatter)
        self.max_size = max_size
        self.max_files = max_files
        self._open_file()

    def log(self, msg: LogMessage) -> None:
        super().log(msg)
        self._check_rotate()

    def write(self, data: bytes) -> None:
        super().write(data)
        self._check_rotate()

    def _numbered(self, index: int) -> str:
        return f"{self.name}-{index}{self.suffix}"

    def _current_size(self) -> int:
        self.flush()
        try:
            return os.path.getsize(self.filename)
        except OSError as exc:
            raise OSError(f"Failed to open log file: {self.filename}") from exc

    def _check_rotate(self) -> None:
        if self._current_size() > self.max_size:
            self._rotate()

    def _rotate(self) -> None:
        self.close()
        oldest = self._numbered(self.max_files)
        if os.path.exists(oldest):
            os.remove(oldest)
        for index in range(self.max_files - 1, 0, -1):
            source = self._numbered(index)
            if os.path.exists(source):
                os.replace(source, self._numbered(index + 1))
        if os.path.exists(self.filename):
            os.replace(self.filename, self._numbered(1))
        self._open(self.filename, "wb")


class TimedFileSink(FileSink):
    """Starts a new file whenever more than ``duration`` has passed.

    Each file is named ``<name>_<time><suffix>``, the time being formatted
    with ``file_format`` at the moment of rotation. The first record always
    opens a file.
    """

    def __init__(
        self,
        filename: PathLike,
        duration: Union[timedelta, float] = timedelta(hours=24),
        file_format: str = DEFAULT_TIME_FORMAT,
        formatter: FormatterSpec = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(filename, formatter)
        self.duration = duration if isinstance(duration, timedelta) else timedelta(seconds=duration)
        self.file_format = file_format
        self.last_time: Optional[datetime] = None
        self.current_filename: Optional[str] = None
        self._clock = clock

    def set_duration_hours(self, hours: int) -> None:
        self.duration = timedelta(hours=hours)

    def set_duration_days(self, days: int) -> None:
        self.duration = timedelta(hours=days * 24)

    def set_duration_weeks(self, weeks: int) -> None:
        self.duration = timedelta(hours=weeks * 24 * 7)

    def log(self, msg: LogMessage) -> None:
        self._check_rotate()
        super().log(msg)

    def write(self, data: bytes) -> None:
        self._check_rotate()
        super().write(data)

    def _check_rotate(self) -> None:
        now = self._clock()
        if self.last_time is None or now - self.last_time > self.duration:
            self.last_time = now
            self._rotate()

    def _rotate(self) -> None:
        self.close()
        self._open_file()

    def _open_file(self) -> None:
        path = f"{self.name}_{self.last_time.strftime(self.file_format)}{self.suffix}"
        self._open(path, "wb")
        self.current_filename = path


class DailyFileSink(TimedFileSink):
    """Starts a new file every day, named by date."""

    def __init__(
        self,
        filename: PathLike,
        formatter: FormatterSpec = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(filename, timedelta(hours=24), "%Y-%m-%d", formatter, clock)


class HourlyFileSink(TimedFileSink):
    """Starts a new file every hour, named by date and hour."""

    def __init__(
        self,
        filename: PathLike,
        formatter: FormatterSpec = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(filename, timedelta(hours=1), "%Y-%m-%d_%H", formatter, clock)