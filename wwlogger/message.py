"""Log levels and the record passed from loggers to sinks."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity of a log record; ``OFF`` disables output entirely."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    OFF = 6


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class LogMessage:
    """A single log record."""

    name: str
    level: LogLevel
    message: str
    file: str = ""
    line: int = 0
    function: str = ""
    timestamp: datetime = field(default_factory=_now)
    thread_id: int = field(default_factory=threading.get_ident)