"""Pattern-based formatting of log records."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, List, Optional

from wwlogger.message import LogLevel, LogMessage

DEFAULT_PATTERN = "[%n][%c][%L] %v"

_TIME_CODES = frozenset("YybhBmdeaAwuHIMScDFTPZ")

_PATTERN_PIECE = re.compile(r"%(.)|((?:[^%]|%\Z)+)", re.DOTALL)

_LEVEL_NAMES = {
    LogLevel.TRACE: "trace",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warn",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
}

_Instruction = Callable[[LogMessage, Optional[datetime]], str]


def format_level(level: LogLevel) -> str:
    """Return the lower-case name of a level, or ``"unknown"``."""
    return _LEVEL_NAMES.get(level, "unknown")


class FormatterBase(ABC):
    """Turns a log record into a line of text."""

    @abstractmethod
    def format(self, msg: LogMessage) -> str:
        """Format one record."""


def _literal(text: str) -> _Instruction:
    return lambda msg, when: text


def _time(code: str) -> _Instruction:
    spec = "%" + code
    return lambda msg, when: when.strftime(spec)


_FIELDS = {
    "L": lambda msg, when: format_level(msg.level),
    "t": lambda msg, when: str(msg.thread_id),
    "f": lambda msg, when: msg.file,
    "l": lambda msg, when: str(msg.line),
    "C": lambda msg, when: msg.function,
    "V": lambda msg, when: f"{msg.file}:{msg.line}-{msg.function}",
    "n": lambda msg, when: msg.name,
    "v": lambda msg, when: msg.message,
}


class DefaultFormatter(FormatterBase):
    """Formatter driven by a ``%``-directive pattern compiled once.

    Time directives follow ``strftime``; ``%L`` level, ``%t`` thread id,
    ``%f`` file, ``%l`` line, ``%C`` function, ``%V`` file:line-function,
    ``%n`` logger name and ``%v`` message. Unknown directives are kept as is.
    """

    def __init__(self, pattern: str = DEFAULT_PATTERN) -> None:
        self.pattern = pattern
        self._timed = False
        self._instructions: List[_Instruction] = list(self._compile(pattern))

    def _compile(self, pattern: str):
        for match in _PATTERN_PIECE.finditer(pattern):
            code, text = match.groups()
            if code is None:
                yield _literal(text)
            elif code in _TIME_CODES:
                self._timed = True
                yield _time(code)
            elif code in _FIELDS:
                yield _FIELDS[code]
            else:
                yield _literal("%" + code)

    def format(self, msg: LogMessage) -> str:
        when = msg.timestamp.astimezone() if self._timed else None
        return "".join(step(msg, when) for step in self._instructions)