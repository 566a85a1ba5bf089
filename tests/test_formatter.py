from datetime import datetime

import pytest

from wwlogger.formatter import DefaultFormatter, FormatterBase, format_level
from wwlogger.message import LogLevel, LogMessage


def make(level=LogLevel.INFO, message="hello", **kwargs):
    kwargs.setdefault("timestamp", datetime(2024, 1, 2, 3, 4, 5))
    return LogMessage("app", level, message, **kwargs)


def test_formatter_base_is_abstract():
    with pytest.raises(TypeError):
        FormatterBase()


@pytest.mark.parametrize(
    "level, name",
    [
        (LogLevel.TRACE, "trace"),
        (LogLevel.DEBUG, "debug"),
        (LogLevel.INFO, "info"),
        (LogLevel.WARN, "warn"),
        (LogLevel.ERROR, "error"),
        (LogLevel.FATAL, "fatal"),
        (LogLevel.OFF, "unknown"),
    ],
)
def test_format_level(level, name):
    assert format_level(level) == name


def test_name_level_and_message():
    assert DefaultFormatter("[%n][%L] %v").format(make()) == "[app][info] hello"


def test_default_pattern_shape():
    out = DefaultFormatter().format(make(level=LogLevel.WARN))
    assert out.startswith("[app][")
    assert out.endswith("][warn] hello")


def test_date_and_time_directives():
    out = DefaultFormatter("[%F %T][%L] %v").format(make())
    assert out == "[2024-01-02 03:04:05][info] hello"


def test_individual_time_fields():
    out = DefaultFormatter("%Y/%m/%d %H:%M:%S").format(make())
    assert out == "2024/01/02 03:04:05"


def test_source_location_directives():
    msg = make(file="main.py", line=42, function="run")
    assert DefaultFormatter("[%V]").format(msg) == "[main.py:42-run]"
    assert DefaultFormatter("%f|%l|%C").format(msg) == "main.py|42|run"


def test_thread_id_directive():
    msg = make(thread_id=1234)
    assert DefaultFormatter("%t").format(msg) == "1234"


def test_unknown_directive_kept():
    assert DefaultFormatter("a%qb").format(make()) == "a%qb"


def test_double_percent_is_not_collapsed():
    assert DefaultFormatter("100%%").format(make()) == "100%%"


def test_trailing_percent_is_literal():
    assert DefaultFormatter("abc%").format(make()) == "abc%"


def test_pure_literal_pattern():
    assert DefaultFormatter("plain text").format(make()) == "plain text"


def test_time_recomputed_per_message():
    formatter = DefaultFormatter("%T")
    first = formatter.format(make(timestamp=datetime(2024, 1, 2, 3, 4, 5)))
    second = formatter.format(make(timestamp=datetime(2024, 1, 2, 6, 7, 8)))
    assert first == "03:04:05"
    assert second == "06:07:08"


def test_message_with_percent_is_not_interpreted():
    assert DefaultFormatter("%v").format(make(message="50% %n")) == "50% %n"