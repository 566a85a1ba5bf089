# wwlogger

A compact logging library: named loggers that write through synchronous or
asynchronous back ends to one or more sinks, with a pattern-based formatter.
It has no third-party dependencies.

## Installation

```
pip install .
```

## Quick start

```python
from wwlogger.logger import get_sync_logger
from wwlogger.sinks import ConsoleSink, DefaultFileSink

logger = get_sync_logger("app")
logger.set_formatter("[%F %T][%L] %v")
logger.add_sink(ConsoleSink())
logger.add_sink(DefaultFileSink("app.log"))

logger.info("service started")
logger.error("something went wrong", "main.py", 42, "run")
logger.flush()
```

## Loggers (`wwlogger.logger`)

Loggers are registered by name: `get_logger(name, log_type)` returns the same
`Logger` every time it is called with the same name, whatever `log_type` is
passed the second time. `get_default_logger` (name `"default_logger"`) and
`get_sync_logger` (name `"sync_logger"`) create synchronous loggers;
`get_async_logger` (name `"async_logger"`) creates one that formats on the
calling thread and writes from a background worker.

A `Logger` has:

- `level` – records below it are dropped; the default is `LogLevel.INFO`.
  `LogLevel.OFF` is never written.
- `trace`, `debug`, `info`, `warn`, `error`, `fatal` and
  `log(level, message, file, line, function)`; `file`, `line` and `function`
  are optional.
- `add_sink(sink)`.
- `set_formatter(pattern_or_formatter)` – applies the formatter to every
  current sink and to every sink added later; `clear_formatter()` stops
  applying it to sinks added afterwards.
- `set_type(LogType.SYNC | LogType.ASYNC)` – switches to a fresh back end of
  the other type; the new back end starts with no sinks and the old one is
  closed.
- `flush()`, `close()`, and use as a context manager (closing on exit).

## Levels and records (`wwlogger.message`)

`LogLevel` is an `IntEnum`: `TRACE`, `DEBUG`, `INFO`, `WARN`, `ERROR`,
`FATAL`, `OFF`. `LogMessage` is a dataclass holding the logger name, level,
message, file, line, function, a timezone-aware local timestamp and the
thread id.

## Patterns (`wwlogger.formatter`)

`DefaultFormatter` compiles a pattern once. The default is `[%n][%c][%L] %v`.

| Code | Meaning |
|------|---------|
| `%v` | message text |
| `%n` | logger name |
| `%L` | level name (`trace`, `debug`, `info`, `warn`, `error`, `fatal`) |
| `%t` | thread id |
| `%f`, `%l`, `%C` | file, line, function |
| `%V` | `file:line-function` |
| `%Y %y %b %h %B %m %d %e %a %A %w %u %H %I %M %S %c %D %F %T %P %Z` | local time fields, as in `strftime` |

Unknown codes are written as they appear. `format_level(level)` returns the
level name, or `"unknown"`. Custom formatters subclass `FormatterBase` and
implement `format(msg)`.

## Sinks (`wwlogger.sinks`)

Every sink takes a formatter as a pattern string, a formatter object, or
nothing for the default pattern, and can change it with `set_formatter`.

- `ConsoleSink` – error and fatal records go to standard error, everything
  else to standard output.
- `DefaultFileSink(filename)` – appends to one file, opened on construction.
- `RotateFileSink(filename, max_size=1048576, max_files=1)` – when the file
  grows past `max_size` bytes it is renamed to `name-1.ext`, older files shift
  up to `name-<max_files>.ext` (the oldest is removed), and a fresh file is
  started.
- `TimedFileSink(filename, duration=timedelta(hours=24), file_format="%Y-%m-%d_%H-%M-%S")`
  – the first record, and every record after more than `duration` has passed,
  starts a new file named `name_<time>.ext`; `duration` may also be given in
  seconds. `set_duration_hours`, `set_duration_days` and `set_duration_weeks`
  change the interval, and `current_filename` names the open file. A `clock`
  callable can be passed to supply the current time.
- `DailyFileSink` and `HourlyFileSink` – timed sinks with a one-day
  (`%Y-%m-%d`) or one-hour (`%Y-%m-%d_%H`) interval.

File sinks have `close()` and work as context managers.

## Back ends (`wwlogger.backends`)

`SyncLogger` formats and writes each record on the calling thread.
`AsyncLogger` formats with its own formatter and queues the text to an
`AsyncWorker` (`wwlogger.buffer`), which writes it from a background thread
through a pair of swapped `LoggerBuffer`s. The asynchronous back end hands its
text only to `DefaultFileSink` sinks; console, rotating and timed sinks
receive nothing from it. `close()` drains the queue before stopping.

## What it does not do

There is no command-line tool, no bridge to the standard `logging` module and
no network or syslog sink; output goes only to the console and local files.

## Running the tests

```
pip install .[test]
pytest
```