"""Named sync and async loggers with pattern formatting and console, file, rotating and timed sinks."""

__version__ = "0.1.0"