[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wwlogger"
version = "0.1.0"
description = "A small logging library with sync and async loggers, pattern formatters and console, rotating and timed file sinks."
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "logger", "async", "rotating", "sink", "formatter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wwlogger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
