"""Simple logging to the console and to an appended log file."""

import sys
from enum import Enum


class LogLevel(Enum):
    """Message level; the value is the ANSI colour code used when printing."""

    INFO = 34
    WARNING = 33
    ERROR = 31
    DEFAULT = 0


DEFAULT_LOG_PATH = "app.log"


def _format(message, level):
    if level is LogLevel.DEFAULT:
        return "   " + message
    return f"\033[{level.value}m   {message}\033[0m"


def log(message, level=LogLevel.INFO, log_path=DEFAULT_LOG_PATH):
    """Append ``message`` to the log file and print it to standard output.

    Returns the formatted line that was written.
    """
    formatted = _format(message, level)
    try:
        with open(log_path, "a", encoding="utf-8") as log_file:
            log_file.write(formatted + "\n")
    except OSError:
        print("Logger not initialized or file cannot be opened.", file=sys.stderr)
    print(formatted)
    return formatted


def read_full_log(log_path):
    """Return the whole content of the log file, or a notice if it cannot be read."""
    try:
        with open(log_path, encoding="utf-8", newline="") as log_file:
            return log_file.read()
    except OSError:
        return "Logger file could not be opened."