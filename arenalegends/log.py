"""Minimal logger writing to standard output and a log file."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class LogType(Enum):
    """Kind of a log line; the value is the label printed in front of it."""

    VERBOSE = "VERBOSE"
    DEBUGGING = "DEBUGGING"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


@dataclass
class _LogConfig:
    enabled: bool = False
    log_verbose: bool = False
    file_path: str = "log.txt"


_config = _LogConfig()


def set_config(enabled: bool = False, log_verbose: bool = False, file_path: str = "log.txt") -> None:
    """Set the global logging options and empty the log file."""
    _config.enabled = enabled
    _config.log_verbose = log_verbose
    _config.file_path = str(file_path)
    Path(_config.file_path).write_text("")


def _can_log(level: LogType) -> bool:
    return _config.enabled and (level is not LogType.VERBOSE or _config.log_verbose)


def log(level: LogType = LogType.DEBUGGING, *args: object) -> None:
    """Write one labelled line made of the given parts to stdout and the log file."""
    if not _can_log(level):
        return
    line = f"[{level.value}] " + "".join(str(part) for part in args) + "\n"
    sys.stdout.write(line)
    sys.stdout.flush()
    with open(_config.file_path, "a", encoding="utf-8") as fh:
        fh.write(line)