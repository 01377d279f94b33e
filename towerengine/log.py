"""Simple logging to the console and to an append-only log file."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class LogType(Enum):
    """Log levels and the labels printed in front of each line."""

    VERBOSE = "VERBOSE"
    DEBUGGING = "DEBUGGING"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class _Config:
    enabled: bool = False
    log_verbose: bool = False
    file_path: str = "log.txt"


_config = _Config()


def set_config(enabled: bool = False, log_verbose: bool = False, file_path: str | Path = "log.txt") -> None:
    """Set the global log options and clear the log file."""
    _config.enabled = enabled
    _config.log_verbose = log_verbose
    _config.file_path = str(file_path)
    Path(_config.file_path).write_text("", encoding="utf-8")


def _can_log(log_type: LogType) -> bool:
    return _config.enabled and (log_type is not LogType.VERBOSE or _config.log_verbose)


def log(log_type: LogType, *args: object) -> None:
    """Write one labelled line made of the concatenated arguments."""
    if not _can_log(log_type):
        return
    line = f"[{log_type.label}] " + "".join(str(arg) for arg in args) + "\n"
    sys.stdout.write(line)
    with open(_config.file_path, "a", encoding="utf-8") as stream:
        stream.write(line)