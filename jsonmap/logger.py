"""A small levelled logger with a console sink and pluggable callbacks."""

from __future__ import annotations

import inspect
import os
import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Callable, Optional, TextIO

MAX_CALLBACKS = 32

_THIS_FILE = os.path.normcase(os.path.abspath(__file__))


class Level(IntEnum):
    """Severity of a log record, in increasing order."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5


def level_string(level: int) -> str:
    """Return the upper-case name of a level."""
    return Level(level).name


@dataclass
class LogEvent:
    """One record as handed to sinks."""

    fmt: str
    args: tuple
    file: str
    line: int
    level: Level
    time: datetime = field(default_factory=datetime.now)
    udata: Any = None

    @property
    def message(self) -> str:
        """The formatted message text."""
        return self.fmt % self.args if self.args else self.fmt


@dataclass
class _Callback:
    fn: Callable[[LogEvent], None]
    udata: Any
    level: int


def _caller() -> tuple[str, int]:
    frame = inspect.currentframe()
    while frame is not None and os.path.normcase(
        os.path.abspath(frame.f_code.co_filename)
    ) == _THIS_FILE:
        frame = frame.f_back
    if frame is None:
        return "?", 0
    return os.path.basename(frame.f_code.co_filename), frame.f_lineno


def _write_console(event: LogEvent) -> None:
    stream = event.udata
    stamp = event.time.strftime("%H:%M:%S")
    name = level_string(event.level)
    stream.write(f"{stamp} {name:<5} {event.file}:{event.line}: {event.message}\n")
    stream.flush()


def _write_file(event: LogEvent) -> None:
    stream = event.udata
    stamp = event.time.strftime("%Y-%m-%d %H:%M:%S")
    name = level_string(event.level)
    stream.write(f"{stamp} {name:<5} {event.file}:{event.line}: {event.message}\n")
    stream.flush()


class Logger:
    """Writes records to a console stream and to registered callbacks."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._lock: Optional[Callable[[bool], None]] = None
        self.level: int = Level.TRACE
        self.quiet = False
        self._callbacks: list[_Callback] = []

    def set_lock(self, fn: Optional[Callable[[bool], None]]) -> None:
        """Install a function called with True before and False after each record."""
        self._lock = fn

    def set_level(self, level: int) -> None:
        """Set the lowest level written to the console stream."""
        self.level = Level(level)

    def set_quiet(self, enable: bool) -> None:
        """Turn console output off or on; callbacks are unaffected."""
        self.quiet = bool(enable)

    def _add(self, fn: Callable[[LogEvent], None], udata: Any, level: int) -> None:
        if len(self._callbacks) >= MAX_CALLBACKS:
            raise RuntimeError(f"no room for more than {MAX_CALLBACKS} callbacks")
        self._callbacks.append(_Callback(fn, udata, Level(level)))

    def add_callback(self, fn: Callable[[LogEvent], None], level: int) -> None:
        """Register a callback receiving every event at or above level."""
        self._add(fn, None, level)

    def add_fp(self, fp: TextIO, level: int) -> None:
        """Register a text stream receiving dated records at or above level."""
        self._add(_write_file, fp, level)

    def log(self, level: int, fmt: str, *args: Any) -> None:
        """Emit one record."""
        level = Level(level)
        file, line = _caller()
        now = datetime.now()
        if self._lock is not None:
            self._lock(True)
        try:
            if not self.quiet and level >= self.level:
                stream = self._stream if self._stream is not None else sys.stderr
                _write_console(LogEvent(fmt, args, file, line, level, now, stream))
            for cb in self._callbacks:
                if level >= cb.level:
                    cb.fn(LogEvent(fmt, args, file, line, level, now, cb.udata))
        finally:
            if self._lock is not None:
                self._lock(False)

    def trace(self, fmt: str, *args: Any) -> None:
        self.log(Level.TRACE, fmt, *args)

    def debug(self, fmt: str, *args: Any) -> None:
        self.log(Level.DEBUG, fmt, *args)

    def info(self, fmt: str, *args: Any) -> None:
        self.log(Level.INFO, fmt, *args)

    def warn(self, fmt: str, *args: Any) -> None:
        self.log(Level.WARN, fmt, *args)

    def error(self, fmt: str, *args: Any) -> None:
        self.log(Level.ERROR, fmt, *args)

    def fatal(self, fmt: str, *args: Any) -> None:
        self.log(Level.FATAL, fmt, *args)