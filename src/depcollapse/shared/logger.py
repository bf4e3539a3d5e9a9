from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO


@dataclass
class _TimerEntry:
    name: str
    start: float
    end: float | None = None

    @property
    def elapsed(self) -> float:
        return (self.end or time.perf_counter()) - self.start


class RunLogger:
    """Run logger for the command line with three sinks.

    - console   : stderr, gated by ``min_level`` (stdout carries the dependencies)
    - info_file : INFO+, persisted
    - trace_file: every line, including pass-by-pass DEBUG dumps
    """

    LEVELS: dict[str, int] = {
        "TRACE": -1,
        "DEBUG":  0,
        "INFO":   1,
        "COUNT":  1,
        "WARN":   2,
        "ERROR":  3,
    }

    def __init__(
        self,
        log_file: str | Path | None = None,
        trace_file: str | Path | None = None,
        console: bool = True,
        min_level: str = "INFO",
        stream: TextIO | None = None,
    ) -> None:
        self.console = console
        self.min_level = self.LEVELS.get(min_level.upper(), 1)
        self._stream = stream
        self._info_file: TextIO | None = None
        self._trace_file: TextIO | None = None
        self.log_path: Path | None = None
        self.trace_path: Path | None = None
        self._timers: dict[str, _TimerEntry] = {}
        self._counts: dict[str, int] = {}
        self._start = time.perf_counter()

        if log_file:
            self.log_path = Path(log_file)
            self._info_file = self._open(self.log_path, "depcollapse log")
        if trace_file:
            self.trace_path = Path(trace_file)
            self._trace_file = self._open(self.trace_path, "depcollapse trace")

    @staticmethod
    def _open(path: Path, title: str) -> TextIO:
        path.parent.mkdir(parents=True, exist_ok=True)
        f = open(path, "w", encoding="utf-8", buffering=1)
        f.write(f"# {title}, {time.strftime('%Y-%m-%d %H:%M:%S')}\n\n")
        return f

    def _console(self, line: str) -> None:
        if self.console:
            print(line, file=self._stream or sys.stderr, flush=True)

    def _emit(self, level: str, msg: str) -> None:
        level_int = self.LEVELS.get(level, 1)
        elapsed = time.perf_counter() - self._start
        line = f"[{elapsed:7.2f}s] {level:5} | {msg}"

        if level_int >= self.min_level:
            self._console(line)
        if level_int >= 1 and self._info_file:
            self._info_file.write(line + "\n")
        if self._trace_file:
            self._trace_file.write(line + "\n")

    def debug(self, msg: str) -> None:
        self._emit("DEBUG", msg)

    def info(self, msg: str) -> None:
        self._emit("INFO", msg)

    def warn(self, msg: str) -> None:
        self._emit("WARN", msg)

    def error(self, msg: str) -> None:
        self._emit("ERROR", msg)

    def section(self, title: str) -> None:
        """Banner on the info sinks; the console only shows it at INFO or below."""
        sep = "=" * 60
        for line in (sep, f"  {title}", sep):
            if self.min_level <= 1:
                self._console(line)
            for f in (self._info_file, self._trace_file):
                if f:
                    f.write(line + "\n")

    def count(self, name: str, n: int = 1) -> None:
        self._counts[name] = self._counts.get(name, 0) + n

    @contextmanager
    def timer(self, name: str):
        entry = _TimerEntry(name=name, start=time.perf_counter())
        self._timers[name] = entry
        try:
            yield
        finally:
            entry.end = time.perf_counter()
            self._emit("DEBUG", f"timer:{name} = {entry.elapsed:.3f}s")

    def summary(self) -> None:
        self.section("RUN SUMMARY")
        self.info(f"Total wall time: {time.perf_counter() - self._start:.2f}s")
        for name, value in self._counts.items():
            self._emit("COUNT", f"{name} = {value}")
        for name, entry in self._timers.items():
            if entry.end:
                self.info(f"  {name:<30} {entry.elapsed:>8.3f}s")
        if self.log_path:
            self.info(f"Info log : {self.log_path}")
        if self.trace_path:
            self.info(f"Trace log: {self.trace_path}")

    def install_stdlib_bridge(self, root_logger: str = "depcollapse", level: int = logging.INFO) -> None:
        """Route records of the ``root_logger`` tree into this logger."""
        handler = _BridgeHandler(self)
        handler.setLevel(level)
        root = logging.getLogger(root_logger)
        root.setLevel(level)
        if not any(isinstance(h, _BridgeHandler) for h in root.handlers):
            root.addHandler(handler)

    def close(self) -> None:
        for f in (self._info_file, self._trace_file):
            if f:
                f.close()
        self._info_file = None
        self._trace_file = None

    def __enter__(self) -> "RunLogger":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


def remove_stdlib_bridge(root_logger: str = "depcollapse") -> None:
    root = logging.getLogger(root_logger)
    for handler in [h for h in root.handlers if isinstance(h, _BridgeHandler)]:
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)


class _BridgeHandler(logging.Handler):
    _MAP = {
        logging.DEBUG:    "debug",
        logging.INFO:     "info",
        logging.WARNING:  "warn",
        logging.ERROR:    "error",
        logging.CRITICAL: "error",
    }

    def __init__(self, logger: RunLogger) -> None:
        super().__init__()
        self._run = logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            getattr(self._run, self._MAP.get(record.levelno, "info"))(
                f"[{record.name}] {msg}"
            )
        except Exception:
            self.handleError(record)


def stdlib_level(level: str) -> int:
    """Stdlib logging level matching a ``RunLogger`` level name."""
    return {
        "TRACE": logging.DEBUG,
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
    }.get(level.upper(), logging.INFO)

