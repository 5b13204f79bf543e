"""Core logger set-up with console and rotating file sinks."""

from __future__ import annotations

import logging
import re
import sys
import time
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import ClassVar, Optional

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

OFF = logging.CRITICAL + 10

# Numeric severities 0..6: trace, debug, info, warning, error, critical, off.
_SEVERITIES = (
    TRACE,
    logging.DEBUG,
    logging.INFO,
    logging.WARNING,
    logging.ERROR,
    logging.CRITICAL,
    OFF,
)

_LEVEL_NAMES = {
    TRACE: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}

_COLORS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m\033[1m",
    logging.ERROR: "\033[31m\033[1m",
    logging.CRITICAL: "\033[1m\033[41m",
}
_RESET = "\033[m"

DEFAULT_PATTERN = "[%Y-%m-%d %H:%M:%S.%e] [%n] [%l] %v"
INIT_PATTERN = "%^[%T] [%t] [%l]: %v%$"
CORE_LOGGER_NAME = "CoreLogger"

_FLAG_RE = re.compile(r"%(.)", re.DOTALL)


def _to_logging_level(level: int) -> int:
    if not 0 <= level < len(_SEVERITIES):
        raise ValueError(f"log level must be between 0 and {len(_SEVERITIES) - 1}, got {level}")
    return _SEVERITIES[level]


class _PatternFormatter(logging.Formatter):
    """Formats records from a pattern of %-flags (%v message, %l level, %T time...)."""

    def __init__(self, pattern: str) -> None:
        super().__init__()
        self.pattern = pattern

    def render(self, record: logging.LogRecord, color: bool = False) -> str:
        created = time.localtime(record.created)
        level = _LEVEL_NAMES.get(record.levelno, record.levelname.lower())
        fields = {
            "v": record.getMessage(),
            "l": level,
            "L": level[:1].upper(),
            "n": record.name,
            "t": str(record.thread),
            "P": str(record.process),
            "T": time.strftime("%H:%M:%S", created),
            "Y": time.strftime("%Y", created),
            "m": time.strftime("%m", created),
            "d": time.strftime("%d", created),
            "H": time.strftime("%H", created),
            "M": time.strftime("%M", created),
            "S": time.strftime("%S", created),
            "e": f"{int(record.msecs):03d}",
            "%": "%",
        }
        color_code = _COLORS.get(record.levelno, "") if color else ""

        def substitute(match: re.Match) -> str:
            key = match.group(1)
            if key == "^":
                return color_code
            if key == "$":
                return _RESET if color_code else ""
            return fields.get(key, match.group(0))

        text = _FLAG_RE.sub(substitute, self.pattern)
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text

    def format(self, record: logging.LogRecord) -> str:
        return self.render(record)


class _ColorStreamHandler(logging.StreamHandler):
    """Stream handler that colours the marked range when writing to a terminal."""

    def __init__(self, stream=None) -> None:
        super().__init__(stream if stream is not None else sys.stdout)
        isatty = getattr(self.stream, "isatty", None)
        self._colored = bool(isatty and isatty())

    def format(self, record: logging.LogRecord) -> str:
        formatter = self.formatter
        if isinstance(formatter, _PatternFormatter):
            return formatter.render(record, color=self._colored)
        return super().format(record)


@dataclass
class RotatingFileSinkParams:
    """Settings for a rotating log file."""

    file_name: str
    max_size: int = 1024 * 1024
    max_files: int = 5
    rotate_on_open: bool = True


def _close_all(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.flush()
        logger.removeHandler(handler)
        handler.close()


class BaseLog:
    """Holds the shared core logger and builds the sinks it writes to."""

    _core_logger: ClassVar[Optional[logging.Logger]] = None

    @classmethod
    def init_core_logger(
        cls,
        console: bool,
        file: bool,
        level: int,
        params: Optional[RotatingFileSinkParams],
        pattern: Optional[str],
    ) -> logging.Logger:
        """Create the core logger with the chosen sinks, level and pattern."""
        severity = _to_logging_level(level)
        if file and params is None:
            raise ValueError("file logging needs RotatingFileSinkParams")
        logger = logging.getLogger(CORE_LOGGER_NAME)
        _close_all(logger)
        logger.propagate = False
        if console:
            logger.addHandler(cls.console_sink())
        if file:
            logger.addHandler(cls.rotating_file_sink(params))
        if pattern is not None:
            for handler in logger.handlers:
                handler.setFormatter(_PatternFormatter(pattern))
        logger.setLevel(severity)
        cls._core_logger = logger
        return logger

    @classmethod
    def get_core_logger(cls) -> Optional[logging.Logger]:
        """Return the core logger, or None before it is initialised."""
        return cls._core_logger

    @classmethod
    def init(cls) -> logging.Logger:
        """Initialise a console-only core logger that logs every level."""
        return cls.init_core_logger(True, False, 0, RotatingFileSinkParams(""), INIT_PATTERN)

    @classmethod
    def shut_down(cls) -> None:
        """Flush and close every sink of the core logger."""
        if cls._core_logger is not None:
            _close_all(cls._core_logger)

    @classmethod
    def set_logger_file(
        cls,
        logger: logging.Logger,
        params: RotatingFileSinkParams,
        pattern: Optional[str] = None,
    ) -> None:
        """Replace the logger's last sink with a new rotating file sink."""
        if logger is None:
            raise ValueError("a logger is required")
        if logger.handlers:
            last = logger.handlers[-1]
            last.flush()
            logger.removeHandler(last)
            last.close()
        sink = cls.rotating_file_sink(params)
        if pattern is not None:
            sink.setFormatter(_PatternFormatter(pattern))
        logger.addHandler(sink)

    @classmethod
    def console_sink(cls) -> logging.Handler:
        """Create a standard-output sink with level colours on terminals."""
        handler = _ColorStreamHandler(sys.stdout)
        handler.setFormatter(_PatternFormatter(DEFAULT_PATTERN))
        return handler

    @classmethod
    def rotating_file_sink(cls, params: RotatingFileSinkParams) -> logging.Handler:
        """Create a size-rotating file sink."""
        if not params.file_name:
            raise ValueError("a log file name is required")
        path = Path(params.file_name)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=params.max_size,
            backupCount=params.max_files,
            encoding="utf-8",
        )
        if params.rotate_on_open and path.stat().st_size > 0:
            handler.doRollover()
        handler.setFormatter(_PatternFormatter(DEFAULT_PATTERN))
        return handler

    @classmethod
    def basic_file_sink(cls, file_name: str) -> logging.Handler:
        """Create a sink appending to a single file."""
        if not file_name:
            raise ValueError("a log file name is required")
        path = Path(file_name)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        handler.setFormatter(_PatternFormatter(DEFAULT_PATTERN))
        return handler