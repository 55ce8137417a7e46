"""Centralized logging for ipwatch.

The watcher has no error channel besides its log: enumeration, address,
serialization, write and notification failures are all reported here and
then skipped. Every record therefore carries a date, a microsecond
timestamp and the ``[filename:lineno]`` of the call, so a single line is
enough to tell which stage of which polling iteration went wrong.

The level comes from ``IPWATCH_LOG_LEVEL`` at CLI startup and is raised to
DEBUG by ``--verbose``; DEBUG adds the per-iteration "interfaces unchanged"
lines and the resolved configuration.

Usage:
    from ipwatch.utils.logger import Logger

    Logger.configure(level="INFO")
    log = Logger.get("watcher")
    log.info("ip lookup success")
"""

import logging
import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TextIO

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [%(filename)s:%(lineno)d] %(message)s"


class LogLevel(Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Convert to Python logging level."""
        level: int = getattr(logging, self.value)
        return level


class LoggerNotConfiguredError(Exception):
    """Raised when trying to use Logger before calling Logger.configure()."""

    def __init__(self) -> None:
        super().__init__(
            "Logger not configured. Call Logger.configure() at application startup."
        )


class MicrosecondFormatter(logging.Formatter):
    """Formatter rendering ``asctime`` as ``YYYY/MM/DD HH:MM:SS.ffffff``."""

    def formatTime(  # noqa: N802 - logging.Formatter API
        self, record: logging.LogRecord, datefmt: str | None = None
    ) -> str:
        stamp = datetime.fromtimestamp(record.created)
        return stamp.strftime(datefmt or "%Y/%m/%d %H:%M:%S.%f")


def _make_handler(output: str | Path | TextIO | None) -> logging.Handler:
    if output is None:
        return logging.StreamHandler(sys.stdout)
    if output == "stderr":
        return logging.StreamHandler(sys.stderr)
    if isinstance(output, str | Path):
        return logging.FileHandler(str(output))
    if hasattr(output, "write"):
        return logging.StreamHandler(output)
    raise ValueError(f"Invalid output: {type(output)}")


class Logger:
    """Centralized logging for ipwatch.

    Must be configured once before use. Attempting to log before configuration
    raises LoggerNotConfiguredError.
    """

    _configured: bool = False
    _root_name: str = "ipwatch"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "INFO",
        output: str | Path | TextIO | None = None,
        format_string: str | None = None,
    ) -> None:
        """Configure the "ipwatch" logger. Must be called before any logging.

        The CLI calls this once per process before the watcher is built.
        Calling it again replaces the previous handler.

        Args:
            level: Log level name or a LogLevel enum value.
            output: Where to send logs:
                - None: stdout (default)
                - "stderr": sys.stderr
                - str/Path: File path
                - TextIO: Any file-like object
            format_string: Custom format string (overrides DEFAULT_FORMAT).
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())

        for existing_handler in logger.handlers[:]:
            logger.removeHandler(existing_handler)
            existing_handler.close()

        new_handler = _make_handler(output)
        new_handler.setLevel(level.to_logging_level())
        new_handler.setFormatter(MicrosecondFormatter(format_string or DEFAULT_FORMAT))
        logger.addHandler(new_handler)
        logger.propagate = False

        cls._configured = True

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name (appended to "ipwatch."). If None, returns the
                package root logger.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def set_level(cls, level: str | LogLevel) -> None:
        """Change log level without reconfiguring.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())
        for handler in logger.handlers:
            handler.setLevel(level.to_logging_level())

    @classmethod
    def is_configured(cls) -> bool:
        """Check if logger has been configured."""
        return cls._configured
