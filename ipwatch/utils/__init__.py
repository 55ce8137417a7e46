"""ipwatch utilities - logging and environment helpers."""

from ipwatch.utils.env import get_env
from ipwatch.utils.logger import Logger, LoggerNotConfiguredError, LogLevel

__all__ = [
    "LogLevel",
    "Logger",
    "LoggerNotConfiguredError",
    "get_env",
]
