"""Logger repositories and the loggers they own."""

from .hierarchy import Logger, LoggerRepository, ShutdownHandler

__all__ = ["Logger", "LoggerRepository", "ShutdownHandler"]
