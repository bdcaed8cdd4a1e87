"""Custom exceptions for LogHaven."""

from typing import Any, Dict, Optional


class LogHavenException(Exception):
    """Base exception for all LogHaven errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationException(LogHavenException):
    """Raised when configuration is invalid."""
    pass


class WrapperMapReentrancyError(LogHavenException):
    """Raised when a wrapper factory calls back into the map that invoked it.

    The wrapper map holds a non-reentrant lock while the factory runs, so a
    nested lookup from the same thread would otherwise deadlock.
    """
    pass
