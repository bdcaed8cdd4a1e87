"""Default logger wrapper exposing level-named logging methods."""

from typing import Any, Optional

from loghaven.core.level import Level
from loghaven.models.interfaces import ILoggerWrapper
from loghaven.repository import Logger


class LogImpl(ILoggerWrapper):
    """
    Convenience facade over a Logger.

    Instances are produced and cached by a WrapperMap, one per logger, so all
    callers asking for the same logger share the same LogImpl.
    """

    def __init__(self, logger: Logger):
        self._logger = logger

    @property
    def logger(self) -> Logger:
        return self._logger

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, message: Any, exception: Optional[BaseException] = None) -> None:
        self._logger.log(Level.DEBUG, message, exception)

    def info(self, message: Any, exception: Optional[BaseException] = None) -> None:
        self._logger.log(Level.INFO, message, exception)

    def warn(self, message: Any, exception: Optional[BaseException] = None) -> None:
        self._logger.log(Level.WARN, message, exception)

    def error(self, message: Any, exception: Optional[BaseException] = None) -> None:
        self._logger.log(Level.ERROR, message, exception)

    def fatal(self, message: Any, exception: Optional[BaseException] = None) -> None:
        self._logger.log(Level.FATAL, message, exception)

    @property
    def is_debug_enabled(self) -> bool:
        return self._logger.is_enabled_for(Level.DEBUG)

    @property
    def is_info_enabled(self) -> bool:
        return self._logger.is_enabled_for(Level.INFO)

    @property
    def is_warn_enabled(self) -> bool:
        return self._logger.is_enabled_for(Level.WARN)

    @property
    def is_error_enabled(self) -> bool:
        return self._logger.is_enabled_for(Level.ERROR)

    @property
    def is_fatal_enabled(self) -> bool:
        return self._logger.is_enabled_for(Level.FATAL)

    def __repr__(self):
        return f"LogImpl({self._logger.name!r})"
