# File: loghaven/models/interfaces.py
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loghaven.core.logging_event import LoggingEvent
    from loghaven.repository import Logger


class IAppender(ABC):
    """Abstract base class for event destinations.

    Appenders receive every event a repository decides to deliver. The
    repository calls ``close`` when it shuts down.
    """

    @abstractmethod
    def do_append(self, logging_event: "LoggingEvent") -> None:
        """Write one event to the destination.

        Args:
            logging_event: Event that passed the repository filter chain
        """
        pass

    def close(self) -> None:
        """Release any resources held by the appender."""
        pass


class ILoggerWrapper(ABC):
    """Abstract base class for objects built around a single logger.

    Wrappers are produced once per logger by a ``WrapperMap`` and reused for
    every later lookup, so implementations should not hold per-call state.
    """

    @property
    @abstractmethod
    def logger(self) -> "Logger":
        """The wrapped logger."""
        pass
