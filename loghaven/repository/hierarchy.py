"""
Logger Repository

A repository owns a set of named loggers together with the filter chain and
appenders their events are delivered to. Other components that keep state
per repository (such as the wrapper map) subscribe to its shutdown
notification and drop that state when it fires.
"""

import itertools
import threading
from typing import Callable, Dict, List, Optional

from loghaven.core.level import Level
from loghaven.core.logging_event import LoggingEvent
from loghaven.filter.base import FilterDecision, FilterSkeleton, decide_chain
from loghaven.infrastructure.logging.config import get_logger
from loghaven.models.interfaces import IAppender

log = get_logger(__name__)

ShutdownHandler = Callable[["LoggerRepository"], None]

_repository_ids = itertools.count(1)


class Logger:
    """
    A named logging source bound to one repository.

    Loggers hash and compare by identity. A logger created without a
    repository is detached: it is never enabled and is ignored by the
    wrapper map.
    """

    def __init__(self, name: str, repository: Optional["LoggerRepository"] = None):
        if not name:
            raise ValueError("Logger name must not be empty")
        self.name = name
        self.repository = repository
        self.level: Optional[Level] = None

    @property
    def effective_level(self) -> Level:
        return self.level if self.level is not None else Level.ALL

    def is_enabled_for(self, level: Level) -> bool:
        if self.repository is None or self.repository.is_disabled(level):
            return False
        return level >= self.effective_level

    def log(self, level: Level, message, exception: Optional[BaseException] = None) -> None:
        """Create an event and dispatch it through the repository if enabled."""
        if not self.is_enabled_for(level):
            return
        self.repository.dispatch(
            LoggingEvent(
                logger_name=self.name,
                level=level,
                message=message,
                exception=exception,
                repository=self.repository,
            )
        )

    def __repr__(self):
        return f"Logger({self.name!r})"


class LoggerRepository:
    """
    Logging configuration domain.

    Attributes:
        name: Repository name, generated when not supplied
        threshold: Events below this level are discarded for every logger
        configured: True until the repository is shut down
    """

    def __init__(self, name: Optional[str] = None, threshold: Level = Level.ALL):
        self.name = name or f"repository-{next(_repository_ids)}"
        self.threshold = threshold
        self.configured = True
        self._lock = threading.Lock()
        self._loggers: Dict[str, Logger] = {}
        self._appenders: List[IAppender] = []
        self._filter_head: Optional[FilterSkeleton] = None
        self._filter_tail: Optional[FilterSkeleton] = None
        self._shutdown_handlers: List[ShutdownHandler] = []

    # -- loggers -------------------------------------------------------------

    def get_logger(self, name: str) -> Logger:
        """Return the logger with this name, creating it on first request."""
        if not name:
            raise ValueError("Logger name must not be empty")
        with self._lock:
            existing = self._loggers.get(name)
            if existing is None:
                existing = Logger(name, self)
                self._loggers[name] = existing
            return existing

    def exists(self, name: str) -> Optional[Logger]:
        with self._lock:
            return self._loggers.get(name)

    @property
    def current_loggers(self) -> List[Logger]:
        with self._lock:
            return list(self._loggers.values())

    def is_disabled(self, level: Level) -> bool:
        return level < self.threshold

    # -- filters and appenders ------------------------------------------------

    def add_filter(self, event_filter: FilterSkeleton) -> None:
        """Append a filter to the end of the chain."""
        event_filter.activate_options()
        with self._lock:
            if self._filter_head is None:
                self._filter_head = event_filter
            else:
                self._filter_tail.next = event_filter
            self._filter_tail = event_filter

    def clear_filters(self) -> None:
        with self._lock:
            self._filter_head = self._filter_tail = None

    @property
    def filter_head(self) -> Optional[FilterSkeleton]:
        return self._filter_head

    def add_appender(self, appender: IAppender) -> None:
        with self._lock:
            if appender not in self._appenders:
                self._appenders.append(appender)

    @property
    def appenders(self) -> List[IAppender]:
        with self._lock:
            return list(self._appenders)

    def dispatch(self, logging_event: LoggingEvent) -> bool:
        """
        Deliver an event to the appenders unless the filter chain denies it.

        Returns:
            True if the event was delivered
        """
        if decide_chain(self._filter_head, logging_event) == FilterDecision.DENY:
            return False
        for appender in self.appenders:
            appender.do_append(logging_event)
        return True

    # -- shutdown notification ------------------------------------------------

    def subscribe_shutdown(self, handler: ShutdownHandler) -> None:
        """Register a handler called with this repository on shutdown."""
        with self._lock:
            if handler not in self._shutdown_handlers:
                self._shutdown_handlers.append(handler)

    def unsubscribe_shutdown(self, handler: ShutdownHandler) -> None:
        with self._lock:
            if handler in self._shutdown_handlers:
                self._shutdown_handlers.remove(handler)

    @property
    def shutdown_subscriber_count(self) -> int:
        with self._lock:
            return len(self._shutdown_handlers)

    def shutdown(self) -> None:
        """
        Notify subscribers, then close and detach all appenders.

        Handlers run outside the repository lock and may unsubscribe
        themselves. A failing handler is reported and does not prevent the
        remaining handlers from running.
        """
        with self._lock:
            handlers = list(self._shutdown_handlers)
            appenders = list(self._appenders)
            self._appenders.clear()
            self.configured = False

        log.debug("Repository shutting down", repository=self.name, subscribers=len(handlers))

        for handler in handlers:
            try:
                handler(self)
            except Exception:
                log.exception("Shutdown handler failed", repository=self.name, handler=repr(handler))

        for appender in appenders:
            appender.close()

    def __repr__(self):
        return f"LoggerRepository({self.name!r})"
