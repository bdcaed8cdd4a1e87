"""
Wrapper Map

Maps loggers to wrapper objects, creating each wrapper at most once per
logger. Wrappers are held per repository; when a repository shuts down all
of its wrappers are released together and the map stops listening to it.
"""

import threading
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from loghaven.exceptions import WrapperMapReentrancyError
from loghaven.infrastructure.logging.config import get_logger
from loghaven.repository import Logger, LoggerRepository

log = get_logger(__name__)

W = TypeVar("W")

WrapperCreationHandler = Callable[[Logger], W]


class WrapperMap(Generic[W]):
    """
    Thread-safe cache of one wrapper per logger, partitioned by repository.

    New wrappers are built by ``create_new_wrapper_object``, which delegates
    to the handler given to the constructor. Specialize construction either
    by passing a different handler or by overriding that method.

    A single non-reentrant lock guards every read and write, including the
    call to the creation handler. The handler must therefore not call back
    into the same map; doing so from the same thread raises
    ``WrapperMapReentrancyError``.
    """

    def __init__(self, create_wrapper_handler: WrapperCreationHandler):
        """
        Args:
            create_wrapper_handler: Called with a logger to build its wrapper
        """
        self._create_wrapper_handler = create_wrapper_handler
        self._lock = threading.Lock()
        self._owner: Optional[int] = None
        self._repositories: Dict[LoggerRepository, Dict[Logger, W]] = {}
        # Keep one handler object so unsubscribe matches the subscription
        self._shutdown_handler = self._on_repository_shutdown

    def get_wrapper(self, logger: Optional[Logger]) -> Optional[W]:
        """
        Get the wrapper for a logger, creating it on first request.

        Args:
            logger: Logger to look up; None is allowed

        Returns:
            The cached wrapper, or None if the logger or its repository is None

        Raises:
            WrapperMapReentrancyError: If called from inside the creation handler
        """
        if logger is None or logger.repository is None:
            return None

        repository = logger.repository
        with self._guard():
            wrappers = self._repositories.get(repository)
            if wrappers is None:
                wrappers = {}
                self._repositories[repository] = wrappers
                repository.subscribe_shutdown(self._shutdown_handler)
                log.debug("Registered for repository shutdown", repository=repository.name)

            if logger in wrappers:
                return wrappers[logger]

            wrapper = self.create_new_wrapper_object(logger)
            wrappers[logger] = wrapper
            return wrapper

    def create_new_wrapper_object(self, logger: Logger) -> W:
        """Build the wrapper for a logger. Override to customize construction."""
        return self._create_wrapper_handler(logger)

    def repository_shutdown(self, repository: LoggerRepository) -> None:
        """
        Release all wrappers held for a repository and stop listening to it.

        Unknown or already released repositories are ignored.
        """
        with self._guard():
            removed = self._repositories.pop(repository, None)
            repository.unsubscribe_shutdown(self._shutdown_handler)

        if removed is not None:
            log.debug(
                "Released wrappers for repository",
                repository=repository.name,
                wrappers=len(removed),
            )

    @property
    def repositories(self) -> List[LoggerRepository]:
        """Snapshot of the repositories currently holding wrappers."""
        with self._guard():
            return list(self._repositories)

    def wrapper_count(self, repository: LoggerRepository) -> int:
        with self._guard():
            return len(self._repositories.get(repository, ()))

    def _on_repository_shutdown(self, sender) -> None:
        if isinstance(sender, LoggerRepository):
            self.repository_shutdown(sender)
        else:
            log.warning("Ignoring shutdown from non-repository sender", sender=repr(sender))

    def _guard(self) -> "_OwnedLock":
        return _OwnedLock(self)


class _OwnedLock:
    """Acquires a map's lock, refusing re-entry from the owning thread."""

    __slots__ = ("_map",)

    def __init__(self, wrapper_map: WrapperMap):
        self._map = wrapper_map

    def __enter__(self):
        me = threading.get_ident()
        if self._map._owner == me:
            raise WrapperMapReentrancyError(
                "Wrapper creation handler must not call back into its WrapperMap",
                details={"thread": me},
            )
        self._map._lock.acquire()
        self._map._owner = me
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._map._owner = None
        self._map._lock.release()
        return False
