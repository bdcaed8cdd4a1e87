"""
Log Manager

Entry point for application code. Resolves a repository, fetches a named
logger from it and hands back the logger's cached LogImpl wrapper.
"""

import threading
from typing import List, Optional

from loghaven.config.settings import get_settings
from loghaven.core.level import Level
from loghaven.core.log_impl import LogImpl
from loghaven.core.wrapper_map import WrapperMap
from loghaven.infrastructure.logging.config import get_logger as get_internal_logger
from loghaven.repository import Logger, LoggerRepository

log = get_internal_logger(__name__)

_wrapper_map: WrapperMap[LogImpl] = WrapperMap(LogImpl)
_default_repository: Optional[LoggerRepository] = None
_repository_lock = threading.Lock()


def get_repository() -> LoggerRepository:
    """Return the default repository, creating it from settings on first use."""
    global _default_repository
    with _repository_lock:
        if _default_repository is None:
            settings = get_settings().repository
            _default_repository = LoggerRepository(
                name=settings.default_repository_name,
                threshold=Level.from_name(settings.default_threshold),
            )
            log.debug("Default repository created", repository=_default_repository.name)
        return _default_repository


def get_logger(name: str, repository: Optional[LoggerRepository] = None) -> LogImpl:
    """
    Get the wrapper for a named logger.

    Args:
        name: Logger name
        repository: Repository to use; defaults to the default repository

    Returns:
        The same LogImpl for every call with this name until the repository shuts down
    """
    repository = repository or get_repository()
    return _wrapper_map.get_wrapper(repository.get_logger(name))


def wrap_logger(logger: Optional[Logger]) -> Optional[LogImpl]:
    """Get the cached wrapper for an existing logger; None for detached loggers."""
    return _wrapper_map.get_wrapper(logger)


def get_current_loggers(repository: Optional[LoggerRepository] = None) -> List[LogImpl]:
    repository = repository or get_repository()
    return [_wrapper_map.get_wrapper(logger) for logger in repository.current_loggers]


def shutdown(repository: Optional[LoggerRepository] = None) -> None:
    """Shut down a repository, releasing its cached wrappers."""
    (repository or get_repository()).shutdown()


def reset_default_repository() -> None:
    """Shut down and forget the default repository (primarily for testing)."""
    global _default_repository
    with _repository_lock:
        repository, _default_repository = _default_repository, None
    if repository is not None:
        repository.shutdown()
