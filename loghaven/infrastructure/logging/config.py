"""
LogHaven Internal Logging Configuration

Provides the diagnostic logger LogHaven uses to report on itself (repository
registration, shutdown handling, handler failures) using structlog with
console or JSON rendering.

LogHaven is a library, so the processor chain is bound to its own loggers
with ``structlog.wrap_logger`` instead of replacing the application's global
structlog configuration.
"""

import logging
import sys
import threading
from typing import Any, Dict, List, Optional, Tuple

import structlog

from loghaven.config.settings import InternalLogLevel, LogHavenSettings, get_settings

INTERNAL_LOGGER_NAMESPACE = "loghaven"


class InternalLogConfig:
    """
    Structlog configuration for LogHaven's own diagnostics.

    The processor chain filters by level, adds logger name, level and an ISO
    timestamp, renders exceptions and stamps every entry with the emitting
    component before handing it to a JSON or console renderer.
    """

    def __init__(self, settings: Optional[LogHavenSettings] = None):
        """Initialize the logger configuration."""
        self.settings = settings or get_settings()
        self.processors: List[Any] = []
        self.configure_structlog()

    def configure_structlog(self) -> None:
        """
        Build the processor chain and prepare the stdlib namespace logger.

        Quiet mode raises the namespace threshold to CRITICAL so that only
        unrecoverable problems are reported.
        """
        internal = self.settings.internal_logging

        namespace_logger = logging.getLogger(INTERNAL_LOGGER_NAMESPACE)
        if not any(getattr(h, "_loghaven_internal", False) for h in namespace_logger.handlers):
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter("%(message)s"))
            handler._loghaven_internal = True
            namespace_logger.addHandler(handler)
        namespace_logger.propagate = False

        if internal.quiet_mode:
            namespace_logger.setLevel(logging.CRITICAL)
        else:
            level = InternalLogLevel(internal.internal_level).value
            namespace_logger.setLevel(getattr(logging, level))

        self.processors = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            self.add_component,
        ]
        if internal.internal_json:
            self.processors += [
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        else:
            # ConsoleRenderer renders exc_info itself
            self.processors.append(
                structlog.dev.ConsoleRenderer(
                    colors=False,
                    exception_formatter=structlog.dev.plain_traceback,
                )
            )

    def wrap(self, name: str) -> structlog.stdlib.BoundLogger:
        """Bind the processor chain to the stdlib logger ``name``."""
        return structlog.wrap_logger(
            logging.getLogger(name),
            processors=self.processors,
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
        )

    @staticmethod
    def add_component(logger, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Tag entries with the LogHaven subsystem that produced them.

        The component is the second segment of the logger name, e.g.
        ``loghaven.core.wrapper_map`` yields ``core``.

        Args:
            logger: Logger instance
            method_name: Log method name
            event_dict: Event dictionary to process

        Returns:
            Event dictionary with a ``component`` field
        """
        if "component" not in event_dict:
            name = event_dict.get("logger") or ""
            parts = name.split(".")
            event_dict["component"] = parts[1] if len(parts) > 1 else INTERNAL_LOGGER_NAMESPACE
        return event_dict


_logger_config: Optional[InternalLogConfig] = None
_config_lock = threading.Lock()


def get_log_config() -> InternalLogConfig:
    """Return the active configuration, building it from settings on first use."""
    global _logger_config
    if _logger_config is None:
        with _config_lock:
            if _logger_config is None:
                _logger_config = InternalLogConfig()
    return _logger_config


class InternalLogger:
    """
    Lazy handle on an internal diagnostic logger.

    Nothing is configured until the first log call. The bound logger is
    rebuilt whenever the active configuration changes, so modules can hold a
    handle at import time and still follow ``reset_logging()``.
    """

    __slots__ = ("_name", "_cache")

    def __init__(self, name: str):
        self._name = name
        self._cache: Optional[Tuple[InternalLogConfig, structlog.stdlib.BoundLogger]] = None

    def resolve(self) -> structlog.stdlib.BoundLogger:
        """Return the logger bound to the active configuration."""
        config = get_log_config()
        cache = self._cache
        if cache is None or cache[0] is not config:
            cache = (config, config.wrap(self._name))
            self._cache = cache
        return cache[1]

    def __getattr__(self, attr: str) -> Any:
        return getattr(self.resolve(), attr)

    def __repr__(self):
        return f"InternalLogger({self._name!r})"


def get_logger(name: str) -> InternalLogger:
    """
    Get the internal diagnostic logger for a LogHaven module.

    Safe to call at import time; settings are read on the first log call.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Repository registered", repository="default")
    """
    return InternalLogger(name)


def reset_logging() -> None:
    """Forget the active configuration (primarily for testing)."""
    global _logger_config
    with _config_lock:
        _logger_config = None
