"""
LogHaven

Leveled logging with repository-scoped loggers, filter chains, appenders
and a per-repository cache of logger wrappers that is released when the
repository shuts down.
"""

from loghaven.core.level import Level
from loghaven.core.logging_event import LoggingEvent
from loghaven.repository import Logger, LoggerRepository
from loghaven.core.wrapper_map import WrapperMap
from loghaven.core.log_impl import LogImpl
from loghaven.filter import FilterDecision, FilterSkeleton, LevelRangeFilter
from loghaven.appender import MemoryAppender, TextWriterAppender
from loghaven.log_manager import get_logger, get_repository, shutdown

__version__ = "1.0.0"

__all__ = [
    "FilterDecision",
    "FilterSkeleton",
    "Level",
    "LevelRangeFilter",
    "LogImpl",
    "Logger",
    "LoggerRepository",
    "LoggingEvent",
    "MemoryAppender",
    "TextWriterAppender",
    "WrapperMap",
    "get_logger",
    "get_repository",
    "shutdown",
]
