"""
Built-in appenders.

MemoryAppender keeps events in a list; TextWriterAppender renders each
event as a single line of text onto any writable stream.
"""

import threading
from typing import List, Optional, TextIO

from loghaven.config.settings import get_settings
from loghaven.core.logging_event import LoggingEvent
from loghaven.date_formatter import DateFormatter, create_date_formatter
from loghaven.models.interfaces import IAppender


class MemoryAppender(IAppender):
    """Stores delivered events in memory."""

    def __init__(self):
        self._lock = threading.Lock()
        self._events: List[LoggingEvent] = []
        self.closed = False

    def do_append(self, logging_event: LoggingEvent) -> None:
        with self._lock:
            self._events.append(logging_event)

    @property
    def events(self) -> List[LoggingEvent]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def close(self) -> None:
        self.closed = True


class TextWriterAppender(IAppender):
    """
    Writes ``<timestamp> [<LEVEL>] <logger> - <message>`` lines.

    The timestamp formatter defaults to the configured ``date_format``.
    Attached exceptions are written on the following line as
    ``<ExceptionType>: <message>``.
    """

    def __init__(self, writer: TextIO, date_formatter: Optional[DateFormatter] = None):
        self.writer = writer
        self.date_formatter = date_formatter or create_date_formatter(
            get_settings().date_format.date_format
        )
        self._lock = threading.Lock()

    def do_append(self, logging_event: LoggingEvent) -> None:
        level = logging_event.level.display_name if logging_event.level is not None else "-"
        with self._lock:
            self.date_formatter.format_date(logging_event.timestamp, self.writer)
            self.writer.write(
                f" [{level}] {logging_event.logger_name} - {logging_event.rendered_message}\n"
            )
            if logging_event.exception is not None:
                exc = logging_event.exception
                self.writer.write(f"{type(exc).__name__}: {exc}\n")

    def close(self) -> None:
        flush = getattr(self.writer, "flush", None)
        if flush is not None:
            flush()
