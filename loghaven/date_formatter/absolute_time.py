"""
Absolute time formatters.

Formatting the hours/minutes/seconds part of a timestamp is comparatively
expensive and, under load, many events share the same second. The
formatters here cache that part: one process-wide marker records the last
second formatted, and a table keyed by formatter class holds the string each
class produced for it. Crossing into a new second empties the table.
"""

import io
import threading
from datetime import date as date_type, datetime
from typing import ClassVar, Dict, Optional, TextIO

from loghaven.date_formatter.base import DateFormatter

_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class AbsoluteTimeDateFormatter(DateFormatter):
    """Formats a date as ``HH:mm:ss,fff``, e.g. ``15:49:37,459``."""

    _cache_lock: ClassVar[threading.Lock] = threading.Lock()
    _last_time_to_the_second: ClassVar[Optional[datetime]] = None
    _last_time_strings: ClassVar[Dict[type, str]] = {}

    def format_date_without_millis(self, date: datetime, buffer: TextIO) -> None:
        """
        Write everything except the milliseconds.

        Subclasses override this to prepend a date part. The result is cached
        per class for the current second, so it must depend only on the
        date truncated to the second.
        """
        buffer.write(f"{date.hour:02d}:{date.minute:02d}:{date.second:02d}")

    def format_date(self, date: datetime, writer: TextIO) -> None:
        cache = AbsoluteTimeDateFormatter
        current_second = date.replace(microsecond=0)

        with cache._cache_lock:
            time_string = None
            if cache._last_time_to_the_second != current_second:
                cache._last_time_strings.clear()
            else:
                time_string = cache._last_time_strings.get(type(self))

            if time_string is None:
                buffer = io.StringIO()
                self.format_date_without_millis(date, buffer)
                time_string = buffer.getvalue()
                cache._last_time_strings[type(self)] = time_string
                cache._last_time_to_the_second = current_second

        writer.write(time_string)
        writer.write(",")
        writer.write(f"{date.microsecond // 1000:03d}")

    @classmethod
    def clear_cache(cls) -> None:
        """Drop every cached string (primarily for testing)."""
        cache = AbsoluteTimeDateFormatter
        with cache._cache_lock:
            cache._last_time_strings.clear()
            cache._last_time_to_the_second = None


class _DayCachingFormatter(AbsoluteTimeDateFormatter):
    """Prepends a date part that is rebuilt only when the day changes."""

    def __init__(self):
        self._last_day: Optional[date_type] = None
        self._last_day_string: Optional[str] = None

    def format_day(self, day: date_type) -> str:
        raise NotImplementedError

    def format_date_without_millis(self, date: datetime, buffer: TextIO) -> None:
        # Called with the shared cache lock held
        day = date.date()
        if self._last_day != day or self._last_day_string is None:
            self._last_day_string = self.format_day(day)
            self._last_day = day
        buffer.write(self._last_day_string)
        super().format_date_without_millis(date, buffer)


class DateTimeDateFormatter(_DayCachingFormatter):
    """Formats a date as ``dd MMM yyyy HH:mm:ss,fff``, e.g. ``06 Nov 1994 15:49:37,459``.

    Month names are English abbreviations regardless of locale.
    """

    def format_day(self, day: date_type) -> str:
        return f"{day.day:02d} {_MONTH_ABBREVIATIONS[day.month - 1]} {day.year:04d} "


class Iso8601DateFormatter(_DayCachingFormatter):
    """Formats a date as ``yyyy-MM-dd HH:mm:ss,fff``, e.g. ``1994-11-06 15:49:37,459``."""

    def format_day(self, day: date_type) -> str:
        return f"{day.year:04d}-{day.month:02d}-{day.day:02d} "
