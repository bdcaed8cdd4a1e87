"""Timestamp formatters."""

from .absolute_time import AbsoluteTimeDateFormatter, DateTimeDateFormatter, Iso8601DateFormatter
from .base import DateFormatter, SimpleDateFormatter

_NAMED_FORMATTERS = {
    "ABSOLUTE": AbsoluteTimeDateFormatter,
    "DATE": DateTimeDateFormatter,
    "ISO8601": Iso8601DateFormatter,
}


def create_date_formatter(name: str) -> DateFormatter:
    """
    Build a formatter from a configured name.

    ``ABSOLUTE``, ``DATE`` and ``ISO8601`` (any case) select the caching
    formatters; any other value is used as a ``strftime`` pattern.
    """
    formatter_class = _NAMED_FORMATTERS.get(name.strip().upper()) if name else None
    if formatter_class is not None:
        return formatter_class()
    return SimpleDateFormatter(name)


__all__ = [
    "AbsoluteTimeDateFormatter",
    "DateFormatter",
    "DateTimeDateFormatter",
    "Iso8601DateFormatter",
    "SimpleDateFormatter",
    "create_date_formatter",
]
