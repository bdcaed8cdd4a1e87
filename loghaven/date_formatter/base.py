"""Date formatter interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import TextIO


class DateFormatter(ABC):
    """Renders a timestamp onto a text writer."""

    @abstractmethod
    def format_date(self, date: datetime, writer: TextIO) -> None:
        """Write the formatted date to ``writer``."""


class SimpleDateFormatter(DateFormatter):
    """Formats dates with a ``strftime`` pattern. No caching."""

    def __init__(self, format_string: str):
        if not format_string:
            raise ValueError("format_string must not be empty")
        self.format_string = format_string

    def format_date(self, date: datetime, writer: TextIO) -> None:
        writer.write(date.strftime(self.format_string))
