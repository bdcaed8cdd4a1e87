"""Logging event passed from loggers through filters to appenders."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional

from loghaven.core.level import Level

if TYPE_CHECKING:
    from loghaven.repository import LoggerRepository


@dataclass
class LoggingEvent:
    """
    A single log request.

    Attributes:
        logger_name: Name of the logger that created the event
        level: Severity of the event; may be None for events built by hand
        message: Rendered message object
        timestamp: Local time the event was created
        exception: Exception attached to the request, if any
        repository: Repository the event was dispatched through
        properties: Extra key/value pairs for appenders
    """
    logger_name: str
    level: Optional[Level]
    message: Any
    timestamp: datetime = field(default_factory=datetime.now)
    exception: Optional[BaseException] = None
    repository: Optional["LoggerRepository"] = None
    properties: Dict[str, Any] = field(default_factory=dict)

    @property
    def rendered_message(self) -> str:
        return "" if self.message is None else str(self.message)
