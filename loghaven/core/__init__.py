"""Core logging types.

The wrapper cache and default wrapper live in ``loghaven.core.wrapper_map``
and ``loghaven.core.log_impl``; they depend on ``loghaven.repository`` and
are imported from there directly.
"""

from .level import Level
from .logging_event import LoggingEvent

__all__ = ["Level", "LoggingEvent"]
