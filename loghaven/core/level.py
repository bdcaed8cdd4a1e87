"""Logging levels.

A level is a named integer. Levels compare by value only, so user defined
levels slot into the standard ordering without registration.
"""

from typing import Dict, Optional


class Level:
    """Immutable named severity."""

    __slots__ = ("_value", "_name", "_display_name")

    def __init__(self, value: int, name: str, display_name: Optional[str] = None):
        if not name:
            raise ValueError("Level name must not be empty")
        self._value = int(value)
        self._name = name
        self._display_name = display_name or name

    @property
    def value(self) -> int:
        return self._value

    @property
    def name(self) -> str:
        return self._name

    @property
    def display_name(self) -> str:
        return self._display_name

    def __eq__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self._value == other._value and self._name == other._name

    def __lt__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self):
        return hash((self._value, self._name))

    def __repr__(self):
        return f"Level({self._value}, {self._name!r})"

    def __str__(self):
        return self._name

    @classmethod
    def from_name(cls, name: str) -> "Level":
        """Look up a standard level by name, case-insensitively."""
        level = _STANDARD_LEVELS.get(name.strip().upper()) if name else None
        if level is None:
            raise ValueError(f"Unknown level name '{name}'")
        return level


Level.OFF = Level(2**31 - 1, "OFF")
Level.EMERGENCY = Level(120000, "EMERGENCY")
Level.FATAL = Level(110000, "FATAL")
Level.ALERT = Level(100000, "ALERT")
Level.CRITICAL = Level(90000, "CRITICAL")
Level.SEVERE = Level(80000, "SEVERE")
Level.ERROR = Level(70000, "ERROR")
Level.WARN = Level(60000, "WARN")
Level.NOTICE = Level(50000, "NOTICE")
Level.INFO = Level(40000, "INFO")
Level.DEBUG = Level(30000, "DEBUG")
Level.TRACE = Level(20000, "TRACE")
Level.VERBOSE = Level(10000, "VERBOSE")
Level.ALL = Level(-2**31, "ALL")

_STANDARD_LEVELS: Dict[str, Level] = {
    level.name: level
    for level in (
        Level.OFF, Level.EMERGENCY, Level.FATAL, Level.ALERT, Level.CRITICAL,
        Level.SEVERE, Level.ERROR, Level.WARN, Level.NOTICE, Level.INFO,
        Level.DEBUG, Level.TRACE, Level.VERBOSE, Level.ALL,
    )
}
_STANDARD_LEVELS["WARNING"] = Level.WARN
