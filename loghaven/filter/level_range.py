"""Level range filter."""

from typing import Optional

from loghaven.core.level import Level
from loghaven.core.logging_event import LoggingEvent
from loghaven.filter.base import FilterDecision, FilterSkeleton


class LevelRangeFilter(FilterSkeleton):
    """
    Filter on an inclusive range of levels.

    Events whose level lies below ``level_min`` or above ``level_max`` are
    denied. Events inside the range are accepted when ``accept_on_match`` is
    set, otherwise the filter stays neutral and lets the rest of the chain
    decide. An unset bound, or an event without a level, skips that check.

    Attributes:
        level_min: Lowest matched level, or None for no lower bound
        level_max: Highest matched level, or None for no upper bound
        accept_on_match: ACCEPT (True, default) or NEUTRAL (False) on a match
    """

    def __init__(
        self,
        level_min: Optional[Level] = None,
        level_max: Optional[Level] = None,
        accept_on_match: bool = True,
    ):
        super().__init__()
        self.level_min = level_min
        self.level_max = level_max
        self.accept_on_match = accept_on_match

    def decide(self, logging_event: LoggingEvent) -> FilterDecision:
        if logging_event is None:
            raise ValueError("logging_event must not be None")

        level = logging_event.level
        if self.level_min is not None and level is not None and level < self.level_min:
            return FilterDecision.DENY

        if self.level_max is not None and level is not None and level > self.level_max:
            return FilterDecision.DENY

        return FilterDecision.ACCEPT if self.accept_on_match else FilterDecision.NEUTRAL
