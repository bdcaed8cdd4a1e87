"""Event filters."""

from .base import FilterDecision, FilterSkeleton, decide_chain
from .level_range import LevelRangeFilter

__all__ = ["FilterDecision", "FilterSkeleton", "LevelRangeFilter", "decide_chain"]
