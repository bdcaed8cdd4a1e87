"""
Test module for loghaven.filter.level_range
"""

import pytest

from loghaven.core.level import Level
from loghaven.filter import FilterDecision, LevelRangeFilter, decide_chain
from loghaven.filter.base import FilterSkeleton


class TestLevelRangeFilter:
    """Test cases for LevelRangeFilter decisions."""

    def setup_method(self):
        self.filter = LevelRangeFilter(level_min=Level.INFO, level_max=Level.ERROR)

    @pytest.mark.parametrize("level", [Level.INFO, Level.WARN, Level.ERROR])
    def test_inside_range_accepts(self, make_event, level):
        assert self.filter.decide(make_event(level)) == FilterDecision.ACCEPT

    @pytest.mark.parametrize("level", [Level.DEBUG, Level.FATAL])
    def test_outside_range_denies(self, make_event, level):
        assert self.filter.decide(make_event(level)) == FilterDecision.DENY

    def test_bounds_compare_by_value(self, make_event):
        """Custom levels sharing a bound's value are inside the range."""
        custom_error = Level(Level.ERROR.value, "CUSTOM_ERROR")
        custom_info = Level(Level.INFO.value, "CUSTOM_INFO")

        assert self.filter.decide(make_event(custom_error)) == FilterDecision.ACCEPT
        assert self.filter.decide(make_event(custom_info)) == FilterDecision.ACCEPT

    def test_match_is_neutral_without_accept_on_match(self, make_event):
        self.filter.accept_on_match = False

        assert self.filter.decide(make_event(Level.WARN)) == FilterDecision.NEUTRAL
        assert self.filter.decide(make_event(Level.DEBUG)) == FilterDecision.DENY

    def test_unset_bounds_match_everything(self, make_event):
        open_filter = LevelRangeFilter()

        assert open_filter.decide(make_event(Level.ALL)) == FilterDecision.ACCEPT
        assert open_filter.decide(make_event(Level.OFF)) == FilterDecision.ACCEPT

    def test_single_bound(self, make_event):
        min_only = LevelRangeFilter(level_min=Level.WARN)

        assert min_only.decide(make_event(Level.INFO)) == FilterDecision.DENY
        assert min_only.decide(make_event(Level.EMERGENCY)) == FilterDecision.ACCEPT

    def test_event_without_level_skips_bounds(self, make_event):
        assert self.filter.decide(make_event(None)) == FilterDecision.ACCEPT

    def test_none_event_raises(self):
        with pytest.raises(ValueError):
            self.filter.decide(None)


class _Fixed(FilterSkeleton):
    def __init__(self, decision):
        super().__init__()
        self.decision = decision
        self.calls = 0

    def decide(self, logging_event):
        self.calls += 1
        return self.decision


class TestFilterChain:
    """Test cases for chained filter evaluation."""

    def test_empty_chain_is_neutral(self, make_event):
        assert decide_chain(None, make_event()) == FilterDecision.NEUTRAL

    def test_first_non_neutral_wins(self, make_event):
        first = _Fixed(FilterDecision.NEUTRAL)
        second = _Fixed(FilterDecision.DENY)
        third = _Fixed(FilterDecision.ACCEPT)
        first.next = second
        second.next = third

        assert decide_chain(first, make_event()) == FilterDecision.DENY
        assert third.calls == 0

    def test_neutral_range_falls_through(self, make_event):
        range_filter = LevelRangeFilter(level_min=Level.INFO, accept_on_match=False)
        range_filter.next = _Fixed(FilterDecision.ACCEPT)

        assert decide_chain(range_filter, make_event(Level.WARN)) == FilterDecision.ACCEPT
        assert decide_chain(range_filter, make_event(Level.DEBUG)) == FilterDecision.DENY
