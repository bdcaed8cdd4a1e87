"""
Filter base types.

Filters form a singly linked chain. Each filter inspects an event and returns
a FilterDecision; the first non-neutral decision in the chain wins.
"""

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Optional

from loghaven.core.logging_event import LoggingEvent


class FilterDecision(IntEnum):
    """Outcome of a filter for one event."""
    DENY = -1
    NEUTRAL = 0
    ACCEPT = 1


class FilterSkeleton(ABC):
    """Base class for filters with chain linkage."""

    def __init__(self):
        self.next: Optional["FilterSkeleton"] = None

    def activate_options(self) -> None:
        """Hook for filters that derive state from their configured options."""

    @abstractmethod
    def decide(self, logging_event: LoggingEvent) -> FilterDecision:
        """Decide whether the event should be logged."""


def decide_chain(head: Optional[FilterSkeleton], logging_event: LoggingEvent) -> FilterDecision:
    """
    Run an event through a filter chain.

    Args:
        head: First filter of the chain, or None for an empty chain
        logging_event: Event to check

    Returns:
        The first DENY or ACCEPT in chain order, NEUTRAL if every filter abstained
    """
    current = head
    while current is not None:
        decision = current.decide(logging_event)
        if decision != FilterDecision.NEUTRAL:
            return decision
        current = current.next
    return FilterDecision.NEUTRAL
