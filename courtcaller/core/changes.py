"""Detect structural changes between the displayed and freshly polled buckets."""

from collections.abc import Sequence

from ..models.match import Match

MATCH_FIELDS: tuple[str, ...] = tuple(Match.model_fields)


def matches_equal(a: Match, b: Match) -> bool:
    """Field-by-field value comparison"""
    return all(getattr(a, name) == getattr(b, name) for name in MATCH_FIELDS)


def buckets_equal(old: Sequence[Match], new: Sequence[Match]) -> bool:
    """Same matches with the same values, in the same order"""
    if len(old) != len(new):
        return False
    return all(matches_equal(a, b) for a, b in zip(old, new))


class BucketSlot:
    """Holds the bucket currently on screen"""

    def __init__(self, name: str):
        self.name: str = name
        self.matches: tuple[Match, ...] = ()

    def reconcile(self, new: Sequence[Match]) -> bool:
        """Swap in new if it differs from what is displayed.

        Returns True when a replacement happened, which is the caller's cue
        to flash the refreshed region.
        """
        if buckets_equal(self.matches, new):
            return False
        self.matches = tuple(new)
        return True
