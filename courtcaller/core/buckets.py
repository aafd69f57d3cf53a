"""Select the bounded, category-diverse match lists shown on the scoreboard.

Selection favours one match per category over chronological completeness:
the input is sorted first (ascending match number for upcoming, descending
for recent results) and the first match seen for each category wins.
"""

from collections.abc import Iterable

from pydantic import BaseModel

from ..models.match import Match, MatchStatus

UPCOMING_LIMIT = 6
RECENT_LIMIT = 4


class Buckets(BaseModel):
    """The two display buckets computed from one poll"""

    upcoming: tuple[Match, ...] = ()
    recent: tuple[Match, ...] = ()

    model_config = {"frozen": True}


def pick_one_per_category(matches: Iterable[Match], limit: int) -> tuple[Match, ...]:
    """Keep the first match for each category, in input order, up to limit"""
    seen: set[str] = set()
    picked: list[Match] = []
    for match in matches:
        if len(picked) >= limit:
            break
        category = (match.category or "").lower()
        if not category or category in seen:
            continue
        seen.add(category)
        picked.append(match)
    return tuple(picked)


def upcoming_bucket(matches: Iterable[Match], limit: int = UPCOMING_LIMIT) -> tuple[Match, ...]:
    candidates = sorted(
        (m for m in matches if m.status == MatchStatus.UPCOMING and not m.is_placeholder),
        key=lambda m: m.match_number,
    )
    return pick_one_per_category(candidates, limit)


def recent_bucket(matches: Iterable[Match], limit: int = RECENT_LIMIT) -> tuple[Match, ...]:
    candidates = sorted(
        (
            m
            for m in matches
            if m.status == MatchStatus.COMPLETED and m.score and not m.is_placeholder
        ),
        key=lambda m: m.match_number,
        reverse=True,
    )
    return pick_one_per_category(candidates, limit)


def build_buckets(
    matches: Iterable[Match],
    upcoming_limit: int = UPCOMING_LIMIT,
    recent_limit: int = RECENT_LIMIT,
) -> Buckets:
    """Split normalized matches into the upcoming and recent buckets"""
    matches = list(matches)
    return Buckets(
        upcoming=upcoming_bucket(matches, upcoming_limit),
        recent=recent_bucket(matches, recent_limit),
    )
