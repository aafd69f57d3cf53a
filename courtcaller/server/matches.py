"""Match listing for the local /api/matches endpoint."""

from collections.abc import Iterable
from datetime import datetime, timezone

from ..models.match import Match, MatchStatus

_STATUS_RANK: dict[MatchStatus, int] = {
    MatchStatus.LIVE: 0,
    MatchStatus.UPCOMING: 1,
    MatchStatus.COMPLETED: 2,
}


def parse_status(raw: str | None) -> MatchStatus | None:
    """Valid status filter or None (unknown values mean no filter)"""
    try:
        return MatchStatus(raw) if raw else None
    except ValueError:
        return None


def parse_limit(raw: str | None) -> int | None:
    """Positive integer limit or None"""
    try:
        limit = int(raw) if raw else None
    except ValueError:
        return None
    if limit is None or limit <= 0:
        return None
    return limit


def _sort_key(match: Match) -> tuple[int, int, float]:
    rank = _STATUS_RANK.get(match.status, len(_STATUS_RANK))
    if match.status == MatchStatus.UPCOMING:
        when = match.start_time
        return (rank, when is None, when.timestamp() if when else 0.0)
    if match.status == MatchStatus.COMPLETED:
        when = match.end_time
        return (rank, when is None, -when.timestamp() if when else 0.0)
    return (rank, 0, 0.0)


def order_matches(matches: Iterable[Match]) -> list[Match]:
    """Live first, then upcoming by start time, then completed newest first"""
    return sorted(matches, key=_sort_key)


def query_matches(
    matches: Iterable[Match],
    status: MatchStatus | None = None,
    limit: int | None = None,
) -> list[Match]:
    selected = [m for m in matches if status is None or m.status == status]
    ordered = order_matches(selected)
    if limit is not None:
        ordered = ordered[:limit]
    return ordered


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 timestamp in UTC with a trailing Z"""
    now = now or datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
