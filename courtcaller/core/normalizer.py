"""Turn raw sheet rows into Match records."""

import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from ..models.match import Match, MatchStatus, SheetRow
from .categories import classify

ID_PREFIX = "sheet"

_LEADING_INT_RE = re.compile(r"[+-]?[0-9]+")

STATUS_MAP: dict[str, MatchStatus] = {
    "past": MatchStatus.COMPLETED,
    "next": MatchStatus.UPCOMING,
}


def _text(value: Any) -> str:
    """Loosely-typed cell to trimmed text"""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def parse_match_number(value: Any) -> int | None:
    """Parse the leading base-10 integer of a cell, None when there is none"""
    found = _LEADING_INT_RE.match(_text(value))
    if not found:
        return None
    try:
        return int(found.group())
    except ValueError:
        # Longer than the interpreter's int-string conversion limit
        return None


def map_status(raw: Any) -> MatchStatus:
    return STATUS_MAP.get(_text(raw).lower(), MatchStatus.UPCOMING)


def match_id(match_number: int) -> str:
    return f"{ID_PREFIX}-{match_number}"


def normalize_row(row: SheetRow | Mapping[str, Any]) -> Match | None:
    """Normalize one sheet row. Rows without a usable match number give None."""
    if not isinstance(row, SheetRow):
        try:
            row = SheetRow.model_validate(row)
        except ValidationError:
            return None

    match_number = parse_match_number(row.match)
    if match_number is None:
        return None

    return Match(
        id=match_id(match_number),
        match_number=match_number,
        player1=_text(row.player_a),
        player2=_text(row.player_b),
        status=map_status(row.status),
        score=_text(row.score),
        winner=_text(row.winner),
        category=classify(_text(row.category), match_number),
    )


def normalize_rows(rows: Iterable[SheetRow | Mapping[str, Any]]) -> Iterator[Match]:
    """Lazily normalize rows, skipping the ones that can't be parsed"""
    for row in rows:
        match = normalize_row(row)
        if match is not None:
            yield match
