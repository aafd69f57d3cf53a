"""Competition bracket classification."""

from collections.abc import Sequence

CATEGORY_ROTATION: tuple[str, ...] = ("u9", "u11", "u13", "13+")

# Checked in order, most specific first: "13+" must be tested before "u13"
CATEGORY_PATTERNS: tuple[str, ...] = ("13+", "u13", "u11", "u9")

CATEGORY_LABELS: dict[str, str] = {
    "u9": "U9",
    "u11": "U11",
    "u13": "U13",
    "13+": "13+",
}


def normalize_category(raw: str | None) -> str | None:
    """Map free-text category input onto a known tag, or None"""
    if not raw:
        return None
    value = "".join(raw.lower().split())
    for pattern in CATEGORY_PATTERNS:
        if pattern in value:
            return pattern
    return None


def derive_category(
    match_number: int, rotation: Sequence[str] = CATEGORY_ROTATION
) -> str:
    """Pick a category from the rotation; numbers <= 1 map to the first entry"""
    return rotation[(max(1, match_number) - 1) % len(rotation)]


def classify(
    raw: str | None,
    match_number: int,
    rotation: Sequence[str] = CATEGORY_ROTATION,
) -> str:
    """Explicit category if recognisable, otherwise derived from the match number"""
    return normalize_category(raw) or derive_category(match_number, rotation)


def category_label(category: str | None) -> str:
    return CATEGORY_LABELS.get((category or "").lower(), "—")
