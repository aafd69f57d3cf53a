"""Display-rotation and data-reconciliation core."""

from .board import BoardSnapshot, BoardUpdate, MatchBoard
from .buckets import Buckets, build_buckets, pick_one_per_category
from .categories import CATEGORY_ROTATION, classify, derive_category, normalize_category
from .changes import BucketSlot, buckets_equal, matches_equal
from .normalizer import map_status, normalize_row, normalize_rows, parse_match_number
from .polling import poll_once
from .rotation import DisplayRotation, RotationState, ViewMode
from .scheduler import TimerRegistry

__all__ = [
    "BoardSnapshot",
    "BoardUpdate",
    "MatchBoard",
    "Buckets",
    "build_buckets",
    "pick_one_per_category",
    "CATEGORY_ROTATION",
    "classify",
    "derive_category",
    "normalize_category",
    "BucketSlot",
    "buckets_equal",
    "matches_equal",
    "map_status",
    "normalize_row",
    "normalize_rows",
    "parse_match_number",
    "poll_once",
    "DisplayRotation",
    "RotationState",
    "ViewMode",
    "TimerRegistry",
]
