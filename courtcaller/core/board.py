"""Published scoreboard state."""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel

from ..models.match import Match, SheetRow
from ..utils.logging import log
from .buckets import RECENT_LIMIT, UPCOMING_LIMIT, build_buckets
from .changes import BucketSlot
from .normalizer import normalize_rows


class BoardSnapshot(BaseModel):
    """Immutable view of what the scoreboard should show"""

    upcoming: tuple[Match, ...] = ()
    recent: tuple[Match, ...] = ()
    live: tuple[Match, ...] = ()
    error: str | None = None
    last_update: str = ""
    loaded: bool = False

    model_config = {"frozen": True}


class BoardUpdate(BaseModel):
    """Which buckets were replaced by a poll"""

    upcoming_changed: bool = False
    recent_changed: bool = False

    model_config = {"frozen": True}

    @property
    def changed(self) -> bool:
        return self.upcoming_changed or self.recent_changed


class MatchBoard:
    """Reconciles polled rows against the displayed buckets.

    Every write replaces ``snapshot`` as a whole; readers never see a
    half-updated board.
    """

    def __init__(
        self,
        upcoming_limit: int = UPCOMING_LIMIT,
        recent_limit: int = RECENT_LIMIT,
    ):
        self.upcoming_limit: int = upcoming_limit
        self.recent_limit: int = recent_limit
        self.upcoming_slot: BucketSlot = BucketSlot("upcoming")
        self.recent_slot: BucketSlot = BucketSlot("recent")
        self.snapshot: BoardSnapshot = BoardSnapshot()

    def apply_rows(self, rows: Iterable[SheetRow | Mapping[str, Any]]) -> BoardUpdate:
        """Normalize, bucket and reconcile one batch of sheet rows"""
        rows = list(rows)
        matches = list(normalize_rows(rows))
        dropped = len(rows) - len(matches)
        if dropped:
            log(f"⏭️  Dropped {dropped} rows without a match number")

        buckets = build_buckets(matches, self.upcoming_limit, self.recent_limit)
        update = BoardUpdate(
            upcoming_changed=self.upcoming_slot.reconcile(buckets.upcoming),
            recent_changed=self.recent_slot.reconcile(buckets.recent),
        )

        self.snapshot = BoardSnapshot(
            upcoming=self.upcoming_slot.matches,
            recent=self.recent_slot.matches,
            live=(),
            error=None,
            last_update=datetime.now().strftime("%H:%M:%S"),
            loaded=True,
        )
        log(
            f"📊 Board: {len(matches)} matches, {len(buckets.upcoming)} upcoming, "
            f"{len(buckets.recent)} recent, changed={update.changed}"
        )
        return update

    def apply_error(self, message: str) -> None:
        """Keep the last good buckets and surface the error"""
        self.snapshot = self.snapshot.model_copy(
            update={
                "error": message,
                "last_update": f"Error at {datetime.now().strftime('%H:%M:%S')}",
                "loaded": True,
            }
        )
