"""Scoreboard / media view rotation."""

import math
from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ViewMode(str, Enum):
    SCOREBOARD = "scoreboard"
    MEDIA = "media"


class RotationState(BaseModel):
    """Where the rotation currently stands"""

    view: ViewMode = ViewMode.SCOREBOARD
    elapsed: int = 0  # seconds spent in the current view
    media_index: int = 0
    ticker_index: int = 0
    transitioning: bool = False

    model_config = {"frozen": True}


class DisplayRotation:
    """Two-state cycle between the scoreboard and the media slideshow.

    ``tick`` is driven once per second. The scoreboard is shown for
    ``scoreboard_seconds``, then the media view for ``media_seconds``; coming
    back from media moves on to the next media item. Inside the scoreboard
    view, ``advance_ticker`` pages through the upcoming bucket.

    The machine has no terminal state. Every change replaces ``state`` as a
    whole.
    """

    def __init__(
        self,
        scoreboard_seconds: int = 30,
        media_seconds: int = 20,
        page_size: int = 4,
        media_count: int = 0,
    ):
        self.scoreboard_seconds: int = scoreboard_seconds
        self.media_seconds: int = media_seconds
        self.page_size: int = page_size
        self.media_count: int = media_count
        self.state: RotationState = RotationState()

    @property
    def view(self) -> ViewMode:
        return self.state.view

    def tick(self) -> bool:
        """Advance one second. Returns True if the view switched."""
        elapsed = self.state.elapsed + 1

        if self.state.view == ViewMode.SCOREBOARD and elapsed >= self.scoreboard_seconds:
            self.state = self.state.model_copy(
                update={"view": ViewMode.MEDIA, "elapsed": 0, "transitioning": True}
            )
            return True

        if self.state.view == ViewMode.MEDIA and elapsed >= self.media_seconds:
            self.state = self.state.model_copy(
                update={
                    "view": ViewMode.SCOREBOARD,
                    "elapsed": 0,
                    "media_index": self._next_media_index(),
                    "transitioning": True,
                }
            )
            return True

        self.state = self.state.model_copy(update={"elapsed": elapsed})
        return False

    def end_transition(self) -> None:
        if self.state.transitioning:
            self.state = self.state.model_copy(update={"transitioning": False})

    def _next_media_index(self) -> int:
        if self.media_count <= 0:
            return 0
        return (self.state.media_index + 1) % self.media_count

    def set_media_count(self, count: int) -> None:
        self.media_count = max(0, count)
        index = self.state.media_index % self.media_count if self.media_count else 0
        if index != self.state.media_index:
            self.state = self.state.model_copy(update={"media_index": index})

    def page_count(self, bucket_size: int) -> int:
        return math.ceil(bucket_size / self.page_size)

    def advance_ticker(self, bucket_size: int) -> int:
        """Move the upcoming ticker to its next page.

        Only pages while the scoreboard is visible and the bucket spans more
        than one page; a bucket that fits on one page pins the ticker to 0.
        """
        if bucket_size <= self.page_size:
            index = 0
        elif self.state.view != ViewMode.SCOREBOARD:
            index = self.state.ticker_index % self.page_count(bucket_size)
        else:
            index = (self.state.ticker_index + 1) % self.page_count(bucket_size)

        if index != self.state.ticker_index:
            self.state = self.state.model_copy(update={"ticker_index": index})
        return index

    def ticker_page(self, bucket: Sequence[T]) -> Sequence[T]:
        """The slice of bucket shown on the current ticker page"""
        if len(bucket) <= self.page_size:
            return bucket
        index = self.state.ticker_index % self.page_count(len(bucket))
        start = index * self.page_size
        return bucket[start : start + self.page_size]
