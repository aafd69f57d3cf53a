"""Match data model and related types."""

from datetime import datetime
from enum import Enum
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class MatchStatus(str, Enum):
    """Lifecycle state of a match"""

    UPCOMING = "upcoming"
    LIVE = "live"
    COMPLETED = "completed"


class Match(BaseModel):
    """A single contest record.

    Instances are frozen: buckets are rebuilt from fresh matches on every
    poll and never patched in place. Field aliases give the camelCase names
    used on the wire.
    """

    id: str
    match_number: int = Field(alias="matchNumber")
    player1: str = Field(default="", alias="playerA")
    player2: str = Field(default="", alias="playerB")
    category: str
    round: str | None = None
    status: MatchStatus = MatchStatus.UPCOMING
    score: str = ""
    winner: str = ""
    start_time: datetime | None = Field(default=None, alias="startTime")
    end_time: datetime | None = Field(default=None, alias="endTime")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def is_placeholder(self) -> bool:
        """Rows with no players and no score carry nothing worth showing"""
        return not self.player1 and not self.player2 and not self.score

    @property
    def match_name(self) -> str:
        return f"{title_case(self.player1) or 'TBD'} vs {title_case(self.player2) or 'TBD'}"


class SheetRow(BaseModel):
    """A raw row from the published spreadsheet feed.

    Every column is optional and loosely typed; the sheet may hand back
    numbers where text is expected, and extra columns are kept.
    """

    match: str | int | float | None = Field(default=None, alias="Match")
    player_a: str | int | float | None = Field(default=None, alias="Player A")
    player_b: str | int | float | None = Field(default=None, alias="Player B")
    score: str | int | float | None = Field(default=None, alias="Score")
    winner: str | int | float | None = Field(default=None, alias="Winner")
    status: str | int | float | None = Field(default=None, alias="Status")  # "past" | "next"
    category: str | int | float | None = Field(default=None, alias="Category")

    model_config = {"extra": "allow", "populate_by_name": True}


class MediaItem(BaseModel):
    """A slideshow entry found in the media directory"""

    filename: str
    type: Literal["image", "video"]
    title: str
    url: str

    model_config = {"frozen": True}


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope returned by the local endpoints"""

    success: bool = True
    data: list[T]
    total: int
    timestamp: str | None = None


class ApiError(BaseModel):
    """Failure envelope returned by the local endpoints"""

    success: bool = False
    error: str
    details: str | None = None


def title_case(text: str) -> str:
    """Capitalize the first letter of each space-separated word"""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))
