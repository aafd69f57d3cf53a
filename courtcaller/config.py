"""Runtime settings for the display and the local server."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_SHEET_URL = (
    "https://opensheet.elk.sh/16bUHth1gRVkT3c7kkIr_Bo7kj4IQ87ETZ1tSjkuCQFw/Sheet1"
)
DEFAULT_MEDIA_DIR = Path("public") / "media"


class DisplaySettings(BaseModel):
    """Timing and sizing knobs. All periods are in seconds."""

    # Data source (None runs the display on demo rows)
    sheet_url: str | None = None
    request_timeout: float = Field(default=10.0, gt=0)

    media_dir: Path = DEFAULT_MEDIA_DIR

    # Polling
    poll_interval: float = Field(default=15.0, gt=0)

    # View rotation
    scoreboard_seconds: int = Field(default=30, gt=0)
    media_seconds: int = Field(default=20, gt=0)
    transition_seconds: float = Field(default=0.5, ge=0)

    # Upcoming ticker
    ticker_seconds: float = Field(default=5.0, gt=0)
    page_size: int = Field(default=4, gt=0)

    # Buckets
    upcoming_limit: int = Field(default=6, gt=0)
    recent_limit: int = Field(default=4, gt=0)
    refresh_flash_seconds: float = Field(default=0.9, ge=0)

    model_config = {"frozen": True}
