"""List slideshow media from a directory."""

from pathlib import Path
from typing import Literal
from urllib.parse import quote

from ..models.match import MediaItem

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}
VIDEO_EXTENSIONS = {".mp4", ".webm", ".mov"}


def media_type_for(filename: str) -> Literal["image", "video"] | None:
    suffix = Path(filename).suffix.lower()
    if suffix in IMAGE_EXTENSIONS:
        return "image"
    if suffix in VIDEO_EXTENSIONS:
        return "video"
    return None


def format_title(filename: str) -> str:
    """'summer-finals_2024.jpg' -> 'Summer Finals 2024'"""
    stem = filename.split(".")[0]
    words = stem.replace("-", " ").replace("_", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def scan_media_directory(media_dir: Path, url_prefix: str = "/media/") -> list[MediaItem]:
    """Images and videos in media_dir, sorted by filename.

    The directory is created when missing. Read failures raise OSError.
    """
    media_dir.mkdir(parents=True, exist_ok=True)

    items: list[MediaItem] = []
    for path in sorted(media_dir.iterdir(), key=lambda p: p.name):
        if not path.is_file():
            continue
        media_type = media_type_for(path.name)
        if media_type is None:
            continue
        items.append(
            MediaItem(
                filename=path.name,
                type=media_type,
                title=format_title(path.name),
                url=f"{url_prefix}{quote(path.name)}",
            )
        )
    return items
