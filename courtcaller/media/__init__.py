"""Media slideshow sources."""

from .library import format_title, media_type_for, scan_media_directory

__all__ = ["scan_media_directory", "media_type_for", "format_title"]
