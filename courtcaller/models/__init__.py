"""Data models."""

from .match import ApiError, ApiResponse, Match, MatchStatus, MediaItem, SheetRow

__all__ = ["Match", "MatchStatus", "SheetRow", "MediaItem", "ApiResponse", "ApiError"]
