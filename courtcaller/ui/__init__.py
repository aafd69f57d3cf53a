"""User interface module for the kiosk display."""

from .scoreboard_display import ScoreboardDisplay

__all__ = ["ScoreboardDisplay"]
