"""Courtside Live - a terminal kiosk scoreboard with a media slideshow."""

from .api import SheetAPI
from .config import DisplaySettings
from .models import Match, MatchStatus
from .ui import ScoreboardDisplay

__version__ = "1.0.0"
__all__ = ["SheetAPI", "DisplaySettings", "Match", "MatchStatus", "ScoreboardDisplay"]
