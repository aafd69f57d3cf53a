"""API module for match data fetching."""

from .sheet_api import SheetAPI, SheetFetchError

__all__ = ["SheetAPI", "SheetFetchError"]
