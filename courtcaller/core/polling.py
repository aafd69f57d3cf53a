"""One fetch-normalize-bucket-detect cycle."""

from ..api.sheet_api import SheetAPI, SheetFetchError
from ..utils.logging import log
from .board import BoardUpdate, MatchBoard

FETCH_ERROR_MESSAGE = "Network error while fetching matches"


async def poll_once(api: SheetAPI, board: MatchBoard) -> BoardUpdate | None:
    """Run a single poll against the board.

    Fetch failures never escape: they are recorded on the board snapshot and
    None is returned, so the next scheduled poll simply tries again.
    """
    try:
        rows = await api.fetch_rows()
    except SheetFetchError as e:
        log(f"❌ Poll failed: {e}")
        board.apply_error(FETCH_ERROR_MESSAGE)
        return None

    return board.apply_rows(rows)
