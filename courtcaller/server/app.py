"""Local HTTP endpoints: match query, media listing and media files."""

from collections.abc import Callable, Iterable
from pathlib import Path

from aiohttp import web

from ..media.library import scan_media_directory
from ..models.match import ApiError, ApiResponse, Match, MediaItem
from ..models.mock_data import SAMPLE_MATCHES
from ..utils.logging import log
from .matches import parse_limit, parse_status, query_matches, utc_timestamp

MatchSource = Callable[[], Iterable[Match]]

MATCH_SOURCE_KEY = web.AppKey("match_source", MatchSource)
MEDIA_DIR_KEY = web.AppKey("media_dir", Path)


def _error_response(message: str, details: str | None = None) -> web.Response:
    body = ApiError(error=message, details=details)
    return web.json_response(body.model_dump(exclude_none=True), status=500)


async def list_matches(request: web.Request) -> web.Response:
    """GET /api/matches?status=upcoming|live|completed&limit=N"""
    status = parse_status(request.query.get("status"))
    limit = parse_limit(request.query.get("limit"))

    try:
        matches = query_matches(request.app[MATCH_SOURCE_KEY](), status, limit)
    except Exception as e:
        log(f"❌ Error fetching matches: {type(e).__name__}: {e}")
        return _error_response("Failed to fetch matches")

    body = ApiResponse[Match](data=matches, total=len(matches), timestamp=utc_timestamp())
    return web.json_response(body.model_dump(mode="json", by_alias=True, exclude_none=True))


async def list_media(request: web.Request) -> web.Response:
    """GET /api/media"""
    media_dir = request.app[MEDIA_DIR_KEY]
    try:
        items = scan_media_directory(media_dir)
    except OSError as e:
        log(f"❌ Error reading media directory {media_dir}: {e}")
        return _error_response("Failed to read media files", str(e))

    body = ApiResponse[MediaItem](data=items, total=len(items))
    return web.json_response(body.model_dump(mode="json", exclude_none=True))


def create_app(
    media_dir: Path,
    match_source: MatchSource = lambda: SAMPLE_MATCHES,
) -> web.Application:
    media_dir.mkdir(parents=True, exist_ok=True)

    app = web.Application()
    app[MATCH_SOURCE_KEY] = match_source
    app[MEDIA_DIR_KEY] = media_dir
    app.router.add_get("/api/matches", list_matches)
    app.router.add_get("/api/media", list_media)
    app.router.add_static("/media/", media_dir)
    return app


def run_server(media_dir: Path, host: str = "0.0.0.0", port: int = 3000) -> None:
    log(f"🌐 Serving /api/matches and /api/media on http://{host}:{port}")
    log(f"📁 Media directory: {media_dir.resolve()}")
    web.run_app(create_app(media_dir), host=host, port=port, print=None)
