"""Main scoreboard kiosk TUI application."""

import traceback
from typing import ClassVar

from textual.binding import BindingType

try:
    from textual import work
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.reactive import reactive
    from textual.widgets import (
        ContentSwitcher,
        DataTable,
        Footer,
        Header,
        ProgressBar,
        Static,
    )
except ImportError:
    raise ImportError(
        "Missing required dependencies. Please install with: pip install textual aiohttp"
    )

from ..api import SheetAPI
from ..config import DisplaySettings
from ..core.board import MatchBoard
from ..core.categories import category_label
from ..core.polling import FETCH_ERROR_MESSAGE, poll_once
from ..core.rotation import DisplayRotation, ViewMode
from ..core.scheduler import TimerRegistry
from ..media.library import scan_media_directory
from ..models.match import MediaItem, title_case
from ..utils.logging import log, set_console_logging
from ..utils.terminal import cleanup_terminal

VIEW_IDS: dict[ViewMode, str] = {
    ViewMode.SCOREBOARD: "scoreboard-view",
    ViewMode.MEDIA: "media-view",
}


class ScoreboardDisplay(App[None]):
    """Kiosk display alternating between the scoreboard and a media slideshow"""

    CSS: ClassVar[
        str
    ] = """
    Screen {
        layout: vertical;
    }

    Header {
        dock: top;
        height: 1;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-1;
    }

    #views {
        height: 1fr;
    }

    #views.fading {
        opacity: 40%;
    }

    .view {
        height: 1fr;
        padding: 0 1;
    }

    .section-title {
        background: $primary;
        color: $text;
        padding: 0 1;
        text-align: center;
        height: 1;
        margin: 1 0 0 0;
    }

    .match-table {
        height: auto;
        min-height: 3;
        border: solid $primary;
    }

    .match-table.refreshed {
        border: solid $success;
        background: $success 15%;
    }

    #ticker-dots {
        text-align: center;
        height: 1;
    }

    #status-line {
        height: 1;
        color: $text-muted;
    }

    #status-line.error {
        color: $error;
    }

    #media-body {
        height: 1fr;
        content-align: center middle;
        border: solid $primary;
    }

    #media-progress {
        width: 1fr;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        ("r", "refresh", "Refresh"),
        ("q", "quit", "Quit"),
    ]

    # Reactive variables
    last_update: reactive[str] = reactive("")
    animate_upcoming: reactive[bool] = reactive(False)
    animate_recent: reactive[bool] = reactive(False)

    def __init__(self, settings: DisplaySettings | None = None):
        super().__init__()
        self.settings: DisplaySettings = settings or DisplaySettings()
        self.api: SheetAPI = SheetAPI(
            self.settings.sheet_url, timeout=self.settings.request_timeout
        )
        self.board: MatchBoard = MatchBoard(
            upcoming_limit=self.settings.upcoming_limit,
            recent_limit=self.settings.recent_limit,
        )
        self.rotation: DisplayRotation = DisplayRotation(
            scoreboard_seconds=self.settings.scoreboard_seconds,
            media_seconds=self.settings.media_seconds,
            page_size=self.settings.page_size,
        )
        self.timers: TimerRegistry = TimerRegistry()
        self.media_items: list[MediaItem] = []
        self.media_loaded: bool = False
        self.media_error: str | None = None
        self.title = "Courtside Live"
        log(
            f"🎯 ScoreboardDisplay initialized: sheet={self.settings.sheet_url or 'demo'}, "
            f"media_dir={self.settings.media_dir}, poll_interval={self.settings.poll_interval}"
        )

    def compose(self) -> ComposeResult:
        """Create the UI layout"""
        yield Header()
        with ContentSwitcher(initial=VIEW_IDS[ViewMode.SCOREBOARD], id="views"):
            with Vertical(id=VIEW_IDS[ViewMode.SCOREBOARD], classes="view"):
                yield Static("Upcoming Matches", classes="section-title")
                yield DataTable(id="upcoming-table", classes="match-table")
                yield Static("", id="ticker-dots")
                yield Static("Recent Results", classes="section-title")
                yield DataTable(id="recent-table", classes="match-table")
                yield Static("Loading matches...", id="status-line")
            with Vertical(id=VIEW_IDS[ViewMode.MEDIA], classes="view"):
                yield Static("", id="media-title", classes="section-title")
                yield Static("Loading media...", id="media-body")
                yield ProgressBar(
                    total=self.settings.media_seconds,
                    show_eta=False,
                    show_percentage=False,
                    id="media-progress",
                )
        yield Footer()

    def on_mount(self) -> None:
        """Initialize the app"""
        set_console_logging(False)
        log("🏁 on_mount() called")

        upcoming = self.query_one("#upcoming-table", DataTable)
        upcoming.add_column("#", width=5)
        upcoming.add_column("Cat", width=5)
        upcoming.add_column("Match", width=44)
        upcoming.cursor_type = "none"

        recent = self.query_one("#recent-table", DataTable)
        recent.add_column("Cat", width=5)
        recent.add_column("Match", width=44)
        recent.add_column("Score", width=22)
        recent.add_column("Winner", width=20)
        recent.cursor_type = "none"

        self.load_media()

        self.timers.track(
            "poll", self.set_interval(self.settings.poll_interval, self.fetch_matches)
        )
        self.timers.track("rotation", self.set_interval(1.0, self.tick_rotation))
        self.timers.track(
            "ticker", self.set_interval(self.settings.ticker_seconds, self.advance_ticker)
        )

        log("🚀 Starting initial data fetch...")
        self.fetch_matches()

    def load_media(self) -> None:
        """Scan the media directory for the slideshow"""
        try:
            self.media_items = scan_media_directory(self.settings.media_dir)
            self.media_error = None
            log(f"🖼️  Loaded {len(self.media_items)} media items from {self.settings.media_dir}")
        except OSError as e:
            log(f"❌ Error loading media files: {e}")
            self.media_error = "Failed to load media files"
        self.media_loaded = True
        self.rotation.set_media_count(len(self.media_items))
        self.render_media()

    @work(exclusive=True)
    async def fetch_matches(self) -> None:
        """Poll the sheet and reconcile the buckets (async worker)"""
        log("🔄 fetch_matches() STARTED")
        try:
            update = await poll_once(self.api, self.board)
        except Exception as e:
            log(f"❌ Exception in fetch_matches: {type(e).__name__}: {e}")
            log(f"❌ Full traceback: {traceback.format_exc()}")
            self.board.apply_error(FETCH_ERROR_MESSAGE)
            self.last_update = self.board.snapshot.last_update
            self.render_status()
            return

        self.last_update = self.board.snapshot.last_update
        if update is not None:
            if update.upcoming_changed:
                self.flash_bucket("upcoming")
            if update.recent_changed:
                self.flash_bucket("recent")
        self.render_scoreboard()

    def flash_bucket(self, name: str) -> None:
        """Highlight a freshly replaced bucket for a moment"""
        setattr(self, f"animate_{name}", True)
        self.query_one(f"#{name}-table", DataTable).add_class("refreshed")
        self.timers.track(
            f"flash-{name}",
            self.set_timer(
                self.settings.refresh_flash_seconds, lambda: self._end_flash(name)
            ),
        )

    def _end_flash(self, name: str) -> None:
        self.timers.release(f"flash-{name}")
        setattr(self, f"animate_{name}", False)
        self.query_one(f"#{name}-table", DataTable).remove_class("refreshed")

    def tick_rotation(self) -> None:
        """Advance the view rotation (called every second)"""
        if self.rotation.tick():
            view = self.rotation.view
            log(f"🔀 Switching to {view.value} view")
            self.query_one("#views", ContentSwitcher).current = VIEW_IDS[view]
            self.query_one("#views").add_class("fading")
            self.timers.track(
                "transition",
                self.set_timer(self.settings.transition_seconds, self._end_transition),
            )
            if view == ViewMode.SCOREBOARD:
                self.render_scoreboard()
            self.render_media()
        elif self.rotation.view == ViewMode.MEDIA:
            self.update_media_progress()

    def _end_transition(self) -> None:
        self.timers.release("transition")
        self.rotation.end_transition()
        self.query_one("#views").remove_class("fading")

    def advance_ticker(self) -> None:
        """Page through the upcoming bucket"""
        before = self.rotation.state.ticker_index
        after = self.rotation.advance_ticker(len(self.board.snapshot.upcoming))
        if after != before:
            self.render_upcoming()

    def render_scoreboard(self) -> None:
        self.render_upcoming()
        self.render_recent()
        self.render_status()

    def render_upcoming(self) -> None:
        snapshot = self.board.snapshot
        table = self.query_one("#upcoming-table", DataTable)
        table.clear()
        for match in self.rotation.ticker_page(snapshot.upcoming):
            table.add_row(
                f"#{match.match_number}",
                category_label(match.category),
                match.match_name,
                key=match.id,
            )

        pages = self.rotation.page_count(len(snapshot.upcoming))
        dots = ""
        if pages > 1:
            current = self.rotation.state.ticker_index % pages
            dots = " ".join("●" if i == current else "○" for i in range(pages))
        self.query_one("#ticker-dots", Static).update(dots)

    def render_recent(self) -> None:
        table = self.query_one("#recent-table", DataTable)
        table.clear()
        for match in self.board.snapshot.recent:
            table.add_row(
                category_label(match.category),
                match.match_name,
                match.score,
                title_case(match.winner),
                key=match.id,
            )

    def render_status(self) -> None:
        snapshot = self.board.snapshot
        status = self.query_one("#status-line", Static)
        if snapshot.error:
            status.update(f"⚠️  {snapshot.error} - press r to retry ({snapshot.last_update})")
            status.add_class("error")
        elif not snapshot.loaded:
            status.update("Loading matches...")
            status.remove_class("error")
        else:
            status.update(f"Last update: {snapshot.last_update}")
            status.remove_class("error")

    def current_media(self) -> MediaItem | None:
        if not self.media_items:
            return None
        return self.media_items[self.rotation.state.media_index % len(self.media_items)]

    def render_media(self) -> None:
        title = self.query_one("#media-title", Static)
        body = self.query_one("#media-body", Static)
        item = self.current_media()
        if self.media_error:
            title.update("Media")
            body.update(self.media_error)
        elif item is None:
            title.update("Media")
            body.update("No media files found" if self.media_loaded else "Loading media...")
        else:
            icon = "🎬" if item.type == "video" else "🖼️"
            title.update(item.title)
            body.update(f"{icon}  {item.filename}")
        self.update_media_progress()

    def update_media_progress(self) -> None:
        elapsed = self.rotation.state.elapsed if self.rotation.view == ViewMode.MEDIA else 0
        self.query_one("#media-progress", ProgressBar).update(progress=elapsed)

    def action_refresh(self) -> None:
        """Manually refresh data"""
        log("🔄 Manual refresh triggered")
        self.fetch_matches()
        self.notify("Refreshing matches...")

    def on_unmount(self) -> None:
        """Clean up when app is unmounted"""
        self.timers.cancel_all()
        cleanup_terminal()

    async def action_quit(self):
        """Quit the application"""
        self.timers.cancel_all()
        self.exit()
