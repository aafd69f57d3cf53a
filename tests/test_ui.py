"""UI tests for the ScoreboardDisplay Textual application"""

from unittest.mock import AsyncMock, patch

import pytest
from textual.widgets import ContentSwitcher, DataTable, Static

from courtcaller.api.sheet_api import SheetFetchError
from courtcaller.config import DisplaySettings
from courtcaller.core.polling import FETCH_ERROR_MESSAGE
from courtcaller.core.rotation import ViewMode
from courtcaller.ui import ScoreboardDisplay

ROWS = [
    {"Match": "1", "Player A": "alice smith", "Player B": "bob jones", "Score": "21-10, 21-8", "Winner": "alice smith", "Status": "past"},
    {"Match": "2", "Player A": "Cara", "Player B": "Dan", "Status": "next"},
    {"Match": "3", "Player A": "Eve", "Player B": "Finn", "Status": "next"},
]


def make_app(tmp_path, **overrides) -> ScoreboardDisplay:
    settings = DisplaySettings(media_dir=tmp_path, **overrides)
    return ScoreboardDisplay(settings)


def stop_rotation(app: ScoreboardDisplay) -> None:
    """Drive the rotation by hand instead of the 1s timer"""
    app.timers.cancel("rotation")
    app.timers.cancel("ticker")


@pytest.mark.ui
class TestScoreboardDisplay:
    """Test ScoreboardDisplay Textual app functionality"""

    @pytest.mark.asyncio
    async def test_app_creates_required_widgets(self, tmp_path):
        app = make_app(tmp_path)

        async with app.run_test():
            assert app.query_one("#views", ContentSwitcher).current == "scoreboard-view"
            assert app.query_one("#upcoming-table", DataTable)
            assert app.query_one("#recent-table", DataTable)
            assert app.query_one("#media-view")

    @pytest.mark.asyncio
    async def test_timers_are_registered(self, tmp_path):
        app = make_app(tmp_path)

        async with app.run_test():
            assert {"poll", "rotation", "ticker"} <= set(app.timers.names)

    @pytest.mark.asyncio
    async def test_demo_data_loads(self, tmp_path):
        app = make_app(tmp_path)

        async with app.run_test() as pilot:
            await pilot.pause(0.5)

            snapshot = app.board.snapshot
            assert snapshot.loaded is True
            assert [m.match_number for m in snapshot.upcoming] == [5, 6, 7, 9]
            assert len(snapshot.recent) == 4
            assert app.query_one("#upcoming-table", DataTable).row_count == 4
            assert app.query_one("#recent-table", DataTable).row_count == 4

    @pytest.mark.asyncio
    async def test_changed_bucket_flashes_then_clears(self, tmp_path):
        app = make_app(tmp_path, refresh_flash_seconds=0.2)

        with patch.object(app.api, "fetch_rows", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = ROWS

            async with app.run_test() as pilot:
                await pilot.pause(0.1)
                assert app.animate_upcoming is True
                assert app.query_one("#upcoming-table").has_class("refreshed")

                await pilot.pause(0.4)
                assert app.animate_upcoming is False
                assert not app.query_one("#upcoming-table").has_class("refreshed")

    @pytest.mark.asyncio
    async def test_unchanged_poll_does_not_flash(self, tmp_path):
        app = make_app(tmp_path, refresh_flash_seconds=0.1)

        with patch.object(app.api, "fetch_rows", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = ROWS

            async with app.run_test() as pilot:
                await pilot.pause(0.3)
                assert app.animate_recent is False

                app.fetch_matches()
                await pilot.pause(0.05)

                assert mock_fetch.call_count == 2
                assert app.animate_recent is False

    @pytest.mark.asyncio
    async def test_fetch_error_shows_retry_hint_and_keeps_data(self, tmp_path):
        app = make_app(tmp_path)

        with patch.object(app.api, "fetch_rows", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = ROWS

            async with app.run_test() as pilot:
                await pilot.pause(0.2)
                mock_fetch.side_effect = SheetFetchError("HTTP 503")

                await pilot.press("r")
                await pilot.pause(0.2)

                status = app.query_one("#status-line", Static)
                assert status.has_class("error")
                assert app.board.snapshot.error is not None
                assert len(app.board.snapshot.upcoming) == 2
                assert app.query_one("#upcoming-table", DataTable).row_count == 2

    @pytest.mark.asyncio
    async def test_unexpected_poll_exception_shows_error(self, tmp_path):
        app = make_app(tmp_path)

        with patch.object(app.api, "fetch_rows", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = ROWS

            async with app.run_test() as pilot:
                await pilot.pause(0.2)

                with patch(
                    "courtcaller.ui.scoreboard_display.poll_once",
                    new_callable=AsyncMock,
                    side_effect=UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"),
                ):
                    await pilot.press("r")
                    await pilot.pause(0.2)

                status = app.query_one("#status-line", Static)
                assert status.has_class("error")
                assert app.board.snapshot.error == FETCH_ERROR_MESSAGE
                assert app.last_update.startswith("Error at")
                assert len(app.board.snapshot.upcoming) == 2

    @pytest.mark.asyncio
    async def test_rotation_switches_to_media_and_back(self, tmp_path):
        (tmp_path / "welcome-banner.png").write_bytes(b"")
        (tmp_path / "sponsor_reel.mp4").write_bytes(b"")
        app = make_app(tmp_path, scoreboard_seconds=3, media_seconds=2, transition_seconds=0.1)

        async with app.run_test() as pilot:
            stop_rotation(app)
            switcher = app.query_one("#views", ContentSwitcher)

            for _ in range(3):
                app.tick_rotation()
            assert app.rotation.view == ViewMode.MEDIA
            assert switcher.current == "media-view"
            assert switcher.has_class("fading")

            await pilot.pause(0.3)
            assert not switcher.has_class("fading")

            for _ in range(2):
                app.tick_rotation()
            assert switcher.current == "scoreboard-view"
            assert app.rotation.state.media_index == 1

    @pytest.mark.asyncio
    async def test_media_view_shows_current_item(self, tmp_path):
        (tmp_path / "club-night.jpg").write_bytes(b"")
        app = make_app(tmp_path, scoreboard_seconds=1)

        async with app.run_test():
            stop_rotation(app)
            app.tick_rotation()

            assert app.current_media().title == "Club Night"
            assert len(app.media_items) == 1

    @pytest.mark.asyncio
    async def test_ticker_pages_upcoming(self, tmp_path):
        rows = [
            {"Match": str(n), "Player A": f"P{n}", "Player B": f"Q{n}", "Status": "next", "Category": f"Group {n}"}
            for n in range(1, 7)
        ]
        app = make_app(tmp_path, page_size=2)

        with patch.object(app.api, "fetch_rows", new_callable=AsyncMock) as mock_fetch, patch(
            "courtcaller.core.normalizer.classify", side_effect=lambda raw, number: raw
        ):
            mock_fetch.return_value = rows

            async with app.run_test() as pilot:
                stop_rotation(app)
                await pilot.pause(0.2)

                table = app.query_one("#upcoming-table", DataTable)
                assert len(app.board.snapshot.upcoming) == 6
                assert table.row_count == 2
                assert table.get_row_at(0)[0] == "#1"

                app.advance_ticker()
                assert table.get_row_at(0)[0] == "#3"

    @pytest.mark.asyncio
    async def test_unmount_cancels_all_timers(self, tmp_path):
        app = make_app(tmp_path)

        async with app.run_test() as pilot:
            await pilot.pause(0.1)

        assert app.timers.names == []

    @pytest.mark.asyncio
    async def test_quit_action_exits_app(self, tmp_path):
        app = make_app(tmp_path)

        async with app.run_test() as pilot:
            await pilot.pause(0.1)
            await pilot.press("q")

            assert not app.is_running
