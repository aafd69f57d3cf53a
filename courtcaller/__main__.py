"""Main entry point for the courtside kiosk display."""

import argparse
import sys
import time
from pathlib import Path

from pydantic import ValidationError

from .config import DEFAULT_MEDIA_DIR, DEFAULT_SHEET_URL, DisplaySettings
from .ui import ScoreboardDisplay
from .utils.logging import log
from .utils.terminal import cleanup_terminal


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Courtside kiosk scoreboard")
    parser.add_argument(
        "--sheet-url",
        help=f"JSON row feed to poll (e.g. {DEFAULT_SHEET_URL})",
    )
    parser.add_argument("--demo", action="store_true", help="Run with demo data")
    parser.add_argument(
        "--media-dir",
        type=Path,
        default=DEFAULT_MEDIA_DIR,
        help=f"Directory of slideshow images/videos (default: {DEFAULT_MEDIA_DIR})",
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=15.0,
        help="Seconds between sheet polls (default: 15)",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the local /api/matches and /api/media server instead of the display",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Server bind address")
    parser.add_argument("--port", type=int, default=3000, help="Server port")
    return parser


def main():
    """Main entry point"""
    args = build_parser().parse_args()

    log("🔍 Command line args:")
    log(f"   Sheet URL: {args.sheet_url}")
    log(f"   Demo: {args.demo}")
    log(f"   Media dir: {args.media_dir}")
    log(f"   Poll interval: {args.poll_interval}")
    log(f"   Serve: {args.serve}")

    if args.serve:
        from .server import run_server

        run_server(args.media_dir, host=args.host, port=args.port)
        return

    if args.demo or not args.sheet_url:
        log("🏸 Running in DEMO mode with mock rows")
        log("   Use --sheet-url for real data")
        log("   Press Ctrl+C to exit\n")
        time.sleep(2)
        sheet_url = None
    else:
        log("🌐 Running with live sheet data")
        log("   Press Ctrl+C to exit\n")
        time.sleep(1)
        sheet_url = args.sheet_url

    try:
        settings = DisplaySettings(
            sheet_url=sheet_url,
            media_dir=args.media_dir,
            poll_interval=args.poll_interval,
        )
    except ValidationError as e:
        log(f"❌ Invalid settings: {e}")
        sys.exit(2)

    app = ScoreboardDisplay(settings)

    try:
        log("🏁 Starting Textual app...")
        app.run()
        log("🏁 Textual app finished")
    except KeyboardInterrupt:
        log("\n👋 Scoreboard display stopped")
    except Exception as e:
        log(f"❌ App crashed: {type(e).__name__}: {e}")
    finally:
        # Always clean up terminal state regardless of how app exits
        cleanup_terminal()


if __name__ == "__main__":
    main()
