"""Logging utilities for the courtside display application."""

import logging

LOG_FILE = "/tmp/courtcaller_debug.log"

# Global state
_console_logging_enabled = None
_file_logger = None


def _is_tui_running() -> bool:
    """Detect if we're running in TUI mode vs CLI mode"""
    if _console_logging_enabled is not None:
        return not _console_logging_enabled

    # Default to console output unless explicitly disabled
    return False


def set_console_logging(enabled: bool):
    """Explicitly enable/disable console logging"""
    global _console_logging_enabled
    _console_logging_enabled = enabled


def log(message: str, level: int = logging.INFO):
    """
    Smart logging that adapts to context:
    - Always logs to file for debugging
    - Also logs to console for CLI operations (server, startup)
    - Skips console output while the TUI owns the terminal
    """
    global _file_logger

    if _file_logger is None:
        _file_logger = logging.getLogger("courtcaller_file")
        _file_logger.setLevel(logging.DEBUG)
        file_handler = logging.FileHandler(LOG_FILE)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        _file_logger.addHandler(file_handler)
        _file_logger.propagate = False

    _file_logger.log(level, message)

    if not _is_tui_running():
        print(message)
