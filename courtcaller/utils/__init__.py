"""Shared utilities."""

from .logging import log, set_console_logging
from .terminal import cleanup_terminal

__all__ = ["cleanup_terminal", "log", "set_console_logging"]
