"""Terminal state helpers."""

import sys

# Disable mouse tracking and focus events, show the cursor again
RESET_SEQUENCE = "\033[?1000l\033[?1003l\033[?1015l\033[?1006l\033[?25h\033[?1004l"


def cleanup_terminal():
    """Cleanup terminal state to prevent mouse tracking issues"""
    try:
        sys.stdout.write(RESET_SEQUENCE)
        sys.stdout.flush()
    except OSError:
        pass
