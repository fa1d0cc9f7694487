"""Terminal metrics."""
from __future__ import annotations

import sys

from rich.console import Console

DEFAULT_TERMINAL_WIDTH = 80


def terminal_width() -> int:
    """Width in columns of the terminal behind stdout.

    rich honours ``COLUMNS`` and falls back to 80 columns when stdout is not
    attached to a terminal.
    """
    console = Console(file=sys.stdout)
    width = console.width
    return width if width > 0 else DEFAULT_TERMINAL_WIDTH
