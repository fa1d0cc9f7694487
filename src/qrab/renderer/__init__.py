"""Rendering of URLs as terminal QR codes and their grid layout."""
from __future__ import annotations

from .layout import GUTTER, Block, QrGrid, columns_per_row, compose_row, layout
from .qr import EncodingError, Theme, render_block, render_qr
from .terminal import DEFAULT_TERMINAL_WIDTH, terminal_width

__all__ = [
    "Block",
    "DEFAULT_TERMINAL_WIDTH",
    "EncodingError",
    "GUTTER",
    "QrGrid",
    "Theme",
    "columns_per_row",
    "compose_row",
    "layout",
    "render_block",
    "render_qr",
    "terminal_width",
]
