"""QR code rendering for the terminal.

Codes are drawn with the dense 1x2 glyph set: each text row carries two
module rows, using the upper half block, the lower half block, the full
block or a space.  This keeps the code roughly square in a terminal whose
cells are about twice as tall as they are wide.
"""
from __future__ import annotations

import enum
import logging
from typing import List, Sequence

import qrcode
from qrcode.constants import ERROR_CORRECT_M
from qrcode.exceptions import DataOverflowError

from ..errors import QrabError
from .layout import Block

logger = logging.getLogger("qrab.renderer.qr")

QUIET_ZONE = 4

# Indexed by (top_filled, bottom_filled).
_GLYPHS = {
    (False, False): " ",
    (True, False): "▀",
    (False, True): "▄",
    (True, True): "█",
}


class EncodingError(QrabError):
    """Raised when the data cannot be encoded as a QR code."""


class Theme(enum.Enum):
    """Which modules are drawn with glyphs.

    ``DARK`` suits light-on-dark terminals: the light modules are filled in
    and the dark modules are left as background.  ``LIGHT`` is the inverse.
    """

    DARK = "dark"
    LIGHT = "light"

    def filled(self, dark_module: bool) -> bool:
        return not dark_module if self is Theme.DARK else dark_module


def encode(data: str) -> List[List[bool]]:
    """Return the module matrix (quiet zone included) for ``data``."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_CORRECT_M,
        border=QUIET_ZONE,
    )
    try:
        qr.add_data(data)
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as exc:
        raise EncodingError(f"Failed to encode QR code for: {data}") from exc
    logger.debug("encoded %d character(s) as QR version %s", len(data), qr.version)
    return qr.get_matrix()


def draw(matrix: Sequence[Sequence[bool]], theme: Theme) -> str:
    """Draw a module matrix using half-block glyphs.

    A matrix with an odd number of rows has its last row paired with a row
    of light modules.
    """
    lines = []
    for top in range(0, len(matrix), 2):
        upper = matrix[top]
        lower = matrix[top + 1] if top + 1 < len(matrix) else [False] * len(upper)
        lines.append("".join(
            _GLYPHS[(theme.filled(a), theme.filled(b))] for a, b in zip(upper, lower)
        ))
    return "\n".join(lines)


def render_qr(data: str, theme: Theme = Theme.DARK) -> str:
    """Render ``data`` as a QR code ready to print to the terminal."""
    return draw(encode(data), theme)


def render_block(data: str, theme: Theme = Theme.DARK) -> Block:
    return Block.from_text(render_qr(data, theme))
