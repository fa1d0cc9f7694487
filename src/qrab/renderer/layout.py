"""Grid layout for rendered QR codes.

A rendered QR code is a rectangular block of text.  The helpers here place
several blocks side by side, separated by a fixed gutter, and wrap them onto
new rows once the terminal width is used up.  Everything in this module is a
pure function of its inputs.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .terminal import terminal_width as query_terminal_width

logger = logging.getLogger("qrab.renderer.layout")

GUTTER = 2
ROW_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class Block:
    """One rendered glyph grid.

    ``width`` is taken from the first row only.  Rows of a well-formed block
    all share that width; ragged blocks are laid out using the first-row
    width and are never reflowed.
    """

    lines: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))

    @classmethod
    def from_text(cls, text: str, *, strict: bool = False) -> "Block":
        block = cls(_split_rows(text))
        if strict and not block.is_rectangular:
            raise ValueError("block rows must all have the same width")
        return block

    @property
    def width(self) -> int:
        return len(self.lines[0]) if self.lines else 0

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def is_rectangular(self) -> bool:
        return all(len(line) == self.width for line in self.lines)

    def __str__(self) -> str:
        return "\n".join(self.lines)


BlockLike = Union[Block, str]


def _split_rows(text: str) -> Tuple[str, ...]:
    # Only "\n" ends a row; a trailing "\r" is dropped.
    rows = text.split("\n")
    if rows[-1] == "":
        rows.pop()
    return tuple(row[:-1] if row.endswith("\r") else row for row in rows)


def _as_block(item: BlockLike) -> Block:
    return item if isinstance(item, Block) else Block.from_text(item)


def compose_row(blocks: Sequence[Block]) -> str:
    """Merge ``blocks`` left to right into a single multi-line string.

    Blocks shorter than the tallest one are padded with rows of spaces as
    wide as their first row, so the result stays rectangular.
    """
    if not blocks:
        return ""

    gutter = " " * GUTTER
    max_height = max(block.height for block in blocks)

    merged: List[str] = []
    for row in range(max_height):
        parts = []
        for block in blocks:
            if row < block.height:
                parts.append(block.lines[row])
            else:
                parts.append(" " * block.width)
        merged.append(gutter.join(parts))
    return "\n".join(merged)


def columns_per_row(unit_width: int, terminal_width: int) -> int:
    """How many blocks of ``unit_width`` fit side by side; never less than one."""
    terminal_width = max(0, terminal_width)
    return max(1, (terminal_width + GUTTER) // (unit_width + GUTTER))


def layout(blocks: Sequence[Block], terminal_width: int) -> str:
    """Arrange ``blocks`` in a grid no wider than ``terminal_width`` columns.

    The width of the first block decides how many blocks go on each row.  A
    block wider than the terminal still gets a row of its own and simply
    overflows.  Rows are separated by one blank line.
    """
    if not blocks:
        return ""

    unit_width = blocks[0].width
    if unit_width == 0:
        return ""

    per_row = columns_per_row(unit_width, terminal_width)
    logger.debug(
        "laying out %d block(s) of width %d, %d per row (terminal width %d)",
        len(blocks), unit_width, per_row, terminal_width,
    )

    rows = [
        compose_row(blocks[start:start + per_row])
        for start in range(0, len(blocks), per_row)
    ]
    return ROW_SEPARATOR.join(rows)


class QrGrid:
    """A set of rendered QR codes laid out for one terminal width."""

    def __init__(self, qr_codes: Iterable[BlockLike], terminal_width: Optional[int] = None) -> None:
        self.blocks: List[Block] = [_as_block(item) for item in qr_codes]
        if terminal_width is None:
            terminal_width = query_terminal_width()
        self.terminal_width = terminal_width

    def __len__(self) -> int:
        return len(self.blocks)

    def render(self) -> str:
        return layout(self.blocks, self.terminal_width)
