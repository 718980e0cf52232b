"""Grid index helpers and colour parsing."""

from __future__ import annotations

import re

from .constants import TILE_COUNT

_HEX_COLOR = re.compile(r"#([0-9a-fA-F]{6})")


def col_row(index: int) -> tuple[int, int]:
    """Return the (column, row) of a board index."""
    return index % TILE_COUNT, index // TILE_COUNT


def xy(index: int) -> tuple[int, int]:
    """Return the (x, y) grid position of a board index."""
    return col_row(index)


def index_of(col: int, row: int) -> int:
    """Return the board index of a grid position."""
    return row * TILE_COUNT + col


def hex_color(color: str, alpha: int = 255) -> tuple[int, int, int, int]:
    """Parse a ``#rrggbb`` string into an RGBA tuple with the given alpha."""
    match = _HEX_COLOR.fullmatch(color)
    if match is None:
        raise ValueError(f"Invalid color format: {color}")
    if not 0 <= alpha <= 255:
        raise ValueError(f"Alpha out of range: {alpha}")
    value = int(match.group(1), 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha