"""Piece colours and shared layout constants."""

from __future__ import annotations

Color = tuple[int, int, int]

BLOCK_SIZE = 30

WIN_WIDTH = 800
WIN_HEIGHT = 600
BOARD_OFFSET_X = 50
BOARD_OFFSET_Y = 50
SCALE = 1.0

WHITE: Color = (255, 255, 255)

_PIECE_COLORS: dict[int, Color] = {
    1: (102, 255, 255),
    2: (255, 255, 102),
    3: (255, 102, 255),
    4: (102, 255, 102),
    5: (255, 102, 102),
    6: (102, 102, 255),
    7: (255, 178, 102),
}


def piece_color(kind: int) -> Color:
    """Return the RGB colour for a board cell value (1-7); white otherwise."""
    return _PIECE_COLORS.get(kind, WHITE)