"""Drawing of blocks, the board background, the board and the falling piece."""

from __future__ import annotations

from collections.abc import Iterable

import pygame

from tetrix.board import Board
from tetrix.colors import WHITE, Color, piece_color
from tetrix.pieces import Piece

RGBA = tuple[int, int, int, int]

_OUTLINE = (200, 200, 200)
_SHADOW = (80, 80, 80)
_HIGHLIGHT = (255, 255, 255)
_BLACK = (0, 0, 0)


def _fill(surface, rect: pygame.Rect, rgb, alpha: int) -> None:
    if rect.width <= 0 or rect.height <= 0 or alpha <= 0:
        return
    if alpha >= 255:
        surface.fill(tuple(rgb[:3]), rect)
        return
    overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
    overlay.fill((*rgb[:3], alpha))
    surface.blit(overlay, rect.topleft)


def draw_block(surface, x, y, size, scale, color, alpha=255) -> None:
    """Draw one bevelled block with its top-left corner at (x, y)."""
    side = int(size * scale)
    body = side - 2
    x, y = int(x), int(y)

    _fill(surface, pygame.Rect(x, y, body, body), color, alpha)
    # The outline sits outside the body.
    for rect in (
        pygame.Rect(x - 2, y - 2, body + 4, 2),
        pygame.Rect(x - 2, y + body, body + 4, 2),
        pygame.Rect(x - 2, y, 2, body),
        pygame.Rect(x + body, y, 2, body),
    ):
        _fill(surface, rect, _OUTLINE, alpha)

    _fill(surface, pygame.Rect(x + 4, y + side - 10, side - 6, 6), _SHADOW, alpha)
    _fill(surface, pygame.Rect(x + side - 10, y + 4, 6, side - 6), _SHADOW, alpha)

    highlight_alpha = 60 * alpha // 255
    _fill(surface, pygame.Rect(x + 2, y + 2, side - 6, 4), _HIGHLIGHT, highlight_alpha)
    _fill(surface, pygame.Rect(x + 2, y + 2, 4, side - 6), _HIGHLIGHT, highlight_alpha)


def draw_background(
    surface, win_width, win_height, offset_x, offset_y, width, height, scale
) -> None:
    """Paint the black rectangle behind the board."""
    rect = pygame.Rect(
        int(offset_x), int(offset_y), int(width * scale), int(height * scale)
    )
    surface.fill(_BLACK, rect)


def animated_color(base: Color, anim_frames: int, max_frames: int) -> RGBA:
    """Colour of a cell in a clearing row: white first, then fading out."""
    half = max_frames // 2
    if anim_frames > half:
        return (*WHITE, 255)
    if half == 0:
        raise ValueError("max_frames must be at least 2")
    return (base[0], base[1], base[2], 255 * anim_frames // half)


def draw_board(
    surface,
    board: Board,
    offset_x,
    offset_y,
    block_size,
    scale,
    animated_rows: Iterable[int] = (),
    anim_frames=0,
    max_frames=12,
) -> None:
    """Draw every locked cell; rows being cleared are drawn animated."""
    animated = set(animated_rows)
    step = block_size * scale
    for row_index, row in enumerate(board.grid):
        for col_index, value in enumerate(row):
            if not value:
                continue
            base = piece_color(value)
            if row_index in animated:
                *rgb, alpha = animated_color(base, anim_frames, max_frames)
            else:
                rgb, alpha = base, 255
            draw_block(
                surface,
                offset_x + col_index * step,
                offset_y + row_index * step,
                block_size,
                scale,
                tuple(rgb),
                alpha,
            )


def draw_piece(surface, piece: Piece, offset_x, offset_y, block_size, scale) -> None:
    """Draw the falling piece in its kind's colour."""
    color = piece_color(piece.kind + 1)
    step = block_size * scale
    for x, y in piece.cells():
        draw_block(
            surface, offset_x + x * step, offset_y + y * step, block_size, scale, color
        )