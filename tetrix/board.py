"""The playing field: collision, locking and line clearing."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from tetrix.pieces import Piece

_CLEAR_SCREEN = "\033[2J\033[H"


class Board:
    """A grid of cells; 0 is empty, 1-7 is the kind of the piece locked there."""

    WIDTH = 10
    HEIGHT = 20

    def __init__(self) -> None:
        self.grid: list[list[int]] = [self._empty_row() for _ in range(self.HEIGHT)]

    @classmethod
    def _empty_row(cls) -> list[int]:
        return [0] * cls.WIDTH

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.WIDTH and 0 <= y < self.HEIGHT

    def collides(self, piece: Piece) -> bool:
        """Tell whether the piece leaves the board or overlaps a locked cell."""
        return any(
            not self._inside(x, y) or self.grid[y][x] for x, y in piece.cells()
        )

    def lock(self, piece: Piece) -> None:
        """Write the piece's cells into the grid; cells outside are dropped."""
        for x, y in piece.cells():
            if self._inside(x, y):
                self.grid[y][x] = piece.kind + 1

    def full_rows(self) -> list[int]:
        """Return the indices of completely filled rows, top to bottom."""
        return [index for index, row in enumerate(self.grid) if all(row)]

    def remove_rows(self, rows: Iterable[int]) -> None:
        """Delete each row in the given order, adding an empty row on top."""
        for index in rows:
            del self.grid[index]
            self.grid.insert(0, self._empty_row())

    def clear_lines(self) -> int:
        """Remove every full row and return how many were removed."""
        kept = [row for row in self.grid if not all(row)]
        cleared = self.HEIGHT - len(kept)
        self.grid = [self._empty_row() for _ in range(cleared)] + kept
        return cleared

    def render_text(self) -> str:
        """Return the grid as text, '#' for filled and '.' for empty cells."""
        return "".join(
            "".join("#" if cell else "." for cell in row) + "\n" for row in self.grid
        )

    def draw(self) -> None:
        """Clear the terminal and print the grid."""
        sys.stdout.write(_CLEAR_SCREEN + self.render_text())
        sys.stdout.flush()