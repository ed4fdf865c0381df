"""Tetromino shapes and the falling piece."""

from __future__ import annotations

from collections.abc import Iterator

Shape = tuple[tuple[int, ...], ...]

SHAPES: tuple[Shape, ...] = (
    ((1, 1, 1, 1),),  # I
    ((1, 1), (1, 1)),  # O
    ((0, 1, 0), (1, 1, 1)),  # T
    ((0, 1, 1), (1, 1, 0)),  # S
    ((1, 1, 0), (0, 1, 1)),  # Z
    ((1, 0, 0), (1, 1, 1)),  # J
    ((0, 0, 1), (1, 1, 1)),  # L
)

SPAWN_X = 3
SPAWN_Y = 0


class Piece:
    """A tetromino with its kind, rotation count, position and current shape."""

    def __init__(self, kind: int) -> None:
        self.kind = kind % len(SHAPES)
        self.rotation = 0
        self.x = SPAWN_X
        self.y = SPAWN_Y
        self.shape: Shape = SHAPES[self.kind]

    def __repr__(self) -> str:
        return (
            f"Piece(kind={self.kind}, rotation={self.rotation}, "
            f"x={self.x}, y={self.y})"
        )

    def rotate(self) -> None:
        """Rotate the shape a quarter turn clockwise."""
        self.shape = tuple(tuple(column) for column in zip(*reversed(self.shape)))
        self.rotation = (self.rotation + 1) % 4

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) board coordinates of every filled cell."""
        for row_index, row in enumerate(self.shape):
            for col_index, filled in enumerate(row):
                if filled:
                    yield self.x + col_index, self.y + row_index