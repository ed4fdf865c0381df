"""Score keeping for cleared lines."""

from __future__ import annotations

LINE_POINTS: dict[int, int] = {1: 100, 2: 300, 3: 500, 4: 800}


class Score:
    """Running score; clearing 1-4 lines at once earns points."""

    def __init__(self) -> None:
        self.points = 0

    def __repr__(self) -> str:
        return f"Score(points={self.points})"

    def add_lines(self, lines: int) -> None:
        """Add the points for clearing the given number of lines at once."""
        self.points += LINE_POINTS.get(lines, 0)

    def reset(self) -> None:
        """Set the score back to zero."""
        self.points = 0