"""The plain single-window game and its command entry point."""

from __future__ import annotations

import random

import pygame

from tetrix.board import Board
from tetrix.colors import BLOCK_SIZE, WHITE
from tetrix.controls import Action, process_event
from tetrix.pieces import SHAPES, SPAWN_X, SPAWN_Y, Piece
from tetrix.window import Window

TITLE = "Tetris SFML"
DELAY = 0.5
FPS = 60

_CELL_COLORS = {
    1: (0, 255, 255),
    2: (255, 255, 0),
    3: (255, 0, 255),
    4: (0, 255, 0),
    5: (255, 0, 0),
    6: (0, 0, 255),
    7: (255, 140, 0),
}


class Game:
    """Game state and loop: a board, the falling piece and the game-over flag."""

    def __init__(self, rng=None, window: Window | None = None) -> None:
        self.board = Board()
        self.current: Piece | None = None
        self.game_over = False
        self.quit_requested = False
        self._rng = rng if rng is not None else random.Random()
        self._window = window

    def _piece(self) -> Piece:
        if self.current is None:
            raise RuntimeError("no piece in play")
        return self.current

    def new_piece(self) -> None:
        """Spawn a random piece; the game is over if it does not fit."""
        piece = Piece(self._rng.randrange(len(SHAPES)))
        piece.x, piece.y = SPAWN_X, SPAWN_Y
        self.current = piece
        if self.board.collides(piece):
            self.game_over = True

    def step_down(self) -> bool:
        """Move the piece one row down, locking it if it cannot go further."""
        piece = self._piece()
        piece.y += 1
        if not self.board.collides(piece):
            return False
        piece.y -= 1
        self.board.lock(piece)
        self.board.clear_lines()
        self.new_piece()
        return True

    def apply(self, action: Action) -> None:
        """Carry out one player action on the falling piece."""
        piece = self._piece()
        if action is Action.MOVE_LEFT:
            piece.x -= 1
            if self.board.collides(piece):
                piece.x += 1
        elif action is Action.MOVE_RIGHT:
            piece.x += 1
            if self.board.collides(piece):
                piece.x -= 1
        elif action is Action.DROP:
            self.step_down()
        elif action is Action.ROTATE:
            piece.rotate()
            if self.board.collides(piece):
                piece.rotate()
        elif action is Action.QUIT:
            self.quit_requested = True

    def _draw(self, window: Window) -> None:
        window.clear()
        size = BLOCK_SIZE - 2
        for row_index, row in enumerate(self.board.grid):
            for col_index, value in enumerate(row):
                if value:
                    window.surface.fill(
                        _CELL_COLORS.get(value, WHITE),
                        pygame.Rect(col_index * BLOCK_SIZE, row_index * BLOCK_SIZE, size, size),
                    )
        piece = self._piece()
        color = _CELL_COLORS.get(piece.kind + 1, WHITE)
        for x, y in piece.cells():
            window.surface.fill(
                color, pygame.Rect(x * BLOCK_SIZE, y * BLOCK_SIZE, size, size)
            )
        window.display()

    def play(self) -> None:
        """Run the game until the window closes or the game is over."""
        window = self._window or Window(
            Board.WIDTH * BLOCK_SIZE, Board.HEIGHT * BLOCK_SIZE, TITLE
        )
        clock = pygame.time.Clock()
        timer = 0.0
        self.quit_requested = False
        self.new_piece()
        try:
            while window.is_open() and not self.game_over:
                timer += clock.tick(FPS) / 1000.0
                while (event := window.poll_event()) is not None:
                    if event.type == pygame.QUIT:
                        window.close()
                        break
                    action = process_event(event)
                    if action is not Action.NONE:
                        self.apply(action)
                    if self.quit_requested:
                        window.close()
                        break
                if not window.is_open():
                    break
                if timer > DELAY:
                    self.step_down()
                    timer = 0.0
                self._draw(window)
        finally:
            window.close()


def main(argv=None) -> int:
    """Start the game."""
    Game().play()
    return 0