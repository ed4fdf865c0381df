"""The styled game: title screen, music, bevelled blocks and line-clear animation."""

from __future__ import annotations

import random

import pygame

from tetrix.audio import Audio
from tetrix.board import Board
from tetrix.controls import Action, process_event
from tetrix.pieces import SHAPES, SPAWN_X, SPAWN_Y, Piece
from tetrix.render import draw_background, draw_board, draw_piece
from tetrix.window import Window

BLOCK_SIZE = 30
SCALE = 2
PANEL_WIDTH = 180
PANEL_MARGIN = 16
BOARD_OFFSET_X = PANEL_WIDTH + PANEL_MARGIN
BOARD_OFFSET_Y = 40
WIN_WIDTH = BOARD_OFFSET_X + Board.WIDTH * BLOCK_SIZE * SCALE + PANEL_MARGIN
WIN_HEIGHT = BOARD_OFFSET_Y + Board.HEIGHT * BLOCK_SIZE * SCALE + PANEL_MARGIN

ANIMATION_FRAMES = 12
DELAY = 0.5
FPS = 60
TITLE = "Tetris NES Style"
MUSIC_PATH = "assets/music/Tetris.ogg"
FONT_PATH = "arial.ttf"


class Tetris:
    """The styled game with its state, animation counters and main loop."""

    def __init__(
        self,
        rng=None,
        window: Window | None = None,
        music_path: str = MUSIC_PATH,
        font_path: str = FONT_PATH,
    ) -> None:
        self.board = Board()
        self.current: Piece | None = None
        self.game_over = False
        self.quit_requested = False
        self.animated_rows: list[int] = []
        self.anim_frames = 0
        self.music_path = music_path
        self.font_path = font_path
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

    def apply(self, action: Action) -> None:
        """Carry out one player action; a drop locks and clears at once."""
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
            piece.y += 1
            if self.board.collides(piece):
                piece.y -= 1
                self.board.lock(piece)
                self.board.clear_lines()
                self.new_piece()
        elif action is Action.ROTATE:
            piece.rotate()
            if self.board.collides(piece):
                piece.rotate()
        elif action is Action.QUIT:
            self.quit_requested = True

    def gravity_step(self) -> bool:
        """Let the piece fall one row; on landing, start animating full rows."""
        piece = self._piece()
        piece.y += 1
        if not self.board.collides(piece):
            return False
        piece.y -= 1
        self.board.lock(piece)
        self.animated_rows = self.board.full_rows()
        if self.animated_rows:
            self.anim_frames = ANIMATION_FRAMES
        else:
            self.board.clear_lines()
        self.new_piece()
        return True

    def finish_animation_frame(self) -> bool:
        """Count down one animation frame; remove the rows when it ends."""
        if self.anim_frames <= 0:
            return False
        self.anim_frames -= 1
        if self.anim_frames:
            return False
        self.board.remove_rows(self.animated_rows)
        self.animated_rows = []
        return True

    def _font(self, size: int) -> pygame.font.Font:
        pygame.font.init()
        try:
            return pygame.font.Font(self.font_path, size)
        except (OSError, pygame.error):
            return pygame.font.Font(None, size)

    def _background(self, window: Window) -> None:
        draw_background(
            window.surface,
            WIN_WIDTH,
            WIN_HEIGHT,
            BOARD_OFFSET_X,
            BOARD_OFFSET_Y,
            Board.WIDTH * BLOCK_SIZE,
            Board.HEIGHT * BLOCK_SIZE,
            SCALE,
        )

    def _title_screen(self, window: Window) -> bool:
        title_font = self._font(80)
        title_font.set_bold(True)
        prompt_font = self._font(32)
        clock = pygame.time.Clock()
        while window.is_open():
            window.clear()
            self._background(window)
            title = title_font.render("TETRIS", True, (255, 255, 255))
            window.surface.blit(title, (WIN_WIDTH // 2 - title.get_width() // 2, 80))
            prompt = prompt_font.render("Presiona ENTER para jugar", True, (200, 200, 200))
            window.surface.blit(
                prompt, (WIN_WIDTH // 2 - prompt.get_width() // 2, WIN_HEIGHT // 2 + 60)
            )
            window.display()

            started = False
            while (event := window.poll_event()) is not None:
                if event.type == pygame.QUIT:
                    window.close()
                    return False
                if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
                    started = True
            if started:
                return True
            clock.tick(FPS)
        return False

    def _draw(self, window: Window, animating: bool) -> None:
        window.clear()
        self._background(window)
        if animating:
            draw_board(
                window.surface,
                self.board,
                BOARD_OFFSET_X,
                BOARD_OFFSET_Y,
                BLOCK_SIZE,
                SCALE,
                self.animated_rows,
                self.anim_frames,
                ANIMATION_FRAMES,
            )
        else:
            draw_board(
                window.surface, self.board, BOARD_OFFSET_X, BOARD_OFFSET_Y, BLOCK_SIZE, SCALE
            )
        draw_piece(
            window.surface, self._piece(), BOARD_OFFSET_X, BOARD_OFFSET_Y, BLOCK_SIZE, SCALE
        )
        window.display()

    def _run(self, window: Window) -> None:
        clock = pygame.time.Clock()
        timer = 0.0
        self.new_piece()
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

            if self.anim_frames > 0:
                self._draw(window, animating=True)
                self.finish_animation_frame()
                continue

            if timer > DELAY:
                self.gravity_step()
                timer = 0.0

            if self.anim_frames == 0:
                self._draw(window, animating=False)

    def play(self) -> None:
        """Start the music, show the title screen and run the game."""
        audio = Audio(self.music_path)
        audio.play()
        window = self._window or Window(WIN_WIDTH, WIN_HEIGHT, TITLE)
        self.quit_requested = False
        try:
            if self._title_screen(window):
                self._run(window)
        finally:
            window.close()
            audio.stop()