# tetrix

A classic falling-blocks puzzle game played in a pygame window. The seven
tetromino shapes (I, O, T, S, Z, J, L) fall onto a 10 × 20 board. When a
row is completely filled it disappears.

## Installation

```
pip install .
```

## Playing

Start the game with:

```
tetrix
```

A window opens and a piece starts to fall one row every half second. The
game ends when a new piece does not fit at the top of the board. It also
ends when you quit or close the window.

### Controls

| Key | Action                                         |
|-----|------------------------------------------------|
| A   | Move left                                      |
| D   | Move right                                     |
| S   | Move down one row (locks the piece if blocked) |
| W   | Rotate a quarter turn clockwise                |
| Q   | Quit                                           |

Moves and rotations that would leave the board or overlap locked blocks
are ignored.

## NES-style variant

`tetrix.nes.Tetris` is a fuller version of the game. It has no command of
its own, so you start it from Python:

```python
from tetrix.nes import Tetris

Tetris().play()
```

This version:

- plays background music from `assets/music/Tetris.ogg`, a path relative
  to the working directory,
- shows a title screen and waits for you to press ENTER,
- draws shaded blocks at double scale,
- makes completed rows flash for 12 frames before it removes them.

The music file must be there. If it cannot be loaded, `tetrix.audio.Audio`
raises `RuntimeError`. The title screen uses `arial.ttf` from the working
directory if it exists; otherwise it uses pygame's default font. You can
give other paths with
`Tetris(music_path=..., font_path=...)`.

## Using the game logic in your own code

The board, pieces and scoring work without a window:

```python
from tetrix.board import Board
from tetrix.pieces import Piece
from tetrix.scoring import Score

board = Board()
piece = Piece(0)            # the I piece, spawned at x=3, y=0
piece.y = 19
if not board.collides(piece):
    board.lock(piece)
print(board.full_rows())    # indices of completely filled rows
print(board.clear_lines())  # number of rows removed
print(board.render_text())  # '#' for filled cells, '.' for empty ones

score = Score()
score.add_lines(4)          # 1/2/3/4 lines earn 100/300/500/800
print(score.points)
```

`tetrix.colors.piece_color` gives the RGB colour for a cell value from 1 to
7. `tetrix.controls.process_event` maps a pygame key event to an `Action`.

## What it does not do

- Neither game shows or keeps a score while you play. `Score` is there
  for your own use, but the game loops do not call it.
- There are no levels, no speed-up, no next-piece preview and no hard drop.
- Nothing is saved between games.

## Running the tests

```
pip install ".[test]"
pytest
```