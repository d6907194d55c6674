# tileduel

A two-player duel of the classic sliding tile puzzle. Two 4×4 boards sit
side by side. Each player slides their own tiles, and equal tiles merge into
one that shows their sum. Every merge adds the new value to that player's
score.

## Installing

```
pip install .
```

## Playing

```
tileduel
```

The window has these screens:

- **Main menu**: press the space bar to start, or `i` to read the instructions.
- **Instructions**: press the space bar to start, or `m` to go back to the main menu.
- **Game**:
  - Player 1 moves the left board with `w`, `a`, `s` and `d`.
  - Player 2 moves the right board with the arrow keys.
- **Result**: press `m` to return to the main menu with fresh boards.

The 60-second timer starts when either player first scores. A player whose
board can no longer move loses. If the timer runs out first, the higher score
wins, and an equal score is a tie. The result screen colours the winner's
board green and the loser's red.

## Modules

- `tileduel.model`: `Model`, one player's board, with `tiles` (sixteen
  values in row-major order), `score`, `over`, `refresh_over()` and the four
  moves `move_left()`, `move_up()`, `move_down()` and `move_right()`.
  `GameOverError` is raised by a move on a board that has no moves left.
- `tileduel.layout`: window and tile geometry (`window_dimensions()`,
  `tile_dimensions()`, `tile_position()`), tile colours and labels
  (`tile_color()`, `tile_label()`), the `Screen` enum and `decide_outcome()`,
  which returns an `Outcome`.
- `tileduel.view`: `View`, which draws the current screen onto a pygame
  surface and gives the `timer_text()` and `winner_text()` shown on it.
- `tileduel.controller`: `Controller`, which routes key presses and runs the
  window loop, and `main()`, the `tileduel` command.

## Using the game model

The board logic in `tileduel.model` needs no display:

```python
import random
from tileduel.model import Model, GameOverError

model = Model(random.Random(0))
model.move_left()
print(model.tiles, model.score)

model.refresh_over()
if model.over:
    try:
        model.move_up()
    except GameOverError:
        print("no moves left")
```

A new board starts with three random tiles. A move that changes nothing
does not add a tile. A move that changes the board adds one new tile in a
random empty cell. That tile is a 4 one time in ten and a 2 otherwise.

## Running the tests

```
pip install .[test]
pytest
```