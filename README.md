# pikaconnect

pikaconnect is a tile-matching "connect" puzzle game built on pygame. The
playing area has 9 rows and 16 columns of icons. There are 24 kinds of icon and
6 copies of each. Click two matching icons to remove them. A pair can only be
removed when the two icons can be joined by a path of empty cells that turns at
most twice. The path may run through the empty border around the board.

## Playing

Install the package, which also installs pygame. Then start the game:

```
pip install .
pikaconnect
```

Options:

- `--assets DIR` sets the directory that holds the game data. The default is
  `data`, relative to the current working directory.
- `--fullscreen` opens the window in full-screen mode.

The window is 1200 by 800 pixels and runs at 60 frames per second.

The assets directory must contain these sub-directories:

- `pokemon_icon/`: the icons, named `<kind>-up.png` and `<kind>-down.png` for
  kinds 1 to 24.
- `pokemon_screen/`: the title screen `mewtwo.png` and one background per
  level (`<level>.png`). Each level also needs a pause screen
  (`<level>-pause.png`), a level-cleared screen (`<level>-sub-win.png`) and a
  lost screen (`<level>-sub-lose.png`). The buttons go here too.
- `chance/`: the chance counters, named `<n>-chance.png`.
- `time/`: `run_time.png`, one segment of the time bar.
- `audio/`: `soundtrack.wav`, `first_move.wav`, `delete.wav` and
  `no_delete.wav`. Sounds are used only when the audio mixer is available.

## Rules

- There are seven levels. Each level has a 420-second clock, shown as a
  shrinking time bar. The level is lost when the clock runs out.
- After a pair is removed, the remaining icons move to close the gaps. The
  direction depends on the level:
  - level 1: nothing moves
  - level 2: icons above the gap fall down
  - level 3: icons below the gap rise up
  - level 4: icons to the left of the gap slide right
  - level 5: icons to the right of the gap slide left
  - level 6: each half of the board closes its gaps away from the centre line
  - level 7: each half of the board closes its gaps towards the centre line
- A level starts with one chance more than the player carried over from the
  previous level. The first level starts with one chance.
- If a removal leaves icons on the board but no pair that can be connected, one
  chance is used and the board is reshuffled until a move exists.
- If the chance count falls below zero, the next click on the level ends it as
  lost.
- When a level is cleared, the unused chances carry over to the next level.
- Clearing level 7 shows the final win screen. From there you can play again
  from level 1 or go back to the title screen.
- The side panel has three buttons:
  - **New** starts again from level 1.
  - **Pause** stops the clock and shows the pause screen. From the pause screen
    you can continue or go to the main menu.
  - **Menu** returns to the title screen.

## Using the pieces

The board logic, the shifting rules and the timer do not need a display. You
can use them on their own:

```python
import random
from pikaconnect.board import Board

rng = random.Random(0)
board = Board.new(rng)
print(board.has_move(), board.is_complete())
```

The main pieces:

- `pikaconnect.board.Board` holds the grid, with 0 meaning an empty cell.
  - `find_way(xa, ya, xb, yb)` tells whether two cells match and can be
    connected.
  - `has_move()`, `shuffle(rng)` and `is_complete()` work on the whole board.
  - `remove(level, xa, ya, xb, yb)` removes a pair and then moves the other
    icons as that level dictates.
- `pikaconnect.gravity.remove_pair(board, level, xa, ya, xb, yb)` applies the
  same rules to a plain list-of-lists grid. It raises `ValueError` for an
  unknown level.
- `pikaconnect.session.Session` is one level in play: the board, the selected
  cell, the chances and the clock. Its `click_cell(x, y)` method returns a
  `Selection`, one of `IGNORED`, `FIRST`, `CANCELLED`, `MATCHED` or
  `MISMATCHED`. `cell_at(px, py)` converts a screen point to a board cell.
- `pikaconnect.timer.Timer` is a millisecond stopwatch that can be paused. It
  takes an optional `clock` callable.

## What it does not do

The package does not include any images or sounds. You must supply them in the
assets directory described above. Progress is not saved between runs, and
there is no score table.

## Running the tests

```
pip install .[test]
pytest
```