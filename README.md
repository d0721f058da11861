# snakeduel

A snake game for the terminal. Two players share one keyboard and race for
the same food on a walled board. There is also a single-player mode.

## Installing

```
pip install .
```

The game draws with Python's built-in `curses` module, so it runs in a
terminal on Linux, macOS and other POSIX systems.

## Playing a duel

```
snakeduel
```

The board has 40 columns by 20 rows inside its walls. `~` runs along the top
and bottom and `#` runs down the sides. Player 1's snake is drawn as `O` for
the head and `o` for the body. Player 2's snake is drawn as `X` and `x`. Food
is shown as `&`.

| Key             | Action                       |
|-----------------|------------------------------|
| Arrow keys      | steer player 1               |
| `w` `a` `s` `d` | steer player 2               |
| `e`             | end the round                |

A snake cannot turn straight back onto itself. Each piece of food is worth
10 points on screen and makes the snake one segment longer, up to 500
segments.

A player loses by running into a wall, into their own body, or with their
head into the other snake's body. Any of these ends the round.

When the two heads land on the same cell:
- If the snakes have equal length, the round ends.
- If one snake is longer, the shorter one is counted as lost, but play goes on.

A round lasts at most two minutes. If both snakes are still alive at the end,
the higher score wins, and equal scores are a tie.

When the round is over, the result is shown. Press `g` to play again or `e`
to quit.

### Score file

After every round, one entry is appended to `score.txt` in the current
directory, for example:

```
Player 1: 3 | Player 2: 1 | Winner: Player 1 (Score)
```

The numbers count pieces of food eaten. The last part is one of the
following:
- `Winner: Player 1`
- `Winner: Player 2`
- `Winner: Player 1 (Score)`
- `Winner: Player 2 (Score)`
- `Result: Tie`

Each of these ends with a line break. When both snakes are counted as lost,
nothing follows the scores, not even a line break.

If the file cannot be opened, the result is not saved and the game goes on.

## Playing alone

```
snakeduel-solo
```

This mode uses a 40 by 10 board, steered with the arrow keys. Each piece of
food scores one point and lengthens the snake, up to 100 segments.

Walls and the snake's own body do not end this game. The snake simply stops
when a wall is in its way. Press `e` to quit.

## Using the rules from Python

The game rules work without a terminal.

- `snakeduel.model` holds the `Direction`, `Snake`, `Board` and `Duel` types.
  - A `Duel` takes key names through `handle_key`, for example `"KEY_LEFT"`, `"w"` or `"e"`.
  - It moves forward one step at a time through `tick`.
  - Its state is held in `score1`, `score2`, `dead1`, `dead2`, `over` and `aborted`.
  - It accepts its own `random.Random` and clock, which makes games reproducible.
- `snakeduel.results` handles the end of a round.
  - `decide_outcome` decides how a round ended and returns an `Outcome`.
  - `banner` gives the text shown for the outcome.
  - `record_line` and `save_score` write the score file.
- `snakeduel.screen` holds the curses front end.
  - `board_cells` returns the wall characters by position.
  - `game_over_lines` returns the pieces of the result screen.
  - `play` runs duels on a curses window.
- `snakeduel.solo` has the single-player `SoloGame` and `render_solo`, which renders a game as text lines.

## What it does not do

- There is no computer opponent and no network play.
- The score file is only written, never read back, so there is no high-score table.
- Board size and the time limit are fixed for the commands. They can only be changed by building a `Duel` or `SoloGame` from Python.

## Running the tests

```
pip install ".[test]"
pytest
```