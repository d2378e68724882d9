# solong

A small top-down tile game. The player walks across a walled map, picks up
every collectible and then steps onto the exit. Each successful move is
counted; the step count is drawn in the window and printed to standard
output.

## Installing

```
pip install .
```

This installs the `solong` command and its one runtime dependency, pygame.

## Playing

```
solong path/to/level.ber
```

The same entry point can be run as `python -m solong.display path/to/level.ber`.
With no argument the command exits with status 1.

Controls:

| Key    | Action     |
|--------|------------|
| W      | move up    |
| S      | move down  |
| A      | move left  |
| D      | move right |
| Escape | quit       |

Closing the window also quits. Walking into a wall does nothing. Stepping onto
the exit ends the game only once every collectible has been picked up; the
line `Game over. Steps taken: ` and the final step count are then printed.
Before that the exit cannot be entered.

## Map files

A map is a plain text file with the `.ber` extension, one row per line:

| Char | Meaning     |
|------|-------------|
| `1`  | wall        |
| `0`  | floor       |
| `P`  | player      |
| `C`  | collectible |
| `E`  | exit        |

Example:

```
1111111111
1P0000C001
1000110001
1C000000E1
1111111111
```

A map is rejected, with one of these messages on standard output and exit
status 1, when:

| Problem                                        | Message                       |
|------------------------------------------------|-------------------------------|
| the file name does not end in `.ber`           | `Check the map extension`     |
| the file cannot be read                        | `There is no such a file`     |
| the outer border is not made of walls          | `not surrounded with walls`   |
| there is no player, no collectible or no exit  | `at least one p, c, e needed` |
| any character other than the five above        | `not only p, c, e, 1, 0`      |
| rows are not all the same length               | `Error with the lines`        |
| the map is square rather than rectangular      | `should be rectangular`       |

## Tile images

The window is a grid of 64-pixel tiles. The images are read from a `data`
directory in the current working directory:

| Tile        | File           |
|-------------|----------------|
| wall        | `wall4.xpm`    |
| floor       | `grass.xpm`    |
| player      | `farmer.xpm`   |
| collectible | `playerbg.xpm` |
| exit        | `exit3.xpm`    |

If any of them is missing or cannot be decoded, the command prints the error
to standard error and exits with status 1.

## What is not included

The package ships no tile images; the `data` directory with the five XPM
files above has to be supplied alongside the maps before the game can be
played. It has no level editor and no bundled levels.

## Using it as a library

```python
from solong.mapfile import read_map
from solong.validate import check_errors
from solong.game import Game, Direction, MoveOutcome

game_map = read_map("level.ber")
check_errors(game_map)
game = Game(game_map)
outcome = game.move(Direction.RIGHT)
if outcome is MoveOutcome.WON:
    print("won in", game.steps, "steps")
```

- `solong.mapfile`: `read_map`, `check_extension`, `GameMap` (with `rows`,
  `width`, `height` and `tile(x, y)`), `MapError` and `MapProblem`, whose
  values are the messages above.
- `solong.validate`: `check_walls`, `check_characters`, `check_allowed`,
  `check_line_lengths`, `check_rectangular` and `check_errors`, each raising
  `MapError` with the matching `MapProblem`; `count_tiles` returns a
  `TileCounts` with the numbers of players, collectibles and exits and the
  player's position.
- `solong.game`: `Game` keeps the player's position, `steps`, `score` and
  `won`; `Game.move` takes a `Direction` (`UP`, `DOWN`, `LEFT`, `RIGHT`) and
  returns a `MoveOutcome` (`BLOCKED`, `MOVED`, `COLLECTED`, `EXIT_LOCKED`,
  `WON`).
- `solong.xpm`: `load_xpm`, `parse_xpm` and `parse_xpm_lines` decode XPM
  images into an `XpmImage` of 0xAARRGGBB pixels, with named X11 colours and
  `None` transparency; bad data raises `XpmError`. `strip_comments` and
  `split_words` are the helpers they use.
- `solong.colors`: `lookup_color` maps an X11 colour name, in any case, to
  its 0xRRGGBB value (`none` gives -1).
- `solong.display`: `Renderer` draws a game onto a pygame surface,
  `load_tiles` reads the tile images from a directory, and `main` is the
  `solong` command.

## Running the tests

```
pip install .[test]
pytest
```