"""Map files: reading the grid of tiles and the errors a map can have."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from os import PathLike

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"

TILE_SIZE = 64
"""Edge length of one tile on screen, in pixels."""


class MapProblem(Enum):
    """What is wrong with a map; the value is the message shown to the user."""

    EXTENSION = "Check the map extension"
    CHARACTERS = "not only p, c, e, 1, 0"
    WALLS = "not surrounded with walls"
    LINES = "Error with the lines"
    MISSING_TILES = "at least one p, c, e needed"
    RECTANGULAR = "should be rectangular"
    MISSING_FILE = "There is no such a file"


class MapError(Exception):
    """Raised when a map cannot be used."""

    def __init__(self, problem: MapProblem) -> None:
        super().__init__(problem.value)
        self.problem = problem


@dataclass
class GameMap:
    """The tiles of a map, one list of characters per line.

    ``width`` is taken from the first line and ``height`` is the number
    of lines; lines are not checked against each other here.
    """

    rows: list[list[str]]
    width: int
    height: int

    def tile(self, x: int, y: int) -> str:
        """Return the character at column ``x`` of line ``y``."""
        if not 0 <= y < len(self.rows) or not 0 <= x < len(self.rows[y]):
            raise IndexError(f"no tile at ({x}, {y})")
        return self.rows[y][x]


def check_extension(path: str | PathLike[str]) -> None:
    """Raise MapError unless the path ends in ``.ber``."""
    if not str(path).endswith(".ber"):
        raise MapError(MapProblem.EXTENSION)


def _raw_lines(text: str) -> list[str]:
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def read_map(path: str | PathLike[str]) -> GameMap:
    """Read a map file into a GameMap."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(MapProblem.MISSING_FILE) from exc
    raw = _raw_lines(text)
    width = len(raw[0]) - 1 if raw else 0
    rows = [list(line.rstrip("\n")) for line in raw]
    return GameMap(rows=rows, width=width, height=len(rows))