"""Checks that a map is playable before a game is started on it."""

from __future__ import annotations

from dataclasses import dataclass

from solong.mapfile import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    GameMap,
    MapError,
    MapProblem,
)

ALLOWED_TILES = frozenset({PLAYER, EXIT, COLLECTIBLE, WALL, FLOOR})


@dataclass(frozen=True)
class TileCounts:
    """How many players, collectibles and exits a map holds.

    ``player_position`` is the (x, y) of the last player tile found, or
    None when there is none.
    """

    players: int
    collectibles: int
    exits: int
    player_position: tuple[int, int] | None


def _at(game_map: GameMap, x: int, y: int) -> str:
    try:
        return game_map.tile(x, y)
    except IndexError:
        return ""


def _visible_rows(game_map: GameMap) -> list[list[str]]:
    return game_map.rows[: game_map.height]


def count_tiles(game_map: GameMap) -> TileCounts:
    """Count the special tiles between the first and the last line."""
    players = collectibles = exits = 0
    position = None
    inner = game_map.rows[1 : max(game_map.height - 1, 1)]
    for y, row in enumerate(inner, start=1):
        for x, tile in enumerate(row[: game_map.width]):
            if tile == PLAYER:
                players += 1
                position = (x, y)
            elif tile == COLLECTIBLE:
                collectibles += 1
            elif tile == EXIT:
                exits += 1
    return TileCounts(players, collectibles, exits, position)


def check_walls(game_map: GameMap) -> None:
    """Raise MapError unless the map is closed in by walls on every side."""
    height, width = game_map.height, game_map.width
    if height <= 0:
        raise MapError(MapProblem.WALLS)
    left = (_at(game_map, 0, y) for y in range(height))
    right = (_at(game_map, width - 1, y) for y in range(height))
    top = (_at(game_map, x, 0) for x in range(width))
    bottom = (_at(game_map, x, height - 1) for x in range(width))
    for side in (left, right, top, bottom):
        if any(tile != WALL for tile in side):
            raise MapError(MapProblem.WALLS)


def check_characters(game_map: GameMap) -> TileCounts:
    """Raise MapError unless there is at least one player, collectible and exit."""
    counts = count_tiles(game_map)
    if not (counts.players and counts.collectibles and counts.exits):
        raise MapError(MapProblem.MISSING_TILES)
    return counts


def check_allowed(game_map: GameMap) -> None:
    """Raise MapError if a tile is anything other than P, C, E, 1 or 0."""
    for y in range(game_map.height):
        for x in range(game_map.width):
            if _at(game_map, x, y) not in ALLOWED_TILES:
                raise MapError(MapProblem.CHARACTERS)


def check_line_lengths(game_map: GameMap) -> None:
    """Raise MapError unless every line is as long as the first."""
    rows = _visible_rows(game_map)
    if rows and any(len(row) != len(rows[0]) for row in rows[1:]):
        raise MapError(MapProblem.LINES)


def check_rectangular(game_map: GameMap) -> None:
    """Raise MapError if the map is a square."""
    if game_map.height == game_map.width:
        raise MapError(MapProblem.RECTANGULAR)


def check_errors(game_map: GameMap) -> TileCounts:
    """Run every check in turn; return the tile counts of a good map."""
    check_walls(game_map)
    counts = check_characters(game_map)
    check_allowed(game_map)
    check_line_lengths(game_map)
    check_rectangular(game_map)
    return counts