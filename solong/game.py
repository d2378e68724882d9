"""The state of a game in progress and the player's moves."""

from __future__ import annotations

from enum import Enum

from solong.mapfile import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap
from solong.validate import check_characters


class Direction(Enum):
    """A step on the grid as (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class MoveOutcome(Enum):
    """What a move did."""

    BLOCKED = "blocked"
    MOVED = "moved"
    COLLECTED = "collected"
    EXIT_LOCKED = "exit_locked"
    WON = "won"


class Game:
    """A map being played: the player's position, steps taken and score."""

    def __init__(self, game_map: GameMap) -> None:
        counts = check_characters(game_map)
        assert counts.player_position is not None
        self.map = game_map
        self.x, self.y = counts.player_position
        self.collectibles = counts.collectibles
        self.score = 0
        self.steps = 0
        self.won = False

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def move(self, direction: Direction) -> MoveOutcome:
        """Try to move the player one tile; the exit opens once all is collected."""
        dx, dy = direction.value
        x, y = self.x + dx, self.y + dy
        target = self.map.tile(x, y)
        if target == WALL:
            return MoveOutcome.BLOCKED
        if target == EXIT:
            if self.score == self.collectibles:
                self.won = True
                return MoveOutcome.WON
            return MoveOutcome.EXIT_LOCKED
        collected = target == COLLECTIBLE
        if collected:
            self.score += 1
        self.map.rows[self.y][self.x] = FLOOR
        self.map.rows[y][x] = PLAYER
        self.x, self.y = x, y
        self.steps += 1
        return MoveOutcome.COLLECTED if collected else MoveOutcome.MOVED