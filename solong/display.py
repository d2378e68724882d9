"""Drawing the game with pygame and the command that starts it."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from os import PathLike
from pathlib import Path

import pygame

from solong.game import Direction, Game, MoveOutcome
from solong.mapfile import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    TILE_SIZE,
    WALL,
    MapError,
    check_extension,
    read_map,
)
from solong.validate import check_errors
from solong.xpm import XpmError, XpmImage, load_xpm

DATA_DIR = Path("data")
TILE_FILES = {
    WALL: "wall4.xpm",
    FLOOR: "grass.xpm",
    PLAYER: "farmer.xpm",
    COLLECTIBLE: "playerbg.xpm",
    EXIT: "exit3.xpm",
}
WINDOW_TITLE = "so_long"
STEPS_POSITION = (50, 50)
STEPS_COLOR = (255, 0, 0)
_FONT_SIZE = 20

_KEYS = {
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}


def load_tiles(directory: str | PathLike[str]) -> dict[str, XpmImage]:
    """Load the image of every tile kind from a directory."""
    base = Path(directory)
    return {tile: load_xpm(base / name) for tile, name in TILE_FILES.items()}


def _to_surface(image: XpmImage) -> pygame.Surface:
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y, row in enumerate(image.rows):
        for x, pixel in enumerate(row):
            # The top byte is transparency, not opacity.
            colour = (
                (pixel >> 16) & 0xFF,
                (pixel >> 8) & 0xFF,
                pixel & 0xFF,
                255 - ((pixel >> 24) & 0xFF),
            )
            surface.set_at((x, y), colour)
    return surface


class Renderer:
    """Draws a game's tiles and step count onto a surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        tiles: Mapping[str, XpmImage],
        tile_size: int = TILE_SIZE,
    ) -> None:
        self.surface = surface
        self.tile_size = tile_size
        self._images = {tile: _to_surface(image) for tile, image in tiles.items()}
        self._font: pygame.font.Font | None = None

    def _steps_font(self) -> pygame.font.Font:
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        return self._font

    def draw(self, game: Game) -> None:
        """Draw every tile of the map, then the number of steps."""
        game_map = game.map
        for y, row in enumerate(game_map.rows[: game_map.height]):
            for x, tile in enumerate(row[: game_map.width]):
                image = self._images.get(tile)
                if image is not None:
                    self.surface.blit(image, (x * self.tile_size, y * self.tile_size))
        text = self._steps_font().render(str(game.steps), True, STEPS_COLOR)
        self.surface.blit(text, STEPS_POSITION)


def _play(game: Game, tiles: Mapping[str, XpmImage]) -> int:
    size = (game.map.width * TILE_SIZE, game.map.height * TILE_SIZE)
    window = pygame.display.set_mode(size)
    pygame.display.set_caption(WINDOW_TITLE)
    renderer = Renderer(window, tiles)
    renderer.draw(game)
    pygame.display.flip()
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return 0
        if event.type != pygame.KEYDOWN:
            continue
        if event.key == pygame.K_ESCAPE:
            return 0
        direction = _KEYS.get(event.key)
        if direction is None:
            continue
        outcome = game.move(direction)
        if outcome is MoveOutcome.WON:
            print("Game over. Steps taken: ")
            print(game.steps)
            return 0
        if outcome in (MoveOutcome.MOVED, MoveOutcome.COLLECTED):
            renderer.draw(game)
            pygame.display.flip()
            print(game.steps)


def main(argv: Sequence[str] | None = None) -> int:
    """Check the map named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    path = args[0]
    try:
        check_extension(path)
        game_map = read_map(path)
        check_errors(game_map)
    except MapError as exc:
        print(exc)
        return 1
    game = Game(game_map)
    try:
        tiles = load_tiles(DATA_DIR)
    except XpmError as exc:
        print(exc, file=sys.stderr)
        return 1
    pygame.init()
    try:
        return _play(game, tiles)
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())