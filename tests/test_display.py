import pygame
import pytest

from solong.display import TILE_FILES, Renderer, load_tiles, main
from solong.game import Direction, Game
from solong.mapfile import GameMap
from solong.xpm import XpmError, parse_xpm

COLOURS = {
    "1": "#FF0000",
    "0": "#00FF00",
    "P": "#0000FF",
    "C": "#FFFF00",
    "E": "#00FFFF",
}


def xpm_text(colour):
    return (
        "/* XPM */\nstatic char *img[] = {\n"
        '"2 2 1 1",\n'
        f'"a c {colour}",\n'
        '"aa",\n'
        '"aa"};\n'
    )


def rgb(colour):
    value = int(colour[1:], 16)
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def make_game():
    lines = ("111111", "1PC0E1", "111111")
    return Game(
        GameMap(rows=[list(line) for line in lines], width=6, height=3)
    )


@pytest.fixture
def tiles():
    return {tile: parse_xpm(xpm_text(colour)) for tile, colour in COLOURS.items()}


def pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_draw_places_each_tile(tiles):
    game = make_game()
    surface = pygame.Surface((6 * 64, 3 * 64))
    Renderer(surface, tiles).draw(game)
    assert pixel(surface, 0, 0) == rgb(COLOURS["1"])
    assert pixel(surface, 129, 65) == rgb(COLOURS["C"])
    assert pixel(surface, 192, 64) == rgb(COLOURS["0"])
    assert pixel(surface, 256, 64) == rgb(COLOURS["E"])


def test_draw_follows_player(tiles):
    game = make_game()
    surface = pygame.Surface((6 * 64, 3 * 64))
    renderer = Renderer(surface, tiles)
    game.move(Direction.RIGHT)
    renderer.draw(game)
    assert pixel(surface, 128, 64) == rgb(COLOURS["P"])
    assert pixel(surface, 65, 65) == rgb(COLOURS["0"])


def test_load_tiles_reads_every_file(tmp_path, tiles):
    for tile, name in TILE_FILES.items():
        (tmp_path / name).write_text(xpm_text(COLOURS[tile]))
    loaded = load_tiles(tmp_path)
    assert set(loaded) == set(TILE_FILES)
    assert loaded == tiles


def test_load_tiles_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_tiles(tmp_path)


def test_main_without_arguments():
    assert main([]) == 1


def test_main_bad_extension(capsys):
    assert main(["map.txt"]) == 1
    assert "Check the map extension" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert "There is no such a file" in capsys.readouterr().out


def test_main_square_map(tmp_path, capsys):
    path = tmp_path / "square.ber"
    path.write_text("11111\n1PCE1\n10001\n10001\n11111\n")
    assert main([str(path)]) == 1
    assert "should be rectangular" in capsys.readouterr().out