import pytest

from solong.mapfile import GameMap, MapError, MapProblem
from solong.validate import (
    TileCounts,
    check_allowed,
    check_characters,
    check_errors,
    check_line_lengths,
    check_rectangular,
    check_walls,
    count_tiles,
)


def make_map(*lines):
    return GameMap(
        rows=[list(line) for line in lines], width=len(lines[0]), height=len(lines)
    )


GOOD = ("111111", "1PC0E1", "111111")


def test_good_map_passes_and_reports_counts():
    counts = check_errors(make_map(*GOOD))
    assert counts == TileCounts(
        players=1, collectibles=1, exits=1, player_position=(1, 1)
    )


def test_count_tiles_ignores_first_and_last_lines():
    counts = count_tiles(make_map("1C1E1", "1PCC1", "1C1E1"))
    assert counts.collectibles == 2
    assert counts.exits == 0
    assert counts.player_position == (1, 1)


def test_count_tiles_keeps_last_player():
    counts = count_tiles(make_map("111111", "1P0CE1", "10P001", "111111"))
    assert counts.players == 2
    assert counts.player_position == (2, 2)


@pytest.mark.parametrize(
    "lines",
    [
        ("110111", "1PC0E1", "111111"),
        ("111111", "1PC0E1", "111101"),
        ("111111", "0PC0E1", "111111"),
        ("111111", "1PC0E0", "111111"),
    ],
)
def test_open_sides_are_rejected(lines):
    with pytest.raises(MapError) as info:
        check_walls(make_map(*lines))
    assert info.value.problem is MapProblem.WALLS


def test_short_line_fails_wall_check():
    with pytest.raises(MapError) as info:
        check_errors(make_map("111111", "1PCE1", "111111"))
    assert info.value.problem is MapProblem.WALLS


def test_missing_collectible_is_rejected():
    with pytest.raises(MapError) as info:
        check_characters(make_map("111111", "1P00E1", "111111"))
    assert info.value.problem is MapProblem.MISSING_TILES


def test_unknown_character_is_rejected():
    with pytest.raises(MapError) as info:
        check_errors(make_map("111111", "1PXCE1", "111111"))
    assert info.value.problem is MapProblem.CHARACTERS


def test_check_allowed_accepts_good_map():
    game_map = make_map(*GOOD)
    check_allowed(game_map)
    assert game_map.rows[1] == list(GOOD[1])


def test_longer_line_is_rejected():
    with pytest.raises(MapError) as info:
        check_errors(make_map("111111", "1PCE011", "111111"))
    assert info.value.problem is MapProblem.LINES


def test_line_lengths_differing():
    with pytest.raises(MapError) as info:
        check_line_lengths(make_map("1111", "11", "1111"))
    assert info.value.problem is MapProblem.LINES


def test_square_map_is_rejected():
    with pytest.raises(MapError) as info:
        check_errors(make_map("11111", "1PCE1", "10001", "10001", "11111"))
    assert info.value.problem is MapProblem.RECTANGULAR


def test_check_rectangular_direct():
    with pytest.raises(MapError) as info:
        check_rectangular(make_map("111", "1P1", "111"))
    assert str(info.value) == "should be rectangular"


def test_empty_map_is_rejected():
    with pytest.raises(MapError) as info:
        check_walls(GameMap(rows=[], width=0, height=0))
    assert info.value.problem is MapProblem.WALLS