import pytest

from solong.game import Direction, Game, MoveOutcome
from solong.mapfile import GameMap, MapError, MapProblem


def make_map(*lines):
    return GameMap(
        rows=[list(line) for line in lines], width=len(lines[0]), height=len(lines)
    )


def make_game(*lines):
    return Game(make_map(*lines))


def test_start_position_and_counters():
    game = make_game("111111", "1PC0E1", "111111")
    assert game.position == (1, 1)
    assert game.collectibles == 1
    assert (game.steps, game.score, game.won) == (0, 0, False)


def test_wall_blocks():
    game = make_game("111111", "1PC0E1", "111111")
    assert game.move(Direction.LEFT) is MoveOutcome.BLOCKED
    assert game.move(Direction.UP) is MoveOutcome.BLOCKED
    assert game.position == (1, 1)
    assert game.steps == 0


def test_collecting_moves_player():
    game = make_game("111111", "1PC0E1", "111111")
    assert game.move(Direction.RIGHT) is MoveOutcome.COLLECTED
    assert game.score == 1
    assert game.steps == 1
    assert game.map.tile(2, 1) == "P"
    assert game.map.tile(1, 1) == "0"


def test_full_run_wins():
    game = make_game("111111", "1PC0E1", "111111")
    outcomes = [game.move(Direction.RIGHT) for _ in range(3)]
    assert outcomes == [MoveOutcome.COLLECTED, MoveOutcome.MOVED, MoveOutcome.WON]
    assert game.won
    assert game.steps == 2
    assert game.position == (3, 1)
    assert game.map.tile(4, 1) == "E"


def test_exit_stays_locked_until_everything_collected():
    game = make_game("111111", "1PE0C1", "111111")
    assert game.move(Direction.RIGHT) is MoveOutcome.EXIT_LOCKED
    assert game.position == (1, 1)
    assert game.steps == 0
    assert not game.won


def test_vertical_moves():
    game = make_game("11111", "1PC01", "10E01", "11111")
    assert game.move(Direction.DOWN) is MoveOutcome.MOVED
    assert game.position == (1, 2)
    assert game.move(Direction.UP) is MoveOutcome.MOVED
    assert game.position == (1, 1)
    assert game.steps == 2


def test_map_without_player_is_refused():
    with pytest.raises(MapError) as info:
        make_game("111111", "10C0E1", "111111")
    assert info.value.problem is MapProblem.MISSING_TILES


@pytest.mark.parametrize("direction", list(Direction))
def test_each_direction_moves_one_tile(direction):
    game = make_game(
        "1111111",
        "10000C1",
        "1000001",
        "100P001",
        "1000001",
        "1E00001",
        "1111111",
    )
    start_x, start_y = game.position
    assert game.move(direction) is MoveOutcome.MOVED
    new_x, new_y = game.position
    assert abs(new_x - start_x) + abs(new_y - start_y) == 1
    assert game.map.tile(new_x, new_y) == "P"
    assert game.map.tile(start_x, start_y) == "0"
    assert game.steps == 1