import io

import pytest

from pacmaze.game import (
    ENEMY_FRAMES,
    EXIT_OPEN_IMAGE,
    HIDDEN_X,
    SPEED_FRAME,
    STEP,
    Direction,
    Game,
    Sprite,
)
from pacmaze.mapfile import MapInfo, parse_map
from pacmaze.physics import TILE

SIMPLE = "111111\n1PC0E1\n111111\n"
EXIT_FIRST = "111111\n1PE0C1\n111111\n"
ENEMY_AHEAD = "11111111\n1P0X0001\n10000CE1\n11111111\n"
BONUS_SAFE = "1111111\n1PC0E01\n1000X01\n1111111\n"


def _game(text, with_enemies=False):
    game = Game.from_map(parse_map(text, with_enemies), with_enemies)
    game.out = io.StringIO()
    return game


def _walk(game, direction, limit=200):
    for _ in range(limit):
        if game.closed:
            break
        game.update(direction)


def test_from_map_layout():
    game = _game(SIMPLE)
    assert game.player_position == (TILE, TILE)
    assert len(game.wall.instances) == 14
    assert [(i.x, i.y) for i in game.collect.instances] == [(2 * TILE, TILE)]
    assert [(i.x, i.y) for i in game.exit.instances] == [(4 * TILE, TILE)]
    assert game.enemy.instances == []
    assert game.collect_left == 1
    assert game.steps_counter == 1
    assert not game.closed


def test_from_map_requires_player():
    info = MapInfo(grid=("111", "1C1", "111"), player=(1, 1), collectibles=1, exits=0)
    with pytest.raises(ValueError):
        Game.from_map(info, False)


def test_free_step_moves_and_prints():
    game = _game(SIMPLE)
    x, y = game.player_position
    game.update(Direction.RIGHT)
    assert game.player_position == (x + STEP, y)
    assert game.out.getvalue() == "steps: 1\n"
    assert game.steps_counter == 2


def test_blocked_step_does_not_move_or_count():
    game = _game(SIMPLE)
    start = game.player_position
    game.update(Direction.LEFT)
    assert game.player_position == start
    assert game.out.getvalue() == ""
    assert game.steps_counter == 1


def test_no_key_keeps_position():
    game = _game(SIMPLE)
    start = game.player_position
    game.update(None)
    assert game.player_position == start
    assert game.steps_counter == 1


def test_collect_then_exit_closes():
    game = _game(SIMPLE)
    _walk(game, Direction.RIGHT)
    assert game.closed
    assert game.collect_left == 0
    coin = game.collect.instances[0]
    assert coin.enabled is False
    assert (coin.x, coin.y) == (HIDDEN_X, HIDDEN_X)
    printed = game.out.getvalue().splitlines()
    assert printed == [f"steps: {n}" for n in range(1, len(printed) + 1)]


def test_exit_stays_shut_while_collectibles_remain():
    game = _game(EXIT_FIRST)
    exit_x = game.exit.instances[0].x
    while game.player_position[0] < exit_x and not game.closed:
        game.update(Direction.RIGHT)
    assert not game.closed
    assert game.collect_left == 1


def test_closed_game_ignores_updates():
    game = _game(SIMPLE)
    start = game.player_position
    game.close()
    game.update(Direction.RIGHT)
    assert game.closed
    assert game.player_position == start


def test_bonus_player_frame_follows_direction():
    game = _game(BONUS_SAFE, with_enemies=True)
    game.update(Direction.DOWN)
    assert game.player.image == Direction.DOWN.image
    game.update(Direction.RIGHT)
    assert game.player.image == Direction.RIGHT.image


def test_bonus_steps_label():
    game = _game(BONUS_SAFE, with_enemies=True)
    game.update(Direction.RIGHT)
    assert game.steps_label == "1"
    assert game.out.getvalue() == ""
    game.update(Direction.RIGHT)
    assert game.steps_label == "2"


def test_bonus_enemy_animation_toggles():
    game = _game(BONUS_SAFE, with_enemies=True)
    initial = game.enemy.image
    for _ in range(SPEED_FRAME):
        game.update(None)
    assert game.enemy.image == initial
    game.update(None)
    assert game.enemy.image == ENEMY_FRAMES[1]
    assert game.counter == 0
    for _ in range(SPEED_FRAME + 1):
        game.update(None)
    assert game.enemy.image == ENEMY_FRAMES[0]


def test_bonus_door_opens_after_collecting():
    game = _game(BONUS_SAFE, with_enemies=True)
    assert game.exit.image != EXIT_OPEN_IMAGE
    while game.collect_left and not game.closed:
        game.update(Direction.RIGHT)
    assert game.exit.image == EXIT_OPEN_IMAGE
    coin = game.collect.instances[0]
    assert coin.x == HIDDEN_X and coin.y == TILE
    _walk(game, Direction.RIGHT)
    assert game.closed


def test_bonus_enemy_contact_closes():
    game = _game(ENEMY_AHEAD, with_enemies=True)
    _walk(game, Direction.RIGHT)
    assert game.closed
    assert game.collect_left == 1
    assert game.player_position[0] < game.enemy.instances[0].x


def test_mandatory_ignores_enemy_sprite():
    info = MapInfo(
        grid=("11111", "1PXC1", "1E001", "11111"),
        player=(1, 1),
        collectibles=1,
        exits=1,
    )
    game = Game.from_map(info, False)
    assert game.enemy == Sprite(game.enemy.image, [])
    assert len(game.collect.instances) == 1