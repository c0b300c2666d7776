import random

import numpy as np
import pytest

from tankwars.game import TankWars
from tankwars.health_bar import HealthBar
from tankwars.projectile import Projectile
from tankwars.window import Key, Window


@pytest.fixture
def game():
    g = TankWars(Window(), clock=lambda: 0.0, rng=random.Random(0))
    g.init()
    g.update(0.0)
    return g


def test_init_builds_world(game):
    assert len(game.tanks) == TankWars.NUM_TANKS
    assert len(game.terrain.height_map) == int(TankWars.LOGIC_WIDTH) + 1
    assert len(game.sky_decor) == 18
    assert game.tanks[0].position[0] == pytest.approx(TankWars.LOGIC_WIDTH / 6)
    assert game.tanks[1].position[0] == pytest.approx(TankWars.LOGIC_WIDTH * 5 / 6)


def test_tanks_settle_on_terrain(game):
    for tank in game.tanks:
        x, y = tank.position
        assert y == pytest.approx(game.terrain.height_at(x))


def test_fire_keys(game):
    game.on_key_press(Key.SPACE, 0)
    game.on_key_press(Key.ENTER, 0)
    assert [p.tank_id for p in game.projectiles] == [0, 1]


def test_dead_tank_cannot_fire(game):
    game.tanks[0].is_alive = False
    game.on_key_press(Key.SPACE, 0)
    assert game.projectiles == []


def test_move_right_with_held_key(game):
    start = game.tanks[0].position[0]
    game.window.key_callback(Key.D, 0, 1, 0)
    game.on_input_update(0.1, 0)
    game.update(0.0)
    assert game.tanks[0].position[0] > start
    assert game.tanks[1].position[0] == pytest.approx(TankWars.LOGIC_WIDTH * 5 / 6)


def test_barrel_keys_directions(game):
    game.window.key_callback(Key.W, 0, 1, 0)
    game.window.key_callback(Key.UP, 0, 1, 0)
    game.on_input_update(0.1, 0)
    assert game.tanks[0].barrel_rotation == pytest.approx(0.1)
    assert game.tanks[1].barrel_rotation == pytest.approx(-0.1)


def test_offscreen_projectile_removed(game):
    game.projectiles.append(Projectile(0, (-10.0, 100.0), 0.0))
    game.update(0.0)
    assert game.projectiles == []


def test_hit_damages_tank(game):
    x, y = game.tanks[0].position
    game.projectiles.append(Projectile(1, (x, y + 5.0), 0.0))
    game.update(0.0)
    assert game.projectiles == []
    assert game.tanks[0].health_bar.hp == HealthBar.INITIAL_HP - 1


def test_draw_list_contents(game):
    items = game.draw_list()
    squares = len(game.terrain.squares)
    expected = 2 * 2 + squares + 2 * 4 + 2 + len(game.sky_decor)
    assert len(items) == expected
    mesh, matrix = items[4]
    assert mesh is game.terrain.mesh
    np.testing.assert_allclose(matrix, game.vis.matrix @ game.terrain.squares[0])


def test_draw_list_skips_dead_tank(game):
    before = len(game.draw_list())
    game.tanks[1].is_alive = False
    after = len(game.draw_list())
    assert before - after == 2 + 4 + 1


def test_planets_move_stars_stay(game):
    planet, star = game.sky_decor[0], game.sky_decor[-1]
    py, sy = planet.y, star.y
    game.update(0.5)
    assert planet.y != py
    assert star.y == sy