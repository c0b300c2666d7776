import random

import pytest

from tankwars import transform2d
from tankwars.projectile import Projectile
from tankwars.terrain import Terrain, generate_height


class _ZeroRng:
    def randrange(self, n):
        return 0


def _terrain(width=320):
    terrain = Terrain()
    terrain.init(width, _ZeroRng())
    return terrain


def test_generate_height_at_zero():
    assert generate_height(0) == pytest.approx(60)


def test_init_sizes():
    terrain = Terrain()
    terrain.init(320, random.Random(3))
    assert len(terrain.height_map) == 321
    assert len(terrain.squares) == 320
    assert terrain.mesh.name == "terrain"


def test_init_uses_height_function():
    terrain = _terrain(40)
    for i, h in enumerate(terrain.height_map):
        assert h == pytest.approx(generate_height(i / 20))


def test_height_at_integer_points():
    terrain = _terrain(50)
    for i in range(51):
        assert terrain.height_at(i) == pytest.approx(terrain.height_map[i])


def test_squares_span_segments():
    terrain = _terrain(30)
    for i, m in enumerate(terrain.squares):
        assert transform2d.apply(m, (0, 0)) == pytest.approx((i, terrain.height_map[i]))
        assert transform2d.apply(m, (1, 0)) == pytest.approx(
            (i + 1, terrain.height_map[i + 1])
        )


def test_offscreen_projectile_removed_and_margin_kept():
    terrain = _terrain(100)
    far = Projectile(0, (-10.0, 50.0), 0.0)
    margin = Projectile(0, (-3.0, 50.0), 0.0)
    high = Projectile(0, (50.5, 500.0), 0.0)
    shells = [far, margin, high]
    terrain.check_collision(shells)
    assert shells == [margin, high]


def test_hit_removes_projectile_and_carves_crater():
    terrain = _terrain(200)
    before = list(terrain.height_map)
    shells = [Projectile(0, (100.5, 0.0), 0.0)]
    terrain.check_collision(shells)
    assert shells == []
    assert terrain.height_map[100] == 0
    assert all(a <= b for a, b in zip(terrain.height_map, before))


def test_deform_never_goes_below_zero():
    terrain = _terrain(100)
    terrain.deform((50.0, -100.0))
    assert min(terrain.height_map) >= 0
    assert terrain.height_map[50] == 0


def test_landslide_conserves_mass_and_flattens():
    terrain = _terrain(4)
    terrain.height_map[:] = [0.0, 10.0, 0.0, 0.0, 0.0]
    terrain.landslide(0.1)
    assert sum(terrain.height_map) == pytest.approx(10.0)
    assert max(terrain.height_map) < 10.0


def test_update_rebuilds_squares_after_deform():
    terrain = _terrain(60)
    terrain.deform((30.0, 10.0))
    terrain.update(0.0, [])
    for i, m in enumerate(terrain.squares):
        assert transform2d.apply(m, (0, 0)) == pytest.approx((i, terrain.height_map[i]))