import math

import numpy as np
import pytest

from tankwars import transform2d
from tankwars.projectile import Projectile


def test_stores_owner_and_start():
    p = Projectile(1, (3.0, 4.0), 0.0)
    assert p.tank_id == 1
    assert p.position == (3.0, 4.0)
    assert np.allclose(p.model_matrix, transform2d.translate(3.0, 4.0))


def test_straight_up_keeps_x_and_rises():
    p = Projectile(0, (10.0, 20.0), 0.0)
    p.update(0.05)
    assert p.position[0] == pytest.approx(10.0)
    assert p.position[1] > 20.0


def test_horizontal_shot_distance():
    p = Projectile(0, (0.0, 0.0), math.pi / 2)
    p.update(0.1)
    assert p.position[0] == pytest.approx(Projectile.MAGNITUDE)
    assert p.position[1] == pytest.approx(0.0, abs=1e-9)


def test_gravity_decreases_vertical_velocity_evenly():
    p = Projectile(0, (0.0, 0.0), 0.3)
    v0 = p.velocity[1]
    p.update(0.02)
    v1 = p.velocity[1]
    p.update(0.02)
    v2 = p.velocity[1]
    assert v1 < v0
    assert v0 - v1 == pytest.approx(v1 - v2)
    assert p.velocity[0] == pytest.approx(Projectile.MAGNITUDE * math.sin(0.3))


def test_model_matrix_follows_position():
    p = Projectile(0, (1.0, 2.0), 0.7)
    p.update(0.03)
    assert transform2d.apply(p.model_matrix, (0.0, 0.0)) == pytest.approx(p.position)