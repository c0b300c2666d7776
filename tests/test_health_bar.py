import numpy as np

from tankwars import transform2d
from tankwars.health_bar import HealthBar
from tankwars.shapes import DrawMode


def test_starts_full_with_identity_fill():
    bar = HealthBar()
    assert bar.hp == HealthBar.INITIAL_HP
    assert np.allclose(bar.fill_model_matrix, np.eye(3))


def test_meshes_draw_modes():
    bar = HealthBar()
    assert bar.outline.draw_mode is DrawMode.LINE_LOOP
    assert bar.fill.draw_mode is DrawMode.TRIANGLES


def test_dies_after_initial_hp_hits():
    bar = HealthBar()
    results = [bar.decrease_hp() for _ in range(HealthBar.INITIAL_HP)]
    assert results[:-1] == [False] * (HealthBar.INITIAL_HP - 1)
    assert results[-1] is True
    assert bar.decrease_hp() is True


def test_fill_shrinks_towards_left_edge():
    bar = HealthBar()
    bar.decrease_hp()
    left = transform2d.apply(bar.fill_model_matrix, (-4.5, 3.0))
    right = transform2d.apply(bar.fill_model_matrix, (4.5, 3.0))
    assert left[0] == -4.5
    assert left[1] == 3.0
    assert right[0] < 4.5
    assert right[0] > left[0]


def test_fill_collapses_when_empty():
    bar = HealthBar()
    for _ in range(HealthBar.INITIAL_HP):
        bar.decrease_hp()
    left = transform2d.apply(bar.fill_model_matrix, (-4.5, 0.0))
    right = transform2d.apply(bar.fill_model_matrix, (4.5, 0.0))
    assert left[0] == right[0]