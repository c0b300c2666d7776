import numpy as np
import pytest

from tankwars import transform2d
from tankwars.visualizer import (
    LogicSpace,
    ViewportSpace,
    Visualizer,
    visualization_transform,
)


def test_defaults_are_unit_spaces():
    assert LogicSpace() == LogicSpace(0, 0, 1, 1)
    assert ViewportSpace() == ViewportSpace(0, 0, 1, 1)
    assert np.allclose(Visualizer().matrix, np.eye(3))


def test_transform_maps_corners():
    logic = LogicSpace(10, 20, 50, 40)
    view = ViewportSpace(5, 6, 200, 100)
    m = visualization_transform(logic, view)
    assert transform2d.apply(m, (10, 20)) == pytest.approx((5, 6))
    assert transform2d.apply(m, (60, 60)) == pytest.approx((205, 106))


def test_init_fits_logic_to_resolution():
    vis = Visualizer()
    vis.init((1280, 720), 320, 180)
    assert vis.view_space == ViewportSpace(0, 0, 1280, 720)
    assert vis.logic_space == LogicSpace(0, 0, 320, 180)
    assert transform2d.apply(vis.matrix, (320, 180)) == pytest.approx((1280, 720))
    assert transform2d.apply(vis.matrix, (0, 0)) == pytest.approx((0, 0))