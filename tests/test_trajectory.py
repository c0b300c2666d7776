import pytest

from tankwars.projectile import Projectile
from tankwars.shapes import DrawMode, GRAY
from tankwars.trajectory import POINTS, Trajectory


def test_init_builds_line_strip_from_barrel():
    traj = Trajectory([1.0, 2.0])
    traj.init((5.0, 7.0, 1.0), 0.2)
    assert traj.mesh.draw_mode is DrawMode.LINE_STRIP
    assert len(traj.mesh.vertices) == POINTS
    assert traj.mesh.indices == list(range(POINTS))
    assert traj.mesh.vertices[0].position[:2] == (5.0, 7.0)
    assert all(v.color == GRAY for v in traj.mesh.vertices)


def test_vertical_aim_keeps_x_constant():
    traj = Trajectory()
    traj.init((12.0, 3.0, 1.0), 0.0)
    assert all(v.position[0] == pytest.approx(12.0) for v in traj.vertices)
    ys = [v.position[1] for v in traj.vertices]
    assert max(ys) > ys[0]
    assert ys[-1] < max(ys)


def test_matches_projectile_flight():
    traj = Trajectory()
    traj.init((5.0, 7.0, 1.0), 0.3)
    shell = Projectile(0, (5.0, 7.0), -0.3)
    for k in range(1, 30):
        shell.update(Trajectory.C)
        assert traj.vertices[k].position[:2] == pytest.approx(shell.position)


def test_translate_to_shifts_every_vertex():
    traj = Trajectory()
    traj.init((0.0, 0.0, 1.0), -0.4)
    before = [v.position for v in traj.vertices]
    traj.translate_to((3.0, -2.0, 1.0))
    after = [v.position for v in traj.mesh.vertices]
    assert traj.barrel_position == (3.0, -2.0, 1.0)
    for old, new in zip(before, after):
        assert new[0] == pytest.approx(old[0] + 3.0)
        assert new[1] == pytest.approx(old[1] - 2.0)


def test_update_keeps_origin():
    traj = Trajectory()
    traj.init((4.0, 9.0, 1.0), 0.0)
    first = traj.vertices[1].position
    traj.update(0.5)
    assert traj.vertices[0].position[:2] == (4.0, 9.0)
    assert traj.vertices[1].position != first