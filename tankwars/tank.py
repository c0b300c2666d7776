"""A player's tank: movement on the terrain, aiming, firing and damage."""

from __future__ import annotations

import math
from collections.abc import MutableSequence

import numpy as np

from tankwars import transform2d
from tankwars.health_bar import HealthBar
from tankwars.projectile import Projectile
from tankwars.shapes import (
    BLUE,
    BLUE_DARK,
    YELLOW,
    YELLOW_DARK,
    Mesh,
    create_disk,
    create_rectangle,
    create_trapezoid,
)
from tankwars.trajectory import Trajectory

LOGIC_WIDTH = 320.0
HIT_RADIUS = 8.5


class Tank:
    """A tank riding the terrain height map it shares with the terrain."""

    SPEED = 20.0

    def __init__(
        self,
        tank_id: int,
        height_map: list[float],
        logic_width: float = LOGIC_WIDTH,
    ) -> None:
        self.id = tank_id
        self.height_map = height_map
        self.logic_width = logic_width
        self.is_alive = True
        self.health_bar = HealthBar()
        self.meshes: list[Mesh] = []
        self.position: tuple[float, float] = (0.0, 0.0)
        self.rotation = 0.0
        self.barrel_rotation = 0.0
        self.barrel_position: tuple[float, float, float] = (0.0, 0.0, 1.0)
        self.tank_model_matrix = transform2d.identity()
        self.barrel_model_matrix = transform2d.identity()
        self.hb_model_matrix = transform2d.identity()
        self.trajectory: Trajectory | None = None
        self._new_x = 0.0
        self._new_y = 0.0

    @property
    def trajectory_mesh(self) -> Mesh | None:
        """The aiming line mesh, once the tank is initialised."""
        return self.trajectory.mesh if self.trajectory else None

    def init(self) -> None:
        """Pick colours and a start position, build meshes and the aim line."""
        if self.id == 0:
            color, color_dark = YELLOW, YELLOW_DARK
            x = self.logic_width / 6
        else:
            color, color_dark = BLUE, BLUE_DARK
            x = self.logic_width * 5 / 6
        self.position = (x, self.position[1])

        self.meshes = [
            create_trapezoid("top", (-5, 1, 0), 10, 9, 2.5, color),
            create_trapezoid("bottom", (-3.5, 0, 0), 7, 8, 1, color_dark),
            create_disk("turret", (0, 3.5, 0), 2, 1, 0.1, color),
            create_rectangle("barrel", (-0.3, 0, 0), 0.6, 4.5, color_dark, True),
        ]

        self.barrel_rotation = 0.0
        self._update_model_matrix()

        self.trajectory = Trajectory(self.height_map)
        self.trajectory.init(self.barrel_position, self.barrel_rotation)

        self._new_x, self._new_y = self.position

    def _segment(self, x: float) -> tuple[tuple[float, float], tuple[float, float]]:
        hm = self.height_map
        i = min(int(math.floor(x)), len(hm) - 2)
        return (float(i), hm[i]), (float(i + 1), hm[i + 1])

    def update(self, projectiles: MutableSequence[Projectile]) -> bool:
        """Take hits and settle on the terrain; False once the tank is dead."""
        if not self.is_alive:
            return False
        if self._check_collision(projectiles):
            return False

        a, b = self._segment(self._new_x)
        t = (self._new_x - a[0]) / (b[0] - a[0])
        self._new_y = a[1] + t * (b[1] - a[1])

        if self.position == (self._new_x, self._new_y):
            return True

        self.position = (self._new_x, self._new_y)
        self.rotation = math.atan2(b[1] - a[1], b[0] - a[0])

        self._update_model_matrix()
        if self.trajectory is not None:
            self.trajectory.translate_to(self.barrel_position)
        return True

    def _barrel_matrix(self) -> np.ndarray:
        return (
            self.tank_model_matrix
            @ transform2d.translate(0.0, 4.5)
            @ transform2d.rotate(self.barrel_rotation - self.rotation)
        )

    def _update_model_matrix(self) -> None:
        x, y = self.position
        self.tank_model_matrix = (
            transform2d.translate(x, y)
            @ transform2d.scale(1.5, 1.5)
            @ transform2d.rotate(self.rotation)
        )
        self.barrel_model_matrix = self._barrel_matrix()
        tip = self.barrel_model_matrix @ np.array([0.0, 0.0, 1.0])
        self.barrel_position = (float(tip[0]), float(tip[1]), float(tip[2]))
        self.hb_model_matrix = transform2d.translate(x, y) @ transform2d.scale(1.5, 1.5)

    def move(self, distance: float) -> None:
        """Request a horizontal move; slopes change the effective speed."""
        x = self.position[0]
        if distance < 0:
            new_x = x + distance * self.SPEED * (self.rotation + 2)
        else:
            new_x = x + distance * self.SPEED * (2 - self.rotation)
        self._new_x = x if new_x < 0 or new_x > self.logic_width else new_x

    def move_barrel(self, angle: float) -> None:
        """Turn the barrel and recompute the aiming line."""
        self.barrel_rotation += angle
        self.barrel_model_matrix = self._barrel_matrix()
        if self.trajectory is not None:
            self.trajectory.update(self.barrel_rotation)

    def shoot(self) -> Projectile:
        """Fire a shell from the barrel tip."""
        bx, by, _ = self.barrel_position
        return Projectile(self.id, (bx, by), -self.barrel_rotation)

    def _check_collision(self, projectiles: MutableSequence[Projectile]) -> bool:
        kept: list[Projectile] = []
        remaining = iter(list(projectiles))
        for p in remaining:
            hit = p.tank_id != self.id and math.dist(self.position, p.position) <= HIT_RADIUS
            if not hit:
                kept.append(p)
                continue
            if self.health_bar.decrease_hp():
                self.is_alive = False
                kept.extend(remaining)
                projectiles[:] = kept
                return True
        projectiles[:] = kept
        return False