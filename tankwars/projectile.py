"""Shells fired by the tanks."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from tankwars import transform2d


class Projectile:
    """A shell flying under gravity, tagged with the tank that fired it."""

    MAGNITUDE = 15.0
    GRAVITY = 20.0
    SPEED = 10.0
    RADIUS = 1.0

    def __init__(
        self, tank_id: int, start_position: Sequence[float], angle: float
    ) -> None:
        self.tank_id = tank_id
        self.position: tuple[float, float] = (
            float(start_position[0]),
            float(start_position[1]),
        )
        self.velocity: tuple[float, float] = (
            math.sin(angle) * self.MAGNITUDE,
            math.cos(angle) * self.MAGNITUDE,
        )
        self.model_matrix: np.ndarray = transform2d.translate(*self.position)

    def update(self, delta_time: float) -> None:
        """Advance the shell by one frame."""
        step = delta_time * self.SPEED
        vx, vy = self.velocity
        x, y = self.position
        self.position = (x + vx * step, y + vy * step)
        self.velocity = (vx, vy - self.GRAVITY * delta_time)
        self.model_matrix = transform2d.translate(*self.position)