"""The aiming line that previews a shell's flight."""

from __future__ import annotations

import math
from collections.abc import Sequence

from tankwars.projectile import Projectile
from tankwars.shapes import GRAY, DrawMode, Mesh, Vertex

POINTS = 100


class Trajectory:
    """A line strip sampling the path of a shell fired from the barrel."""

    M = Projectile.MAGNITUDE
    G = Projectile.GRAVITY
    S = Projectile.SPEED
    C = 0.1

    def __init__(self, height_map: Sequence[float] = ()) -> None:
        self.terrain_height_map = list(height_map)
        self.mesh = Mesh("trajectory", DrawMode.LINE_STRIP)
        self.barrel_position: tuple[float, float, float] = (0.0, 0.0, 0.0)
        self.vertices = [Vertex((0.0, 0.0, 0.0), GRAY) for _ in range(POINTS)]
        self.indices = list(range(POINTS))

    def init(self, barrel_position: Sequence[float], barrel_rotation: float) -> None:
        """Anchor the line at the barrel and compute it."""
        self.barrel_position = tuple(float(v) for v in barrel_position)
        self.update(barrel_rotation)

    def update(self, barrel_rotation: float) -> None:
        """Recompute the sampled path for a new barrel angle."""
        x0, y0 = self.barrel_position[0], self.barrel_position[1]
        t = -barrel_rotation
        m, g, s, c = self.M, self.G, self.S, self.C
        sin_t, cos_t = math.sin(t), math.cos(t)
        points = [(x0, y0)]
        for k in range(1, POINTS):
            x = x0 + k * s * c * m * sin_t
            y = y0 + s * c * (k * m * cos_t - (k * (k - 1) // 2) * c * g)
            points.append((x, y))
        self.vertices = [Vertex((x, y, 0.0), GRAY) for x, y in points]
        self.mesh.set_data(self.vertices, self.indices)

    def translate_to(self, new_barrel_position: Sequence[float]) -> None:
        """Shift the whole line so it starts at the new barrel position."""
        dx = new_barrel_position[0] - self.barrel_position[0]
        dy = new_barrel_position[1] - self.barrel_position[1]
        self.barrel_position = tuple(float(v) for v in new_barrel_position)
        self.vertices = [
            Vertex((v.position[0] + dx, v.position[1] + dy, v.position[2]), v.color)
            for v in self.vertices
        ]
        self.mesh.set_data(self.vertices, self.indices)