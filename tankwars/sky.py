"""Planets and stars in the background."""

from __future__ import annotations

import numpy as np

from tankwars import transform2d
from tankwars.shapes import WHITE, Mesh, Vec3, create_disk


class SkyElement:
    """A decorative disk; planets bob up and down, stars stay put."""

    UP = True
    DOWN = False

    def __init__(
        self,
        mesh: Mesh,
        x: float,
        y: float,
        num_frames: int = 0,
        direction: bool = False,
    ) -> None:
        self.mesh = mesh
        self.x = float(x)
        self.y = float(y)
        self.num_frames = num_frames
        self.direction = direction
        self.frame = 0
        self.model_matrix: np.ndarray = transform2d.translate(self.x, self.y)

    @classmethod
    def planet(
        cls,
        x: float,
        y: float,
        radius: float,
        color: Vec3,
        frames: int,
        direction: bool,
    ) -> "SkyElement":
        """A planet that reverses its drift every ``frames`` updates."""
        mesh = create_disk("planet", (0.0, 0.0, 0.0), radius, 2, 0.05, color)
        return cls(mesh, x, y, frames, direction)

    @classmethod
    def star(cls, x: float, y: float, radius: float) -> "SkyElement":
        """A small white star."""
        mesh = create_disk("star", (0.0, 0.0, 0.0), radius, 2, 0.2, WHITE)
        return cls(mesh, x, y, 0, False)

    def update(self, delta_time: float) -> None:
        """Drift vertically and flip direction after the frame count."""
        self.y += 2 * delta_time if self.direction else -2 * delta_time
        self.model_matrix = transform2d.translate(self.x, self.y)
        self.frame += 1
        if self.frame == self.num_frames:
            self.frame = 0
            self.direction = not self.direction