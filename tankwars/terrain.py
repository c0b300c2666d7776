"""The destructible terrain height map."""

from __future__ import annotations

import math
import random
from collections.abc import MutableSequence, Sequence

import numpy as np

from tankwars import transform2d
from tankwars.projectile import Projectile
from tankwars.shapes import TERRAIN, create_square


def generate_height(x: float) -> float:
    """The rolling-hills height function used to seed the terrain."""
    return 20 * (
        3
        + 0.5 * math.sin(x)
        + math.sin(0.4 * x)
        + 0.2 * math.sin(2.5 * x)
        + 0.3 * math.sin(0.3 * x)
    )


def _column_matrix(a: tuple[float, float], b: tuple[float, float]) -> np.ndarray:
    """Map the unit square onto the column under segment ``a``-``b``."""
    return (
        transform2d.translate(a[0], a[1])
        @ transform2d.shear(0.0, (b[1] - a[1]) / (b[0] - a[0]))
        @ transform2d.scale(b[0] - a[0], max(b[1], a[1]))
    )


class Terrain:
    """A height map sampled at integer x, drawn as sheared unit squares."""

    DEFORM_RADIUS = 15.0
    LS_THRESHOLD = 0.1

    def __init__(self) -> None:
        self.mesh = create_square("terrain", (0.0, -1.0, 0.0), 1, TERRAIN, True)
        self.height_map: list[float] = []
        self.squares: list[np.ndarray] = []
        self.width = 0
        self._dirty: list[bool] = []

    def init(self, width: int, rng=None) -> None:
        """Generate a random terrain ``width`` units wide."""
        rng = rng if rng is not None else random.Random()
        self.width = width
        offset = rng.randrange(120)
        self.height_map[:] = [
            generate_height((i + offset * 10) / 20) for i in range(width + 1)
        ]
        self._dirty = [False] * (width + 1)
        self.squares = [self._square(i) for i in range(width)]

    def _square(self, i: int) -> np.ndarray:
        hm = self.height_map
        return _column_matrix((float(i), hm[i]), (float(i + 1), hm[i + 1]))

    def height_at(self, x: float) -> float:
        """The terrain height at ``x`` by linear interpolation."""
        hm = self.height_map
        i = min(int(math.floor(x)), len(hm) - 2)
        t = x - i
        return hm[i] + t * (hm[i + 1] - hm[i])

    def update(
        self, delta_time: float, projectiles: MutableSequence[Projectile]
    ) -> None:
        """Handle hits, let slopes slide and rebuild the changed columns."""
        self.check_collision(projectiles)
        self.landslide(delta_time)
        for i in range(len(self.squares)):
            if self._dirty[i] or self._dirty[i + 1]:
                self.squares[i] = self._square(i)
                self._dirty[i] = False
        self._dirty[len(self.squares)] = False

    def check_collision(self, projectiles: MutableSequence[Projectile]) -> None:
        """Remove shells that left the field or hit the ground, deforming it."""
        kept = []
        for p in projectiles:
            px, py = p.position
            if px < -5 or px > self.width + 5:
                continue
            if px < 0 or px > self.width:
                kept.append(p)
                continue
            if py - self.height_at(px) <= Projectile.RADIUS:
                self.deform((px, py))
                continue
            kept.append(p)
        projectiles[:] = kept

    def deform(self, point: Sequence[float]) -> None:
        """Carve a circular crater centred on ``point``."""
        px, py = point[0], point[1]
        r = self.DEFORM_RADIUS
        x = int(px - r)
        while x <= px + r:
            if 0 <= x <= self.width:
                d2 = r * r - (px - x) ** 2
                if d2 >= 0:
                    self.height_map[x] = min(self.height_map[x], py - math.sqrt(d2))
                if self.height_map[x] < 0:
                    self.height_map[x] = 0.0
                self._dirty[x] = True
            x += 1

    def landslide(self, delta_time: float) -> None:
        """Let steep neighbouring heights even out a little."""
        hm = self.height_map
        for x in range(len(hm) - 1):
            d = hm[x] - hm[x + 1]
            if d > self.LS_THRESHOLD or -d > self.LS_THRESHOLD:
                hm[x] -= d * delta_time
                hm[x + 1] += d * delta_time
                self._dirty[x] = True
                self._dirty[x + 1] = True