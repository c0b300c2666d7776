"""The two-player artillery game."""

from __future__ import annotations

import random
from collections.abc import Callable

import numpy as np

from tankwars.projectile import Projectile
from tankwars.shapes import PINK1, PINK2, PINK3, SKY, WHITE, Mesh, create_disk
from tankwars.sky import SkyElement
from tankwars.tank import Tank
from tankwars.terrain import Terrain
from tankwars.visualizer import Visualizer
from tankwars.window import Key, Window
from tankwars.world import World

DEFAULT_RESOLUTION = (1280, 720)

# (move left, move right, barrel key a, barrel key b, barrel sign for a, fire)
_CONTROLS = (
    (Key.A, Key.D, Key.W, Key.S, 1.0, Key.SPACE),
    (Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN, -1.0, Key.ENTER),
)


def _sky_decor() -> list[SkyElement]:
    planets = [
        SkyElement.planet(30, 105, 10, PINK1, 180, SkyElement.UP),
        SkyElement.planet(65, 140, 20, PINK2, 120, SkyElement.DOWN),
        SkyElement.planet(170, 110, 13, PINK3, 230, SkyElement.UP),
        SkyElement.planet(240, 145, 17, PINK1, 110, SkyElement.DOWN),
        SkyElement.planet(285, 100, 10, PINK2, 120, SkyElement.UP),
    ]
    stars = [
        SkyElement.star(x, y, r)
        for x, y, r in (
            (15, 140, 0.5), (20, 80, 0.2), (35, 160, 1), (70, 95, 0.5),
            (100, 130, 1), (135, 85, 0.2), (140, 140, 0.5), (190, 165, 1),
            (200, 100, 1), (220, 125, 0.2), (260, 110, 0.5), (285, 160, 1),
            (305, 140, 0.5),
        )
    ]
    return planets + stars


class TankWars(World):
    """Two tanks on a destructible terrain shooting at each other."""

    LOGIC_WIDTH = 320.0
    LOGIC_HEIGHT = 180.0
    NUM_TANKS = 2
    NUM_PLANETS = 5
    clear_color = SKY

    def __init__(
        self,
        window: Window | None = None,
        clock: Callable[[], float] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(window, clock)
        self.rng = rng
        self.terrain = Terrain()
        self.vis = Visualizer()
        self.tanks: list[Tank] = []
        self.projectiles: list[Projectile] = []
        self.sky_decor: list[SkyElement] = []
        self.projectile_mesh: Mesh | None = None

    def init(self) -> None:
        """Build terrain, tanks, the view mapping and the sky."""
        resolution = (
            self.window.get_resolution() if self.window is not None else DEFAULT_RESOLUTION
        )
        self.terrain.init(int(self.LOGIC_WIDTH), self.rng)
        self.vis.init(resolution, self.LOGIC_WIDTH, self.LOGIC_HEIGHT)

        self.tanks = []
        for tank_id in range(self.NUM_TANKS):
            tank = Tank(tank_id, self.terrain.height_map, self.LOGIC_WIDTH)
            tank.init()
            self.tanks.append(tank)

        self.projectile_mesh = create_disk(
            "projectile", (0.0, 0.0, 0.0), Projectile.RADIUS, 2, 0.2, WHITE
        )
        self.sky_decor = _sky_decor()

    def update(self, delta_time_seconds: float) -> None:
        """Advance terrain, tanks, shells and planets by one frame."""
        self.terrain.update(delta_time_seconds, self.projectiles)
        for tank in self.tanks:
            tank.update(self.projectiles)
        for projectile in self.projectiles:
            projectile.update(delta_time_seconds)
        for planet in self.sky_decor[: self.NUM_PLANETS]:
            planet.update(delta_time_seconds)

    def draw_list(self) -> list[tuple[Mesh, np.ndarray]]:
        """Meshes with their viewport-space model matrices, in drawing order."""
        view = self.vis.matrix
        items: list[tuple[Mesh, np.ndarray]] = []
        alive = [tank for tank in self.tanks if tank.is_alive]

        for tank in alive:
            bar = tank.health_bar
            items.append((bar.outline, view @ tank.hb_model_matrix))
            items.append((bar.fill, view @ tank.hb_model_matrix @ bar.fill_model_matrix))

        items.extend((self.terrain.mesh, view @ square) for square in self.terrain.squares)

        for tank in alive:
            *body, barrel = tank.meshes
            items.extend((mesh, view @ tank.tank_model_matrix) for mesh in body)
            items.append((barrel, view @ tank.barrel_model_matrix))

        if self.projectile_mesh is not None:
            items.extend(
                (self.projectile_mesh, view @ p.model_matrix) for p in self.projectiles
            )

        for tank in alive:
            if tank.trajectory_mesh is not None:
                items.append((tank.trajectory_mesh, view))

        items.extend((element.mesh, view @ element.model_matrix) for element in self.sky_decor)
        return items

    def on_input_update(self, delta_time: float, mods: int) -> None:
        """Move and aim the tanks whose keys are held."""
        if self.window is None:
            return
        held = self.window.key_hold
        for tank, (left, right, aim_a, aim_b, sign, _fire) in zip(self.tanks, _CONTROLS):
            if not tank.is_alive:
                continue
            if held(left):
                tank.move(-delta_time)
            if held(right):
                tank.move(delta_time)
            if held(aim_a):
                tank.move_barrel(sign * delta_time)
            if held(aim_b):
                tank.move_barrel(-sign * delta_time)

    def on_key_press(self, key: int, mods: int) -> None:
        """Fire a shell from the tank whose fire key was pressed."""
        for tank, controls in zip(self.tanks, _CONTROLS):
            if tank.is_alive and key == controls[-1]:
                self.projectiles.append(tank.shoot())