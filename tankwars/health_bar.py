"""The health bar drawn above each tank."""

from __future__ import annotations

import numpy as np

from tankwars import transform2d
from tankwars.shapes import WHITE, Mesh, create_rectangle

INITIAL_HP = 10
_BAR_LEFT = -4.5
_BAR_WIDTH = 9.0
_BAR_HEIGHT = 2.5
_BAR_Y = 10.0


class HealthBar:
    """Hit points plus the outline and fill meshes that display them."""

    INITIAL_HP = INITIAL_HP

    def __init__(self) -> None:
        self.hp: int = INITIAL_HP
        corner = (_BAR_LEFT, _BAR_Y, 0.0)
        self.outline: Mesh = create_rectangle(
            "outline", corner, _BAR_WIDTH, _BAR_HEIGHT, WHITE, False
        )
        self.fill: Mesh = create_rectangle(
            "fill", corner, _BAR_WIDTH, _BAR_HEIGHT, WHITE, True
        )
        self.fill_model_matrix: np.ndarray = transform2d.identity()

    def decrease_hp(self) -> bool:
        """Lose one hit point and shrink the fill; True once hp reaches zero."""
        self.hp -= 1
        self.fill_model_matrix = (
            transform2d.translate(_BAR_LEFT, 0.0)
            @ transform2d.scale(self.hp / INITIAL_HP, 1.0)
            @ transform2d.translate(-_BAR_LEFT, 0.0)
        )
        return self.hp <= 0