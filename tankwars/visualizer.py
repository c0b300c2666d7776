"""Mapping from the game's logic space onto the viewport."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from tankwars import transform2d


@dataclass
class LogicSpace:
    """A rectangle in game coordinates."""

    x: float = 0.0
    y: float = 0.0
    width: float = 1.0
    height: float = 1.0


@dataclass
class ViewportSpace:
    """A rectangle in window pixels."""

    x: int = 0
    y: int = 0
    width: int = 1
    height: int = 1


def visualization_transform(
    logic_space: LogicSpace, view_space: ViewportSpace
) -> np.ndarray:
    """Matrix that scales and translates logic space onto the viewport."""
    sx = view_space.width / logic_space.width
    sy = view_space.height / logic_space.height
    tx = view_space.x - sx * logic_space.x
    ty = view_space.y - sy * logic_space.y
    return np.array(
        [[sx, 0.0, tx],
         [0.0, sy, ty],
         [0.0, 0.0, 1.0]]
    )


@dataclass
class Visualizer:
    """Holds the logic and view spaces and the matrix between them."""

    logic_space: LogicSpace = field(default_factory=LogicSpace)
    view_space: ViewportSpace = field(default_factory=ViewportSpace)
    matrix: np.ndarray = field(default_factory=transform2d.identity)

    def init(self, resolution: Sequence[float], width: float, height: float) -> None:
        """Fit a ``width`` x ``height`` logic space to the window resolution."""
        self.logic_space = LogicSpace(0.0, 0.0, float(width), float(height))
        self.view_space = ViewportSpace(0, 0, int(resolution[0]), int(resolution[1]))
        self.matrix = visualization_transform(self.logic_space, self.view_space)