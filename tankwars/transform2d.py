"""Homogeneous 3x3 matrices for 2D transforms (column-vector convention)."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np


def identity() -> np.ndarray:
    """The 3x3 identity matrix."""
    return np.eye(3)


def translate(tx: float, ty: float) -> np.ndarray:
    """Translation by ``(tx, ty)``."""
    return np.array(
        [[1.0, 0.0, tx],
         [0.0, 1.0, ty],
         [0.0, 0.0, 1.0]]
    )


def scale(sx: float, sy: float) -> np.ndarray:
    """Axis-aligned scaling."""
    return np.array(
        [[sx, 0.0, 0.0],
         [0.0, sy, 0.0],
         [0.0, 0.0, 1.0]]
    )


def rotate(radians: float) -> np.ndarray:
    """Counter-clockwise rotation about the origin."""
    c, s = math.cos(radians), math.sin(radians)
    return np.array(
        [[c, -s, 0.0],
         [s, c, 0.0],
         [0.0, 0.0, 1.0]]
    )


def shear(shear_x: float, shear_y: float) -> np.ndarray:
    """Shear: x gains ``shear_x * y`` and y gains ``shear_y * x``."""
    return np.array(
        [[1.0, shear_x, 0.0],
         [shear_y, 1.0, 0.0],
         [0.0, 0.0, 1.0]]
    )


def apply(matrix: np.ndarray, point: Sequence[float]) -> tuple[float, float]:
    """Transform a 2D point and return the resulting ``(x, y)``."""
    x, y = point[0], point[1]
    result = np.asarray(matrix) @ np.array([x, y, 1.0])
    return (float(result[0]), float(result[1]))