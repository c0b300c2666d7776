"""Small numeric, bit and text helpers shared across the game."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable, Sequence

TO_RADIANS = 0.0174532925194444
TO_DEGREES = 57.29577951308233

VEC3_UP = (0.0, 1.0, 0.0)
VEC3_DOWN = (0.0, -1.0, 0.0)
VEC3_LEFT = (-1.0, 0.0, 0.0)
VEC3_RIGHT = (1.0, 0.0, 0.0)
VEC3_FORWARD = (0.0, 0.0, 1.0)
VEC3_BACKWARD = (0.0, 0.0, -1.0)


def lerp(v0: float, v1: float, t: float) -> float:
    """Linearly interpolate between ``v0`` and ``v1``."""
    return v0 + (v1 - v0) * t


def radians(angle: float) -> float:
    """Convert degrees to radians."""
    return angle * TO_RADIANS


def degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * TO_DEGREES


def upper_bound(a: int, b: int) -> int:
    """Integer division of ``a`` by ``b`` rounded up."""
    return (a + b - 1) // b


def normalized_rgb(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Map 8-bit colour channels into the ``[0, 1]`` range."""
    return (r / 255.0, g / 255.0, b / 255.0)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def axis_angle(
    xx: float, yy: float, zz: float, angle360: float
) -> tuple[float, float, float, float]:
    """Build a quaternion ``(w, x, y, z)`` rotating ``angle360`` degrees about an axis."""
    t = radians(angle360) / 2.0
    sin_t = math.sin(t)
    return (math.cos(t), xx * sin_t, yy * sin_t, zz * sin_t)


def get_axis_angle(
    rotation: Sequence[float], precision: int = 0
) -> tuple[float, float, float, float]:
    """Turn a quaternion ``(w, x, y, z)`` into ``(axis_x, axis_y, axis_z, degrees)``.

    With a non-zero ``precision`` the axis components are rounded to
    multiples of ``1 / precision``.
    """
    w, x, y, z = rotation
    angle = math.acos(max(-1.0, min(1.0, w)))
    if angle == 0:
        return (1.0, 0.0, 0.0, 0.0)

    t = math.sqrt(1 - w * w)
    angle_deg = _round_half_away(degrees(angle))
    if precision:
        return (
            _round_half_away(x / t * precision) / precision,
            _round_half_away(y / t * precision) / precision,
            _round_half_away(z / t * precision) / precision,
            angle_deg,
        )
    return (x / t, y / t, z / t, angle_deg)


def _format_number(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def format_vector(values: Iterable[float]) -> str:
    """Render a vector as ``[a b c]``."""
    return "[" + " ".join(_format_number(v) for v in values) + "]"


def is_bit_set(item: int, bit: int) -> bool:
    """Tell whether ``bit`` is set in ``item``."""
    return (item & (1 << bit)) != 0


def set_bit(item: int, bit: int) -> int:
    """Return ``item`` with ``bit`` set."""
    return item | (1 << bit)


def clear_bit(item: int, bit: int) -> int:
    """Return ``item`` with ``bit`` cleared."""
    return item & ~(1 << bit)


def join(elements: Iterable[str], separator: str) -> str:
    """Join strings with a separator."""
    return separator.join(elements)


def path_join(*args: str) -> str:
    """Join path parts with the platform's path separator."""
    return join(args, os.sep)