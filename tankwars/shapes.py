"""Vertices, meshes and the 2D shape builders used by the game."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

Vec3 = tuple[float, float, float]

SKY: Vec3 = (0.00, 0.00, 0.00)
TERRAIN: Vec3 = (0.30, 0.15, 0.46)
WHITE: Vec3 = (1.00, 1.00, 1.00)
GRAY: Vec3 = (0.50, 0.50, 0.50)
BLUE: Vec3 = (0.40, 0.84, 1.00)
BLUE_DARK: Vec3 = (0.15, 0.61, 0.99)
YELLOW: Vec3 = (0.99, 0.93, 0.00)
YELLOW_DARK: Vec3 = (0.92, 0.64, 0.02)
PINK1: Vec3 = (0.95, 0.49, 0.96)
PINK2: Vec3 = (0.84, 0.22, 0.95)
PINK3: Vec3 = (0.73, 0.23, 0.82)

NUM_BONES_PER_VERTEX = 4


class DrawMode(enum.Enum):
    """How a mesh's indices are assembled into primitives."""

    TRIANGLES = "triangles"
    LINES = "lines"
    LINE_STRIP = "line_strip"
    LINE_LOOP = "line_loop"
    TRIANGLE_FAN = "triangle_fan"


def _vec3(values: Sequence[float]) -> Vec3:
    return (float(values[0]), float(values[1]), float(values[2]))


def _add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


@dataclass
class Vertex:
    """A mesh vertex with position, colour, normal and texture coordinates."""

    position: Vec3
    color: Vec3 = (1.0, 1.0, 1.0)
    normal: Vec3 = (0.0, 1.0, 0.0)
    text_coord: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.color = _vec3(self.color)
        self.normal = _vec3(self.normal)


@dataclass
class BoneWeights:
    """Up to four bone influences on a single vertex."""

    ids: list[int] = field(default_factory=lambda: [0] * NUM_BONES_PER_VERTEX)
    weights: list[float] = field(default_factory=lambda: [0.0] * NUM_BONES_PER_VERTEX)

    def reset(self) -> None:
        """Clear every slot."""
        self.ids = [0] * NUM_BONES_PER_VERTEX
        self.weights = [0.0] * NUM_BONES_PER_VERTEX

    def add_bone_data(self, bone_id: int, weight: float) -> None:
        """Store a bone influence in the first empty slot.

        Raises ValueError when all slots are taken.
        """
        for slot, current in enumerate(self.weights):
            if current == 0.0:
                self.ids[slot] = bone_id
                self.weights[slot] = weight
                return
        raise ValueError(
            f"vertex already has {NUM_BONES_PER_VERTEX} bone influences"
        )


@dataclass
class Mesh:
    """Named indexed geometry with a draw mode."""

    name: str
    draw_mode: DrawMode = DrawMode.TRIANGLES
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def set_data(self, vertices: Sequence[Vertex], indices: Sequence[int]) -> None:
        """Replace the mesh geometry."""
        self.vertices = list(vertices)
        self.indices = list(indices)

    def primitives(self) -> Iterator[tuple[Vertex, ...]]:
        """Yield the primitives the draw mode builds from the indices.

        Triangles for TRIANGLES and TRIANGLE_FAN, pairs for LINES and a
        single polyline for LINE_STRIP and LINE_LOOP.
        """
        verts = [self.vertices[i] for i in self.indices]
        mode = self.draw_mode
        if mode is DrawMode.TRIANGLES:
            for start in range(0, len(verts) - 2, 3):
                yield tuple(verts[start:start + 3])
        elif mode is DrawMode.LINES:
            for start in range(0, len(verts) - 1, 2):
                yield tuple(verts[start:start + 2])
        elif mode is DrawMode.TRIANGLE_FAN:
            if len(verts) >= 3:
                hub = verts[0]
                for a, b in zip(verts[1:], verts[2:]):
                    yield (hub, a, b)
        elif verts:
            yield tuple(verts)


def _quad_mesh(
    name: str, corners: Sequence[Vec3], color: Vec3, fill: bool
) -> Mesh:
    vertices = [Vertex(c, color) for c in corners]
    indices = [0, 1, 2, 3]
    mesh = Mesh(name)
    if fill:
        indices += [0, 2]
    else:
        mesh.draw_mode = DrawMode.LINE_LOOP
    mesh.set_data(vertices, indices)
    return mesh


def create_square(
    name: str, corner: Sequence[float], length: float, color: Vec3, fill: bool
) -> Mesh:
    """A square with its lower-left corner at ``corner``; outlined unless ``fill``."""
    return create_rectangle(name, corner, length, length, color, fill)


def create_rectangle(
    name: str,
    corner: Sequence[float],
    length: float,
    height: float,
    color: Vec3,
    fill: bool,
) -> Mesh:
    """A rectangle with its lower-left corner at ``corner``; outlined unless ``fill``."""
    corners = [
        _vec3(corner),
        _add(corner, (length, 0.0, 0.0)),
        _add(corner, (length, height, 0.0)),
        _add(corner, (0.0, height, 0.0)),
    ]
    return _quad_mesh(name, corners, color, fill)


def create_trapezoid(
    name: str,
    corner: Sequence[float],
    base1: float,
    base2: float,
    height: float,
    color: Vec3,
) -> Mesh:
    """A filled trapezoid: bottom base ``base1``, centred top base ``base2``."""
    inset = (base1 - base2) / 2
    corners = [
        _vec3(corner),
        _add(corner, (base1, 0.0, 0.0)),
        _add(corner, (inset + base2, height, 0.0)),
        _add(corner, (inset, height, 0.0)),
    ]
    return _quad_mesh(name, corners, color, True)


def create_disk(
    name: str,
    center: Sequence[float],
    radius: float,
    radians: float,
    angular_step: float,
    color: Vec3,
) -> Mesh:
    """A triangle-fan disk sector.

    ``radians`` and ``angular_step`` are in units of pi, so ``radians=2``
    gives a full disk.
    """
    count = int(radians / angular_step + 2)
    vertices = [Vertex(center, color)]
    for step in range(count - 1):
        angle = step * angular_step * math.pi
        offset = (radius * math.cos(angle), radius * math.sin(angle), 0.0)
        vertices.append(Vertex(_add(center, offset), color))
    mesh = Mesh(name, DrawMode.TRIANGLE_FAN)
    mesh.set_data(vertices, range(count))
    return mesh