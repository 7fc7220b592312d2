"""Plain data passed from the geometry pass to a renderer."""

from __future__ import annotations

from array import array
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

Vec2 = tuple[float, float]
Color = tuple[int, int, int, int]

FLOATS_PER_VERTEX = 8
VERTICES_PER_RECTANGLE = 6


class Texture(Enum):
    """Which image a draw batch samples from."""

    PRIMARY = "primary"
    QUOTE = "quote"


@dataclass(frozen=True)
class Rectangle:
    center: Vec2
    width: float
    height: float

    @property
    def top_left(self) -> Vec2:
        return (
            self.center[0] - 0.5 * self.width,
            self.center[1] - 0.5 * self.height,
        )

    @property
    def bottom_right(self) -> Vec2:
        return (
            self.center[0] + 0.5 * self.width,
            self.center[1] + 0.5 * self.height,
        )


class Vertex(NamedTuple):
    """One vertex: position, colour, texture coordinate and blend weight.

    ``lam`` is the cross-fade between the flat colour (0) and the
    sampled texture (1).
    """

    x: float
    y: float
    r: float
    g: float
    b: float
    tx: float
    ty: float
    lam: float


@dataclass(frozen=True)
class DrawBatch:
    texture: Texture
    data: array
    count: int

    def vertices(self) -> list[Vertex]:
        return [
            Vertex(*self.data[i * FLOATS_PER_VERTEX : (i + 1) * FLOATS_PER_VERTEX])
            for i in range(self.count)
        ]

    def rectangles(self) -> list[tuple[Vertex, Vertex]]:
        """(top-left, bottom-right) vertex of each emitted rectangle."""
        verts = self.vertices()
        return [
            (verts[i], verts[i + VERTICES_PER_RECTANGLE - 1])
            for i in range(0, len(verts), VERTICES_PER_RECTANGLE)
        ]


@dataclass(frozen=True)
class BackgroundUniforms:
    lp: float
    radius: float


@dataclass(frozen=True)
class Frame:
    """Everything a renderer needs to draw one frame, in draw order."""

    batches: tuple[DrawBatch, ...]
    background: BackgroundUniforms
