"""Turns the game state into coloured, textured quads.

Coordinates are canvas pixels with the origin in the top-left corner;
texture coordinates are normalised to ``[0, 1]`` over the image. A
tile's texture coordinates depend on its *value*, so every tile always
shows the part of the picture it covers in the solved layout.
"""

from __future__ import annotations

import math
from array import array
from dataclasses import dataclass

from backend.engine.gamestate.state import GameState
from backend.models.board import GRID_DIMENSION, Direction, GridInvariantError
from backend.models.geometry import (
    FLOATS_PER_VERTEX,
    BackgroundUniforms,
    Color,
    DrawBatch,
    Frame,
    Rectangle,
    Texture,
    Vec2,
)

# -- palette ------------------------------------------------------------------

WHITE: Color = (255, 255, 255, 255)
MAGENTA: Color = (255, 0, 255, 255)
GRID_BLUE: Color = (0x3E, 0x48, 0x5F, 255)
SPACE_BLACK: Color = (0x03, 0x03, 0x05, 255)

GRID_BACKGROUND = WHITE
TILE_BORDER = GRID_BLUE
# Inner tiles are always fully textured, so this never shows.
TILE_INNER = MAGENTA
QUOTE_BACKGROUND = SPACE_BLACK

# -- layout ratios ------------------------------------------------------------

TILE_WIDTH_RATIO = 0.125  # of the canvas width
TILE_BORDER_RATIO = 0.05  # of the tile width
TILE_SPACING_RATIO = 0.02  # of the tile width
QUOTE_POSITION_RATIO: Vec2 = (1.12, 1.65)  # of the canvas centre

# -- background shader --------------------------------------------------------

BACKGROUND_SHAPE_CHANGE_TIME = 200.0
BACKGROUND_DOT_RADIUS = 0.018571486

# The sliding tile's border samples the whole picture.
FULL_UV: tuple[Vec2, Vec2] = ((0.0, 0.0), (1.0, 1.0))


@dataclass(frozen=True)
class Layout:
    """Fixed puzzle geometry for a canvas size."""

    canvas_width: int
    canvas_height: int

    def __post_init__(self) -> None:
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(
                f"Canvas must have a positive size, got "
                f"{self.canvas_width}×{self.canvas_height}."
            )

    @property
    def center(self) -> Vec2:
        return (0.5 * self.canvas_width, 0.5 * self.canvas_height)

    @property
    def tile_width(self) -> float:
        return TILE_WIDTH_RATIO * self.canvas_width

    @property
    def tile_border_width(self) -> float:
        return TILE_BORDER_RATIO * self.tile_width

    @property
    def tile_spacing(self) -> float:
        return TILE_SPACING_RATIO * self.tile_width

    @property
    def grid_width(self) -> float:
        n = GRID_DIMENSION
        return (
            n * self.tile_width
            + (n + 1) * self.tile_spacing
            + 2 * n * self.tile_border_width
        )

    @property
    def border_rect_width(self) -> float:
        return self.tile_width + 2 * self.tile_border_width

    @property
    def cell_pitch(self) -> float:
        """Distance between the centres of neighbouring tiles."""
        return self.tile_width + 2 * self.tile_border_width + self.tile_spacing

    def tile_center(self, index: int) -> Vec2:
        row, col = divmod(index, GRID_DIMENSION)
        cx, cy = self.center
        first = (
            -0.5 * self.grid_width
            + self.tile_spacing
            + self.tile_border_width
            + 0.5 * self.tile_width
        )
        return (
            cx + first + col * self.cell_pitch,
            cy + first + row * self.cell_pitch,
        )

    def slide_offset(self, direction: Direction) -> Vec2:
        """Where a tile sliding in *direction* starts, relative to its target."""
        d = self.cell_pitch
        return {
            Direction.UP: (0.0, d),
            Direction.LEFT: (d, 0.0),
            Direction.DOWN: (0.0, -d),
            Direction.RIGHT: (-d, 0.0),
        }[direction]

    def tile_uv(self, tile: int) -> tuple[Vec2, Vec2, Vec2, Vec2]:
        """(inner top-left, inner bottom-right, outer top-left, outer bottom-right)."""
        tile_y, tile_x = divmod(tile, GRID_DIMENSION)
        b = self.tile_border_width
        s = self.tile_spacing
        w = self.tile_width
        gw = self.grid_width

        tl_x = (2 * tile_x + 1) * b + (tile_x + 1) * s + tile_x * w
        tl_y = (2 * tile_y + 1) * b + (tile_y + 1) * s + tile_y * w

        return (
            (tl_x / gw, tl_y / gw),
            ((tl_x + w) / gw, (tl_y + w) / gw),
            ((tl_x - b) / gw, (tl_y - b) / gw),
            ((tl_x + w + b) / gw, (tl_y + w + b) / gw),
        )

    def quote_rectangle(self, quote_size: tuple[int, int]) -> Rectangle:
        cx, cy = self.center
        rx, ry = QUOTE_POSITION_RATIO
        return Rectangle((rx * cx, ry * cy), float(quote_size[0]), float(quote_size[1]))


class VertexBuffer:
    """Reusable buffer of interleaved vertex floats."""

    def __init__(self) -> None:
        self._data = array("f")

    @property
    def count(self) -> int:
        return len(self._data) // FLOATS_PER_VERTEX

    def reset(self) -> None:
        del self._data[:]

    def emit_rectangle(
        self,
        rect: Rectangle,
        color: Color,
        top_left_uv: Vec2,
        bottom_right_uv: Vec2,
        lam: float,
    ) -> None:
        """Append two triangles covering *rect*, sharing the TR–BL diagonal."""
        x_left, y_top = rect.top_left
        x_right, y_bottom = rect.bottom_right
        r, g, b = (c / 255 for c in color[:3])
        s_left, t_top = top_left_uv
        s_right, t_bottom = bottom_right_uv

        v0 = (x_left, y_top, r, g, b, s_left, t_top, lam)
        v1 = (x_right, y_top, r, g, b, s_right, t_top, lam)
        v2 = (x_left, y_bottom, r, g, b, s_left, t_bottom, lam)
        v5 = (x_right, y_bottom, r, g, b, s_right, t_bottom, lam)
        for vertex in (v0, v1, v2, v1, v2, v5):
            self._data.extend(vertex)

    def flush(self, texture: Texture) -> DrawBatch:
        """Hand the buffered vertices over as a batch and start empty."""
        batch = DrawBatch(texture=texture, data=array("f", self._data), count=self.count)
        self.reset()
        return batch


class GeometryBuilder:
    """Builds the draw batches for one frame."""

    def __init__(self, layout: Layout, quote_size: tuple[int, int]) -> None:
        self.layout = layout
        self.quote_size = quote_size
        self.buffer = VertexBuffer()

    def build(self, state: GameState) -> Frame:
        self.buffer.reset()
        layout = self.layout
        lam = state.won_fraction

        grid_rect = Rectangle(layout.center, layout.grid_width, layout.grid_width)
        self.buffer.emit_rectangle(grid_rect, GRID_BACKGROUND, (0.0, 0.0), (1.0, 1.0), lam)

        for index, tile in enumerate(state.board.cells):
            if tile == 0 or tile == state.animating_tile:
                continue
            self._emit_tile(tile, layout.tile_center(index), lam)

        if state.animating_tile:
            index = state.board.find_tile(state.animating_tile)
            if index is None:
                raise GridInvariantError(
                    f"Sliding tile {state.animating_tile} is not on board {list(state.board.cells)}"
                )
            dest_x, dest_y = layout.tile_center(index)
            off_x, off_y = layout.slide_offset(state.animation_direction)
            weight = 1.0 - state.tile_fraction
            self._emit_tile(
                state.animating_tile,
                (dest_x + weight * off_x, dest_y + weight * off_y),
                lam,
                border_uv=FULL_UV,
            )

        tiles = self.buffer.flush(Texture.PRIMARY)

        self.buffer.emit_rectangle(
            layout.quote_rectangle(self.quote_size),
            QUOTE_BACKGROUND,
            (0.0, 0.0),
            (1.0, 1.0),
            state.quote_fraction,
        )
        quote = self.buffer.flush(Texture.QUOTE)

        return Frame(batches=(tiles, quote), background=background_uniforms(state))

    def _emit_tile(
        self,
        tile: int,
        center: Vec2,
        lam: float,
        border_uv: tuple[Vec2, Vec2] | None = None,
    ) -> None:
        layout = self.layout
        inner_tl, inner_br, outer_tl, outer_br = layout.tile_uv(tile)
        if border_uv is not None:
            outer_tl, outer_br = border_uv
        border = Rectangle(center, layout.border_rect_width, layout.border_rect_width)
        inner = Rectangle(center, layout.tile_width, layout.tile_width)
        self.buffer.emit_rectangle(border, TILE_BORDER, outer_tl, outer_br, lam)
        self.buffer.emit_rectangle(inner, TILE_INNER, inner_tl, inner_br, 1.0)


def background_uniforms(state: GameState) -> BackgroundUniforms:
    """Inputs of the animated dot background; the dots shrink away on a win."""
    lp = 1.5 + 0.5 * math.cos(math.pi * state.current_time / BACKGROUND_SHAPE_CHANGE_TIME)
    radius = BACKGROUND_DOT_RADIUS
    if state.is_won:
        radius *= 1.0 - state.won_fraction
    return BackgroundUniforms(lp=lp, radius=radius)
