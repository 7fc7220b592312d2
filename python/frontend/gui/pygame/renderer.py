"""Draws a :class:`~backend.models.geometry.Frame` onto a pygame surface.

Each batch is a run of rectangles (six vertices each). A rectangle is
filled with its flat colour, then the matching part of the batch's
texture is blended on top with alpha ``lam``, which gives the same
cross-fade as mixing colour and texture per pixel.
"""

from __future__ import annotations

import math

import pygame

from backend.models.geometry import BackgroundUniforms, Frame, Texture, Vertex

CLEAR_COLOR = (51, 51, 51)
DOT_COLOR = (70, 74, 92)
DOT_SPACING_RATIO = 0.05  # of the canvas width
_SHAPE_SEGMENTS = 24


def _superellipse(radius: float, p: float) -> list[tuple[float, float]]:
    """Outline of the unit L^p ball scaled to *radius*."""
    points = []
    for i in range(_SHAPE_SEGMENTS):
        t = 2 * math.pi * i / _SHAPE_SEGMENTS
        c, s = math.cos(t), math.sin(t)
        points.append(
            (
                radius * math.copysign(abs(c) ** (2 / p), c),
                radius * math.copysign(abs(s) ** (2 / p), s),
            )
        )
    return points


class QuadRenderer:
    def __init__(
        self, surface: pygame.Surface, textures: dict[Texture, pygame.Surface]
    ) -> None:
        self._surf = surface
        self._textures = textures
        self._pieces: dict[tuple, pygame.Surface] = {}

    def draw(self, frame: Frame) -> None:
        self._surf.fill(CLEAR_COLOR)
        self._draw_background(frame.background)
        for batch in frame.batches:
            texture = self._textures[batch.texture]
            for top_left, bottom_right in batch.rectangles():
                self._draw_rectangle(batch.texture, texture, top_left, bottom_right)

    # -- background -----------------------------------------------------------

    def _draw_background(self, uniforms: BackgroundUniforms) -> None:
        width, height = self._surf.get_size()
        # The radius is given in clip-space units, i.e. half the canvas width.
        radius = uniforms.radius * 0.5 * width
        if radius < 0.5:
            return
        shape = _superellipse(radius, uniforms.lp)
        spacing = DOT_SPACING_RATIO * width
        y = spacing / 2
        while y < height:
            x = spacing / 2
            while x < width:
                pygame.draw.polygon(
                    self._surf, DOT_COLOR, [(x + dx, y + dy) for dx, dy in shape]
                )
                x += spacing
            y += spacing

    # -- rectangles -----------------------------------------------------------

    def _draw_rectangle(
        self,
        slot: Texture,
        texture: pygame.Surface,
        top_left: Vertex,
        bottom_right: Vertex,
    ) -> None:
        rect = pygame.Rect(
            round(top_left.x),
            round(top_left.y),
            max(1, round(bottom_right.x - top_left.x)),
            max(1, round(bottom_right.y - top_left.y)),
        )
        lam = top_left.lam

        if lam < 1.0:
            color = tuple(round(255 * c) for c in (top_left.r, top_left.g, top_left.b))
            pygame.draw.rect(self._surf, color, rect)
        if lam <= 0.0:
            return

        tex_w, tex_h = texture.get_size()
        src = pygame.Rect(
            round(top_left.tx * tex_w),
            round(top_left.ty * tex_h),
            round((bottom_right.tx - top_left.tx) * tex_w),
            round((bottom_right.ty - top_left.ty) * tex_h),
        ).clip(texture.get_rect())
        if src.width == 0 or src.height == 0:
            return

        key = (slot, tuple(src), rect.size)
        piece = self._pieces.get(key)
        if piece is None:
            piece = pygame.transform.smoothscale(texture.subsurface(src), rect.size)
            self._pieces[key] = piece
        piece.set_alpha(round(255 * lam))
        self._surf.blit(piece, rect.topleft)
