"""Rasterize draw commands into meshes that a GPU backend can draw."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional

from quadgui.geometry import Color, Rect, RectOffset, Vec2
from quadgui.painter import (
    Clip,
    DrawCharacter,
    DrawCommand,
    DrawLine,
    DrawRawTexture,
    DrawRect,
    DrawSprite,
    DrawTriangle,
    triangles_budget,
)

MAX_VERTICES = 8000
MAX_INDICES = 4000

_F32_EPSILON = 1.1920929e-07
_INDEX_MASK = 0xFFFF

_RECT_INDICES = (0, 1, 2, 0, 2, 3)
_TRIANGLE_INDICES = (0, 1, 2)
_LINE_INDICES = (0, 1, 2, 2, 1, 3)


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, texture coordinates and colour."""

    position: tuple[float, float, float]
    uv: tuple[float, float]
    color: Color


def _vertex(x: float, y: float, u: float, v: float, color: Color) -> Vertex:
    return Vertex((x, y, 0.0), (u, v), color)


def _nine_patch_indices() -> list[int]:
    indices: list[int] = []
    for row in range(3):
        for column in range(3):
            top_left = row * 4 + column
            below = (row + 1) * 4 + column
            indices.extend((top_left, top_left + 1, below))
            indices.extend((top_left + 1, below, below + 1))
    return indices


_SPRITE_INDICES = tuple(_nine_patch_indices())


@dataclass
class DrawList:
    """A batch of triangles sharing one texture and one clipping zone."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    clipping_zone: Optional[Rect] = None
    texture: Optional[Any] = None

    def _append(self, vertices: list[Vertex], indices: tuple[int, ...]) -> None:
        offset = len(self.vertices) & _INDEX_MASK
        self.vertices.extend(vertices)
        self.indices.extend((index + offset) & _INDEX_MASK for index in indices)

    def clear(self) -> None:
        """Drop the geometry and the clipping zone; the texture stays."""
        self.vertices.clear()
        self.indices.clear()
        self.clipping_zone = None

    def draw_rectangle_lines(self, rect: Rect, source: Rect, color: Color) -> None:
        """Draw a one pixel outline of the rectangle."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        self.draw_rectangle(Rect(x, y, w, 1.0), source, color)
        self.draw_rectangle(Rect(x + w - 1.0, y + 1.0, 1.0, h - 2.0), source, color)
        self.draw_rectangle(Rect(x, y + h - 1.0, w, 1.0), source, color)
        self.draw_rectangle(Rect(x, y + 1.0, 1.0, h - 2.0), source, color)

    def draw_sprite(
        self,
        rect: Rect,
        src: Rect,
        offsets: RectOffset,
        uv_offsets: RectOffset,
        color: Color,
    ) -> None:
        """Draw a nine-patch sprite whose borders keep their size when stretched."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        xs = (x, x + offsets.left, x + w - offsets.right, x + w)
        ys = (y, y + offsets.top, y + h - offsets.top, y + h)
        us = (src.x, src.x + uv_offsets.left, src.x + src.w - uv_offsets.right, src.x + src.w)
        vs = (src.y, src.y + uv_offsets.top, src.y + src.h - uv_offsets.bottom, src.y + src.h)

        vertices = [
            _vertex(vx, vy, u, v, color)
            for vx, u in zip(xs, us)
            for vy, v in zip(ys, vs)
        ]
        self._append(vertices, _SPRITE_INDICES)

    def draw_rectangle(self, rect: Rect, src: Rect, color: Color) -> None:
        """Draw a filled rectangle mapped to the source texture area."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        vertices = [
            _vertex(x, y, src.x, src.y, color),
            _vertex(x + w, y, src.x + src.w, src.y, color),
            _vertex(x + w, y + h, src.x + src.w, src.y + src.h, color),
            _vertex(x, y + h, src.x, src.y + src.h, color),
        ]
        self._append(vertices, _RECT_INDICES)

    def draw_triangle(
        self, p0: Vec2, p1: Vec2, p2: Vec2, source: Rect, color: Color
    ) -> None:
        """Draw a solid triangle."""
        vertices = [_vertex(p.x, p.y, source.x, source.y, color) for p in (p0, p1, p2)]
        self._append(vertices, _TRIANGLE_INDICES)

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        thickness: float,
        source: Rect,
        color: Color,
    ) -> None:
        """Draw a line of the given thickness as a quad; degenerate lines are skipped."""
        nx = -(y2 - y1)
        ny = x2 - x1
        tlen = math.sqrt(nx * nx + ny * ny) / (thickness * 0.5)
        if tlen < _F32_EPSILON:
            return
        tx = nx / tlen
        ty = ny / tlen

        vertices = [
            _vertex(x1 + tx, y1 + ty, source.x, source.y, color),
            _vertex(x1 - tx, y1 - ty, source.x, source.y, color),
            _vertex(x2 + tx, y2 + ty, source.x, source.y, color),
            _vertex(x2 - tx, y2 - ty, source.x, source.y, color),
        ]
        self._append(vertices, _LINE_INDICES)


def _active_draw_list(draw_lists: list[DrawList], command: DrawCommand) -> DrawList:
    if not draw_lists:
        draw_lists.append(DrawList())
    last = draw_lists[-1]

    if isinstance(command, Clip):
        if last.clipping_zone != command.rect:
            draw_lists.append(DrawList())
    elif isinstance(command, DrawRawTexture):
        if last.texture is None or last.texture != command.texture:
            draw_lists.append(
                DrawList(texture=command.texture, clipping_zone=last.clipping_zone)
            )
    else:
        vertices, indices = triangles_budget(command)
        if (
            last.texture is not None
            or len(last.vertices) + vertices >= MAX_VERTICES
            or len(last.indices) + indices >= MAX_INDICES
        ):
            draw_lists.append(DrawList(clipping_zone=last.clipping_zone))

    return draw_lists[-1]


def render_command(draw_lists: list[DrawList], command: DrawCommand) -> None:
    """Rasterize one command into the last fitting draw list, starting a new one if needed."""
    active = _active_draw_list(draw_lists, command)

    if isinstance(command, Clip):
        active.clipping_zone = command.rect
    elif isinstance(command, DrawRect):
        if command.fill is not None:
            active.draw_rectangle(command.rect, command.source, command.fill)
        if command.stroke is not None:
            active.draw_rectangle_lines(command.rect, command.source, command.stroke)
    elif isinstance(command, DrawSprite):
        active.draw_sprite(
            command.rect,
            command.source,
            command.offsets or RectOffset(),
            command.offsets_uv or RectOffset(),
            command.color,
        )
    elif isinstance(command, DrawLine):
        active.draw_line(
            command.start.x,
            command.start.y,
            command.end.x,
            command.end.y,
            1.0,
            command.source,
            command.color,
        )
    elif isinstance(command, DrawCharacter):
        active.draw_rectangle(command.dest, command.source, command.color)
    elif isinstance(command, DrawRawTexture):
        active.draw_rectangle(
            command.rect, Rect(0.0, 0.0, 1.0, 1.0), Color(1.0, 1.0, 1.0, 1.0)
        )
    elif isinstance(command, DrawTriangle):
        active.draw_triangle(command.p0, command.p1, command.p2, command.source, command.color)
    else:
        raise TypeError(f"unknown draw command {command!r}")