"""Turn high-level drawing requests and widget styles into draw commands.

The commands are later rasterized into meshes by the rasterizer.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Hashable, Optional, Protocol, Union

from quadgui.geometry import Color, Rect, RectOffset, Vec2
from quadgui.style import ElementState, Style

WHITE_SPRITE: Hashable = 0
"""Key of the plain white sprite used for untextured shapes."""


class SpriteAtlas(Protocol):
    """What the painter needs from a texture atlas."""

    width: int
    height: int

    def get_uv_rect(self, key: Hashable) -> Optional[Rect]:
        """Normalised texture coordinates of a sprite, or None if unknown."""
        ...


@dataclass(frozen=True)
class DrawCharacter:
    """Draw one glyph from the atlas."""

    dest: Rect
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawCharacter:
        """A copy moved by the given vector."""
        return replace(self, dest=self.dest.offset(offset))


@dataclass(frozen=True)
class DrawRect:
    """Draw a filled and/or stroked rectangle."""

    rect: Rect
    source: Rect
    fill: Optional[Color] = None
    stroke: Optional[Color] = None

    def offset(self, offset: Vec2) -> DrawRect:
        """A copy moved by the given vector."""
        return replace(self, rect=self.rect.offset(offset))


@dataclass(frozen=True)
class DrawSprite:
    """Draw an atlas sprite, optionally as a nine-patch with fixed borders."""

    rect: Rect
    source: Rect
    color: Color
    offsets: Optional[RectOffset] = None
    offsets_uv: Optional[RectOffset] = None

    def offset(self, offset: Vec2) -> DrawSprite:
        """A copy moved by the given vector."""
        return replace(self, rect=self.rect.offset(offset))


@dataclass(frozen=True)
class DrawTriangle:
    """Draw a solid triangle."""

    p0: Vec2
    p1: Vec2
    p2: Vec2
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawTriangle:
        """A copy moved by the given vector."""
        return replace(self, p0=self.p0 + offset, p1=self.p1 + offset, p2=self.p2 + offset)


@dataclass(frozen=True)
class DrawLine:
    """Draw a one pixel wide line."""

    start: Vec2
    end: Vec2
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawLine:
        """A copy moved by the given vector."""
        return replace(self, start=self.start + offset, end=self.end + offset)


@dataclass(frozen=True)
class DrawRawTexture:
    """Draw a whole texture stretched over a rectangle."""

    rect: Rect
    texture: Any

    def offset(self, offset: Vec2) -> DrawRawTexture:
        """A copy moved by the given vector."""
        return replace(self, rect=self.rect.offset(offset))


@dataclass(frozen=True)
class Clip:
    """Restrict the following commands to a rectangle, or lift the restriction."""

    rect: Optional[Rect] = None

    def offset(self, offset: Vec2) -> Clip:
        """A copy moved by the given vector."""
        if self.rect is None:
            return self
        return Clip(self.rect.offset(offset))


DrawCommand = Union[
    DrawCharacter, DrawRect, DrawSprite, DrawTriangle, DrawLine, DrawRawTexture, Clip
]

_BUDGETED = (DrawCharacter, DrawRawTexture, DrawRect, DrawLine, DrawTriangle)


def triangles_budget(command: DrawCommand) -> tuple[int, int]:
    """Rough (vertices, indices) estimate reserved for a command."""
    if isinstance(command, _BUDGETED):
        return (10, 10)
    return (0, 0)


class Alignment(enum.Enum):
    """Horizontal alignment of a label."""

    LEFT = "left"
    CENTER = "center"


_DEFAULT_LABEL_COLOR = Color(0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class LabelParams:
    """Colour and alignment of a drawn label."""

    color: Color = _DEFAULT_LABEL_COLOR
    alignment: Alignment = Alignment.LEFT

    @classmethod
    def from_value(cls, value: Any) -> LabelParams:
        """Build parameters from None, a Color, a (Color, Alignment) pair or LabelParams."""
        if isinstance(value, LabelParams):
            return value
        if value is None:
            return cls()
        if isinstance(value, Color):
            return cls(color=value)
        if (
            isinstance(value, tuple)
            and len(value) == 2
            and isinstance(value[0], Color)
            and isinstance(value[1], Alignment)
        ):
            return cls(color=value[0], alignment=value[1])
        raise TypeError(f"cannot build label parameters from {value!r}")


@dataclass
class Painter:
    """Collects draw commands, skipping what falls outside the clipping zone."""

    atlas: SpriteAtlas
    dpi_scale: float = 1.0
    commands: list[DrawCommand] = field(default_factory=list)
    clipping_zone: Optional[Rect] = None

    def clear(self) -> None:
        """Drop all commands and the clipping zone."""
        self.commands.clear()
        self.clipping_zone = None

    def _uv_rect(self, key: Hashable) -> Rect:
        source = self.atlas.get_uv_rect(key)
        if source is None:
            raise LookupError(f"sprite {key!r} is not in the atlas")
        return source

    def _clipped_out(self, rect: Rect) -> bool:
        return self.clipping_zone is not None and not self.clipping_zone.overlaps(rect)

    def draw_element_background(
        self, style: Style, pos: Vec2, size: Vec2, element_state: ElementState
    ) -> None:
        """Draw a widget background: its sprite if the style has one, else a plain fill."""
        color = style.color_for(element_state)
        background_margin = style.background_margin or RectOffset()
        rect = Rect(pos.x, pos.y, size.x, size.y)
        sprite = style.background_sprite(element_state)
        if sprite is not None:
            self.draw_sprite(rect, sprite, color, background_margin)
        else:
            self.draw_rect(rect, None, color)

    def draw_raw_texture(self, rect: Rect, texture: Any) -> None:
        """Draw a whole texture over the rectangle."""
        if self._clipped_out(rect):
            return
        self.commands.append(DrawRawTexture(rect, texture))

    def draw_rect(self, rect: Rect, stroke: Optional[Color], fill: Optional[Color]) -> None:
        """Draw a rectangle with an optional outline and an optional fill."""
        if self._clipped_out(rect):
            return
        source = self._uv_rect(WHITE_SPRITE)
        self.commands.append(DrawRect(rect, source, fill=fill, stroke=stroke))

    def draw_sprite(
        self, rect: Rect, sprite: Hashable, color: Color, margin: Optional[RectOffset]
    ) -> None:
        """Draw an atlas sprite; a margin keeps that border of the image unscaled."""
        if self._clipped_out(rect):
            return
        source = self._uv_rect(sprite)
        width, height = float(self.atlas.width), float(self.atlas.height)
        offsets_uv = None
        if margin is not None:
            offsets_uv = RectOffset(
                left=margin.left / width,
                right=margin.right / width,
                top=margin.top / height,
                bottom=margin.bottom / height,
            )
        self.commands.append(DrawSprite(rect, source, color, margin, offsets_uv))

    def draw_triangle(self, p0: Vec2, p1: Vec2, p2: Vec2, color: Color) -> None:
        """Draw a triangle unless all its corners are outside the clipping zone."""
        clip = self.clipping_zone
        if clip is not None and not any(clip.contains(p) for p in (p0, p1, p2)):
            return
        source = self._uv_rect(WHITE_SPRITE)
        self.commands.append(DrawTriangle(p0, p1, p2, source, color))

    def draw_line(self, start: Vec2, end: Vec2, color: Color) -> None:
        """Draw a line unless both ends are outside the clipping zone."""
        clip = self.clipping_zone
        if clip is not None and not clip.contains(start) and not clip.contains(end):
            return
        source = self._uv_rect(WHITE_SPRITE)
        self.commands.append(DrawLine(start, end, source, color))

    def clip(self, rect: Optional[Rect]) -> None:
        """Narrow the clipping zone to the rectangle, or lift it with None."""
        if rect is None:
            self.clipping_zone = None
        else:
            narrowed = None
            if self.clipping_zone is not None:
                narrowed = self.clipping_zone.intersect(rect)
            self.clipping_zone = narrowed if narrowed is not None else rect

        zone = self.clipping_zone
        scaled = None
        if zone is not None:
            dpi = self.dpi_scale
            scaled = Rect(zone.x * dpi, zone.y * dpi, zone.w * dpi, zone.h * dpi)
        self.commands.append(Clip(scaled))