"""The layout cursor that decides where the next widget is placed.

This is not the mouse cursor: it tracks where the next widget goes when no
explicit position is requested.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union

from quadgui.geometry import Rect, Vec2


@dataclass
class Scroll:
    """Scroll state of a scrollable area."""

    rect: Rect
    inner_rect: Rect
    inner_rect_previous_frame: Rect
    scroll: Vec2 = field(default_factory=Vec2)
    dragging_x: bool = False
    dragging_y: bool = False
    initial_scroll: Vec2 = field(default_factory=Vec2)

    def _clamped(self, y: float) -> float:
        inner = self.inner_rect_previous_frame
        return min(max(y, inner.y), inner.h - self.rect.h + inner.y)

    def scroll_to(self, y: float) -> None:
        """Scroll to the given y, kept within the previous frame's content."""
        self.rect.y = self._clamped(y)

    def update(self) -> None:
        """Re-clamp the current scroll position."""
        self.rect.y = self._clamped(self.rect.y)


class Layout(enum.Enum):
    """How a widget is placed relative to the previous one."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Free:
    """Place a widget at an explicit point in the area."""

    point: Vec2


LayoutKind = Union[Layout, Free]


@dataclass
class Cursor:
    """Tracks the placement position inside an area."""

    area: Rect
    margin: float
    x: float = field(init=False)
    y: float = field(init=False)
    start_x: float = field(init=False)
    start_y: float = field(init=False)
    ident: float = field(init=False, default=0.0)
    scroll: Scroll = field(init=False)
    next_same_line: Optional[float] = field(init=False, default=None)
    max_row_y: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self.x = self.y = self.margin
        self.start_x = self.start_y = self.margin
        w, h = self.area.w, self.area.h
        self.scroll = Scroll(
            rect=Rect(0.0, 0.0, w, h),
            inner_rect=Rect(0.0, 0.0, w, h),
            inner_rect_previous_frame=Rect(0.0, 0.0, w, h),
        )

    def _area_offset(self) -> Vec2:
        return Vec2(self.area.x, self.area.y) + self.scroll.scroll + Vec2(self.ident, 0.0)

    def reset(self) -> None:
        """Return to the start position for a new frame."""
        self.x = self.start_x
        self.y = self.start_y
        self.max_row_y = 0.0
        self.ident = 0.0
        self.scroll.inner_rect_previous_frame = self.scroll.inner_rect
        self.scroll.inner_rect = Rect(0.0, 0.0, self.area.w, self.area.h)

    def current_position(self) -> Vec2:
        """Absolute position where the next widget would start."""
        return Vec2(self.x, self.y) + self._area_offset()

    def fit(self, size: Vec2, layout: LayoutKind) -> Vec2:
        """Reserve space of the given size and return its absolute position."""
        if self.next_same_line is not None:
            same_line_x = self.next_same_line
            self.next_same_line = None
            if same_line_x != 0.0:
                self.x = same_line_x
            layout = Layout.HORIZONTAL

        if isinstance(layout, Free):
            res = layout.point
        elif layout is Layout.HORIZONTAL:
            self.max_row_y = max(self.max_row_y, size.y)
            if self.x + size.x >= self.area.w - self.margin * 2.0:
                # the extra 1 makes a following vertical widget start a new row
                self.x = self.margin + 1.0
                self.y += self.max_row_y + self.margin
                self.max_row_y = 0.0
            res = Vec2(self.x, self.y)
            self.x += size.x + self.margin
        else:
            if self.x != self.margin:
                self.x = self.margin
                self.y += self.max_row_y
            res = Vec2(self.x, self.y)
            self.x += size.x + self.margin
            self.max_row_y = size.y + self.margin

        self.scroll.inner_rect = self.scroll.inner_rect.combine_with(
            Rect(res.x, res.y, size.x, size.y)
        )
        return res + self._area_offset()