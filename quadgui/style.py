"""Visual style of widgets and how it resolves for a given element state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Optional

from quadgui.geometry import Color, RectOffset

_BLACK = Color.from_rgba(0, 0, 0, 255)
_WHITE = Color.from_rgba(255, 255, 255, 255)

_INACTIVE_TEXT_FACTOR = 0.6
_INACTIVE_ALPHA_FACTOR = 0.8


@dataclass(frozen=True)
class ElementState:
    """Interaction state of a widget element in the current frame."""

    focused: bool = False
    hovered: bool = False
    clicked: bool = False
    selected: bool = False


def _to_byte(value: float) -> int:
    # saturating truncation to the 0..255 range
    return min(255, max(0, int(value)))


@dataclass
class Style:
    """Colours, backgrounds, margins and font settings of one kind of widget.

    ``background``, ``background_hovered`` and ``background_clicked`` are keys
    of sprites in an atlas. ``background_margin`` is the part of a background
    image that is not scaled; ``margin`` is extra space around the content
    that does not affect textures and may be negative.
    """

    background: Optional[Hashable] = None
    background_hovered: Optional[Hashable] = None
    background_clicked: Optional[Hashable] = None
    color: Color = _WHITE
    color_inactive: Optional[Color] = None
    color_hovered: Color = _WHITE
    color_clicked: Color = _WHITE
    color_selected: Color = _WHITE
    color_selected_hovered: Color = _WHITE
    background_margin: Optional[RectOffset] = None
    margin: Optional[RectOffset] = None
    font: Optional[Any] = None
    text_color: Color = _BLACK
    text_color_hovered: Color = _BLACK
    text_color_clicked: Color = _BLACK
    font_size: int = 16
    reverse_background_z: bool = False

    def border_margin(self) -> RectOffset:
        """The background margin and the content margin added together."""
        background = self.background_margin or RectOffset()
        margin = self.margin or RectOffset()
        return RectOffset(
            left=background.left + margin.left,
            right=background.right + margin.right,
            top=background.top + margin.top,
            bottom=background.bottom + margin.bottom,
        )

    def text_color_for(self, element_state: ElementState) -> Color:
        """Text colour for the state; unfocused text is dimmed."""
        if element_state.clicked:
            return self.text_color_clicked
        if element_state.hovered:
            return self.text_color_hovered
        if element_state.focused:
            return self.text_color
        base = self.text_color
        factor = _INACTIVE_TEXT_FACTOR
        return Color(base.r * factor, base.g * factor, base.b * factor, base.a * factor)

    def color_for(self, element_state: ElementState) -> Color:
        """Background colour for the state."""
        if not element_state.focused:
            if self.color_inactive is not None:
                return self.color_inactive
            base = self.color
            return Color.from_rgba(
                _to_byte(base.r * 255.0),
                _to_byte(base.g * 255.0),
                _to_byte(base.b * 255.0),
                _to_byte(base.a * 255.0 * _INACTIVE_ALPHA_FACTOR),
            )
        if element_state.clicked:
            return self.color_clicked
        if element_state.selected and element_state.hovered:
            return self.color_selected_hovered
        if element_state.selected:
            return self.color_selected
        if element_state.hovered:
            return self.color_hovered
        return self.color

    def background_sprite(self, element_state: ElementState) -> Optional[Hashable]:
        """The background sprite key for the state, or None for a plain fill."""
        if element_state.clicked and self.background_clicked is not None:
            return self.background_clicked
        if element_state.hovered and self.background_hovered is not None:
            return self.background_hovered
        return self.background