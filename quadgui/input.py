"""Per-frame input state, key codes, clipboard and key repeat emulation."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union

from quadgui.geometry import Vec2


class KeyCode(enum.Enum):
    """Special keys understood by the widgets."""

    UP = enum.auto()
    DOWN = enum.auto()
    RIGHT = enum.auto()
    LEFT = enum.auto()
    BACKSPACE = enum.auto()
    DELETE = enum.auto()
    ENTER = enum.auto()
    TAB = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    CONTROL = enum.auto()
    ESCAPE = enum.auto()
    A = enum.auto()  # select all
    Z = enum.auto()  # undo
    Y = enum.auto()  # redo
    C = enum.auto()  # copy
    V = enum.auto()  # paste
    X = enum.auto()  # cut


Key = Union[str, KeyCode]


@dataclass(frozen=True)
class InputCharacter:
    """A typed character or special key with its modifier state."""

    key: Key
    modifier_shift: bool = False
    modifier_ctrl: bool = False


@dataclass
class Input:
    """Input gathered during one frame."""

    mouse_position: Vec2 = field(default_factory=Vec2)
    is_mouse_down: bool = False
    click_down: bool = False
    click_up: bool = False
    mouse_wheel: Vec2 = field(default_factory=Vec2)
    input_buffer: list[InputCharacter] = field(default_factory=list)
    modifier_ctrl: bool = False
    escape: bool = False
    enter: bool = False
    cursor_grabbed: bool = False
    window_active: bool = False

    def _usable(self) -> bool:
        return not self.cursor_grabbed and self.window_active

    def mouse_down_active(self) -> bool:
        """Mouse held down, in an active window, with the cursor not grabbed."""
        return self.is_mouse_down and self._usable()

    def click_down_active(self) -> bool:
        """Mouse pressed this frame, in an active window, cursor not grabbed."""
        return self.click_down and self._usable()

    def click_up_active(self) -> bool:
        """Mouse released this frame, in an active window, cursor not grabbed."""
        return self.click_up and self._usable()

    def reset(self) -> None:
        """Clear the per-frame events; the mouse position and button stay."""
        self.modifier_ctrl = False
        self.escape = False
        self.enter = False
        self.click_down = False
        self.click_up = False
        self.mouse_wheel = Vec2()
        self.input_buffer = []
        self.window_active = False


class Clipboard:
    """An in-memory clipboard; subclass to connect a system clipboard."""

    def __init__(self, data: Optional[str] = None) -> None:
        self._data = data

    def get(self) -> Optional[str]:
        """The clipboard contents, or None when empty."""
        return self._data

    def set(self, data: str) -> None:
        """Replace the clipboard contents."""
        self._data = data


_REPEAT_DELAY = 0.5


@dataclass
class KeyRepeat:
    """Emulates key auto-repeat: a held key fires once, then repeats after a delay."""

    character_this_frame: Optional[KeyCode] = None
    active_character: Optional[KeyCode] = None
    repeating_character: Optional[KeyCode] = None
    pressed_time: float = 0.0

    def add_repeat_gap(self, key: KeyCode, time: float) -> bool:
        """Record a key seen this frame and tell whether it should act now."""
        self.character_this_frame = key
        return (
            self.active_character is None
            or self.active_character != self.character_this_frame
            or self.repeating_character == self.character_this_frame
        )

    def new_frame(self, time: float) -> None:
        """Advance to the next frame."""
        this_frame = self.character_this_frame
        self.character_this_frame = None

        if this_frame == self.active_character and time - self.pressed_time > _REPEAT_DELAY:
            self.repeating_character = self.active_character

        if this_frame != self.active_character:
            self.active_character = this_frame
            self.pressed_time = time
            self.repeating_character = None