# quadgui

Building blocks for an immediate-mode graphical user interface. They are
written in plain Python and need no third-party packages.

## What is inside

- `quadgui.geometry` holds the value types the other modules use: `Vec2`,
  `Rect`, `RectOffset` and `Color`. `Color.from_rgba` builds a colour from
  0..255 components.
- `quadgui.cursor` holds the layout `Cursor`. It places each widget
  vertically (`Layout.VERTICAL`), horizontally (`Layout.HORIZONTAL`) or at an
  explicit point (`Free`). It records the content area in a `Scroll`.
- `quadgui.input` holds the per-frame `Input` state and the special keys in
  `KeyCode`. An `InputCharacter` is a buffered key press. `Clipboard` is an
  in-memory clipboard. `KeyRepeat` imitates key auto-repeat: a held key acts
  once, then repeats once it has been held for more than half a second.
- `quadgui.style` holds `Style` and `ElementState`. A style picks the
  background colour (`color_for`), the text colour (`text_color_for`) and the
  background sprite (`background_sprite`) for focused, hovered, clicked and
  selected elements.
- `quadgui.painter` holds `Painter`, which turns drawing requests into draw
  commands: `DrawRect`, `DrawSprite`, `DrawLine`, `DrawTriangle`,
  `DrawRawTexture`, `DrawCharacter` and `Clip`. The painter skips anything
  that falls outside the current clipping zone.
- `quadgui.rasterizer` holds `render_command` and `DrawList`. They turn draw
  commands into batches of `Vertex` objects and 16-bit indices. A new batch
  starts when the texture or the clipping zone changes, or when a batch would
  go past `MAX_VERTICES` or `MAX_INDICES`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example: laying out widgets

```python
from quadgui.cursor import Cursor, Layout
from quadgui.geometry import Rect, Vec2

cursor = Cursor(Rect(0.0, 0.0, 200.0, 100.0), margin=2.0)
first = cursor.fit(Vec2(50.0, 20.0), Layout.VERTICAL)
second = cursor.fit(Vec2(50.0, 20.0), Layout.VERTICAL)
assert first == Vec2(2.0, 2.0)
assert second == Vec2(2.0, 24.0)
```

Each call to `fit` returns the position for the next widget in window
coordinates. That position includes the cursor's area offset, its scroll and
its indent.

## Example: from draw commands to a mesh

The painter works with any atlas that has `width`, `height` and a
`get_uv_rect(key)` method. Untextured shapes use the sprite key
`WHITE_SPRITE`.

```python
from quadgui.geometry import Color, Rect
from quadgui.painter import Painter
from quadgui.rasterizer import render_command


class Atlas:
    width = 64
    height = 64

    def get_uv_rect(self, key):
        return Rect(0.0, 0.0, 1.0, 1.0)


painter = Painter(Atlas())
painter.draw_rect(Rect(10.0, 10.0, 40.0, 20.0), None, Color.from_rgba(200, 200, 200, 255))

draw_lists = []
for command in painter.commands:
    render_command(draw_lists, command)

assert len(draw_lists[0].vertices) == 4
assert draw_lists[0].indices == [0, 1, 2, 0, 2, 3]
```

## What it does not do

- It has no widgets such as buttons, windows or edit boxes.
- It has no text editing model, so it cannot turn key presses into edits of a
  string.
- It loads no fonts and lays out no text.
- It opens no window and does no drawing on the GPU. `DrawList` batches are
  plain data, and a rendering backend of your own must upload and draw them.